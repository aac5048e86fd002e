"""Mini README: HTTP interface for droneroute.

Exports the FastAPI application factory that serves route planning
requests. The command line entry point lives in ``main_delivery_planner.py``.
"""

from .web_app import create_application

__all__ = ["create_application"]
