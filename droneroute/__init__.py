"""Mini README: Core package initializer for droneroute.

droneroute plans delivery drone flights from a fixed base to restaurants,
stepping along sixteen compass headings while avoiding no-fly zones. This
module keeps imports light so subpackages can be used independently; the
planner lives in ``droneroute.route_planning``.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
