"""Mini README: Ingestion of delivery inputs from external services.

Exports ``RestClient`` which fetches restaurants, orders, the central area
and no-fly zones.
"""

from .rest_client import RestClient

__all__ = ["RestClient"]
