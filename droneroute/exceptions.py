"""Mini README: Exception hierarchy shared across droneroute.

Structure:
    * DronerouteError - base class for every error raised by the package.
    * InvalidRegion - malformed polygon supplied to the planner.
    * PlanningError - base class for search failures.
    * NoRouteFound - frontier exhausted before reaching the destination.
    * SearchBudgetExceeded - expansion bound hit before termination.
    * RestServiceError - the order/region service could not be used.
"""

from __future__ import annotations


class DronerouteError(Exception):
    """Base exception for droneroute errors."""


class InvalidRegion(DronerouteError, ValueError):
    """Raised when a region has too few vertices or a self-intersecting boundary."""


class PlanningError(DronerouteError):
    """Base exception for route planning failures."""


class NoRouteFound(PlanningError):
    """Raised when every reachable position has been expanded without reaching the goal."""


class SearchBudgetExceeded(PlanningError):
    """Raised when a single planning call expands more nodes than allowed."""

    def __init__(self, expansions: int, limit: int) -> None:
        super().__init__(
            f"Route search stopped after {expansions} expansions (limit {limit})"
        )
        self.expansions = expansions
        self.limit = limit


class RestServiceError(DronerouteError):
    """Raised when the REST service is unreachable or returns unusable data."""
