"""Mini README: FastAPI service exposing the route planner.

Structure:
    * create_application - application factory wiring the routes.
    * PositionModel / RegionModel / PlanRouteRequest - request schemas.

``POST /plan-route`` plans a single route for the supplied positions and
regions and returns the waypoint records. Malformed regions answer 400 and
searches that fail answer 422 with the failure kind in the detail.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..configuration import get_settings
from ..exceptions import InvalidRegion, PlanningError
from ..geometry import Position, Region
from ..logging_utils import get_logger
from ..route_planning import RoutePlanner

LOGGER = get_logger(__name__)


class PositionModel(BaseModel):
    lng: float = Field(..., ge=-180.0, le=180.0)
    lat: float = Field(..., ge=-90.0, le=90.0)

    def to_position(self) -> Position:
        return Position(longitude=self.lng, latitude=self.lat)


class RegionModel(BaseModel):
    name: str = ""
    vertices: List[PositionModel]

    def to_region(self) -> Region:
        return Region(name=self.name, vertices=tuple(vertex.to_position() for vertex in self.vertices))


class PlanRouteRequest(BaseModel):
    start: Optional[PositionModel] = None
    destination: PositionModel
    central_area: Optional[RegionModel] = None
    no_fly_zones: List[RegionModel] = Field(default_factory=list)


def create_application() -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="droneroute planning service", version="0.1.0")
    settings = get_settings()

    @app.get("/health")
    async def health() -> JSONResponse:
        """Report service liveness and the configured base position."""

        base = settings.base_position
        return JSONResponse(
            {
                "status": "ok",
                "environment": settings.environment,
                "base": base.as_dict(),
            }
        )

    @app.post("/plan-route")
    def plan_route(request: PlanRouteRequest) -> JSONResponse:
        """Return the waypoints of a route from the start (or base) to the destination."""

        start = request.start.to_position() if request.start else settings.base_position
        destination = request.destination.to_position()
        try:
            planner = RoutePlanner(
                central_area=request.central_area.to_region() if request.central_area else None,
                no_fly_zones=[zone.to_region() for zone in request.no_fly_zones],
            )
        except InvalidRegion as error:
            raise HTTPException(status_code=400, detail=str(error)) from error

        try:
            flight_path = planner.plan(start, destination)
        except PlanningError as error:
            LOGGER.info("Route planning failed: %s", error)
            raise HTTPException(
                status_code=422,
                detail={"kind": type(error).__name__, "message": str(error)},
            ) from error

        LOGGER.info(
            "Generated route with %s waypoints after %s expansions",
            len(flight_path.waypoints),
            flight_path.expansions,
        )
        return JSONResponse(
            {
                "step_count": flight_path.step_count,
                "expansions": flight_path.expansions,
                "waypoints": [
                    {
                        "previous_position": waypoint.previous_position.as_dict(),
                        "current_position": waypoint.current_position.as_dict(),
                        "heading": waypoint.heading,
                        "step_index": waypoint.step_index,
                    }
                    for waypoint in flight_path.waypoints
                ],
            }
        )

    return app
