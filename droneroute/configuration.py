"""Mini README: Centralised configuration models and helpers for droneroute.

Structure:
    * DronerouteSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read the REST service URL, the drone's base
    position, the planner's expansion budget and service ports. Every field can
    be overridden with a ``DRONEROUTE_`` prefixed environment variable or a
    ``.env`` file. The configuration is cached so validation runs once per
    process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .geometry import Position


class DronerouteSettings(BaseSettings):
    """Runtime configuration for delivery route planning."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    rest_base_url: str = Field(
        "https://ilp-rest.azurewebsites.net/",
        description="Base URL of the service providing restaurants, orders and regions.",
    )
    request_timeout_seconds: float = Field(
        10.0,
        description="Timeout applied to every REST request.",
        gt=0,
    )
    output_directory: Path = Field(
        Path("resultfiles"),
        description="Directory where delivery, flightpath and GeoJSON files are written.",
    )
    base_longitude: float = Field(
        -3.186874,
        description="Longitude of the drone base (Appleton Tower).",
        ge=-180.0,
        le=180.0,
    )
    base_latitude: float = Field(
        55.944494,
        description="Latitude of the drone base (Appleton Tower).",
        ge=-90.0,
        le=90.0,
    )
    max_expansions: int = Field(
        200_000,
        description="Upper bound on node expansions for a single route search.",
        ge=1,
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the planning service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the planning service exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "DRONEROUTE_"
        env_file = ".env"
        case_sensitive = False

    @validator("output_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def base_position(self) -> Position:
        return Position(longitude=self.base_longitude, latitude=self.base_latitude)


@lru_cache()
def get_settings() -> DronerouteSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return DronerouteSettings()
