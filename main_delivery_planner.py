"""Mini README: Entry point CLI for droneroute.

This script exposes a Typer CLI with two commands:
    * deliver - fetch a day's orders, plan every delivery and write the
      deliveries, flightpath and GeoJSON files.
    * serve - start the FastAPI planning service with uvicorn.

Defaults come from ``DRONEROUTE_`` environment variables when available.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

import typer
import uvicorn

from droneroute.configuration import get_settings
from droneroute.delivery import DeliveryScheduler
from droneroute.exceptions import RestServiceError
from droneroute.export import OutputWriter
from droneroute.ingestion import RestClient
from droneroute.logging_utils import configure_root_logger, level_for_environment
from droneroute.route_planning import RoutePlanner

cli = typer.Typer(help="Plan delivery drone flights around no-fly zones.")


def _configure_logging() -> None:
    configure_root_logger()
    logging.getLogger().setLevel(level_for_environment(get_settings().environment))


@cli.command()
def deliver(
    day: Optional[str] = typer.Argument(None, help="Delivery day as YYYY-MM-DD (default: today)."),
    url: Optional[str] = typer.Option(None, help="Base URL of the REST service."),
) -> None:
    """Plan all deliverable orders for a day and write the result files."""

    _configure_logging()
    try:
        delivery_day = date.fromisoformat(day) if day else date.today()
    except ValueError as error:
        raise typer.BadParameter(f"Invalid date '{day}'; expected YYYY-MM-DD") from error

    client = RestClient(url)
    try:
        restaurants = client.open_restaurants(delivery_day)
        orders = client.orders_for(delivery_day)
        planner = RoutePlanner(
            central_area=client.central_area(),
            no_fly_zones=client.no_fly_zones(),
        )
    except RestServiceError as error:
        typer.echo(f"Unable to fetch delivery data: {error}", err=True)
        raise typer.Exit(code=1) from error

    typer.echo(f"Orders for {delivery_day.isoformat()}: {len(orders)}")
    report = DeliveryScheduler(planner).plan_day(orders, restaurants)

    writer = OutputWriter()
    writer.write_deliveries(delivery_day, report.orders)
    writer.write_flightpath(delivery_day, report.flights)
    writer.write_geojson(delivery_day, report.flights)
    typer.echo(
        f"Delivered {len(report.delivered)} of {len(report.orders)} orders; "
        f"results written to {writer.output_directory}"
    )
    if report.failures:
        typer.echo(f"{len(report.failures)} orders could not be routed", err=True)


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the planning service using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    _configure_logging()

    # Browsers cannot open the 0.0.0.0 / :: bind-all addresses directly.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting droneroute on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "droneroute.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
