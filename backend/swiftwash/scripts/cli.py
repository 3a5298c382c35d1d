"""Command line tools for operating the order ID service.

Usage:
    swiftwash init-db
    swiftwash resolve --postal-code 440001 --lat 21.2 --lng 79.1
"""

import asyncio

import click
import structlog
from sqlalchemy.ext.asyncio import create_async_engine

from swiftwash.config import settings
from swiftwash.db import engine_options, init_models
from swiftwash.logging import setup_logging
from swiftwash.services.geo.resolver import Address, resolve_location

logger = structlog.get_logger(__name__)


@click.group()
def cli() -> None:
    """SwiftWash order ID service tools."""
    setup_logging()


async def _init_db(database_url: str) -> None:
    engine = create_async_engine(database_url, **engine_options(database_url))
    try:
        await init_models(engine)
    finally:
        await engine.dispose()


@cli.command("init-db")
@click.option(
    "--database-url",
    envvar="DATABASE_URL",
    default=None,
    help="Database to initialize. Defaults to the configured DATABASE_URL.",
)
def init_db(database_url: str | None) -> None:
    """Create database tables that do not exist yet."""
    asyncio.run(_init_db(database_url or settings.database_url))
    logger.info("Database tables created")
    click.echo("Database initialized")


@cli.command()
@click.option("--postal-code", default=None, help="Postal code (PIN) of the address.")
@click.option("--city", "city_name", default=None, help="Free-text city name.")
@click.option("--lat", "latitude", type=float, default=None, help="Latitude of the address.")
@click.option("--lng", "longitude", type=float, default=None, help="Longitude of the address.")
def resolve(
    postal_code: str | None,
    city_name: str | None,
    latitude: float | None,
    longitude: float | None,
) -> None:
    """Print the city and direction an address resolves to."""
    address = Address(postal_code=postal_code, city_name=city_name, latitude=latitude, longitude=longitude)
    location = resolve_location(address)
    click.echo(f"{location.city.code} ({location.city.display_name}) {location.direction}")
