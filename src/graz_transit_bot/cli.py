"""Command-line interface for the Graz transit announcement bot."""

import sys
from pathlib import Path

import click
from loguru import logger

from graz_transit_bot.config import Config
from graz_transit_bot.exceptions import ExtractionError, StoreError, TransportError
from graz_transit_bot.logging_conf import configure_logging
from graz_transit_bot.orchestrator import run
from graz_transit_bot.transit_client import TransitClient

EXIT_NOTHING_NEW = 2


@click.command()
@click.option(
    "-d",
    "--database",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path for the JSON database file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
@click.version_option(package_name="graz-transit-bot")
def main(database: Path | None, verbose: bool) -> None:
    """Print new Graz public transport announcements.

    Exits with status 2 when there is nothing new to report.
    """
    overrides: dict[str, object] = {}
    if database is not None:
        overrides["database"] = database
    if verbose:
        overrides["verbose"] = True

    try:
        config = Config(**overrides)
    except Exception as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    configure_logging(config.verbose)
    logger.info(f"Using database `{config.database}`")

    try:
        client = TransitClient(url=config.source_url, timeout=config.request_timeout)
        result = run(database=config.database, client=client)

    except TransportError as e:
        click.echo(f"Fetching announcements failed: {e}", err=True)
        sys.exit(1)

    except ExtractionError as e:
        click.echo(f"Parsing announcements failed: {e}", err=True)
        sys.exit(1)

    except StoreError as e:
        click.echo(f"Database error: {e}", err=True)
        sys.exit(1)

    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)

    if not result.found_new:
        sys.exit(EXIT_NOTHING_NEW)

    for notification in result.notifications:
        click.echo(notification)


if __name__ == "__main__":
    main()
