"""Reconciliation of fetched announcements against the stored history."""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from loguru import logger

from graz_transit_bot import store as json_store
from graz_transit_bot.models import (
    Announcement,
    RunResult,
    datetime_key,
    sort_and_dedup,
)
from graz_transit_bot.notifier import format_notification
from graz_transit_bot.transit_client import TransitClient


def find_novel(
    known: Sequence[Announcement], current: Sequence[Announcement]
) -> list[Announcement]:
    """Return the entries of current whose datetime is not in known.

    The relative order of current is preserved.
    """
    known_keys = {datetime_key(a) for a in known}
    return [a for a in current if datetime_key(a) not in known_keys]


def merge(
    known: Sequence[Announcement], current: Sequence[Announcement]
) -> list[Announcement]:
    """Combine history and fresh announcements into a sorted, deduplicated list.

    Where both contain the same datetime, the entry from known is kept.
    """
    return sort_and_dedup([*known, *current])


def run(
    database: Path,
    client: TransitClient | Any | None = None,
    store: Any | None = None,
) -> RunResult:
    """Execute one fetch-compare-persist cycle.

    Args:
        database: Path to the JSON announcement history.
        client: TransitClient instance (or mock for testing).
        store: Object with exists/load/save (defaults to the JSON store
            module; a mock for testing).

    Returns:
        RunResult holding the novel announcements and their notification
        texts. A run that had to seed a missing database reports nothing new.

    Raises:
        TransportError: If the announcement page cannot be fetched.
        ExtractionError: If the page holds a malformed timestamp.
        StoreReadError: If the existing database cannot be parsed.
        StoreWriteError: If the database cannot be written.
    """
    if client is None:
        client = TransitClient()
    if store is None:
        store = json_store

    seeded = False
    if not store.exists(database):
        logger.info("Database does not exist, creating...")
        store.save(database, client.fetch_announcements())
        seeded = True

    known = store.load(database)
    current = client.fetch_announcements()

    novel = find_novel(known, current)
    logger.info(f"Found {len(novel)} new announcements")

    merged = merge(known, current)
    store.save(database, merged)

    return RunResult(
        seeded=seeded,
        novel=novel,
        notifications=[format_notification(a) for a in novel],
        stored=len(merged),
    )
