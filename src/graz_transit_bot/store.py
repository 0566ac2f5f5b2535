"""JSON file persistence for the announcement history."""

from collections.abc import Sequence
from pathlib import Path

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from graz_transit_bot.exceptions import StoreReadError, StoreWriteError
from graz_transit_bot.models import Announcement, sort_and_dedup

_history_adapter = TypeAdapter(list[Announcement])


def exists(path: Path) -> bool:
    """Return whether a database file is present at path."""
    return Path(path).exists()


def load(path: Path) -> list[Announcement]:
    """Read the announcement history.

    Args:
        path: Location of the JSON database.

    Returns:
        Announcements sorted ascending by datetime, without duplicate datetimes.

    Raises:
        StoreReadError: If the file cannot be read or does not hold a valid
            list of announcements.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise StoreReadError(
            f"Failed to open database '{path}': {e}", path, original_error=e
        ) from e

    try:
        announcements = _history_adapter.validate_json(raw)
    except ValidationError as e:
        raise StoreReadError(
            f"Failed to parse database '{path}': {e}", path, original_error=e
        ) from e

    logger.debug(f"Loaded {len(announcements)} announcements from {path}")
    return sort_and_dedup(announcements)


def save(path: Path, announcements: Sequence[Announcement]) -> None:
    """Write announcements to the database, replacing any previous content.

    Raises:
        StoreWriteError: If the file cannot be created or written.
    """
    path = Path(path)
    data = _history_adapter.dump_json(list(announcements), indent=2)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data + b"\n")
    except OSError as e:
        raise StoreWriteError(
            f"Could not write database '{path}': {e}", path, original_error=e
        ) from e

    logger.debug(f"Saved {len(announcements)} announcements to {path}")
