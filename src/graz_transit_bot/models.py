"""Pydantic models for transit announcements."""

import re
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AwareDatetime, BaseModel, BeforeValidator, ConfigDict

# Defaults for fields the source markup did not provide.
EMPTY_TEXT = ""
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

RFC3339_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})"
)


def _require_rfc3339(value: Any) -> Any:
    """Accept datetimes and RFC 3339 strings with an explicit offset only."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not RFC3339_PATTERN.fullmatch(value):
        raise ValueError(f"not an RFC 3339 timestamp: {value!r}")
    return value


Rfc3339Datetime = Annotated[AwareDatetime, BeforeValidator(_require_rfc3339)]


class Announcement(BaseModel):
    """A single timestamped transit announcement.

    Identity is the publication timestamp alone: two announcements with the
    same ``datetime`` are equal even if their content or link differ.
    """

    model_config = ConfigDict(frozen=True)

    content: str = EMPTY_TEXT
    link: str = EMPTY_TEXT
    datetime: Rfc3339Datetime = EPOCH

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Announcement):
            return NotImplemented
        return datetime_key(self) == datetime_key(other)

    def __hash__(self) -> int:
        return hash(datetime_key(self))


def datetime_key(announcement: Announcement) -> datetime:
    """Key used for containment checks, sorting and deduplication."""
    return announcement.datetime


def sort_and_dedup(announcements: Iterable[Announcement]) -> list[Announcement]:
    """Sort ascending by datetime and drop later entries with an equal datetime.

    The sort is stable, so of two entries sharing a timestamp the one that came
    first in the input survives.
    """
    result: list[Announcement] = []
    for announcement in sorted(announcements, key=datetime_key):
        if result and datetime_key(result[-1]) == datetime_key(announcement):
            continue
        result.append(announcement)
    return result


class RunResult(BaseModel):
    """Outcome of one reconciliation run."""

    seeded: bool = False
    novel: list[Announcement] = []
    notifications: list[str] = []
    stored: int = 0

    @property
    def found_new(self) -> bool:
        return bool(self.novel)
