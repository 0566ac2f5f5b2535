"""Extraction of announcements from the transit operator's news page."""

from datetime import datetime

from bs4 import BeautifulSoup, Tag
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from graz_transit_bot.exceptions import ExtractionError
from graz_transit_bot.models import EMPTY_TEXT, EPOCH, Announcement, Rfc3339Datetime

CONTAINER_SELECTOR = 'div[class="related-teaser__content"]'

# Each teaser opens with an anchor wrapping the teaser image that points to the
# same article; the details link is one of the anchors after it.
SKIPPED_LEADING_ANCHORS = 1

_timestamp_adapter = TypeAdapter(Rfc3339Datetime)


def extract_announcements(html: str) -> list[Announcement]:
    """Parse announcement teasers out of the page markup.

    Args:
        html: Raw markup of the announcement page.

    Returns:
        One Announcement per teaser container, in document order. Fields whose
        markup is missing keep their defaults (empty text, epoch timestamp).

    Raises:
        ExtractionError: If a teaser carries a timestamp that is not a valid
            RFC 3339 datetime with offset.
    """
    soup = BeautifulSoup(html, "html.parser")

    announcements = []
    for container in soup.select(CONTAINER_SELECTOR):
        announcement = _parse_container(container)
        logger.trace(f"Fetched announcement: {announcement!r}")
        announcements.append(announcement)

    logger.info(f"Fetched {len(announcements)} announcements")
    return announcements


def _parse_container(container: Tag) -> Announcement:
    """Build an announcement from a single teaser container."""
    link = EMPTY_TEXT
    for anchor in container.find_all("a")[SKIPPED_LEADING_ANCHORS:]:
        href = anchor.get("href")
        if href is not None:
            link = href

    timestamp = EPOCH
    for time in container.find_all("time"):
        raw = time.get("datetime")
        if raw is not None:
            timestamp = _parse_timestamp(raw)

    content = EMPTY_TEXT
    for paragraph in container.find_all("p"):
        # formatter=None keeps decoded entities as plain characters
        content = paragraph.decode_contents(formatter=None).strip()

    return Announcement(content=content, link=link, datetime=timestamp)


def _parse_timestamp(raw: str) -> datetime:
    try:
        return _timestamp_adapter.validate_python(raw)
    except ValidationError as e:
        raise ExtractionError(raw) from e
