"""Notification text for newly detected announcements."""

from graz_transit_bot.models import Announcement

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

NOTIFICATION_TEMPLATE = (
    "Neue Verkehrsmeldung 🚉🚍\n"
    "{content}\n"
    "vom {timestamp}\n"
    "Mehr Infos: {link}\n"
    "\n"
    "Automatisiert durch OPNV-Graz Bot 🤖 ()"
)


def format_notification(announcement: Announcement) -> str:
    """Render one announcement as a notification block.

    The timestamp is shown in the announcement's own UTC offset.
    """
    return NOTIFICATION_TEMPLATE.format(
        content=announcement.content,
        timestamp=announcement.datetime.strftime(TIMESTAMP_FORMAT),
        link=announcement.link,
    )
