"""HTTP client for the transit operator's announcement page."""

import httpx
from loguru import logger

from graz_transit_bot.config import SOURCE_URL
from graz_transit_bot.exceptions import TransportError
from graz_transit_bot.extractor import extract_announcements
from graz_transit_bot.models import Announcement, datetime_key


class TransitClient:
    """Client for fetching announcements from the transit operator's website."""

    def __init__(self, url: str = SOURCE_URL, timeout: float = 30.0) -> None:
        """Initialize client with the page URL.

        Args:
            url: Address of the announcement listing page.
            timeout: Network timeout in seconds.

        Raises:
            ValueError: If url is empty or whitespace-only.
        """
        if not url or not url.strip():
            raise ValueError("URL must not be empty")
        self.url = url
        self._timeout = timeout

    def fetch_page(self) -> str:
        """Download the announcement page.

        Returns:
            The decoded page body.

        Raises:
            TransportError: If the request fails, the response status is not
                2xx, or the body cannot be decoded.
        """
        logger.debug(f"Requesting {self.url}")
        try:
            response = httpx.get(self.url, timeout=self._timeout, follow_redirects=True)
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {e}") from e

        if not response.is_success:
            raise TransportError(
                f"Response was bad: {response.status_code}",
                status_code=response.status_code,
            )

        # response.text would replace undecodable bytes
        try:
            return response.content.decode(response.encoding or "utf-8")
        except (UnicodeDecodeError, LookupError) as e:
            raise TransportError(f"Body did not contain text: {e}") from e

    def fetch_announcements(self) -> list[Announcement]:
        """Fetch the page and return its announcements sorted by datetime.

        Raises:
            TransportError: If the page cannot be fetched.
            ExtractionError: If an announcement timestamp is malformed.
        """
        announcements = extract_announcements(self.fetch_page())
        announcements.sort(key=datetime_key)
        return announcements
