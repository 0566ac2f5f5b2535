"""Custom exceptions for the transit announcement bot."""

from pathlib import Path


class TransitBotError(Exception):
    """Base class for all errors raised by the bot."""


class TransportError(TransitBotError):
    """Raised when the announcement page cannot be fetched."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ExtractionError(TransitBotError):
    """Raised when an announcement timestamp in the page cannot be parsed."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid announcement timestamp: {value!r}")


class StoreError(TransitBotError):
    """Raised when the announcement database cannot be read or written."""

    def __init__(
        self, message: str, path: Path, original_error: Exception | None = None
    ) -> None:
        self.path = path
        self.original_error = original_error
        super().__init__(message)


class StoreReadError(StoreError):
    """Raised when an existing database file is unreadable or malformed."""


class StoreWriteError(StoreError):
    """Raised when the database file cannot be created or written."""
