"""Custom exceptions for prodcal."""

from __future__ import annotations


class ProdCalError(Exception):
    """Base exception for all prodcal errors."""

    pass


class InvalidRequestError(ProdCalError):
    """Raised when a calendar request is structurally invalid.

    Raised before any collaborator is contacted.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class UnknownSourceError(ProdCalError):
    """Raised when no adapter is registered for a provider."""

    def __init__(self, provider: object) -> None:
        self.provider = provider
        super().__init__(f"No data source registered for provider '{provider}'")


class TransportError(ProdCalError):
    """Raised when a structured document cannot be retrieved.

    Covers non-2xx responses as well as network exceptions.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class DeserializationError(ProdCalError):
    """Raised when a structured document body is empty or malformed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not deserialize calendar document: {reason}")


class FetchError(ProdCalError):
    """Raised when a page cannot be loaded or queried."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to load page {url}: {reason}")


class MalformedPageError(ProdCalError):
    """Raised when a scraped page does not contain exactly twelve months."""

    def __init__(self, found: int, expected: int = 12) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Unexpected number of months: expected {expected} got {found}")


class MonthProcessingError(ProdCalError):
    """Raised when extracting the days of one month fails.

    The whole request is aborted; partial results are never returned.

    Attributes:
        month_name: Display name of the month being processed, if it was
            already extracted.
        url: The page the month came from, when it was scraped.
    """

    def __init__(self, month_name: str | None, url: str | None = None) -> None:
        self.month_name = month_name
        self.url = url
        label = month_name if month_name else "<unnamed>"
        msg = f"Failed to process month {label}"
        if url:
            msg += f" of {url}"
        super().__init__(msg)
