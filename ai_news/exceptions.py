from __future__ import annotations

from typing import Optional


class NewsFetchError(Exception):
    """Base class for failures while fetching recent news."""


class ConfigurationError(NewsFetchError):
    """Raised when a required setting, such as the API key, is missing or invalid."""


class UpstreamError(NewsFetchError):
    """Raised on a transport failure or non-success response from the language API."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ParseError(NewsFetchError):
    """Raised when the generated text cannot be read as a JSON array of news items."""


class InternalError(NewsFetchError):
    """Raised for any other unexpected failure; wraps the original exception."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause
