"""
Error taxonomy for menu fetching and parsing.

Every failure is terminal for the call that raised it; nothing here retries.
"""
from typing import Optional


class MenuError(Exception):
    """Base class for everything fetch_daily_menu can raise."""


class FetchError(MenuError):
    """The page could not be retrieved."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class NetworkError(FetchError):
    """DNS, connection or other transport-level failure."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Network error for {url}: {reason}", url)
        self.reason = reason


class HttpStatusError(FetchError):
    """Server answered with a non-2xx status."""

    def __init__(self, status: int, url: Optional[str] = None):
        super().__init__(f"Unexpected status {status} from {url}", url)
        self.status = status

    @property
    def code(self) -> int:
        return self.status


class FetchTimeoutError(FetchError, TimeoutError):
    """Request did not complete within the configured timeout."""

    def __init__(self, url: str, timeout: Optional[float] = None):
        super().__init__(f"Timeout after {timeout}s for {url}", url)
        self.timeout = timeout


class ParseError(MenuError):
    """Page does not contain the daily menu container."""

    def __init__(self, reason: str):
        super().__init__(f"Could not parse daily menu: {reason}")
        self.reason = reason


class SpeechError(Exception):
    """Text-to-speech engine failed to run."""
