"""
Exceptions raised by the extractor.
Parsing never raises; only fetching and orchestration failures surface here.
"""


class HoursScraperError(RuntimeError):
    """Base class for extractor failures."""


class FetchError(HoursScraperError):
    """Raised when a page cannot be retrieved.

    Attributes:
        url    -- the URL that failed
        status -- HTTP status code (0 if no response was received)
    """

    def __init__(self, message: str, url: str = "", status: int = 0) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class ExtractionError(HoursScraperError):
    """Raised when an extraction request cannot produce a result."""

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url
        self.message = message
