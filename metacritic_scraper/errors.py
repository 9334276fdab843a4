# metacritic_scraper/errors.py
from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base class for fatal scraper errors."""


class InvalidArgument(ScraperError, ValueError):
    """Bad input to the page scraper. Raised before any network activity."""


class FetchFailed(ScraperError):
    """
    A listing page could not be downloaded.

    status_code is set for non-200 responses and None for transport errors
    (the underlying exception is chained as __cause__).
    """

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"Failed to fetch page: {message}")
        self.url = url
        self.status_code = status_code


class NoEntriesWarning(UserWarning):
    """The page had no row-shaped elements at all."""


class NoValidDataWarning(UserWarning):
    """Rows were found but none of them produced an album."""
