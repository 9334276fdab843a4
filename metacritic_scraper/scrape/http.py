# metacritic_scraper/scrape/http.py
from __future__ import annotations

import cloudscraper
import requests
from bs4 import BeautifulSoup
from cloudscraper.exceptions import CloudflareException

from metacritic_scraper.config import ACCEPT, ACCEPT_LANGUAGE, REQUEST_TIMEOUT_SEC, UA
from metacritic_scraper.errors import FetchFailed
from metacritic_scraper.utils_debug import dbg


def fetch_html(
    url: str,
    *,
    timeout: int = REQUEST_TIMEOUT_SEC,
) -> BeautifulSoup:
    """
    Fetch a URL and return a BeautifulSoup object.

    - cloudscraper session (Metacritic sits behind Cloudflare)
    - single attempt, no retry
    - raises FetchFailed on non-200 or any transport error
    """

    headers = {
        "User-Agent": UA,
        "Accept": ACCEPT,
        "Accept-Language": ACCEPT_LANGUAGE,
    }

    dbg("http.get", url=url, timeout=timeout)

    try:
        with cloudscraper.create_scraper(
            browser={"browser": "chrome", "platform": "linux", "mobile": False}
        ) as scraper:
            resp = scraper.get(url, headers=headers, timeout=timeout)
    except (requests.RequestException, CloudflareException) as e:
        dbg("http.error", url=url, error=repr(e))
        raise FetchFailed(url, str(e)) from e

    dbg("http.response", url=url, status=resp.status_code, size=len(resp.text or ""))

    if resp.status_code != 200:
        raise FetchFailed(
            url,
            f"HTTP request failed with status: {resp.status_code}",
            status_code=resp.status_code,
        )

    return BeautifulSoup(resp.text, "html.parser")
