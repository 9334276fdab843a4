# metacritic_scraper/scrape/page.py
from __future__ import annotations

import math
import numbers
import time
import warnings
from typing import List

import pandas as pd

from metacritic_scraper.config import CSV_COLUMNS, DEFAULT_DELAY_SEC, LISTING_URL, ROW_SELECTOR
from metacritic_scraper.errors import InvalidArgument, NoEntriesWarning, NoValidDataWarning
from metacritic_scraper.models import AlbumRecord, Extracted, Skipped
from metacritic_scraper.scrape.http import fetch_html
from metacritic_scraper.scrape.records import extract_albums
from metacritic_scraper.utils_debug import dbg


_DTYPES = {
    "album_title": "object",
    "artist_name": "object",
    "metascore": "float64",
    "user_score": "float64",
    "release_date": "object",
    "summary": "object",
    "album_url": "object",
    "cover_image_url": "object",
    "scraped_at": "datetime64[ns, UTC]",
}


def empty_albums_frame() -> pd.DataFrame:
    """Zero rows, full column set, same dtypes as a populated table."""
    return pd.DataFrame({c: pd.Series(dtype=_DTYPES[c]) for c in CSV_COLUMNS})


def albums_frame(records: List[AlbumRecord]) -> pd.DataFrame:
    if not records:
        return empty_albums_frame()

    df = pd.DataFrame([r.to_row() for r in records], columns=CSV_COLUMNS)
    df = df.astype({"metascore": "float64", "user_score": "float64"})
    df["scraped_at"] = pd.to_datetime(df["scraped_at"], utc=True)
    return df


def _validate(url: object, delay: object) -> None:
    if not isinstance(url, str) or not url.strip():
        raise InvalidArgument("URL must be a single non-empty string")

    if (
        isinstance(delay, bool)
        or not isinstance(delay, numbers.Real)
        or not math.isfinite(delay)
        or delay < 0
    ):
        raise InvalidArgument("Delay must be a non-negative number")


def scrape_metacritic_albums(
    url: str = LISTING_URL,
    delay: float = DEFAULT_DELAY_SEC,
    verbose: bool = True,
) -> pd.DataFrame:
    """
    Scrape album data from a single Metacritic listing page.

    Returns a DataFrame with columns:
      album_title, artist_name, metascore (0-100), user_score (0-10),
      release_date (as displayed), summary, album_url, cover_image_url,
      scraped_at (UTC)

    Raises:
      InvalidArgument - bad url/delay (before any request)
      FetchFailed     - non-200 or transport error

    An empty page is not an error: a NoEntriesWarning / NoValidDataWarning
    is emitted and an empty (but fully-typed) table comes back.
    """
    _validate(url, delay)

    if verbose:
        print(f"Starting scrape of: {url}")
        print(f"Politeness delay: {delay} seconds\n")

    # Politeness delay, applied to every request including the first
    time.sleep(delay)

    soup = fetch_html(url)

    if verbose:
        print("Page successfully downloaded. Parsing album data...\n")

    rows = soup.select(ROW_SELECTOR)
    dbg("page.rows", url=url, count=len(rows))

    if not rows:
        warnings.warn(
            "No album entries found on page. Website structure may have changed.",
            NoEntriesWarning,
            stacklevel=2,
        )
        return empty_albums_frame()

    if verbose:
        print(f"Found {len(rows)} potential album entries. Extracting data...")

    results = extract_albums(rows)
    records = [r.record for r in results if isinstance(r, Extracted)]
    skipped = [r for r in results if isinstance(r, Skipped)]

    if not records:
        warnings.warn(
            "No valid album data could be extracted. Website structure may have changed.",
            NoValidDataWarning,
            stacklevel=2,
        )
        return empty_albums_frame()

    df = albums_frame(records)

    if verbose:
        print(f"\n✓ Successfully extracted {len(df)} albums")
        print(f"✓ Metascores available: {int(df['metascore'].notna().sum())} albums")
        print(f"✓ User scores available: {int(df['user_score'].notna().sum())} albums")
        errors = sum(1 for s in skipped if s.reason != "no_title")
        if errors:
            print(f"⚠ Skipped {errors} malformed rows")

    return df
