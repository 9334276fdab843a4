# metacritic_scraper/scrape/orchestrator.py
from __future__ import annotations

from typing import Callable, Iterable, List, Optional

import pandas as pd

from ..config import BROWSE_URL, DEFAULT_DELAY_SEC, PAGE_COLUMN, PAGE_QUERY
from ..utils_debug import dbg
from .page import empty_albums_frame, scrape_metacritic_albums


ProgressCB = Callable[[int, int, str], None]


def page_url(base_url: str, page: int) -> str:
    """
    base_url + "?page=N&view=detailed"
    """
    return f"{base_url}?{PAGE_QUERY.format(page=page)}"


def scrape_multiple_pages(
    base_url: str = BROWSE_URL,
    pages: Iterable[int] = range(0, 3),
    delay: float = DEFAULT_DELAY_SEC,
    verbose: bool = True,
    progress_cb: Optional[ProgressCB] = None,
) -> pd.DataFrame:
    """
    Scrape several listing pages one after another and stack the results.

    - pages are fetched in the order given (duplicates are fetched again)
    - every row gets a leading page_number column
    - a failing page (FetchFailed etc.) aborts the whole run
    """
    pages = list(pages)
    total = len(pages)

    if verbose:
        print(f"=== Scraping {total} pages from Metacritic ===\n")

    frames: List[pd.DataFrame] = []

    for idx, page_num in enumerate(pages, start=1):
        if verbose:
            print(f"--- Page {page_num} ---")

        url = page_url(base_url, page_num)

        if progress_cb:
            progress_cb(idx - 1, total, f"Fetching page {page_num} ({idx}/{total})\n{url}")

        albums = scrape_metacritic_albums(url=url, delay=delay, verbose=verbose)
        albums.insert(0, PAGE_COLUMN, page_num)
        frames.append(albums)

        dbg("pages.page_done", page=page_num, rows=len(albums))

        if progress_cb:
            progress_cb(idx, total, f"Page {page_num} done • {len(albums)} albums")

        if verbose:
            print()

    if frames:
        all_albums = pd.concat(frames, ignore_index=True)
    else:
        all_albums = empty_albums_frame()
        all_albums.insert(0, PAGE_COLUMN, pd.Series(dtype="int64"))

    if verbose:
        print("\n=== Scraping Complete ===")
        print(f"Total albums collected: {len(all_albums)}")
        print(f"Unique albums: {all_albums['album_url'].nunique(dropna=False)}")

    return all_albums
