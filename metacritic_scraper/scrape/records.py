# metacritic_scraper/scrape/records.py
from __future__ import annotations

from typing import Iterable, List, Optional

from bs4 import Tag

from metacritic_scraper.config import (
    ALBUM_LINK_SELECTOR,
    ARTIST_SELECTOR,
    COVER_SELECTOR,
    METASCORE_SELECTOR,
    RELEASE_DATE_SELECTOR,
    SITE_ORIGIN,
    SUMMARY_SELECTOR,
    TITLE_SELECTOR,
    USER_SCORE_SELECTOR,
)
from metacritic_scraper.models import AlbumRecord, ExtractResult, Extracted, Skipped
from metacritic_scraper.utils import _now_utc, build_full_url, clean_text, extract_score
from metacritic_scraper.utils_debug import dbg


def _attr(node: Optional[Tag], name: str) -> Optional[str]:
    if node is None:
        return None
    value = node.get(name)
    if value is None:
        return None
    return str(value)


def _extract(row: Tag, origin: str) -> ExtractResult:
    album_title = clean_text(row.select_one(TITLE_SELECTOR))

    # Header/footer rows have no <h3>
    if album_title is None:
        return Skipped("no_title")

    link = _attr(row.select_one(ALBUM_LINK_SELECTOR), "href")
    cover = _attr(row.select_one(COVER_SELECTOR), "src")

    record = AlbumRecord(
        album_title=album_title,
        artist_name=clean_text(row.select_one(ARTIST_SELECTOR)),
        metascore=extract_score(row.select_one(METASCORE_SELECTOR)),
        user_score=extract_score(row.select_one(USER_SCORE_SELECTOR)),
        release_date=clean_text(row.select_one(RELEASE_DATE_SELECTOR)),
        summary=clean_text(row.select_one(SUMMARY_SELECTOR)),
        album_url=build_full_url(link, origin),
        cover_image_url=cover or None,
        scraped_at=_now_utc(),
    )
    return Extracted(record)


def extract_album(row: Tag, *, origin: str = SITE_ORIGIN) -> ExtractResult:
    """
    Build one AlbumRecord from a listing row.

    Never raises: malformed markup turns into Skipped("error: ...") so one
    odd row can't sink the page.
    """
    try:
        return _extract(row, origin)
    except Exception as e:
        reason = f"error: {type(e).__name__}: {e}"
        dbg("row.skipped", reason=reason)
        return Skipped(reason)


def extract_albums(rows: Iterable[Tag], *, origin: str = SITE_ORIGIN) -> List[ExtractResult]:
    return [extract_album(row, origin=origin) for row in rows]
