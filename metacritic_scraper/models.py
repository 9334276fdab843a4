# metacritic_scraper/models.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Optional, Union


@dataclass
class AlbumRecord:
    """
    Row model for the results table + CSV export.

    Field order mirrors CSV_COLUMNS. Every optional field uses None as the
    missing marker; album_title is never None (rows without one are skipped).
    """
    album_title: str
    artist_name: Optional[str]
    metascore: Optional[float]
    user_score: Optional[float]
    release_date: Optional[str]
    summary: Optional[str]
    album_url: Optional[str]
    cover_image_url: Optional[str]
    scraped_at: datetime

    def to_row(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Extracted:
    """A listing row that produced an album."""
    record: AlbumRecord


@dataclass(frozen=True)
class Skipped:
    """
    A listing row that produced nothing.

    reason is "no_title" for header/footer rows, "error: ..." when
    extraction blew up on malformed markup.
    """
    reason: str


ExtractResult = Union[Extracted, Skipped]
