# metacritic_scraper/utils.py
from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Optional

from bs4 import Tag

from .config import MISSING_SENTINELS, SITE_ORIGIN
from .utils_debug import dbg


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def _node_text(node: Optional[Tag]) -> Optional[str]:
    if node is None:
        return None
    text = node.get_text().strip()
    if text in MISSING_SENTINELS:
        return None
    return text


def clean_text(node: Optional[Tag]) -> Optional[str]:
    """
    Trimmed text of a node, or None if the node is absent,
    empty, or shows the "tbd" placeholder.
    """
    return _node_text(node)


def extract_score(node: Optional[Tag]) -> Optional[float]:
    """
    Numeric score of a node, with the same missing rules as clean_text.

    Text that is not a number (a stray label etc.) is treated as missing
    rather than failing the whole row.
    """
    text = _node_text(node)
    if text is None:
        return None
    try:
        score = float(text)
    except ValueError:
        score = math.nan

    # "nan" / "inf" parse as floats but are never scores
    if not math.isfinite(score):
        dbg("score.unparsable", text=text)
        return None
    return score


def build_full_url(relative_url: Optional[str], origin: str = SITE_ORIGIN) -> Optional[str]:
    """
    "/music/foo" -> "https://www.metacritic.com/music/foo"

    Absolute URLs come back unchanged. No separator handling: the
    relative path is expected to start with "/".
    """
    if not relative_url:
        return None
    if relative_url.startswith("http"):
        return relative_url
    return origin + relative_url
