# metacritic_scraper/__init__.py
from __future__ import annotations

from .errors import FetchFailed, InvalidArgument, NoEntriesWarning, NoValidDataWarning, ScraperError
from .scrape.orchestrator import scrape_multiple_pages
from .scrape.page import scrape_metacritic_albums
from .storage.csv_export import load_albums_csv, save_albums_to_csv
from .workflow import run_example, summarize_albums

__all__ = [
    "FetchFailed",
    "InvalidArgument",
    "NoEntriesWarning",
    "NoValidDataWarning",
    "ScraperError",
    "load_albums_csv",
    "run_example",
    "save_albums_to_csv",
    "scrape_metacritic_albums",
    "scrape_multiple_pages",
    "summarize_albums",
]
