# metacritic_scraper/cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from metacritic_scraper.config import (
    BROWSE_URL,
    DEFAULT_CSV_NAME,
    DEFAULT_DELAY_SEC,
    DEFAULT_OUTPUT_DIR,
    LISTING_URL,
)
from metacritic_scraper.errors import ScraperError
from metacritic_scraper.scrape.orchestrator import scrape_multiple_pages
from metacritic_scraper.scrape.page import scrape_metacritic_albums
from metacritic_scraper.storage.csv_export import save_albums_to_csv
from metacritic_scraper.workflow import run_example


def parse_pages(spec: str) -> list[int]:
    """
    Supports:
      - "0-2"     -> [0, 1, 2]
      - "0,1,5"   -> [0, 1, 5]
      - "0-1,4"   -> [0, 1, 4]
    Order and duplicates are kept as written.
    """
    pages: list[int] = []
    for part in spec.split(","):
        part = part.strip()
        if not part:
            continue

        if "-" in part:
            lo, hi = part.split("-", 1)
            start, end = int(lo), int(hi)
            if end < start:
                raise argparse.ArgumentTypeError(f"Bad page range: {part}")
            pages.extend(range(start, end + 1))
        else:
            pages.append(int(part))

    if not pages:
        raise argparse.ArgumentTypeError("No pages given")
    return pages


def _pages_arg(value: str) -> list[int]:
    try:
        return parse_pages(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Bad page list: {value}")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Scrape Metacritic album listings to CSV.")
    p.add_argument("--url", default=LISTING_URL, help="Single listing page to scrape")
    p.add_argument("--pages", type=_pages_arg, default=None,
                   help="Scrape several pages of --base-url instead, e.g. 0-2 or 0,1,5")
    p.add_argument("--base-url", default=BROWSE_URL, help="Paginated listing URL (used with --pages)")
    p.add_argument("--delay", type=float, default=DEFAULT_DELAY_SEC,
                   help=f"Politeness delay before each request in seconds (default: {DEFAULT_DELAY_SEC})")
    p.add_argument("--out-dir", default=DEFAULT_OUTPUT_DIR, help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})")
    p.add_argument("--filename", default=DEFAULT_CSV_NAME, help=f"Output file name (default: {DEFAULT_CSV_NAME})")
    p.add_argument("--quiet", action="store_true", help="No progress output while scraping")
    p.add_argument("--example", action="store_true", help="Run the example workflow and exit")
    p.add_argument("--ui", metavar="CSV", default=None, help="Browse an exported CSV in a Textual UI")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    if args.ui:
        # UI mode (imported lazily; textual is only needed here)
        from metacritic_scraper.ui.app import AlbumBrowser

        AlbumBrowser(csv_file=Path(args.ui).expanduser().resolve()).run()
        return 0

    try:
        if args.example:
            run_example(output_dir=args.out_dir, filename=args.filename)
            return 0

        if args.pages is not None:
            albums = scrape_multiple_pages(
                base_url=args.base_url,
                pages=args.pages,
                delay=args.delay,
                verbose=not args.quiet,
            )
        else:
            albums = scrape_metacritic_albums(url=args.url, delay=args.delay, verbose=not args.quiet)

        save_albums_to_csv(albums, filename=args.filename, path=args.out_dir)

    except ScraperError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
