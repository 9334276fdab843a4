# metacritic_scraper/workflow.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Union

import pandas as pd

from .config import DEFAULT_CSV_NAME, DEFAULT_OUTPUT_DIR
from .scrape.page import scrape_metacritic_albums
from .storage.csv_export import save_albums_to_csv


PREVIEW_COLUMNS = ["album_title", "artist_name", "metascore", "user_score", "release_date"]


def summarize_albums(albums: pd.DataFrame) -> Dict[str, int]:
    """
    Data-quality counts: how many rows have each key field filled in.
    """
    return {
        "albums": len(albums),
        "with_title": int(albums["album_title"].notna().sum()),
        "with_artist": int(albums["artist_name"].notna().sum()),
        "with_metascore": int(albums["metascore"].notna().sum()),
        "with_user_score": int(albums["user_score"].notna().sum()),
    }


def print_summary(albums: pd.DataFrame) -> None:
    s = summarize_albums(albums)
    total = s["albums"]
    print(f"  - Albums with titles: {s['with_title']}/{total}")
    print(f"  - Albums with artists: {s['with_artist']}/{total}")
    print(f"  - Albums with metascores: {s['with_metascore']}/{total}")
    print(f"  - Albums with user scores: {s['with_user_score']}/{total}")


def run_example(
    *,
    output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR,
    filename: str = DEFAULT_CSV_NAME,
) -> pd.DataFrame:
    """
    Scrape the first page of new releases, show a summary, save it to CSV.
    """
    print("=== Metacritic Album Scraper - Example Usage ===\n")

    print("1. Scraping first page of new releases...\n")
    albums = scrape_metacritic_albums(verbose=True)

    print("\n2. Data Summary:")
    albums.info()
    print_summary(albums)

    print("\n3. Sample Data (first 3 albums):")
    print(albums[PREVIEW_COLUMNS].head(3).to_string(index=False))

    print("\n4. Saving data to CSV...")
    save_albums_to_csv(albums, filename=filename, path=output_dir)

    print("\n=== Example Complete ===")

    return albums
