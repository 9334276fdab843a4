# metacritic_scraper/storage/csv_export.py
from __future__ import annotations

from pathlib import Path
from typing import Union

import pandas as pd

from metacritic_scraper.config import DEFAULT_CSV_NAME, DEFAULT_OUTPUT_DIR
from metacritic_scraper.utils_debug import dbg


def save_albums_to_csv(
    albums: pd.DataFrame,
    filename: str = DEFAULT_CSV_NAME,
    path: Union[str, Path] = DEFAULT_OUTPUT_DIR,
) -> Path:
    """
    Write the album table to path/filename (header row, no index).

    Creates the directory if needed; an existing file is overwritten.
    """
    out_dir = Path(path)
    out_dir.mkdir(parents=True, exist_ok=True)

    full_path = out_dir / filename
    albums.to_csv(full_path, index=False, encoding="utf-8")

    dbg("csv.write", path=str(full_path), rows=len(albums))

    print(f"✓ Data saved to: {full_path}")
    print(f"  Rows: {albums.shape[0]} | Columns: {albums.shape[1]}")

    return full_path


def load_albums_csv(csv_file: Union[str, Path]) -> pd.DataFrame:
    """
    Read an export back. scraped_at is parsed to UTC datetimes
    when the column is present; everything else is left to pandas.
    """
    df = pd.read_csv(csv_file)
    if "scraped_at" in df.columns:
        df["scraped_at"] = pd.to_datetime(df["scraped_at"], utc=True, errors="coerce")
    return df
