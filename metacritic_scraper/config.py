# metacritic_scraper/config.py
from __future__ import annotations


# -----------------------------
# Site / endpoints
# -----------------------------

SITE_ORIGIN = "https://www.metacritic.com"

# Paginated browse endpoint (without query string)
BROWSE_URL = f"{SITE_ORIGIN}/browse/albums/release-date/new-releases/date"

# Default single-page listing
LISTING_URL = f"{BROWSE_URL}?view=detailed"

# Appended to BROWSE_URL for multi-page runs
PAGE_QUERY = "page={page}&view=detailed"


# -----------------------------
# HTTP / scraping
# -----------------------------

UA = "Python Web Scraper for Educational Purposes (unsam.edu.ar)"
ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
ACCEPT_LANGUAGE = "en-US,en;q=0.9"

REQUEST_TIMEOUT_SEC = 30

# Politeness delay applied before every request
DEFAULT_DELAY_SEC = 2.0

# Cell text that means "no value"
MISSING_SENTINELS = ("", "tbd")


# -----------------------------
# CSS selectors (one listing row)
# -----------------------------

ROW_SELECTOR = "tr"
TITLE_SELECTOR = "h3"
ARTIST_SELECTOR = "div.artist"
METASCORE_SELECTOR = "div.metascore_w"
USER_SCORE_SELECTOR = "div.metascore_w.user"
RELEASE_DATE_SELECTOR = "div.clamp-details span"
SUMMARY_SELECTOR = "div.summary"
ALBUM_LINK_SELECTOR = "a.title"
COVER_SELECTOR = "img"


# -----------------------------
# CSV schema
# -----------------------------

CSV_COLUMNS = [
    "album_title",
    "artist_name",
    "metascore",
    "user_score",
    "release_date",
    "summary",
    "album_url",
    "cover_image_url",
    "scraped_at",
]

# Leading column added by multi-page runs
PAGE_COLUMN = "page_number"


# -----------------------------
# Output
# -----------------------------

DEFAULT_OUTPUT_DIR = "data"
DEFAULT_CSV_NAME = "metacritic_albums.csv"
