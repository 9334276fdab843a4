# metacritic_scraper/ui/app.py
from __future__ import annotations

from pathlib import Path
import math
import webbrowser

import pandas as pd
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import DataTable, Footer, Header, Static

from metacritic_scraper.config import PAGE_COLUMN
from metacritic_scraper.storage.csv_export import load_albums_csv


def _cell(v) -> str:
    """None / NaN -> "" for display."""
    if v is None or v is pd.NaT:
        return ""
    if isinstance(v, float):
        if math.isnan(v):
            return ""
        return f"{v:g}"
    return str(v)


def album_rows(df: pd.DataFrame) -> list[dict]:
    return [
        {k: _cell(v) for k, v in rec.items()}
        for rec in df.to_dict(orient="records")
    ]


def sort_rows(rows: list[dict], mode: str) -> list[dict]:
    if mode == "title":
        return sorted(rows, key=lambda r: r.get("album_title", "").lower())

    # metascore_desc, missing scores last
    def key(r: dict) -> tuple[int, float]:
        s = r.get("metascore", "")
        return (0, -float(s)) if s else (1, 0.0)

    return sorted(rows, key=key)


# ----------------------------
# Small UI widgets
# ----------------------------

class StatCard(Static):
    def __init__(self, label: str, icon: str = ""):
        super().__init__()
        self.label = label
        self.icon = icon

    def update_value(self, v: str) -> None:
        self.update(f"{self.icon} {self.label}\n[b]{v}[/b]")


class Details(Static):
    can_focus = True

    def show_album(self, row: dict) -> None:
        if not row:
            self.update("Select a row…")
            return

        lines = [
            f"[b]{row.get('album_title') or 'N/A'}[/b]",
            f"{row.get('artist_name') or 'Unknown artist'}",
            "",
            f"Metascore: {row.get('metascore') or '-'}",
            f"User score: {row.get('user_score') or '-'}",
            f"Released: {row.get('release_date') or 'N/A'}",
        ]
        if row.get(PAGE_COLUMN):
            lines.append(f"Page: {row[PAGE_COLUMN]}")
        lines += [
            "",
            f"URL: {row.get('album_url') or 'N/A'}",
            f"Cover: {row.get('cover_image_url') or 'N/A'}",
            "",
            row.get("summary") or "",
        ]

        self.update("\n".join(lines))
        self.scroll_home()


# ----------------------------
# Main App
# ----------------------------

class AlbumBrowser(App):
    CSS = """
    Screen {
        background: #101417;
        color: #e8eef2;
    }

    #stats_row {
        height: 4;
        margin: 1 1 1 1;
    }

    StatCard {
        width: 1fr;
        border: tall #2d3a45;
        padding: 0 2;
        background: #0b0f12;
    }

    #list_box {
        width: 2fr;
        margin-right: 1;
        border: tall #2d3a45;
    }

    #details_box {
        width: 1fr;
        border: tall #2d3a45;
        padding: 0 1;
        background: #0b0f12;
    }

    #side_details {
        height: 100%;
        overflow-y: auto;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("s", "toggle_sort", "Sort"),
        Binding("enter", "focus_details", "Details"),
        Binding("escape", "focus_list", "List"),
        Binding("O", "open_url", "Open"),
    ]

    sort_mode = reactive("metascore_desc")

    def __init__(self, *, csv_file: Path):
        super().__init__()
        self.csv_file = Path(csv_file)
        self.rows: list[dict] = []
        self.row_lookup: dict[str, dict] = {}

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Horizontal(id="stats_row"):
            self.card_total = StatCard("Albums", "💿")
            self.card_meta = StatCard("Metascore", "🎯")
            self.card_user = StatCard("User score", "👥")
            self.card_pages = StatCard("Pages", "📄")
            yield self.card_total
            yield self.card_meta
            yield self.card_user
            yield self.card_pages

        with Horizontal():
            self.table = DataTable(zebra_stripes=True, id="list_box")
            yield self.table

            with Container(id="details_box"):
                self.side_details = Details("Select a row…", id="side_details")
                yield self.side_details

        yield Footer()

    def on_mount(self) -> None:
        self.title = f"Metacritic albums · {self.csv_file.name}"
        self.table.add_column("Score", width=6)
        self.table.add_column("Album")
        self.table.add_column("Artist")
        self.table.cursor_type = "row"
        self.table.focus()

        self.rows = album_rows(load_albums_csv(self.csv_file))
        self.apply_view()

    def apply_view(self) -> None:
        self.table.clear()
        self.row_lookup.clear()

        rows = sort_rows(self.rows, self.sort_mode)
        for i, row in enumerate(rows):
            key = f"row-{i}"
            self.row_lookup[key] = row
            self.table.add_row(row.get("metascore") or "-", row.get("album_title"), row.get("artist_name"), key=key)

        if self.table.row_count:
            self.table.cursor_coordinate = (0, 0)

        self.card_total.update_value(str(len(rows)))
        self.card_meta.update_value(str(sum(1 for r in rows if r.get("metascore"))))
        self.card_user.update_value(str(sum(1 for r in rows if r.get("user_score"))))
        pages = {r.get(PAGE_COLUMN) for r in rows if r.get(PAGE_COLUMN)}
        self.card_pages.update_value(str(len(pages) or 1))

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        key = event.row_key.value if event.row_key else None
        self.side_details.show_album(self.row_lookup.get(key or "", {}))

    # ----------------------------
    # Actions
    # ----------------------------

    def action_toggle_sort(self) -> None:
        self.sort_mode = "title" if self.sort_mode == "metascore_desc" else "metascore_desc"
        self.apply_view()

    def action_focus_details(self) -> None:
        self.side_details.focus()

    def action_focus_list(self) -> None:
        self.table.focus()

    def action_open_url(self) -> None:
        if not self.table.row_count:
            return
        key = self.table.coordinate_to_cell_key(self.table.cursor_coordinate).row_key.value
        row = self.row_lookup.get(key or "")
        if row and row.get("album_url"):
            webbrowser.open(row["album_url"])
