"""Shared fixtures: a small listing page in Metacritic's "detailed" layout."""

import pytest
from bs4 import BeautifulSoup


ALBUM_ROW = """
<tr>
  <td class="clamp-image-wrap">
    <a href="/music/{slug}/{artist_slug}"><img src="https://static.metacritic.com/images/{slug}.jpg"></a>
  </td>
  <td class="clamp-summary-wrap">
    <a href="/music/{slug}/{artist_slug}" class="title"><h3>{title}</h3></a>
    <div class="artist">{artist}</div>
    <div class="clamp-details"><span>{date}</span></div>
    <div class="summary">{summary}</div>
    <div class="clamp-score-wrap"><div class="metascore_w large">{metascore}</div></div>
    <div class="clamp-userscore"><div class="metascore_w user large">{user_score}</div></div>
  </td>
</tr>
"""

HEADER_ROW = "<tr><th>Album</th><th>Score</th></tr>"
SPACER_ROW = '<tr class="spacer"><td></td></tr>'


def album_row(
    title="Album X",
    artist="Some Artist",
    metascore="85",
    user_score="7.9",
    date="October 24, 2025",
    summary="A record.",
    slug="album-x",
    artist_slug="some-artist",
):
    return ALBUM_ROW.format(
        title=title,
        artist=artist,
        metascore=metascore,
        user_score=user_score,
        date=date,
        summary=summary,
        slug=slug,
        artist_slug=artist_slug,
    )


def listing_page(*rows):
    return "<html><body><table class='clamp-list'>" + "".join(rows) + "</table></body></html>"


def soup_of(html):
    return BeautifulSoup(html, "html.parser")


def first(html, selector="tr"):
    return soup_of(html).select_one(selector)


@pytest.fixture
def two_album_page():
    return soup_of(
        listing_page(
            HEADER_ROW,
            album_row(),
            SPACER_ROW,
            album_row(
                title="Second Album",
                artist="Another Band",
                metascore="tbd",
                user_score="",
                slug="second-album",
                artist_slug="another-band",
            ),
        )
    )


@pytest.fixture
def no_sleep(monkeypatch):
    """Record politeness delays instead of sleeping."""
    import metacritic_scraper.scrape.page as page

    calls = []
    monkeypatch.setattr(page.time, "sleep", lambda s: calls.append(s))
    return calls
