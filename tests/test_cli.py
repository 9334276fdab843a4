"""Tests for the command line entry point."""

import argparse

import pytest

from metacritic_scraper import cli
from metacritic_scraper.config import BROWSE_URL, DEFAULT_DELAY_SEC, LISTING_URL
from metacritic_scraper.errors import FetchFailed, InvalidArgument
from metacritic_scraper.scrape.page import empty_albums_frame


class TestParsePages:
    @pytest.mark.parametrize("spec,expected", [
        ("0-2", [0, 1, 2]),
        ("0,1,5", [0, 1, 5]),
        ("0-1,4", [0, 1, 4]),
        ("3,1,3", [3, 1, 3]),
        (" 2 ", [2]),
    ])
    def test_valid(self, spec, expected):
        assert cli.parse_pages(spec) == expected

    @pytest.mark.parametrize("spec", ["", ",", "3-1"])
    def test_invalid(self, spec):
        with pytest.raises(argparse.ArgumentTypeError):
            cli.parse_pages(spec)

    def test_non_numeric_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            cli.parse_args(["--pages", "a-b"])


class TestParseArgs:
    def test_defaults(self):
        args = cli.parse_args([])
        assert args.url == LISTING_URL
        assert args.base_url == BROWSE_URL
        assert args.pages is None
        assert args.delay == DEFAULT_DELAY_SEC
        assert args.quiet is False


@pytest.fixture
def recorded(monkeypatch):
    calls = {}

    def single(url, delay, verbose):
        calls["single"] = (url, delay, verbose)
        return empty_albums_frame()

    def multi(base_url, pages, delay, verbose):
        calls["multi"] = (base_url, pages, delay, verbose)
        return empty_albums_frame()

    def save(albums, filename, path):
        calls["save"] = (filename, path)

    monkeypatch.setattr(cli, "scrape_metacritic_albums", single)
    monkeypatch.setattr(cli, "scrape_multiple_pages", multi)
    monkeypatch.setattr(cli, "save_albums_to_csv", save)
    return calls


class TestMain:
    def test_single_page(self, recorded):
        assert cli.main(["--delay", "0", "--quiet", "--out-dir", "out", "--filename", "x.csv"]) == 0
        assert recorded["single"] == (LISTING_URL, 0.0, False)
        assert recorded["save"] == ("x.csv", "out")

    def test_multi_page(self, recorded):
        assert cli.main(["--pages", "0-1", "--base-url", "https://m/browse"]) == 0
        assert recorded["multi"] == ("https://m/browse", [0, 1], DEFAULT_DELAY_SEC, True)
        assert "single" not in recorded

    @pytest.mark.parametrize("err", [
        FetchFailed("https://m", "HTTP request failed with status: 403", status_code=403),
        InvalidArgument("Delay must be a non-negative number"),
    ])
    def test_fatal_error_exit_code(self, monkeypatch, recorded, capsys, err):
        def boom(**kw):
            raise err

        monkeypatch.setattr(cli, "scrape_metacritic_albums", boom)
        assert cli.main(["--delay", "0"]) == 1
        assert "Error:" in capsys.readouterr().err
        assert "save" not in recorded

    @pytest.mark.parametrize("delay", ["nan", "inf"])
    def test_non_finite_delay_exit_code(self, delay, no_sleep, capsys):
        assert cli.main(["--delay", delay, "--quiet"]) == 1
        assert "Delay must be a non-negative number" in capsys.readouterr().err
        assert no_sleep == []
