"""Tests for the venue page scraper."""

from datetime import time

import pytest
import requests

from hours_parser import html_scraper
from hours_parser.exceptions import HoursFetchError
from hours_parser.html_scraper import extract_hours_text, fetch_page, parse_hours_page
from hours_parser.models import DayInterval
from hours_parser.week_intervals import WeekIntervals

VENUE_PAGE = """
<html>
  <head>
    <meta itemprop="openingHours" content="Mo-Fr 09:00-17:00">
  </head>
  <body>
    <h1>Corner Cafe</h1>
    <div class="venue-hours">
      Mon-Fri   8am-5pm,
      Sat 9am-1pm
    </div>
    <p id="hours-note">Sun closed</p>
    <p class="address">12 Main St</p>
  </body>
</html>
"""


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class TestExtractHoursText:
    """Tests for extract_hours_text function."""

    def test_finds_microdata_and_hours_elements(self):
        """Test that microdata comes first, then hours elements."""
        assert extract_hours_text(VENUE_PAGE) == [
            "Mo-Fr 09:00-17:00",
            "Mon-Fri 8am-5pm, Sat 9am-1pm",
            "Sun closed",
        ]

    def test_duplicates_removed(self):
        """Test that repeated descriptions appear once."""
        html = """
        <div class="hours">Daily 7am-10pm</div>
        <footer><span class="hours">Daily 7am-10pm</span></footer>
        """
        assert extract_hours_text(html) == ["Daily 7am-10pm"]

    def test_no_hours(self):
        """Test a page with no hours markup."""
        assert extract_hours_text("<p>Welcome!</p>") == []


class TestParseHoursPage:
    """Tests for parse_hours_page function."""

    def test_first_parseable_description_wins(self):
        """Test that unparseable microdata is skipped."""
        actual = parse_hours_page(VENUE_PAGE)
        expected = [DayInterval(day, time(8, 0), time(17, 0)) for day in range(1, 6)]
        expected.append(DayInterval(6, time(9, 0), time(13, 0)))
        assert actual == WeekIntervals.of(*expected)

    def test_nothing_parseable(self):
        """Test that a page without usable hours returns None."""
        assert parse_hours_page('<div class="hours">Call us</div>') is None


class TestFetchPage:
    """Tests for fetch_page function."""

    def test_success(self, monkeypatch):
        """Test that the page body is returned."""
        calls = []

        def fake_get(url, headers, timeout):
            calls.append((url, headers, timeout))
            return FakeResponse("<html></html>")

        monkeypatch.setattr(html_scraper.requests, "get", fake_get)

        assert fetch_page("https://example.com/cafe") == "<html></html>"
        url, headers, timeout = calls[0]
        assert url == "https://example.com/cafe"
        assert headers["User-Agent"] == html_scraper.USER_AGENT
        assert timeout == html_scraper.REQUEST_TIMEOUT

    def test_http_error(self, monkeypatch):
        """Test that error statuses raise HoursFetchError."""
        monkeypatch.setattr(
            html_scraper.requests,
            "get",
            lambda url, headers, timeout: FakeResponse("", status_code=404),
        )

        with pytest.raises(HoursFetchError, match="Request failed"):
            fetch_page("https://example.com/missing")

    def test_timeout(self, monkeypatch):
        """Test that timeouts raise HoursFetchError."""

        def fake_get(url, headers, timeout):
            raise requests.Timeout("too slow")

        monkeypatch.setattr(html_scraper.requests, "get", fake_get)

        with pytest.raises(HoursFetchError, match="timed out"):
            fetch_page("https://example.com/slow")
