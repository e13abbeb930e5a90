"""Tests for loading and parsing venue hours."""

import json
from datetime import time

import pytest

from hours_parser.data_loader import load_venues, parse_venue_hours
from hours_parser.exceptions import HoursDataError
from hours_parser.models import DayInterval, Venue
from hours_parser.week_intervals import WeekIntervals


def _write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadVenues:
    """Tests for load_venues function."""

    def test_load(self, tmp_path):
        """Test loading venues with and without URLs."""
        filepath = _write_json(
            tmp_path / "venues.json",
            {
                "venues": [
                    {
                        "name": "Corner Cafe",
                        "hours": "Mon-Fri 8am-5pm",
                        "url": "https://example.com/cafe",
                    },
                    {"name": "Night Owl", "hours": "Fri-Sat 10pm-4am"},
                ]
            },
        )

        venues = load_venues(filepath)

        assert venues == [
            Venue("Corner Cafe", "Mon-Fri 8am-5pm", "https://example.com/cafe"),
            Venue("Night Owl", "Fri-Sat 10pm-4am"),
        ]

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="File not found"):
            load_venues(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        """Test that broken JSON raises HoursDataError."""
        filepath = tmp_path / "venues.json"
        filepath.write_text("{not json", encoding="utf-8")

        with pytest.raises(HoursDataError, match="Invalid JSON"):
            load_venues(filepath)

    def test_missing_fields(self, tmp_path):
        """Test that venues without hours raise HoursDataError."""
        filepath = _write_json(tmp_path / "venues.json", {"venues": [{"name": "X"}]})

        with pytest.raises(HoursDataError, match="Malformed venue data"):
            load_venues(filepath)

    @pytest.mark.parametrize("hours", [None, 42, ["Mon 9am-5pm"]])
    def test_hours_not_text(self, tmp_path, hours):
        """Test that non-string hours raise HoursDataError."""
        filepath = _write_json(
            tmp_path / "venues.json", {"venues": [{"name": "X", "hours": hours}]}
        )

        with pytest.raises(HoursDataError, match="Malformed venue data"):
            load_venues(filepath)

    def test_name_not_text(self, tmp_path):
        """Test that a non-string name raises HoursDataError."""
        filepath = _write_json(
            tmp_path / "venues.json", {"venues": [{"name": 7, "hours": "Mon 9am-5pm"}]}
        )

        with pytest.raises(HoursDataError, match="Malformed venue data"):
            load_venues(filepath)

    def test_missing_venues_key(self, tmp_path):
        """Test that a file without a venues list raises HoursDataError."""
        filepath = _write_json(tmp_path / "venues.json", ["Mon 9am-5pm"])

        with pytest.raises(HoursDataError, match="Malformed venue data"):
            load_venues(filepath)


class TestParseVenueHours:
    """Tests for parse_venue_hours function."""

    def test_parse(self):
        """Test that failures map to None without stopping other venues."""
        venues = [
            Venue("Corner Cafe", "Sat 9am-1pm"),
            Venue("Mystery Bar", "ask the bartender"),
        ]

        result = parse_venue_hours(venues)

        assert result == [
            (venues[0], WeekIntervals.of(DayInterval(6, time(9, 0), time(13, 0)))),
            (venues[1], None),
        ]

    def test_duplicate_names_keep_own_results(self):
        """Test that venues sharing a name are parsed independently."""
        venues = [Venue("Cafe", "Mon 9am-5pm"), Venue("Cafe", "gibberish")]

        result = parse_venue_hours(venues)

        assert [intervals is not None for _, intervals in result] == [True, False]
        assert result[0][1] == WeekIntervals.of(DayInterval(1, time(9, 0), time(17, 0)))
