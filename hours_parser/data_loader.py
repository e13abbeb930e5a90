"""Load venue hours from JSON and parse them into typed intervals."""

import json
import logging
from pathlib import Path

from hours_parser.exceptions import HoursDataError
from hours_parser.models import Venue
from hours_parser.time_extractor import parse_week_intervals
from hours_parser.week_intervals import WeekIntervals

logger = logging.getLogger(__name__)


def load_venues(filepath: Path) -> list[Venue]:
    """
    Load venues from JSON file.

    Args:
        filepath: Path to JSON file with {"venues": [{"name", "hours", "url"}]}

    Returns:
        List of Venue objects

    Raises:
        FileNotFoundError: If the file does not exist
        HoursDataError: If the file is not valid venue JSON
    """
    if not filepath.exists():
        error_msg = f"File not found: {filepath}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    try:
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)

        venues = [_build_venue(venue) for venue in data["venues"]]
    except json.JSONDecodeError as e:
        raise HoursDataError(f"Invalid JSON in {filepath}: {e}") from e
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise HoursDataError(f"Malformed venue data in {filepath}: {e}") from e

    logger.info("Loaded %d venues", len(venues))

    return venues


def _build_venue(venue: dict) -> Venue:
    """Convert one raw venue entry, checking that name and hours are text."""
    name = venue["name"]
    hours = venue["hours"]
    url = venue.get("url")

    if not isinstance(name, str) or not isinstance(hours, str):
        raise ValueError(f"name and hours must be strings: {venue!r}")
    if url is not None and not isinstance(url, str):
        raise ValueError(f"url must be a string: {venue!r}")

    return Venue(name=name, hours=hours, url=url)


def parse_venue_hours(
    venues: list[Venue],
) -> list[tuple[Venue, WeekIntervals | None]]:
    """
    Parse the hours description of each venue.

    Args:
        venues: Venues to parse

    Returns:
        (venue, WeekIntervals) pairs in input order, with None where
        parsing failed. Venues sharing a name keep their own results.
    """
    result = []
    for venue in venues:
        intervals = parse_week_intervals(venue.hours)
        if intervals is None:
            logger.warning("Could not parse hours for %s: %r", venue.name, venue.hours)
        result.append((venue, intervals))

    parsed_count = sum(1 for _, intervals in result if intervals is not None)
    logger.info(
        "Parsed hours for %d venues (%d failed)",
        parsed_count,
        len(result) - parsed_count,
    )

    return result
