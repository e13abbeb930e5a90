"""CLI entry point for the business hours parser."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from hours_parser.data_loader import load_venues, parse_venue_hours
from hours_parser.exceptions import HoursParserError
from hours_parser.html_scraper import fetch_page, parse_hours_page
from hours_parser.time_extractor import parse_week_intervals
from hours_parser.week_intervals import WeekIntervals

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: python main.py <hours text> | --venues <json_file> | --url <page_url>"
    " [--at YYYY-MM-DDTHH:MM] [--output <output_file>]"
)


def describe_hours(
    description: str, intervals: WeekIntervals | None, at: datetime | None = None
) -> dict:
    """
    Build the JSON result for one hours description.

    Args:
        description: Source text (or URL for fetched pages)
        intervals: Parse result, None if parsing failed
        at: Optional moment to check against the parsed hours

    Returns:
        Dict with the input, whether it parsed, intervals by day and,
        when at is given, whether the moment is within the hours
    """
    known = intervals is not None
    result = {
        "input": description,
        "known": known,
        "intervals": intervals.to_dict() if known else None,
    }
    if at is not None:
        result["open"] = intervals.contains_datetime(at) if known else None
    return result


def _pop_option(args: list[str], flag: str) -> str | None:
    """Remove a "--flag value" pair from args and return the value."""
    if flag not in args:
        return None

    idx = args.index(flag)
    if idx + 1 >= len(args):
        logger.error("Missing value for %s", flag)
        logger.error(USAGE)
        sys.exit(1)

    value = args[idx + 1]
    del args[idx : idx + 2]
    return value


def main():
    """Main CLI function."""
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.FileHandler("hours_parser.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )

    args = sys.argv[1:]
    output_file = _pop_option(args, "--output")
    at_str = _pop_option(args, "--at")
    venues_file = _pop_option(args, "--venues")
    url = _pop_option(args, "--url")

    at = None
    if at_str:
        try:
            at = datetime.fromisoformat(at_str)
        except ValueError:
            logger.error("Invalid --at value: %s", at_str)
            sys.exit(1)

    try:
        if venues_file:
            venues = load_venues(Path(venues_file))
            results = [
                {
                    "name": venue.name,
                    **describe_hours(venue.hours, intervals, at),
                }
                for venue, intervals in parse_venue_hours(venues)
            ]
            result = {"results": results, "count": len(results)}
        elif url:
            intervals = parse_hours_page(fetch_page(url))
            result = describe_hours(url, intervals, at)
        elif args:
            description = " ".join(args)
            result = describe_hours(description, parse_week_intervals(description), at)
        else:
            logger.error(USAGE)
            sys.exit(1)
    except FileNotFoundError as e:
        logger.error("%s", e)
        sys.exit(1)
    except HoursParserError as e:
        logger.error("Error: %s", e)
        sys.exit(1)

    # Output results
    if output_file:
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(result, f, indent=2)
        logger.info("Wrote results to %s", output_file)
    else:
        logger.info(json.dumps(result, indent=2))

    if "known" in result and not result["known"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
