"""Fetch venue pages and pull hours descriptions out of their HTML."""

import logging
import os
import re

import requests
from bs4 import BeautifulSoup

from hours_parser.exceptions import HoursFetchError
from hours_parser.time_extractor import parse_week_intervals
from hours_parser.week_intervals import WeekIntervals

logger = logging.getLogger(__name__)

# Constants
REQUEST_TIMEOUT = float(os.getenv("HOURS_PARSER_TIMEOUT", "10"))
USER_AGENT = os.getenv(
    "HOURS_PARSER_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36",
)
HOURS_MARKER = "hours"  # Matched against element class and id attributes
OPENING_HOURS_ITEMPROP = "openingHours"  # schema.org microdata property


def fetch_page(url: str) -> str:
    """
    Fetch a venue page.

    Args:
        url: Page URL

    Returns:
        HTML content as string

    Raises:
        HoursFetchError: If the request fails or returns an error status
    """
    headers = {"User-Agent": USER_AGENT}

    try:
        logger.info("Fetching %s", url)
        response = requests.get(url, headers=headers, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        return response.text
    except requests.Timeout as e:
        raise HoursFetchError(f"Request timed out: {url}") from e
    except requests.RequestException as e:
        raise HoursFetchError(f"Request failed: {e}") from e


def extract_hours_text(html_content: str) -> list[str]:
    """
    Find candidate hours descriptions in a page.

    Looks at schema.org openingHours microdata first, then at any element
    whose class or id mentions "hours".

    Args:
        html_content: Raw HTML

    Returns:
        Distinct descriptions in document order
    """
    soup = BeautifulSoup(html_content, "lxml")
    candidates = []

    for element in soup.find_all(attrs={"itemprop": OPENING_HOURS_ITEMPROP}):
        candidates.append(element.get("content") or element.get_text(" "))

    for element in soup.find_all(_mentions_hours):
        candidates.append(element.get_text(" "))

    # Normalise whitespace and drop duplicates, preserving order
    cleaned = [re.sub(r"\s+", " ", text).strip() for text in candidates]
    descriptions = list(dict.fromkeys(text for text in cleaned if text))

    logger.info("Found %d hours descriptions", len(descriptions))
    return descriptions


def parse_hours_page(html_content: str) -> WeekIntervals | None:
    """
    Parse the first understandable hours description on a page.

    Args:
        html_content: Raw HTML

    Returns:
        WeekIntervals, or None if no description on the page parses
    """
    for description in extract_hours_text(html_content):
        intervals = parse_week_intervals(description)
        if intervals is not None:
            logger.debug("Using hours description %r", description)
            return intervals
        logger.debug("Skipping unparseable description %r", description)

    logger.warning("No parseable hours description found")
    return None


def _mentions_hours(tag) -> bool:
    """Check whether a tag's class or id contains the hours marker."""
    classes = " ".join(tag.get("class", []))
    element_id = tag.get("id") or ""
    return HOURS_MARKER in classes.lower() or HOURS_MARKER in element_id.lower()
