"""Tokenizer for free-text business hours descriptions."""

import logging
import re
from collections.abc import Callable
from datetime import time

from hours_parser.date_utils import LONG_DAY_NAMES, MONDAY, SHORT_DAY_NAMES, SUNDAY
from hours_parser.models import CLOSED, Day, DayRange, Separator, TimeRange, Token

logger = logging.getLogger(__name__)

# A successful rule returns the token and the text it did not consume
ParseResult = tuple[Token, str]

# Time parsing constants
NOON_HOUR_12 = 12  # 12 on the clock face, normalised to 0 before adding PM
PM_HOUR_OFFSET = 12  # Hours to add for PM times
DAILY_KEYWORD = "daily"
CLOSED_KEYWORD = "closed"
SEPARATOR_CHAR = ","

# "-" between two days or two times, with at most one space either side
RANGE_SEPARATOR_PATTERN = re.compile(r" ?- ?")

# hour1 [sep minute1] [am|pm] - hour2 [sep minute2] am|pm
# Minutes may be introduced by any single character ("9:30", "9.30") or
# follow the hour directly ("930"). The closing am/pm is optional in the
# pattern so a missing marker can be rejected after matching.
TIME_RANGE_PATTERN = re.compile(
    r"(1[0-2]|[1-9])(.??[0-5]\d)?(am|pm)?"
    r" ?- ?"
    r"(1[0-2]|[1-9])(.??[0-5]\d)?(am|pm)?"
)


def parse_day(text: str) -> ParseResult | None:
    """
    Parse a day name from the start of text.

    Examples: "tue starts" -> Day(2), remainder " starts".
    "thursty" is rejected because a letter follows "thur".

    Args:
        text: Lower-cased text to parse

    Returns:
        (Day, remainder) or None if text does not start with a day name
    """
    # Long names first, because the short names are prefixes of them
    for names in (LONG_DAY_NAMES, SHORT_DAY_NAMES):
        for ordinal, name in names.items():
            if not text.startswith(name):
                continue
            rest = text[len(name) :]
            if rest and _is_lowercase_letter(rest[0]):
                continue
            return Day(ordinal), rest
    return None


def parse_day_range(text: str) -> ParseResult | None:
    """
    Parse a day range like "mon-fri", "thur - sun" or "daily".

    Args:
        text: Lower-cased text to parse

    Returns:
        (DayRange, remainder) or None if both days cannot be parsed
    """
    if text.startswith(DAILY_KEYWORD):
        return DayRange(MONDAY, SUNDAY), text[len(DAILY_KEYWORD) :]

    start = parse_day(text)
    if start is None:
        return None
    start_day, after_start = start

    separator = RANGE_SEPARATOR_PATTERN.match(after_start)
    if not separator:
        return None

    end = parse_day(after_start[separator.end() :])
    if end is None:
        return None
    end_day, rest = end

    return DayRange(start_day.day, end_day.day), rest


def parse_time_range(text: str) -> ParseResult | None:
    """
    Parse a time range like "9:30am-2pm", "11-3pm" or "closed".

    The closing time must carry am/pm. When the opening time has no marker
    it is inferred from the closing time, so "1-2pm" opens at 13:00 and
    "11-2am" opens at 23:00.

    Args:
        text: Lower-cased text to parse

    Returns:
        (TimeRange, remainder) or None if text does not start with a range
    """
    if text.startswith(CLOSED_KEYWORD):
        return CLOSED, text[len(CLOSED_KEYWORD) :]

    match = TIME_RANGE_PATTERN.match(text)
    if not match:
        return None

    (
        start_hour_str,
        start_minute_str,
        start_period,
        end_hour_str,
        end_minute_str,
        end_period,
    ) = match.groups()
    if end_period is None:
        return None

    start_base = _normalise_hour(int(start_hour_str))
    end_base = _normalise_hour(int(end_hour_str))

    end_hour = end_base + PM_HOUR_OFFSET if end_period == "pm" else end_base

    if start_period == "am":
        start_hour = start_base
    elif start_period == "pm":
        start_hour = start_base + PM_HOUR_OFFSET
    else:
        start_hour = _infer_start_hour(start_base, end_base, end_hour)

    start_time = time(start_hour, _parse_minute(start_minute_str))
    end_time = time(end_hour, _parse_minute(end_minute_str))
    return TimeRange(start_time, end_time), text[match.end() :]


def parse_separator(text: str) -> ParseResult | None:
    """Parse a clause separator (comma) from the start of text."""
    if text.startswith(SEPARATOR_CHAR):
        return Separator(), text[len(SEPARATOR_CHAR) :]
    return None


# Rules tried at each position, in priority order. Day ranges come before
# days so "mon-fri" is not read as a lone "mon".
GRAMMAR_RULES: tuple[Callable[[str], ParseResult | None], ...] = (
    parse_day_range,
    parse_day,
    parse_time_range,
    parse_separator,
)


def tokenize(description: str) -> list[Token]:
    """
    Turn an hours description into a list of tokens.

    Text that no rule recognises is skipped one character at a time, so
    filler words ("lunch", "something irrelevant") simply disappear.

    Args:
        description: Free-text hours, e.g. "Mon-Fri 11-3pm, Sat closed"

    Returns:
        Tokens in source order (possibly empty)
    """
    tokens: list[Token] = []
    remainder = description.lower()

    while remainder:
        for rule in GRAMMAR_RULES:
            result = rule(remainder)
            if result is not None:
                token, remainder = result
                tokens.append(token)
                break
        else:
            remainder = remainder[1:]

    logger.debug("Tokenized %r into %s", description, tokens)
    return tokens


def _infer_start_hour(start_base: int, end_base: int, end_hour: int) -> int:
    """
    Pick AM or PM for an opening hour written without a marker.

    Bases are clock-face hours with 12 normalised to 0; end_hour is the
    closing hour on the 24-hour clock.
    """
    if start_base >= end_base:
        if end_hour >= NOON_HOUR_12:
            return start_base
        return start_base + PM_HOUR_OFFSET

    if end_hour > NOON_HOUR_12:
        return start_base + PM_HOUR_OFFSET
    return start_base


def _normalise_hour(hour: int) -> int:
    return 0 if hour == NOON_HOUR_12 else hour


def _parse_minute(minute_str: str | None) -> int:
    # The group may carry a leading separator character ("9:30" -> ":30")
    return int(minute_str[-2:]) if minute_str else 0


def _is_lowercase_letter(char: str) -> bool:
    return "a" <= char <= "z"
