"""
Extract weekly opening intervals from an hours description.

This is the entry point of the package. It understands text like
"Mon-Fri 11-3pm, Saturday closed, Sun 11pm-2am".
"""

import logging

from hours_parser.date_utils import END_OF_DAY, START_OF_DAY, next_day
from hours_parser.models import (
    WHOLE_DAY,
    Day,
    DayInterval,
    DayRange,
    Separator,
    TimeRange,
    Token,
)
from hours_parser.tokenizer import tokenize
from hours_parser.week_intervals import WeekIntervals

logger = logging.getLogger(__name__)


def parse_week_intervals(description: str) -> WeekIntervals | None:
    """
    Parse an hours description into a set of intervals for the week.

    The description is read as comma-separated clauses. A clause without a
    day reuses the days of the previous clause ("Mon 11am-2pm, 5-10pm"), and
    a trailing clause without a time covers the whole day ("Mon-Tue").

    Args:
        description: Free-text hours to parse

    Returns:
        WeekIntervals, or None if the description could not be understood
    """
    tokens = tokenize(description)
    if not tokens:
        logger.debug("Rejected %r: no recognisable tokens", description)
        return None

    intervals = WeekIntervals()
    index = 0
    day_context: Day | DayRange | None = None

    while index < len(tokens):
        clause_end = _find_clause_end(tokens, index)
        clause = tokens[index:clause_end]
        is_last_clause = clause_end == len(tokens)

        day_token = _find_first(clause, (Day, DayRange))
        time_token = _find_first(clause, (TimeRange,))

        if time_token is None and not is_last_clause:
            logger.debug(
                "Rejected %r: clause at token %d has no time", description, index
            )
            return None

        if day_token is not None:
            day_context = day_token
        if day_context is None:
            logger.debug("Rejected %r: no day before first time", description)
            return None

        time_range = time_token if time_token is not None else WHOLE_DAY
        if not time_range.is_closed:
            for day in day_context.days():
                for interval in _split_at_midnight(day, time_range):
                    intervals = intervals.add(interval)

        index = clause_end + 1

    return intervals


def _split_at_midnight(day: int, time_range: TimeRange) -> list[DayInterval]:
    """
    Turn a time range on a day into one or two day intervals.

    A range that runs past midnight ends at END_OF_DAY and continues from
    START_OF_DAY on the following day.
    """
    if time_range.crosses_midnight:
        return [
            DayInterval(day, time_range.start_time, END_OF_DAY),
            DayInterval(next_day(day), START_OF_DAY, time_range.end_time),
        ]
    return [DayInterval(day, time_range.start_time, time_range.end_time)]


def _find_clause_end(tokens: list[Token], start: int) -> int:
    """Index of the next separator at or after start, or len(tokens)."""
    for i in range(start, len(tokens)):
        if isinstance(tokens[i], Separator):
            return i
    return len(tokens)


def _find_first(clause: list[Token], kinds: tuple[type, ...]) -> Token | None:
    return next((token for token in clause if isinstance(token, kinds)), None)
