"""Shared day-of-week and time-of-day utilities used across the project."""

from datetime import time

# Day ordinals follow ISO weekday numbering (Monday = 1, Sunday = 7)
MONDAY = 1
SUNDAY = 7

# Standard day-of-week names in ordinal order
DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# Names recognised in free text, keyed by ordinal. Every short name is a
# prefix of its long name, so long names must be tried first.
LONG_DAY_NAMES = {
    1: "monday",
    2: "tuesday",
    3: "wednesday",
    4: "thursday",
    5: "friday",
    6: "saturday",
    7: "sunday",
}
SHORT_DAY_NAMES = {
    1: "mon",
    2: "tue",
    3: "wed",
    4: "thur",
    5: "fri",
    6: "sat",
    7: "sun",
}

# Bounds used for whole-day clauses and midnight-crossing splits
START_OF_DAY = time(0, 0)
END_OF_DAY = time(23, 59)


def is_valid_day(day: int) -> bool:
    """Check that a day ordinal lies in [MONDAY, SUNDAY]."""
    return MONDAY <= day <= SUNDAY


def next_day(day: int) -> int:
    """Return the cyclic successor of a day ordinal (Sunday wraps to Monday)."""
    if not is_valid_day(day):
        raise ValueError(f"Invalid day ordinal: {day}")
    return MONDAY if day == SUNDAY else day + 1


def day_name(day: int) -> str:
    """Return the three-letter name for a day ordinal (e.g. 1 -> "Mon")."""
    if not is_valid_day(day):
        raise ValueError(f"Invalid day ordinal: {day}")
    return DAY_NAMES[day - MONDAY]


def format_time(value: time) -> str:
    """Format a time of day as HH:MM."""
    return value.strftime("%H:%M")
