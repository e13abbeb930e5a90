"""Data models for hours description tokens, intervals and venues."""

from dataclasses import dataclass
from datetime import time

from hours_parser.date_utils import (
    END_OF_DAY,
    START_OF_DAY,
    day_name,
    is_valid_day,
    next_day,
)


@dataclass(frozen=True)
class Day:
    """A single day of the week, e.g. "tue" or "saturday"."""

    day: int

    def __post_init__(self):
        if not is_valid_day(self.day):
            raise ValueError(f"Invalid day ordinal: {self.day}")

    def days(self) -> tuple[int, ...]:
        """Days covered by this token (always exactly one)."""
        return (self.day,)

    def __str__(self):
        return day_name(self.day)


@dataclass(frozen=True)
class DayRange:
    """
    A run of days such as "mon-fri" or "daily".

    The range walks forward from start_day, wrapping Sunday to Monday,
    and stops once end_day has been produced. "sat-mon" covers Sat, Sun, Mon.
    """

    start_day: int
    end_day: int

    def __post_init__(self):
        for day in (self.start_day, self.end_day):
            if not is_valid_day(day):
                raise ValueError(f"Invalid day ordinal: {day}")

    def days(self) -> tuple[int, ...]:
        """Days covered by this range, in order."""
        days = [self.start_day]
        while days[-1] != self.end_day:
            days.append(next_day(days[-1]))
        return tuple(days)

    def __str__(self):
        return f"{day_name(self.start_day)}-{day_name(self.end_day)}"


@dataclass(frozen=True)
class TimeRange:
    """
    Opening and closing time for a clause.

    start_time may be later than end_time when the range runs past midnight.
    Equal times mean the clause is closed.
    """

    start_time: time
    end_time: time

    @property
    def is_closed(self) -> bool:
        return self.start_time == self.end_time

    @property
    def crosses_midnight(self) -> bool:
        return self.start_time > self.end_time


@dataclass(frozen=True)
class Separator:
    """Clause boundary (a comma in the source text)."""


Token = Day | DayRange | TimeRange | Separator

WHOLE_DAY = TimeRange(START_OF_DAY, END_OF_DAY)
CLOSED = TimeRange(START_OF_DAY, START_OF_DAY)


@dataclass(frozen=True, order=True)
class DayInterval:
    """Closed time interval on a single day of the week."""

    day: int
    start_time: time
    end_time: time

    def __post_init__(self):
        if not is_valid_day(self.day):
            raise ValueError(f"Invalid day ordinal: {self.day}")
        if self.start_time > self.end_time:
            raise ValueError(
                f"Interval start {self.start_time} is after end {self.end_time}"
            )

    def contains(self, day: int, time_of_day: time) -> bool:
        """Check whether the day and time fall inside this interval (inclusive)."""
        return day == self.day and self.start_time <= time_of_day <= self.end_time

    def intersects(self, other: "DayInterval") -> bool:
        """
        Check whether two intervals overlap or touch.

        Intervals sharing only an endpoint count as intersecting, so
        9am-6pm and 6pm-11pm intersect.
        """
        other_has_me = other.contains(self.day, self.start_time) or other.contains(
            self.day, self.end_time
        )
        i_have_other = self.contains(other.day, other.start_time) or self.contains(
            other.day, other.end_time
        )
        return other_has_me or i_have_other

    def merge_with(self, other: "DayInterval") -> "DayInterval":
        """Return the smallest interval covering both (they must intersect)."""
        if not self.intersects(other):
            raise ValueError(f"Cannot merge disjoint intervals {self} and {other}")
        return DayInterval(
            day=self.day,
            start_time=min(self.start_time, other.start_time),
            end_time=max(self.end_time, other.end_time),
        )


@dataclass(frozen=True)
class Venue:
    """A venue with a free-text hours description."""

    name: str
    hours: str
    url: str | None = None
