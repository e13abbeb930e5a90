"""Canonical set of opening intervals over a week."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, time

from hours_parser.date_utils import DAY_NAMES, MONDAY, day_name, format_time
from hours_parser.models import DayInterval


@dataclass(frozen=True)
class WeekIntervals:
    """
    Immutable collection of day intervals, e.g. Mon-Fri 11-2pm, Sat 9am-3pm.

    Intervals on the same day never overlap or touch; add() merges them as
    they arrive. Two collections are equal when they hold the same
    intervals, whatever order they were added in.

    WeekIntervals knows nothing about timezones.
    """

    intervals: frozenset[DayInterval] = field(default_factory=frozenset)

    @classmethod
    def of(cls, *intervals: DayInterval) -> "WeekIntervals":
        """Build a collection by adding each interval in turn."""
        result = cls()
        for interval in intervals:
            result = result.add(interval)
        return result

    def add(self, new_interval: DayInterval) -> "WeekIntervals":
        """
        Return a new collection with the given interval added.

        Every existing interval that intersects the incoming one is folded
        into it, so a chain of overlapping intervals collapses in one call.

        Args:
            new_interval: Interval to add

        Returns:
            New WeekIntervals; this one is left unchanged
        """
        kept = set()
        to_add = new_interval

        for interval in self.intervals:
            if interval.intersects(to_add):
                to_add = interval.merge_with(to_add)
            else:
                kept.add(interval)

        kept.add(to_add)
        return WeekIntervals(frozenset(kept))

    def contains(self, day: int, time_of_day: time) -> bool:
        """Check whether any interval covers the given day and time."""
        return any(interval.contains(day, time_of_day) for interval in self.intervals)

    def contains_datetime(self, moment: datetime) -> bool:
        """
        Check whether a moment falls inside the collection.

        Only the weekday, hour and minute are used; tzinfo is ignored.

        Args:
            moment: Date and time to check

        Returns:
            True if the moment is covered, False otherwise
        """
        return self.contains(moment.isoweekday(), time(moment.hour, moment.minute))

    def intervals_for(self, day: int) -> list[DayInterval]:
        """Intervals on the given day, earliest first."""
        return sorted(interval for interval in self.intervals if interval.day == day)

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        """Convert to dictionary for JSON serialization, keyed by day name."""
        return {
            name: [
                {
                    "start": format_time(interval.start_time),
                    "end": format_time(interval.end_time),
                }
                for interval in self.intervals_for(day)
            ]
            for day, name in enumerate(DAY_NAMES, start=MONDAY)
        }

    def __iter__(self) -> Iterator[DayInterval]:
        return iter(sorted(self.intervals))

    def __len__(self) -> int:
        return len(self.intervals)

    def __str__(self):
        parts = [
            f"{day_name(interval.day)} "
            f"{format_time(interval.start_time)}-{format_time(interval.end_time)}"
            for interval in self
        ]
        return ", ".join(parts) if parts else "(no hours)"
