"""Day-granularity calendar operations.

All functions here are pure. Dates are normalized once at ingestion with
``normalize`` and handled as ``datetime.date`` everywhere after that.
"""

from collections.abc import Iterable, Iterator
from datetime import date, datetime, timezone
from typing import Self

from rentals.domain.errors import InvalidRangeError
from rentals.domain.value_objects import DateRange


def normalize(value: object) -> date:
    """Truncate a date-like value to its calendar day.

    Accepts ``date``, ``datetime`` or an ISO-8601 string. Aware datetimes are
    converted to UTC before truncation.

    Raises:
        InvalidRangeError: If the value is not a recognizable date.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            return normalize(datetime.fromisoformat(text))
        except ValueError:
            raise InvalidRangeError(f"Invalid date format: {value!r}") from None
    raise InvalidRangeError(f"Invalid date value: {value!r}")


def days_between(start: date, end: date) -> list[date]:
    """Every day from start to end inclusive, ascending.

    Raises:
        InvalidRangeError: If start is after end.
    """
    return DateRange(start=start, end=end).days()


def overlaps(range_a: DateRange, range_b: DateRange) -> bool:
    return range_a.overlaps(range_b)


def today() -> date:
    """The current UTC day."""
    return datetime.now(timezone.utc).date()


class Calendar:
    """Immutable set of calendar days."""

    __slots__ = ("_days",)

    def __init__(self, days: Iterable[date] = ()) -> None:
        self._days = frozenset(days)

    @classmethod
    def from_range(cls, dates: DateRange) -> Self:
        return cls(dates.days())

    @classmethod
    def from_ranges(cls, ranges: Iterable[DateRange]) -> Self:
        days: set[date] = set()
        for dates in ranges:
            days.update(dates.days())
        return cls(days)

    def union(self, other: "Calendar") -> "Calendar":
        return Calendar(self._days | other._days)

    def difference(self, other: "Calendar") -> "Calendar":
        return Calendar(self._days - other._days)

    def intersection(self, other: "Calendar") -> "Calendar":
        return Calendar(self._days & other._days)

    __or__ = union
    __sub__ = difference
    __and__ = intersection

    def dates(self) -> list[date]:
        return sorted(self._days)

    @property
    def is_empty(self) -> bool:
        return not self._days

    def first(self) -> date | None:
        return min(self._days, default=None)

    def last(self) -> date | None:
        return max(self._days, default=None)

    def __contains__(self, day: object) -> bool:
        return day in self._days

    def __iter__(self) -> Iterator[date]:
        return iter(self.dates())

    def __len__(self) -> int:
        return len(self._days)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self._days == other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        return f"Calendar({len(self._days)} days)"
