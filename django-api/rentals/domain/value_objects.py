"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Self
from uuid import UUID, uuid4

from rentals.domain.errors import InvalidRangeError


@dataclass(frozen=True)
class ItemId:
    """Unique identifier for a rentable Item."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OrderId:
    """Unique identifier for the Order owning a booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OwnerId:
    """Identifier of the booking actor (absent for guest orders)."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class IntervalId:
    """Unique identifier for a BookedInterval."""

    value: UUID

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class DateRange:
    """Closed-inclusive range of calendar days.

    Every day from ``start`` through ``end`` is part of the range, so a range
    with ``start == end`` covers exactly one day.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidRangeError("Start date must not be after end date")

    @classmethod
    def parse(cls, start: object, end: object) -> Self:
        """Build a range from raw boundary values, normalizing both ends."""
        from rentals.domain.calendar import normalize

        return cls(start=normalize(start), end=normalize(end))

    def overlaps(self, other: "DateRange") -> bool:
        return self.start <= other.end and other.start <= self.end

    def days(self) -> list[date]:
        return [self.start + timedelta(days=n) for n in range(len(self))]

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start <= day <= self.end

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


class AllowedDatesPolicy(Enum):
    """How an item with no explicit allowed dates is treated."""

    OPEN = "open"
    CLOSED = "closed"
