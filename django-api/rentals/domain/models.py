"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in rentals/models.py (persistence layer).
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from enum import Enum
from typing import Iterable, Self

from rentals.domain.calendar import Calendar
from rentals.domain.errors import InvalidRangeError
from rentals.domain.value_objects import DateRange, IntervalId, ItemId, OrderId, OwnerId


class UnavailableReason(Enum):
    """Why a requested range cannot be booked."""

    NOT_LISTED = "not_listed"
    BOOKED = "booked"
    OUTSIDE_ALLOWED_DATES = "outside_allowed_dates"


@dataclass(frozen=True)
class BookedInterval:
    """A committed, contiguous date range reserved against an item by an order.

    Created by the reservation coordinator and removed on release; never
    mutated otherwise.
    """

    id: IntervalId
    item_id: ItemId
    dates: DateRange
    order_id: OrderId
    owner_id: OwnerId | None
    created_at: datetime

    def __post_init__(self) -> None:
        if self.dates.start >= self.dates.end:
            raise InvalidRangeError("A booking must end after it starts")

    @classmethod
    def create(
        cls,
        item_id: ItemId,
        dates: DateRange,
        order_id: OrderId,
        owner_id: OwnerId | None = None,
    ) -> Self:
        return cls(
            id=IntervalId.new(),
            item_id=item_id,
            dates=dates,
            order_id=order_id,
            owner_id=owner_id,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def start_date(self) -> date:
        return self.dates.start

    @property
    def end_date(self) -> date:
        return self.dates.end


@dataclass(frozen=True)
class Item:
    """Domain representation of a rentable Item.

    ``bookings`` is the snapshot of committed intervals the item was read
    with; it is what availability decisions are made against.
    """

    id: ItemId
    is_listed: bool = True
    allowed_dates: Calendar = field(default_factory=Calendar)
    name: str = ""
    bookings: tuple[BookedInterval, ...] = ()

    @property
    def is_restricted(self) -> bool:
        return not self.allowed_dates.is_empty

    def with_bookings(self, intervals: Iterable[BookedInterval]) -> "Item":
        return replace(self, bookings=tuple(intervals))


@dataclass(frozen=True)
class LineItem:
    """One item rented for one window within an order."""

    item_id: ItemId
    dates: DateRange


@dataclass(frozen=True)
class RentalOrder:
    """The slice of an order the reservation core cares about."""

    id: OrderId
    line_items: tuple[LineItem, ...]
    owner_id: OwnerId | None = None


@dataclass(frozen=True)
class AvailabilityReport:
    """Outcome of a pre-checkout availability check."""

    item_id: ItemId
    requested: DateRange
    available: bool
    reason: UnavailableReason | None
    available_dates: tuple[date, ...]
    booked_dates: tuple[date, ...]

    @property
    def message(self) -> str:
        if self.available:
            return "Item is available for the selected dates"
        return "Item is not available for the selected dates"
