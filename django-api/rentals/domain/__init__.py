from rentals.domain.calendar import Calendar
from rentals.domain.models import (
    AvailabilityReport,
    BookedInterval,
    Item,
    LineItem,
    RentalOrder,
    UnavailableReason,
)
from rentals.domain.value_objects import (
    AllowedDatesPolicy,
    DateRange,
    IntervalId,
    ItemId,
    OrderId,
    OwnerId,
)

__all__ = [
    "Calendar",
    "Item",
    "BookedInterval",
    "LineItem",
    "RentalOrder",
    "AvailabilityReport",
    "UnavailableReason",
    "AllowedDatesPolicy",
    "DateRange",
    "ItemId",
    "OrderId",
    "OwnerId",
    "IntervalId",
]
