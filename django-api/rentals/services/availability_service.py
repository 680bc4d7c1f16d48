"""Availability service - read-side queries for the pre-checkout endpoints.

Parses boundary identifiers, loads the item snapshot from the stores and
delegates every decision to the AvailabilityEngine. Read-only: nothing here
takes a reservation lock.
"""

from datetime import date

from rentals.domain import AvailabilityReport, BookedInterval, Item, ItemId
from rentals.domain.errors import InvalidItemIdError, ItemNotFoundError
from rentals.services.availability_engine import AvailabilityEngine
from rentals.stores.interfaces import BookingLedger, ItemStore


class AvailabilityService:
    """Service for item availability queries."""

    def __init__(
        self, items: ItemStore, ledger: BookingLedger, engine: AvailabilityEngine
    ) -> None:
        self._items = items
        self._ledger = ledger
        self._engine = engine

    def check(self, item_id: str, start: object, end: object) -> AvailabilityReport:
        """Check whether an item is free for a window.

        Raises:
            InvalidItemIdError: If the item_id is not a valid UUID.
            ItemNotFoundError: If the item does not exist.
            InvalidRangeError: If the window is malformed or empty.
            PastDateError: If the window starts before today.
        """
        return self._engine.check(self._load(item_id), start, end)

    def booked_dates(self, item_id: str) -> list[date]:
        """Return every booked day for an item, ascending."""
        return self._engine.booked_day_list(self._load(item_id))

    def available_dates(self, item_id: str) -> list[date]:
        """Return the item's allowed days that are not booked, ascending."""
        return self._engine.actual_available_dates(self._load(item_id))

    def bookings(self, item_id: str) -> list[BookedInterval]:
        """Return the committed intervals for an item."""
        return list(self._load(item_id).bookings)

    def _load(self, raw_item_id: str) -> Item:
        item_id = parse_item_id(raw_item_id)
        item = self._items.get_item(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item.with_bookings(self._ledger.find_intervals_for_item(item_id))


def parse_item_id(value: str) -> ItemId:
    try:
        return ItemId.from_string(value)
    except (ValueError, TypeError, AttributeError):
        raise InvalidItemIdError() from None
