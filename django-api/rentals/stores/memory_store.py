"""In-memory store implementations.

Reference implementation of the store interfaces, used in tests and for
running the reservation core without a database.
"""

import threading

from rentals.domain import BookedInterval, Item, ItemId, OrderId
from rentals.stores.interfaces import BookingLedger, ItemStore


class InMemoryItemStore(ItemStore):
    """Dict-backed item store."""

    def __init__(self, items: list[Item] | None = None) -> None:
        self._items: dict[ItemId, Item] = {}
        self._guard = threading.Lock()
        for item in items or []:
            self.add_item(item)

    def add_item(self, item: Item) -> None:
        with self._guard:
            self._items[item.id] = item.with_bookings(())

    def get_item(self, item_id: ItemId) -> Item | None:
        with self._guard:
            return self._items.get(item_id)

    def item_exists(self, item_id: ItemId) -> bool:
        with self._guard:
            return item_id in self._items


class InMemoryBookingLedger(BookingLedger):
    """List-backed booking ledger.

    The internal guard only makes each single call atomic. Check-then-insert
    atomicity is the coordinator's job.
    """

    def __init__(self) -> None:
        self._intervals: list[BookedInterval] = []
        self._guard = threading.Lock()

    def find_intervals_for_item(self, item_id: ItemId) -> list[BookedInterval]:
        with self._guard:
            found = [i for i in self._intervals if i.item_id == item_id]
        return sorted(found, key=lambda i: (i.dates.start, i.dates.end))

    def find_intervals_for_order(self, order_id: OrderId) -> list[BookedInterval]:
        with self._guard:
            return [i for i in self._intervals if i.order_id == order_id]

    def insert_interval(self, interval: BookedInterval) -> None:
        with self._guard:
            self._intervals.append(interval)

    def delete_intervals_by_order(
        self, order_id: OrderId, item_id: ItemId | None = None
    ) -> int:
        def owned(interval: BookedInterval) -> bool:
            if interval.order_id != order_id:
                return False
            return item_id is None or interval.item_id == item_id

        with self._guard:
            kept = [i for i in self._intervals if not owned(i)]
            removed = len(self._intervals) - len(kept)
            self._intervals = kept
        return removed

    def __len__(self) -> int:
        with self._guard:
            return len(self._intervals)
