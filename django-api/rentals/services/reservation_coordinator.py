"""Reservation coordinator - atomic reserve and release.

Services:
- Depend only on interfaces (stores, locks)
- Validate domain invariants
- Return domain models or raise domain errors

The availability check and the ledger insert for an item run while holding
that item's lock, so no two overlapping reservations on the same item can
both succeed. Different items never wait on each other.
"""

import logging

from rentals.domain import BookedInterval, ItemId, OrderId, OwnerId
from rentals.domain.errors import ItemNotFoundError, RangeUnavailableError
from rentals.services.availability_engine import AvailabilityEngine
from rentals.services.item_locks import ItemLocks
from rentals.stores.interfaces import BookingLedger, ItemStore

logger = logging.getLogger(__name__)


class ReservationCoordinator:
    """Reserve-if-available and release, serialized per item."""

    def __init__(
        self,
        items: ItemStore,
        ledger: BookingLedger,
        engine: AvailabilityEngine,
        locks: ItemLocks,
    ) -> None:
        self._items = items
        self._ledger = ledger
        self._engine = engine
        self._locks = locks

    def reserve(
        self,
        item_id: ItemId,
        start: object,
        end: object,
        order_id: OrderId,
        owner_id: OwnerId | None = None,
    ) -> BookedInterval:
        """Book the window for an order if it is free.

        Raises:
            InvalidRangeError: If the window is malformed or empty.
            PastDateError: If the window starts before today.
            ItemNotFoundError: If the item does not exist.
            RangeUnavailableError: If the window is not free. Nothing is written.
            ReservationTimeoutError: If the item's lock was not acquired in time.
            PersistenceError: If the ledger fails.
        """
        dates = self._engine.validate_request(start, end)

        with self._locks.hold(item_id):
            item = self._items.get_item(item_id)
            if item is None:
                raise ItemNotFoundError(item_id)
            item = item.with_bookings(self._ledger.find_intervals_for_item(item_id))

            reason = self._engine.unavailable_reason(item, dates)
            if reason is not None:
                logger.warning(
                    "Rejected reservation of item %s for %s (order %s): %s",
                    item_id,
                    dates,
                    order_id,
                    reason.value,
                )
                raise RangeUnavailableError(item_id, dates, reason)

            interval = BookedInterval.create(
                item_id=item_id, dates=dates, order_id=order_id, owner_id=owner_id
            )
            self._ledger.insert_interval(interval)

        logger.info("Reserved item %s for %s (order %s)", item_id, dates, order_id)
        return interval

    def release(self, order_id: OrderId) -> int:
        """Remove every interval owned by the order and return the count.

        Idempotent: releasing an unknown or already released order returns 0.
        Each item is released under its own lock.
        """
        item_ids = {i.item_id for i in self._ledger.find_intervals_for_order(order_id)}
        removed = 0
        for item_id in sorted(item_ids, key=str):
            with self._locks.hold(item_id):
                removed += self._ledger.delete_intervals_by_order(order_id, item_id=item_id)

        if removed:
            logger.info("Released %d interval(s) for order %s", removed, order_id)
        else:
            logger.debug("Nothing to release for order %s", order_id)
        return removed

    def intervals_for_item(self, item_id: ItemId) -> list[BookedInterval]:
        return self._ledger.find_intervals_for_item(item_id)

    def intervals_for_order(self, order_id: OrderId) -> list[BookedInterval]:
        return self._ledger.find_intervals_for_order(order_id)
