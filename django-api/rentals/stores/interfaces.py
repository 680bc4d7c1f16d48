"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every method is a single
atomic operation from the caller's point of view and raises
PersistenceError when the backing storage fails.
"""

from abc import ABC, abstractmethod

from rentals.domain import BookedInterval, Item, ItemId, OrderId


class ItemStore(ABC):
    """Interface for reading item availability configuration."""

    @abstractmethod
    def get_item(self, item_id: ItemId) -> Item | None:
        """Return an item (without bookings) by ID, or None if not found."""
        ...

    @abstractmethod
    def item_exists(self, item_id: ItemId) -> bool:
        """Check if an item exists."""
        ...


class BookingLedger(ABC):
    """Interface for committed booking persistence."""

    @abstractmethod
    def find_intervals_for_item(self, item_id: ItemId) -> list[BookedInterval]:
        """Return all intervals for an item, ordered by start date ascending."""
        ...

    @abstractmethod
    def find_intervals_for_order(self, order_id: OrderId) -> list[BookedInterval]:
        """Return all intervals owned by an order, across items."""
        ...

    @abstractmethod
    def insert_interval(self, interval: BookedInterval) -> None:
        """Persist a new interval."""
        ...

    @abstractmethod
    def delete_intervals_by_order(
        self, order_id: OrderId, item_id: ItemId | None = None
    ) -> int:
        """Delete the intervals owned by an order and return how many were removed.

        When item_id is given only that item's intervals are deleted.
        """
        ...
