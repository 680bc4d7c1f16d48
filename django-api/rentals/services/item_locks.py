"""Per-item mutual exclusion for reservation decisions.

A holder of ``hold(item_id)`` is the only writer deciding on that item's
booked intervals. Locks for different items never contend.
"""

import logging
import threading
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager, contextmanager
from typing import Iterator

from rentals.domain import ItemId
from rentals.domain.errors import ReservationTimeoutError

logger = logging.getLogger(__name__)


class ItemLocks(ABC):
    """Interface for the per-item exclusion primitive."""

    @abstractmethod
    def hold(self, item_id: ItemId) -> AbstractContextManager[None]:
        """Hold exclusive access to one item's interval set.

        Raises:
            ReservationTimeoutError: If the lock is not acquired in time.
        """
        ...


class _Entry:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class InProcessItemLocks(ItemLocks):
    """One ``threading.Lock`` per item, created on demand.

    An entry is dropped once no thread holds or waits on it, so the table only
    grows with the number of items under contention at the same moment.
    """

    def __init__(self, timeout_seconds: float = 3.0) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        self.timeout_seconds = timeout_seconds
        self._entries: dict[ItemId, _Entry] = {}
        self._table_guard = threading.Lock()

    @contextmanager
    def hold(self, item_id: ItemId) -> Iterator[None]:
        entry = self._checkout(item_id)
        try:
            if not entry.lock.acquire(timeout=self.timeout_seconds):
                logger.warning(
                    "Timed out after %.2fs waiting for item %s", self.timeout_seconds, item_id
                )
                raise ReservationTimeoutError(item_id, self.timeout_seconds)
            try:
                yield
            finally:
                entry.lock.release()
        finally:
            self._checkin(item_id, entry)

    def _checkout(self, item_id: ItemId) -> _Entry:
        with self._table_guard:
            entry = self._entries.get(item_id)
            if entry is None:
                entry = self._entries[item_id] = _Entry()
            entry.users += 1
            return entry

    def _checkin(self, item_id: ItemId, entry: _Entry) -> None:
        with self._table_guard:
            entry.users -= 1
            if entry.users == 0:
                del self._entries[item_id]

    def __len__(self) -> int:
        with self._table_guard:
            return len(self._entries)
