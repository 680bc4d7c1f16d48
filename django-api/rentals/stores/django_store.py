"""Django ORM implementation of the rental stores.

Query Django ORM and convert rows to domain models. Database failures are
wrapped in PersistenceError once, here, and propagate from there unchanged.
"""

import logging
from contextlib import ExitStack, contextmanager
from typing import Iterator

from django.db import DatabaseError, OperationalError, connection, transaction

from rentals import models
from rentals.domain import (
    BookedInterval,
    Calendar,
    DateRange,
    IntervalId,
    Item,
    ItemId,
    OrderId,
    OwnerId,
)
from rentals.domain.errors import PersistenceError, ReservationTimeoutError
from rentals.services.item_locks import ItemLocks
from rentals.stores.interfaces import BookingLedger, ItemStore

logger = logging.getLogger(__name__)

LOCK_NOT_AVAILABLE = "55P03"


def _to_domain_interval(row: models.BookedInterval) -> BookedInterval:
    return BookedInterval(
        id=IntervalId(row.id),
        item_id=ItemId(row.item_id),
        dates=DateRange(start=row.start_date, end=row.end_date),
        order_id=OrderId(row.order_id),
        owner_id=OwnerId(row.owner_id) if row.owner_id else None,
        created_at=row.created_at,
    )


class DjangoItemStore(ItemStore):
    """Item store backed by RentalItem and AllowedDate rows."""

    def get_item(self, item_id: ItemId) -> Item | None:
        try:
            row = models.RentalItem.objects.filter(pk=item_id.value).first()
            if row is None:
                return None
            days = row.allowed_dates.values_list("day", flat=True)
            return Item(
                id=ItemId(row.id),
                is_listed=row.is_listed,
                allowed_dates=Calendar(days),
                name=row.name,
            )
        except DatabaseError as exc:
            raise PersistenceError("get_item") from exc

    def item_exists(self, item_id: ItemId) -> bool:
        try:
            return models.RentalItem.objects.filter(pk=item_id.value).exists()
        except DatabaseError as exc:
            raise PersistenceError("item_exists") from exc


class DjangoBookingLedger(BookingLedger):
    """Booking ledger backed by BookedInterval rows."""

    def find_intervals_for_item(self, item_id: ItemId) -> list[BookedInterval]:
        try:
            rows = models.BookedInterval.objects.filter(item_id=item_id.value).order_by(
                "start_date", "end_date"
            )
            return [_to_domain_interval(row) for row in rows]
        except DatabaseError as exc:
            raise PersistenceError("find_intervals_for_item") from exc

    def find_intervals_for_order(self, order_id: OrderId) -> list[BookedInterval]:
        try:
            rows = models.BookedInterval.objects.filter(order_id=order_id.value)
            return [_to_domain_interval(row) for row in rows]
        except DatabaseError as exc:
            raise PersistenceError("find_intervals_for_order") from exc

    def insert_interval(self, interval: BookedInterval) -> None:
        try:
            models.BookedInterval.objects.create(
                id=interval.id.value,
                item_id=interval.item_id.value,
                start_date=interval.start_date,
                end_date=interval.end_date,
                order_id=interval.order_id.value,
                owner_id=interval.owner_id.value if interval.owner_id else None,
                created_at=interval.created_at,
            )
        except DatabaseError as exc:
            raise PersistenceError("insert_interval") from exc

    def delete_intervals_by_order(
        self, order_id: OrderId, item_id: ItemId | None = None
    ) -> int:
        queryset = models.BookedInterval.objects.filter(order_id=order_id.value)
        if item_id is not None:
            queryset = queryset.filter(item_id=item_id.value)
        try:
            with transaction.atomic():
                _, per_model = queryset.delete()
        except DatabaseError as exc:
            raise PersistenceError("delete_intervals_by_order") from exc
        return per_model.get(models.BookedInterval._meta.label, 0)


def _is_lock_timeout(exc: OperationalError) -> bool:
    cause = exc.__cause__
    code = getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)
    return code == LOCK_NOT_AVAILABLE


class DjangoRowItemLocks(ItemLocks):
    """Per-item exclusion through ``SELECT ... FOR UPDATE`` on the item row.

    The whole held block runs in one transaction, so the availability check
    and the insert commit together across processes. ``local`` is taken
    first; SQLite ignores FOR UPDATE and relies on it alone.
    """

    def __init__(self, timeout_seconds: float = 3.0, local: ItemLocks | None = None) -> None:
        self.timeout_seconds = timeout_seconds
        self._local = local

    @contextmanager
    def hold(self, item_id: ItemId) -> Iterator[None]:
        with ExitStack() as stack:
            if self._local is not None:
                stack.enter_context(self._local.hold(item_id))
            stack.enter_context(transaction.atomic())
            self._lock_row(item_id)
            yield

    def _lock_row(self, item_id: ItemId) -> None:
        try:
            if connection.vendor == "postgresql":
                with connection.cursor() as cursor:
                    cursor.execute(
                        "SELECT set_config('lock_timeout', %s, true)",
                        [f"{int(self.timeout_seconds * 1000)}ms"],
                    )
            list(models.RentalItem.objects.select_for_update().filter(pk=item_id.value))
        except OperationalError as exc:
            if _is_lock_timeout(exc):
                logger.warning("Row lock timeout for item %s", item_id)
                raise ReservationTimeoutError(item_id, self.timeout_seconds) from exc
            raise PersistenceError("lock_item") from exc
        except DatabaseError as exc:
            raise PersistenceError("lock_item") from exc
