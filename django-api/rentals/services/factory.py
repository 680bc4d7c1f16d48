"""Wiring of the rental services to the Django-backed stores."""

from functools import lru_cache

from rentals.conf import get_rental_settings
from rentals.services.availability_engine import AvailabilityEngine
from rentals.services.availability_service import AvailabilityService
from rentals.services.checkout_service import CheckoutService, PaymentGateway
from rentals.services.item_locks import InProcessItemLocks
from rentals.services.reservation_coordinator import ReservationCoordinator
from rentals.stores.django_store import (
    DjangoBookingLedger,
    DjangoItemStore,
    DjangoRowItemLocks,
)


@lru_cache(maxsize=None)
def process_item_locks(timeout_seconds: float) -> InProcessItemLocks:
    """The lock table shared by every coordinator in this process."""
    return InProcessItemLocks(timeout_seconds)


def build_engine() -> AvailabilityEngine:
    return AvailabilityEngine(policy=get_rental_settings().allowed_dates_policy)


def build_availability_service() -> AvailabilityService:
    return AvailabilityService(DjangoItemStore(), DjangoBookingLedger(), build_engine())


def build_reservation_coordinator() -> ReservationCoordinator:
    config = get_rental_settings()
    local = process_item_locks(config.lock_timeout_seconds)
    locks = (
        DjangoRowItemLocks(config.lock_timeout_seconds, local=local)
        if config.use_row_locks
        else local
    )
    return ReservationCoordinator(
        items=DjangoItemStore(),
        ledger=DjangoBookingLedger(),
        engine=build_engine(),
        locks=locks,
    )


def build_checkout_service(payments: PaymentGateway) -> CheckoutService:
    return CheckoutService(build_reservation_coordinator(), payments)
