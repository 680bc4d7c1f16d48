"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest
from rest_framework.test import APIClient

from rentals.domain import Calendar, DateRange, Item, ItemId
from rentals.services.availability_engine import AvailabilityEngine
from rentals.services.item_locks import InProcessItemLocks
from rentals.services.reservation_coordinator import ReservationCoordinator
from rentals.stores.memory_store import InMemoryBookingLedger, InMemoryItemStore

TODAY = date(2025, 6, 1)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


def make_item(
    allowed: DateRange | None = None,
    is_listed: bool = True,
    name: str = "Lehenga",
) -> Item:
    """Helper to create an Item, optionally restricted to a range of days."""
    return Item(
        id=ItemId.new(),
        is_listed=is_listed,
        allowed_dates=Calendar.from_range(allowed) if allowed else Calendar(),
        name=name,
    )


def june(day: int) -> date:
    return date(2025, 6, day)


@pytest.fixture
def engine() -> AvailabilityEngine:
    return AvailabilityEngine(clock=lambda: TODAY)


@pytest.fixture
def june_item() -> Item:
    """Item bookable on 2025-06-01..2025-06-10 only."""
    return make_item(DateRange(june(1), june(10)))


@pytest.fixture
def item_store(june_item) -> InMemoryItemStore:
    return InMemoryItemStore([june_item])


@pytest.fixture
def ledger() -> InMemoryBookingLedger:
    return InMemoryBookingLedger()


@pytest.fixture
def locks() -> InProcessItemLocks:
    return InProcessItemLocks(timeout_seconds=2.0)


@pytest.fixture
def coordinator(item_store, ledger, engine, locks) -> ReservationCoordinator:
    return ReservationCoordinator(item_store, ledger, engine, locks)
