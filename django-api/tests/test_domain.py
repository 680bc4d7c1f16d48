"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import date
from uuid import UUID

import pytest

from rentals.domain import BookedInterval, DateRange, ItemId, OrderId
from rentals.domain.errors import ErrorCode, InvalidRangeError, RangeUnavailableError


class TestDateRange:
    """Tests for DateRange value object."""

    def test_single_day_range_is_allowed(self):
        dates = DateRange(date(2025, 6, 3), date(2025, 6, 3))
        assert len(dates) == 1

    def test_rejects_start_after_end(self):
        with pytest.raises(InvalidRangeError):
            DateRange(date(2025, 6, 5), date(2025, 6, 3))

    def test_days_are_inclusive(self):
        dates = DateRange(date(2025, 6, 3), date(2025, 6, 5))
        assert dates.days() == [date(2025, 6, 3), date(2025, 6, 4), date(2025, 6, 5)]

    def test_contains_day(self):
        dates = DateRange(date(2025, 6, 3), date(2025, 6, 5))
        assert date(2025, 6, 5) in dates
        assert date(2025, 6, 6) not in dates

    def test_parse_normalizes_strings(self):
        dates = DateRange.parse("2025-06-03", "2025-06-05T10:00:00")
        assert dates == DateRange(date(2025, 6, 3), date(2025, 6, 5))

    def test_str_format(self):
        assert str(DateRange(date(2025, 6, 3), date(2025, 6, 5))) == "2025-06-03..2025-06-05"


class TestItemId:
    """Tests for ItemId value object."""

    def test_from_string_valid_uuid(self):
        raw = "7c9e6679-7425-40de-944b-e07fc1f90ae7"
        assert ItemId.from_string(raw).value == UUID(raw)

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            ItemId.from_string("not-a-uuid")

    def test_equal_ids_hash_equal(self):
        raw = "7c9e6679-7425-40de-944b-e07fc1f90ae7"
        assert {ItemId.from_string(raw), ItemId.from_string(raw)} == {ItemId.from_string(raw)}


class TestBookedInterval:
    """Tests for BookedInterval entity."""

    def test_create_assigns_id_and_timestamp(self):
        interval = BookedInterval.create(
            item_id=ItemId.new(),
            dates=DateRange(date(2025, 6, 3), date(2025, 6, 5)),
            order_id=OrderId.new(),
        )
        assert interval.id is not None
        assert interval.created_at.tzinfo is not None
        assert interval.owner_id is None
        assert interval.start_date == date(2025, 6, 3)
        assert interval.end_date == date(2025, 6, 5)

    def test_rejects_single_day_booking(self):
        with pytest.raises(InvalidRangeError):
            BookedInterval.create(
                item_id=ItemId.new(),
                dates=DateRange(date(2025, 6, 3), date(2025, 6, 3)),
                order_id=OrderId.new(),
            )


class TestDomainErrors:
    """Tests for error codes and messages."""

    def test_str_includes_code(self):
        error = InvalidRangeError("End date must be after start date")
        assert str(error) == "INVALID_RANGE: End date must be after start date"

    def test_unavailable_error_carries_context(self):
        item_id = ItemId.new()
        error = RangeUnavailableError(item_id, "2025-06-03..2025-06-05", "booked")
        assert error.code is ErrorCode.RANGE_UNAVAILABLE
        assert error.item_id == item_id
        assert error.reason == "booked"
