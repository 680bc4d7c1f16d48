"""Availability decisions for a single item.

The engine is pure: it reads an Item snapshot (configuration plus committed
bookings) and answers questions about it. It performs no I/O and holds no
mutable state, so it is safe to share between threads.
"""

from datetime import date
from typing import Callable

from rentals.domain import (
    AllowedDatesPolicy,
    AvailabilityReport,
    Calendar,
    DateRange,
    Item,
    UnavailableReason,
)
from rentals.domain import calendar
from rentals.domain.errors import InvalidRangeError, PastDateError


class AvailabilityEngine:
    """Decides whether items can be rented for a date range."""

    def __init__(
        self,
        policy: AllowedDatesPolicy = AllowedDatesPolicy.OPEN,
        clock: Callable[[], date] = calendar.today,
    ) -> None:
        self._policy = policy
        self._clock = clock

    @property
    def policy(self) -> AllowedDatesPolicy:
        return self._policy

    def validate_request(self, start: object, end: object) -> DateRange:
        """Normalize and validate a requested rental window.

        A window starting today is accepted. The end must fall strictly after
        the start.

        Raises:
            InvalidRangeError: If a boundary is malformed, start is after end,
                or start equals end.
            PastDateError: If start precedes the current day.
        """
        dates = DateRange.parse(start, end)
        if dates.start == dates.end:
            raise InvalidRangeError("End date must be after start date")
        if dates.start < self._clock():
            raise PastDateError(dates.start)
        return dates

    def is_range_free(self, item: Item, start: object, end: object) -> bool:
        """Return True if the item can be rented for the whole window.

        The window is validated first, so client faults raise even for an
        unlisted item.

        Raises:
            InvalidRangeError: If the window is malformed or empty.
            PastDateError: If the window starts before today.
        """
        dates = self.validate_request(start, end)
        return self.unavailable_reason(item, dates) is None

    def unavailable_reason(self, item: Item, dates: DateRange) -> UnavailableReason | None:
        """Return why an already validated window cannot be booked, or None."""
        if not item.is_listed:
            return UnavailableReason.NOT_LISTED
        if any(booking.dates.overlaps(dates) for booking in item.bookings):
            return UnavailableReason.BOOKED
        if item.is_restricted:
            if any(day not in item.allowed_dates for day in dates.days()):
                return UnavailableReason.OUTSIDE_ALLOWED_DATES
        elif self._policy is AllowedDatesPolicy.CLOSED:
            return UnavailableReason.OUTSIDE_ALLOWED_DATES
        return None

    def booked_calendar(self, item: Item) -> Calendar:
        return Calendar.from_ranges(booking.dates for booking in item.bookings)

    def booked_day_list(self, item: Item) -> list[date]:
        """Every day covered by any booking, de-duplicated and ascending."""
        return self.booked_calendar(item).dates()

    def actual_available_dates(
        self, item: Item, within: DateRange | None = None
    ) -> list[date]:
        """Allowed days that no booking covers, ascending.

        An unrestricted item has no finite set of allowed days, so it yields
        nothing unless a ``within`` window is given and the policy is OPEN.
        ``within`` also clips the result for restricted items.
        """
        if item.is_restricted:
            candidates = item.allowed_dates
            if within is not None:
                candidates = candidates & Calendar.from_range(within)
        elif within is not None and self._policy is AllowedDatesPolicy.OPEN:
            candidates = Calendar.from_range(within)
        else:
            return []
        return (candidates - self.booked_calendar(item)).dates()

    def check(self, item: Item, start: object, end: object) -> AvailabilityReport:
        """Full availability report for a requested window."""
        dates = self.validate_request(start, end)
        reason = self.unavailable_reason(item, dates)
        return AvailabilityReport(
            item_id=item.id,
            requested=dates,
            available=reason is None,
            reason=reason,
            available_dates=tuple(self.actual_available_dates(item)),
            booked_dates=tuple(self.booked_day_list(item)),
        )
