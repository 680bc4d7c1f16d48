from rentals.handlers.views import (
    AvailabilityCheckView,
    AvailableDatesView,
    BookedDatesView,
    ItemBookingsView,
)

__all__ = [
    "AvailabilityCheckView",
    "AvailableDatesView",
    "BookedDatesView",
    "ItemBookingsView",
]
