from django.urls import path

from rentals.handlers import (
    AvailabilityCheckView,
    AvailableDatesView,
    BookedDatesView,
    ItemBookingsView,
)

urlpatterns = [
    path(
        "items/<str:item_id>/availability",
        AvailabilityCheckView.as_view(),
        name="item-availability",
    ),
    path(
        "items/<str:item_id>/booked-dates",
        BookedDatesView.as_view(),
        name="item-booked-dates",
    ),
    path(
        "items/<str:item_id>/available-dates",
        AvailableDatesView.as_view(),
        name="item-available-dates",
    ),
    path(
        "items/<str:item_id>/bookings",
        ItemBookingsView.as_view(),
        name="item-bookings",
    ),
]
