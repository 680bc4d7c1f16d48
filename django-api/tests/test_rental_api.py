"""Integration tests for the item availability API.

Run with: pytest tests/test_rental_api.py -v
"""

from datetime import date, timedelta
from unittest import mock

import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from rentals import models
from rentals.domain import calendar
from rentals.domain import ItemId, OrderId
from rentals.domain.errors import PersistenceError
from rentals.services.factory import build_reservation_coordinator


def upcoming(days: int) -> date:
    return calendar.today() + timedelta(days=days)


@pytest.fixture
def rental_item() -> models.RentalItem:
    item = models.RentalItem.objects.create(name="Bridal lehenga")
    item.set_allowed_dates([upcoming(d) for d in range(10, 20)])
    return item


def availability(api_client: APIClient, item_id, start, end):
    return api_client.post(
        reverse("item-availability", args=[str(item_id)]),
        {"start_date": str(start), "end_date": str(end)},
        format="json",
    )


@pytest.mark.django_db
class TestAvailabilityCheck:
    """Tests for POST /api/items/{id}/availability"""

    def test_free_range_returns_available(self, api_client: APIClient, rental_item):
        response = availability(api_client, rental_item.id, upcoming(11), upcoming(13))

        assert response.status_code == 200
        body = response.json()
        assert body["available"] is True
        assert body["reason"] is None
        assert body["requested"] == {
            "start_date": upcoming(11).isoformat(),
            "end_date": upcoming(13).isoformat(),
        }
        assert len(body["available_dates"]) == 10
        assert body["booked_dates"] == []

    def test_booked_range_returns_unavailable(self, api_client: APIClient, rental_item):
        build_reservation_coordinator().reserve(
            ItemId(rental_item.id), upcoming(11), upcoming(13), OrderId.new()
        )

        response = availability(api_client, rental_item.id, upcoming(12), upcoming(14))

        body = response.json()
        assert response.status_code == 200
        assert body["available"] is False
        assert body["reason"] == "booked"
        assert body["booked_dates"] == [upcoming(d).isoformat() for d in (11, 12, 13)]

    def test_missing_dates_returns_400(self, api_client: APIClient, rental_item):
        response = api_client.post(
            reverse("item-availability", args=[str(rental_item.id)]), {}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_RANGE"

    def test_same_day_range_returns_400(self, api_client: APIClient, rental_item):
        response = availability(api_client, rental_item.id, upcoming(11), upcoming(11))
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_RANGE"

    def test_past_start_returns_400(self, api_client: APIClient, rental_item):
        response = availability(api_client, rental_item.id, upcoming(-2), upcoming(3))
        assert response.status_code == 400
        assert response.json()["code"] == "PAST_DATE"

    def test_item_not_found_returns_404(self, api_client: APIClient):
        response = availability(api_client, ItemId.new(), upcoming(11), upcoming(13))
        assert response.status_code == 404
        assert response.json() == {"code": "ITEM_NOT_FOUND", "message": "Item not found"}

    def test_invalid_id_format_returns_400(self, api_client: APIClient):
        response = availability(api_client, "not-a-uuid", upcoming(11), upcoming(13))
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ITEM_ID"

    def test_storage_failure_hides_details(self, api_client: APIClient, rental_item):
        with mock.patch(
            "rentals.stores.django_store.DjangoBookingLedger.find_intervals_for_item",
            side_effect=PersistenceError("find_intervals_for_item"),
        ):
            response = availability(api_client, rental_item.id, upcoming(11), upcoming(13))

        assert response.status_code == 500
        assert response.json() == {
            "code": "PERSISTENCE_FAILURE",
            "message": "Booking storage is unavailable",
        }


@pytest.mark.django_db
class TestDateListings:
    """Tests for GET booked-dates, available-dates and bookings."""

    def test_booked_dates(self, api_client: APIClient, rental_item):
        build_reservation_coordinator().reserve(
            ItemId(rental_item.id), upcoming(10), upcoming(11), OrderId.new()
        )

        response = api_client.get(reverse("item-booked-dates", args=[str(rental_item.id)]))

        assert response.status_code == 200
        assert response.json() == {
            "booked_dates": [upcoming(10).isoformat(), upcoming(11).isoformat()]
        }

    def test_available_dates(self, api_client: APIClient, rental_item):
        build_reservation_coordinator().reserve(
            ItemId(rental_item.id), upcoming(10), upcoming(17), OrderId.new()
        )

        response = api_client.get(reverse("item-available-dates", args=[str(rental_item.id)]))

        assert response.json() == {
            "available_dates": [upcoming(18).isoformat(), upcoming(19).isoformat()]
        }

    def test_bookings(self, api_client: APIClient, rental_item):
        order_id = OrderId.new()
        build_reservation_coordinator().reserve(
            ItemId(rental_item.id), upcoming(12), upcoming(14), order_id
        )

        response = api_client.get(reverse("item-bookings", args=[str(rental_item.id)]))

        [booking] = response.json()
        assert booking["order_id"] == str(order_id)
        assert booking["start_date"] == upcoming(12).isoformat()
        assert booking["owner_id"] is None

    def test_listing_unknown_item_returns_404(self, api_client: APIClient):
        response = api_client.get(reverse("item-booked-dates", args=[str(ItemId.new())]))
        assert response.status_code == 404
