"""Cache keys for per-item availability listings."""

from django.core.cache import cache


def booked_dates_key(item_id: object) -> str:
    return f"rentals:item:{item_id}:booked-dates"


def available_dates_key(item_id: object) -> str:
    return f"rentals:item:{item_id}:available-dates"


def invalidate_item(item_id: object) -> None:
    cache.delete_many([booked_dates_key(item_id), available_dates_key(item_id)])
