"""Django signals for cache invalidation.

Listings are dropped only once the writing transaction commits, so a
concurrent read cannot cache the state from before the write.
"""

from functools import partial

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from rentals.cache import invalidate_item
from rentals.models import AllowedDate, BookedInterval, RentalItem


def invalidate_on_commit(item_id) -> None:
    transaction.on_commit(partial(invalidate_item, item_id))


@receiver([post_save, post_delete], sender=RentalItem)
def invalidate_item_cache(sender, instance, **kwargs):
    """Invalidate caches when an item is saved or deleted."""
    invalidate_on_commit(instance.pk)


@receiver([post_save, post_delete], sender=AllowedDate)
def invalidate_allowed_date_cache(sender, instance, **kwargs):
    """Invalidate caches when an allowed date is saved or deleted."""
    invalidate_on_commit(instance.item_id)


@receiver([post_save, post_delete], sender=BookedInterval)
def invalidate_booking_cache(sender, instance, **kwargs):
    """Invalidate caches when a booking is saved or deleted."""
    invalidate_on_commit(instance.item_id)
