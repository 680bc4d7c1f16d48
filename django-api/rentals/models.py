"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid
from datetime import date
from functools import partial
from typing import Iterable

from django.db import models, transaction

from rentals.cache import invalidate_item


class RentalItem(models.Model):
    """Persistence model for rentable items."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    is_listed = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name

    @transaction.atomic
    def set_allowed_dates(
        self, available: Iterable[date], excluded: Iterable[date] = ()
    ) -> None:
        """Replace the allowed days with ``available`` minus ``excluded``.

        bulk_create sends no signals, so the cached listings are dropped here
        once the transaction commits.
        """
        days = set(available) - set(excluded)
        self.allowed_dates.all().delete()
        AllowedDate.objects.bulk_create(
            [AllowedDate(item=self, day=day) for day in sorted(days)]
        )
        transaction.on_commit(partial(invalidate_item, self.pk))


class AllowedDate(models.Model):
    """A day on which an item may be booked."""

    item = models.ForeignKey(
        RentalItem, on_delete=models.CASCADE, related_name="allowed_dates"
    )
    day = models.DateField()

    class Meta:
        ordering = ["day"]
        constraints = [
            models.UniqueConstraint(fields=["item", "day"], name="unique_allowed_day"),
        ]

    def __str__(self) -> str:
        return f"{self.item_id} - {self.day}"


class BookedInterval(models.Model):
    """Persistence model for committed bookings."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    item = models.ForeignKey(
        RentalItem, on_delete=models.CASCADE, related_name="booked_intervals"
    )
    start_date = models.DateField()
    end_date = models.DateField()
    order_id = models.UUIDField()
    owner_id = models.UUIDField(blank=True, null=True)
    created_at = models.DateTimeField()

    class Meta:
        ordering = ["start_date", "end_date"]
        indexes = [
            models.Index(fields=["item", "start_date"], name="booking_item_start_idx"),
            models.Index(fields=["order_id"], name="booking_order_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(start_date__lt=models.F("end_date")),
                name="booking_starts_before_end",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.item_id}: {self.start_date} - {self.end_date}"
