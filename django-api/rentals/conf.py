"""Rental settings read from ``settings.RENTALS`` with validated defaults."""

from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from rentals.domain import AllowedDatesPolicy

DEFAULTS = {
    "LOCK_TIMEOUT_SECONDS": 3.0,
    "ALLOWED_DATES_POLICY": AllowedDatesPolicy.OPEN.value,
    "USE_ROW_LOCKS": True,
    "CACHE_TIMEOUT_SECONDS": 300,
}


@dataclass(frozen=True)
class RentalSettings:
    """Settings for the reservation core."""

    lock_timeout_seconds: float
    allowed_dates_policy: AllowedDatesPolicy
    use_row_locks: bool
    cache_timeout_seconds: int


def get_rental_settings() -> RentalSettings:
    """Load and validate rental settings."""
    raw = {**DEFAULTS, **getattr(settings, "RENTALS", {})}

    try:
        timeout = float(raw["LOCK_TIMEOUT_SECONDS"])
        cache_timeout = int(raw["CACHE_TIMEOUT_SECONDS"])
    except (TypeError, ValueError):
        raise ImproperlyConfigured(
            "RENTALS LOCK_TIMEOUT_SECONDS and CACHE_TIMEOUT_SECONDS must be numbers"
        ) from None
    if timeout <= 0:
        raise ImproperlyConfigured(f"RENTALS LOCK_TIMEOUT_SECONDS must be > 0, got {timeout}")
    if cache_timeout < 0:
        raise ImproperlyConfigured(
            f"RENTALS CACHE_TIMEOUT_SECONDS must be >= 0, got {cache_timeout}"
        )

    try:
        policy = AllowedDatesPolicy(str(raw["ALLOWED_DATES_POLICY"]).lower())
    except ValueError:
        raise ImproperlyConfigured(
            "RENTALS ALLOWED_DATES_POLICY must be 'open' or 'closed', "
            f"got {raw['ALLOWED_DATES_POLICY']!r}"
        ) from None

    return RentalSettings(
        lock_timeout_seconds=timeout,
        allowed_dates_policy=policy,
        use_row_locks=bool(raw["USE_ROW_LOCKS"]),
        cache_timeout_seconds=cache_timeout,
    )
