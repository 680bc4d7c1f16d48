"""Tests for rental settings loading.

Run with: pytest tests/test_conf.py -v
"""

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from rentals.conf import get_rental_settings
from rentals.domain import AllowedDatesPolicy
from rentals.services.factory import build_engine


class TestRentalSettings:
    """Tests for get_rental_settings."""

    @override_settings(RENTALS={})
    def test_defaults(self):
        config = get_rental_settings()
        assert config.lock_timeout_seconds == 3.0
        assert config.allowed_dates_policy is AllowedDatesPolicy.OPEN
        assert config.use_row_locks is True

    @override_settings(RENTALS={"ALLOWED_DATES_POLICY": "CLOSED"})
    def test_policy_is_case_insensitive(self):
        assert get_rental_settings().allowed_dates_policy is AllowedDatesPolicy.CLOSED

    @override_settings(RENTALS={"ALLOWED_DATES_POLICY": "closed"})
    def test_engine_picks_up_policy(self):
        assert build_engine().policy is AllowedDatesPolicy.CLOSED

    @override_settings(RENTALS={"ALLOWED_DATES_POLICY": "sometimes"})
    def test_unknown_policy_rejected(self):
        with pytest.raises(ImproperlyConfigured):
            get_rental_settings()

    @override_settings(RENTALS={"LOCK_TIMEOUT_SECONDS": 0})
    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ImproperlyConfigured):
            get_rental_settings()

    @override_settings(RENTALS={"LOCK_TIMEOUT_SECONDS": "soon"})
    def test_non_numeric_timeout_rejected(self):
        with pytest.raises(ImproperlyConfigured):
            get_rental_settings()
