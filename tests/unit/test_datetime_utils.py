"""
Unit tests for jobportal_accounts.utils.datetime_utils
"""
from datetime import datetime, timedelta, timezone

from jobportal_accounts.utils.datetime_utils import utc_now


class TestUtcNow:
    """Tests for utc_now"""

    def test_is_timezone_aware_utc(self):
        result = utc_now()
        assert isinstance(result, datetime)
        assert result.tzinfo == timezone.utc

    def test_is_current(self):
        delta = abs(utc_now() - datetime.now(timezone.utc))
        assert delta < timedelta(seconds=5)
