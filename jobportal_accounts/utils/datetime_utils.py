"""
DateTime helpers for persisted timestamps.

MongoDB stores BSON dates in UTC, so everything written to the store goes
through utc_now().
"""
from datetime import datetime, timezone as dt_timezone


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)
