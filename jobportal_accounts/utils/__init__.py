"""Utility modules for the accounts backend."""

from .datauri import get_data_uri, guess_mime_type
from .datetime_utils import utc_now

__all__ = [
    "get_data_uri",
    "guess_mime_type",
    "utc_now",
]
