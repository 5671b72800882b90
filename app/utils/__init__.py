"""Utility helper functions."""

from app.utils.helpers import MAX_INT64, get_summary, host, parse_int, positive_int_or, today_str, utc_now

__all__ = [
    "MAX_INT64",
    "get_summary",
    "host",
    "parse_int",
    "positive_int_or",
    "today_str",
    "utc_now",
]
