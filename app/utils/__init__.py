"""Utility helper functions."""

from app.utils.helpers import get_summary, host, today_str

__all__ = [
    "host",
    "today_str",
    "get_summary",
]
