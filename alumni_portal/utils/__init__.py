"""Utility helpers for reusable functionality."""

from .datetime import (
    day_key,
    ensure_app_naive_datetime,
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_timezone,
    start_of_day,
)

__all__ = [
    "day_key",
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "get_app_timezone",
    "now_in_app_timezone",
    "start_of_day",
]
