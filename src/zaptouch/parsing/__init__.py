"""Public parsing exports for zaptouch."""

from __future__ import annotations

from .adjust import parse_adjustment
from .dates import format_timestamp, parse_date, parse_timestamp, pivot_two_digit_year

__all__ = [
    "parse_date",
    "parse_timestamp",
    "parse_adjustment",
    "format_timestamp",
    "pivot_two_digit_year",
]
