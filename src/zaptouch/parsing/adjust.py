"""Parser for -A style adjustments: [+|-][[hh]mm]SS."""

from __future__ import annotations

import re

from zaptouch.errors import AdjustmentOverflowError, TimeArithmeticError, TimeSyntaxError
from zaptouch.models import Adjustment

_ADJUST_RE = re.compile(r"(?P<sign>[+-]?)(?P<digits>\d+)", re.ASCII)

# Right-to-left: seconds, minutes, hours.
_GROUP_SECONDS: tuple[int, ...] = (1, 60, 3600)


def parse_adjustment(value: str) -> Adjustment:
    """
    Parse an adjustment into a signed number of seconds.

    Digits are split from the right into two-digit groups (SS, mm, hh). Groups
    are not range-checked: "0090" is 90 seconds.

    Raises:
        TimeSyntaxError: bad sign, non-digits, odd digit count, too many groups.
        AdjustmentOverflowError: the sum does not fit an Adjustment.
    """
    if not isinstance(value, str):
        raise TimeSyntaxError(repr(value), "adjustment must be a string")

    m = _ADJUST_RE.fullmatch(value)
    if m is None:
        raise TimeSyntaxError(value, "expected [+|-][[hh]mm]SS")

    digits = m["digits"]
    if len(digits) % 2:
        raise TimeSyntaxError(value, "digits must come in pairs ([[hh]mm]SS)")
    if len(digits) > 2 * len(_GROUP_SECONDS):
        raise TimeSyntaxError(value, "at most hours, minutes and seconds are allowed")

    total = 0
    for index, unit in enumerate(_GROUP_SECONDS):
        end = len(digits) - 2 * index
        if end <= 0:
            break
        total += int(digits[end - 2 : end]) * unit

    if m["sign"] == "-":
        total = -total

    try:
        return Adjustment(total)
    except TimeArithmeticError as exc:
        raise AdjustmentOverflowError(
            f"adjustment '{value}' is out of range",
            details={"value": value},
            cause=exc,
        ) from exc
