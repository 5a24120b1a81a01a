"""Parsers for absolute times: ISO dates (-d) and compact timestamps (-t)."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from zaptouch.errors import LocalTimeError, TimeRangeError, TimeSyntaxError
from zaptouch.models import Instant

_DATE_RE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt ]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})?",
    re.ASCII,
)

_TIMESTAMP_LENGTHS: tuple[int, ...] = (8, 10, 12)

# Two-digit years at or above the pivot belong to the 1900s.
_YEAR_PIVOT: int = 69


def parse_date(value: str) -> Instant:
    """
    Parse a -d style date: YYYY-MM-DDThh:mm:ss[.frac][Z|±hh:mm].

    A single space may replace the 'T'. Without an offset the value is local
    wall-clock time.

    Raises:
        TimeSyntaxError: malformed input.
        TimeRangeError: a component is out of range (including second 60).
        LocalTimeError: local time is ambiguous or does not exist.
    """
    if not isinstance(value, str):
        raise TimeSyntaxError(repr(value), "date must be a string")

    m = _DATE_RE.fullmatch(value)
    if m is None:
        raise TimeSyntaxError(value, "expected YYYY-MM-DDThh:mm:ss[.frac][Z|±hh:mm]")

    naive = _calendar(
        value,
        int(m["year"]),
        int(m["month"]),
        int(m["day"]),
        int(m["hour"]),
        int(m["minute"]),
        int(m["second"]),
    )
    nanos = _fraction_to_nanos(m["fraction"])

    offset = m["offset"]
    if offset is None:
        return _from_local(value, naive, nanos)

    tz = _parse_offset(value, offset)
    return Instant.from_datetime(naive.replace(tzinfo=tz), nanos=nanos)


def parse_timestamp(value: str, *, today: Optional[date] = None) -> Instant:
    """
    Parse a -t style timestamp: [[CC]YY]MMDDhhmm[.SS], in local time.

    Args:
        value: The timestamp string.
        today: Supplies the year for the 8-digit form (defaults to today).

    Raises:
        TimeSyntaxError: wrong length, non-digits, malformed seconds.
        TimeRangeError: month/day/hour/minute/second out of range.
        LocalTimeError: local time is ambiguous or does not exist.
    """
    if not isinstance(value, str):
        raise TimeSyntaxError(repr(value), "timestamp must be a string")

    main, dot, seconds_part = value.partition(".")
    second = 0
    if dot:
        if len(seconds_part) != 2 or not _is_digits(seconds_part):
            raise TimeSyntaxError(value, "seconds after '.' must be exactly two digits")
        second = int(seconds_part)
        if second > 60:
            raise TimeRangeError(value, f"seconds out of range (0-60): {second}")

    if len(main) not in _TIMESTAMP_LENGTHS or not _is_digits(main):
        raise TimeSyntaxError(value, "expected [[CC]YY]MMDDhhmm[.SS]")

    year_part = main[:-8]
    month = int(main[-8:-6])
    day = int(main[-6:-4])
    hour = int(main[-4:-2])
    minute = int(main[-2:])

    if not year_part:
        year = (today or date.today()).year
    elif len(year_part) == 2:
        year = pivot_two_digit_year(int(year_part))
    else:
        year = int(year_part)

    naive = _calendar(value, year, month, day, hour, minute, second)
    return _from_local(value, naive, 0)


def format_timestamp(instant: Instant) -> str:
    """Format as CCYYMMDDhhmm.SS in local time (inverse of parse_timestamp)."""
    try:
        dt = datetime.fromtimestamp(instant.seconds)
    except (OverflowError, OSError, ValueError):
        return f"@{instant.seconds}"
    return (
        f"{dt.year:04d}{dt.month:02d}{dt.day:02d}"
        f"{dt.hour:02d}{dt.minute:02d}.{dt.second:02d}"
    )


def pivot_two_digit_year(yy: int) -> int:
    """Expand YY: 69-99 -> 1969-1999, 00-68 -> 2000-2068."""
    if not 0 <= yy <= 99:
        raise ValueError(f"two-digit year expected: {yy}")
    return 1900 + yy if yy >= _YEAR_PIVOT else 2000 + yy


# ----------------------------
# Internals
# ----------------------------
def _is_digits(s: str) -> bool:
    return s.isascii() and s.isdigit()


def _calendar(
    value: str,
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
) -> datetime:
    if second == 60:
        raise TimeRangeError(value, "leap second (60) cannot be stored in a file timestamp")
    if not 1 <= month <= 12:
        raise TimeRangeError(value, f"month out of range (1-12): {month}")
    if hour > 23:
        raise TimeRangeError(value, f"hour out of range (0-23): {hour}")
    if minute > 59:
        raise TimeRangeError(value, f"minute out of range (0-59): {minute}")
    if second > 59:
        raise TimeRangeError(value, f"second out of range (0-59): {second}")
    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError as exc:
        raise TimeRangeError(
            value, f"invalid date {year:04d}-{month:02d}-{day:02d}", cause=exc
        ) from exc


def _fraction_to_nanos(fraction: Optional[str]) -> int:
    if not fraction:
        return 0
    return int(fraction[:9].ljust(9, "0"))


def _parse_offset(value: str, offset: str) -> timezone:
    if offset in ("Z", "z"):
        return timezone.utc

    sign = -1 if offset[0] == "-" else 1
    hours = int(offset[1:3])
    minutes = int(offset[4:6])
    if hours > 23 or minutes > 59:
        raise TimeRangeError(value, f"UTC offset out of range: {offset}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def _from_local(value: str, naive: datetime, nanos: int) -> Instant:
    try:
        return Instant.from_local(naive, nanos)
    except LocalTimeError as exc:
        raise LocalTimeError(value, exc.reason, cause=exc) from exc
    except TimeRangeError as exc:
        raise TimeRangeError(value, exc.reason, cause=exc) from exc
