"""Instant and Adjustment: the canonical time model."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from zaptouch.errors import (
    AdjustmentOverflowError,
    AdjustmentUnderflowError,
    LocalTimeError,
    TimeRangeError,
)

NANOS_PER_SECOND: int = 1_000_000_000

# File timestamps are carried as signed 64-bit seconds.
MIN_SECONDS: int = -(2**63)
MAX_SECONDS: int = 2**63 - 1

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, slots=True)
class Adjustment:
    """A signed whole-second delta."""

    seconds: int

    def __post_init__(self) -> None:
        if self.seconds > MAX_SECONDS:
            raise AdjustmentOverflowError(
                f"adjustment of {self.seconds}s is too large",
                details={"seconds": self.seconds},
            )
        if self.seconds < MIN_SECONDS:
            raise AdjustmentUnderflowError(
                f"adjustment of {self.seconds}s is too small",
                details={"seconds": self.seconds},
            )

    def __add__(self, other: object) -> Adjustment:
        if not isinstance(other, Adjustment):
            return NotImplemented
        return Adjustment(self.seconds + other.seconds)

    def __neg__(self) -> Adjustment:
        return Adjustment(-self.seconds)


@dataclass(frozen=True, order=True, slots=True)
class Instant:
    """
    A point in time as seconds since the Unix epoch plus a nanosecond fraction.

    Ordering and equality compare at full nanosecond precision.
    """

    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos < NANOS_PER_SECOND:
            raise ValueError(f"nanos must be in [0, {NANOS_PER_SECOND}): {self.nanos}")
        if not MIN_SECONDS <= self.seconds <= MAX_SECONDS:
            raise ValueError(f"seconds out of range: {self.seconds}")

    # ----------------------------
    # Construction
    # ----------------------------
    @classmethod
    def now(cls) -> Instant:
        return cls.from_ns(time.time_ns())

    @classmethod
    def from_ns(cls, ns: int) -> Instant:
        """Build from a nanosecond timestamp (e.g. os.stat_result.st_mtime_ns)."""
        seconds, nanos = divmod(ns, NANOS_PER_SECOND)
        return cls(seconds, nanos)

    @classmethod
    def from_datetime(cls, dt: datetime, nanos: int | None = None) -> Instant:
        """
        Build from a tz-aware datetime.

        If nanos is given it replaces the datetime's microsecond fraction.
        """
        if dt.tzinfo is None:
            raise ValueError("naive datetime is not allowed; timezone-aware required")
        whole = dt.replace(microsecond=0) - _EPOCH
        seconds = whole.days * 86400 + whole.seconds
        if nanos is None:
            nanos = dt.microsecond * 1000
        return cls(seconds, nanos)

    @classmethod
    def from_local(cls, naive: datetime, nanos: int = 0) -> Instant:
        """
        Interpret a naive wall-clock datetime in the process-local time zone.

        Raises:
            LocalTimeError: if the wall-clock time is ambiguous (repeated by a
                backward transition) or does not exist (skipped by a forward one).
            TimeRangeError: if the platform cannot convert the date at all.
        """
        if naive.tzinfo is not None:
            raise ValueError("from_local expects a naive datetime")

        wall = naive.replace(microsecond=0)
        label = wall.isoformat(sep=" ")
        try:
            earlier = wall.replace(fold=0).timestamp()
            later = wall.replace(fold=1).timestamp()
        except (OverflowError, OSError, ValueError) as exc:
            raise TimeRangeError(label, "date cannot be represented", cause=exc) from exc

        if earlier != later:
            if datetime.fromtimestamp(earlier) == wall:
                raise LocalTimeError(label, "ambiguous local time (clock was set back)")
            raise LocalTimeError(label, "non-existent local time (clock was set forward)")

        return cls(int(earlier), nanos)

    # ----------------------------
    # Conversion
    # ----------------------------
    def to_ns(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos

    def to_datetime(self) -> datetime:
        """Return a UTC datetime (sub-microsecond digits are truncated)."""
        return _EPOCH + timedelta(seconds=self.seconds, microseconds=self.nanos // 1000)

    def isoformat(self) -> str:
        """
        Format as RFC3339 UTC with 'Z', keeping nanoseconds when present.

        Instants outside the datetime range come out as '@<seconds>.<nanos>'.
        """
        try:
            dt = self.to_datetime()
        except OverflowError:
            return f"@{self.seconds}.{self.nanos:09d}"
        text = (
            f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
            f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        )
        if self.nanos:
            text += "." + f"{self.nanos:09d}".rstrip("0")
        return text + "Z"

    # ----------------------------
    # Arithmetic
    # ----------------------------
    def checked_add(self, adjustment: Adjustment) -> Instant:
        """
        Shift by adjustment.

        Raises:
            AdjustmentOverflowError / AdjustmentUnderflowError: if the result
                leaves the representable range.
        """
        seconds = self.seconds + adjustment.seconds
        if seconds > MAX_SECONDS:
            raise AdjustmentOverflowError(
                "time adjustment overflowed",
                details={"instant": self.seconds, "adjustment": adjustment.seconds},
            )
        if seconds < MIN_SECONDS:
            raise AdjustmentUnderflowError(
                "time adjustment underflowed",
                details={"instant": self.seconds, "adjustment": adjustment.seconds},
            )
        return Instant(seconds, self.nanos)

    def checked_sub(self, adjustment: Adjustment) -> Instant:
        if adjustment.seconds > 0:
            return self.checked_add(Adjustment(-adjustment.seconds))
        seconds = self.seconds - adjustment.seconds
        if seconds > MAX_SECONDS:
            raise AdjustmentOverflowError(
                "time adjustment overflowed",
                details={"instant": self.seconds, "adjustment": -adjustment.seconds},
            )
        return Instant(seconds, self.nanos)
