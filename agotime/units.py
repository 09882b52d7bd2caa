"""Time units and the duration arithmetic behind approximate formatting."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import IntEnum

NANOS_PER_SEC = 1_000_000_000
U64_MAX = 2**64 - 1
SECONDS_IN_MONTH = 2_628_003  # about 2628002.88 seconds


@dataclass(frozen=True, order=True)
class Duration:
    """A non-negative span of time as whole seconds plus nanoseconds."""

    secs: int = 0
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.secs <= U64_MAX:
            raise ValueError(f"seconds out of range: {self.secs}")
        if not 0 <= self.nanos < NANOS_PER_SEC:
            raise ValueError(f"nanoseconds out of range: {self.nanos}")

    @classmethod
    def from_secs(cls, secs: int) -> Duration:
        """Build a duration of a whole number of seconds."""
        return cls(secs, 0)

    @classmethod
    def from_timedelta(cls, delta: datetime.timedelta) -> Duration:
        """Build a duration from a timedelta; negative spans raise ValueError."""
        micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        if micros < 0:
            raise ValueError("negative timedelta cannot be a duration")
        secs, micros = divmod(micros, 1_000_000)
        return cls(secs, micros * 1_000)


MAX_DURATION = Duration(U64_MAX, NANOS_PER_SEC - 1)


class TimeUnit(IntEnum):
    """Units of time, ordered from smallest to largest; not calendar-based."""

    NANOSECONDS = 0
    MICROSECONDS = 1
    MILLISECONDS = 2
    SECONDS = 3
    MINUTES = 4
    HOURS = 5
    DAYS = 6
    WEEKS = 7
    MONTHS = 8
    YEARS = 9

    def min_duration(self) -> Duration:
        """The smallest duration this unit can represent."""
        return _MIN_DURATIONS[self]

    def bigger_unit(self) -> TimeUnit | None:
        """The next larger unit, or None for years."""
        return None if self is TimeUnit.YEARS else TimeUnit(self + 1)

    def smaller_unit(self) -> TimeUnit | None:
        """The next smaller unit, or None for nanoseconds."""
        return None if self is TimeUnit.NANOSECONDS else TimeUnit(self - 1)


_MIN_DURATIONS = {
    TimeUnit.NANOSECONDS: Duration(0, 1),
    TimeUnit.MICROSECONDS: Duration(0, 1_000),
    TimeUnit.MILLISECONDS: Duration(0, 1_000_000),
    TimeUnit.SECONDS: Duration(1),
    TimeUnit.MINUTES: Duration(60),
    TimeUnit.HOURS: Duration(60 * 60),
    TimeUnit.DAYS: Duration(24 * 60 * 60),
    TimeUnit.WEEKS: Duration(7 * 24 * 60 * 60),
    TimeUnit.MONTHS: Duration(SECONDS_IN_MONTH),
    TimeUnit.YEARS: Duration(SECONDS_IN_MONTH * 12),
}


def dominant_time_unit(d: Duration) -> TimeUnit:
    """The largest unit whose minimal duration fits into ``d``."""
    for unit in reversed(TimeUnit):
        if d >= unit.min_duration():
            return unit
    return TimeUnit.NANOSECONDS


def split_up(d: Duration, unit: TimeUnit) -> tuple[int, Duration]:
    """Split ``d`` into a count of ``unit`` and the remainder.

    The count saturates at the largest unsigned 64-bit value, with the
    remainder holding whatever the saturated count leaves over.
    """
    step = unit.min_duration()
    if step.secs:
        if d.secs == 0:
            return 0, d
        count, secs = divmod(d.secs, step.secs)
        return count, Duration(secs, d.nanos)

    tun = step.nanos
    if d.secs == 0:
        count, nanos = divmod(d.nanos, tun)
        return count, Duration(0, nanos)

    per_second = NANOS_PER_SEC // tun
    pieces = min(d.secs * per_second + d.nanos // tun, U64_MAX)
    subtract_s, rest = divmod(pieces, per_second)
    subtract_ns = rest * tun

    secs, nanos = d.secs, d.nanos
    if subtract_ns > nanos:
        secs -= 1
        nanos += NANOS_PER_SEC
    return pieces, Duration(secs - subtract_s, nanos - subtract_ns)