"""English, the default language."""

from __future__ import annotations

from agotime.language import Language
from agotime.units import TimeUnit

_SINGULAR = {
    TimeUnit.NANOSECONDS: "nanosecond",
    TimeUnit.MICROSECONDS: "microsecond",
    TimeUnit.MILLISECONDS: "millisecond",
    TimeUnit.SECONDS: "second",
    TimeUnit.MINUTES: "minute",
    TimeUnit.HOURS: "hour",
    TimeUnit.DAYS: "day",
    TimeUnit.WEEKS: "week",
    TimeUnit.MONTHS: "month",
    TimeUnit.YEARS: "year",
}

_PLURAL = {
    TimeUnit.NANOSECONDS: "nanoseconds",
    TimeUnit.MICROSECONDS: "microseconds",
    TimeUnit.MILLISECONDS: "milliseconds",
    TimeUnit.SECONDS: "seconds",
    TimeUnit.MINUTES: "minutes",
    TimeUnit.HOURS: "hours",
    TimeUnit.DAYS: "days",
    TimeUnit.WEEKS: "weeks",
    TimeUnit.MONTHS: "months",
    TimeUnit.YEARS: "years",
}


class English(Language):
    """Default language: "5 days ago"."""

    NOW = "now"
    OLD = "old"
    AGO = "ago"

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return (_SINGULAR if count == 1 else _PLURAL)[unit]