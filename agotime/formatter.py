"""Lossy formatting of durations as phrases like "5 days ago"."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from agotime.language import Language
from agotime.languages.english import English
from agotime.units import (
    MAX_DURATION,
    SECONDS_IN_MONTH,
    Duration,
    TimeUnit,
    dominant_time_unit,
    split_up,
)

DurationLike = Union[Duration, datetime.timedelta]


def _as_duration(d: DurationLike) -> Duration:
    if isinstance(d, datetime.timedelta):
        return Duration.from_timedelta(d)
    return d


@dataclass(frozen=True)
class Formatter:
    """Turns durations into approximate human phrases.

    ``num_items`` is how many unit chunks to emit ("1 hour 1 minute" is two).
    ``min_unit`` and ``max_unit`` bound the units used; durations too short for
    ``min_unit`` give ``too_low`` (or the language's "now"), and the special
    value ``"0"`` gives output like "0 minutes ago". Durations above
    ``max_duration`` give ``too_high`` (or the language's "old"). ``ago``
    overrides the language's "ago" word; an empty string drops it.
    """

    language: Language = field(default_factory=English)
    num_items: int = 1
    min_unit: TimeUnit = TimeUnit.SECONDS
    max_unit: TimeUnit = TimeUnit.YEARS
    too_low: str | None = None
    too_high: str | None = None
    ago: str | None = None
    max_duration: Duration = MAX_DURATION

    def __post_init__(self) -> None:
        if self.num_items <= 0:
            raise ValueError("num_items must be positive")

    def convert(self, d: DurationLike) -> str:
        """Format ``d`` as a phrase like "5 days ago"."""
        d = _as_duration(d)
        lang = self.language
        if d > self.max_duration:
            return self.too_high if self.too_high is not None else lang.too_high()

        text = " ".join(self._chunks(d))
        if not text:
            now = self.too_low if self.too_low is not None else lang.too_low()
            if now != "0":
                return now
            text = f"0 {lang.get_word(self.min_unit, 0)}"

        ago = self.ago if self.ago is not None else lang.ago()
        if not ago:
            return text
        if lang.place_ago_before():
            return f"{ago}{lang.extra_space()}{text}"
        return f"{text}{lang.extra_space()}{ago}"

    def convert_datetimes(self, start: datetime.datetime, end: datetime.datetime) -> str:
        """Format the span from ``start`` to ``end``; "???" if ``end`` is earlier."""
        try:
            d = Duration.from_timedelta(end - start)
        except ValueError:
            return "???"
        return self.convert(d)

    def _chunks(self, d: Duration):
        for _ in range(self.num_items):
            unit = max(min(dominant_time_unit(d), self.max_unit), self.min_unit)
            count, d = split_up(d, unit)
            if count == 0:
                return
            yield f"{count} {self.language.get_word(unit, count)}"


class Style(Enum):
    """Simple formatting styles for ``format_duration``."""

    LONG = "long"
    HUMAN = "human"
    SHORT = "short"


def format_5chars(d: DurationLike) -> str:
    """Format as a 5-character string like "02Yea", " now " or "07min"."""
    s = _as_duration(d).secs
    if s == 0:
        return " now "
    if s < 60:
        return f"{s:02}sec"
    if s < 60 * 60:
        return f"{s // 60:02}min"
    if s < 60 * 60 * 24:
        return f"{s // 3600:02}hou"
    if s < SECONDS_IN_MONTH:
        return f"{s // 86400:02}day"
    if s < 12 * SECONDS_IN_MONTH:
        return f"{s // SECONDS_IN_MONTH:02}Mon"
    if s <= 99 * 12 * SECONDS_IN_MONTH:
        return f"{s // 12 // SECONDS_IN_MONTH:02}Yea"
    return " OLD "


def format_duration(d: DurationLike, style: Style) -> str:
    """Format ``d`` in English using one of the simple styles."""
    if style is Style.LONG:
        return Formatter(min_unit=TimeUnit.NANOSECONDS).convert(d)
    if style is Style.HUMAN:
        text = Formatter().convert(d)
        return "just now" if text == "now" else text
    return format_5chars(d)