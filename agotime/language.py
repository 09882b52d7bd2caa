"""The interface natural languages implement for formatting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from agotime.units import TimeUnit


class Language(ABC):
    """A natural language used to phrase durations.

    Subclasses set ``NOW``, ``OLD`` and ``AGO`` and implement ``get_word``;
    ``AGO_FIRST`` and ``SEPARATOR`` may be overridden where word order or
    spacing differs.
    """

    NOW: ClassVar[str]
    OLD: ClassVar[str]
    AGO: ClassVar[str]
    AGO_FIRST: ClassVar[bool] = False
    SEPARATOR: ClassVar[str] = " "

    def too_low(self) -> str:
        """What to emit by default when the value is too low."""
        return self.NOW

    def too_high(self) -> str:
        """What to emit by default when the value is too high."""
        return self.OLD

    def ago(self) -> str:
        """The word placed next to the amount by default."""
        return self.AGO

    @abstractmethod
    def get_word(self, unit: TimeUnit, count: int) -> str:
        """The word for ``unit`` when used with the number ``count``."""

    def place_ago_before(self) -> bool:
        """Whether the "ago" word goes before the amount."""
        return self.AGO_FIRST

    def extra_space(self) -> str:
        """The text that separates the amount from the "ago" word."""
        return self.SEPARATOR

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"