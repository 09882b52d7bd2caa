"""German, Danish and Swedish."""

from __future__ import annotations

from typing import ClassVar

from agotime.language import Language
from agotime.units import TimeUnit

# Each table maps a unit to its (singular, plural) forms.
_Forms = dict[TimeUnit, tuple[str, str]]


class _SingularPlural(Language):
    """A language that uses one form for exactly one and another otherwise."""

    FORMS: ClassVar[_Forms]

    def get_word(self, unit: TimeUnit, count: int) -> str:
        singular, plural = self.FORMS[unit]
        return singular if count == 1 else plural


class German(_SingularPlural):
    """German: "vor 5 Tagen"."""

    NOW = "jetzt"
    OLD = "zu alt"
    AGO = "vor"
    AGO_FIRST = True
    FORMS = {
        TimeUnit.NANOSECONDS: ("Nanosekunde", "Nanosekunden"),
        TimeUnit.MICROSECONDS: ("Mikrosekunde", "Mikrosekunden"),
        TimeUnit.MILLISECONDS: ("Millisekunde", "Millisekunden"),
        TimeUnit.SECONDS: ("Sekunde", "Sekunden"),
        TimeUnit.MINUTES: ("Minute", "Minuten"),
        TimeUnit.HOURS: ("Stunde", "Stunden"),
        TimeUnit.DAYS: ("Tag", "Tagen"),
        TimeUnit.WEEKS: ("Woche", "Wochen"),
        TimeUnit.MONTHS: ("Monat", "Monaten"),
        TimeUnit.YEARS: ("Jahr", "Jahren"),
    }

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return super().get_word(unit, count)


class Danish(_SingularPlural):
    """Danish: "5 dage siden"."""

    NOW = "nu"
    OLD = "gammel"
    AGO = "siden"
    FORMS = {
        TimeUnit.NANOSECONDS: ("nanosekund", "nanosekunder"),
        TimeUnit.MICROSECONDS: ("mikrosekund", "mikrosekunder"),
        TimeUnit.MILLISECONDS: ("millisekund", "millisekunder"),
        TimeUnit.SECONDS: ("sekund", "sekunder"),
        TimeUnit.MINUTES: ("minut", "minutter"),
        TimeUnit.HOURS: ("time", "timer"),
        TimeUnit.DAYS: ("dag", "dage"),
        TimeUnit.WEEKS: ("uge", "uger"),
        TimeUnit.MONTHS: ("måned", "måneder"),
        TimeUnit.YEARS: ("år", "år"),
    }

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return super().get_word(unit, count)


class Swedish(_SingularPlural):
    """Swedish: "5 dagar sedan"."""

    NOW = "nu"
    OLD = "gammal"
    AGO = "sedan"
    FORMS = {
        TimeUnit.NANOSECONDS: ("nanosekund", "nanosekunder"),
        TimeUnit.MICROSECONDS: ("mikrosekund", "mikrosekunder"),
        TimeUnit.MILLISECONDS: ("millisekund", "millisekunder"),
        TimeUnit.SECONDS: ("sekund", "sekunder"),
        TimeUnit.MINUTES: ("minut", "minuter"),
        TimeUnit.HOURS: ("timme", "timmar"),
        TimeUnit.DAYS: ("dag", "dagar"),
        TimeUnit.WEEKS: ("vecka", "veckor"),
        TimeUnit.MONTHS: ("månad", "månader"),
        TimeUnit.YEARS: ("år", "år"),
    }

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return super().get_word(unit, count)