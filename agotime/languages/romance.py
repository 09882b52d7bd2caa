"""French, Spanish, Italian, Portuguese and Romanian."""

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


class French(_SingularPlural):
    """French: "il y a 5 jours"."""

    NOW = "maintenant"
    OLD = "ancien"
    AGO = "il y a"
    AGO_FIRST = True
    FORMS = {
        TimeUnit.NANOSECONDS: ("nanoseconde", "nanosecondes"),
        TimeUnit.MICROSECONDS: ("microseconde", "microsecondes"),
        TimeUnit.MILLISECONDS: ("milliseconde", "milisecondes"),
        TimeUnit.SECONDS: ("seconde", "secondes"),
        TimeUnit.MINUTES: ("minute", "minutes"),
        TimeUnit.HOURS: ("heure", "heures"),
        TimeUnit.DAYS: ("jour", "jours"),
        TimeUnit.WEEKS: ("semaine", "semaines"),
        TimeUnit.MONTHS: ("mois", "mois"),
        TimeUnit.YEARS: ("année", "ans"),
    }

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return super().get_word(unit, count)


class Spanish(_SingularPlural):
    """Spanish: "hace 5 días"."""

    NOW = "ahora"
    OLD = "hace mucho"
    AGO = "hace"
    AGO_FIRST = True
    FORMS = {
        TimeUnit.NANOSECONDS: ("nanosegundo", "nanosegundos"),
        TimeUnit.MICROSECONDS: ("microsegundo", "microsegundos"),
        TimeUnit.MILLISECONDS: ("milisegundo", "milisegundos"),
        TimeUnit.SECONDS: ("segundo", "segundos"),
        TimeUnit.MINUTES: ("minuto", "minutos"),
        TimeUnit.HOURS: ("hora", "horas"),
        TimeUnit.DAYS: ("día", "días"),
        TimeUnit.WEEKS: ("semana", "semanas"),
        TimeUnit.MONTHS: ("mes", "meses"),
        TimeUnit.YEARS: ("año", "años"),
    }

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return super().get_word(unit, count)


class Italian(_SingularPlural):
    """Italian: "5 giorni fa"."""

    NOW = "adesso"
    OLD = "troppo vecchio"
    AGO = "fa"
    FORMS = {
        TimeUnit.NANOSECONDS: ("nanosecondo", "nanosecondi"),
        TimeUnit.MICROSECONDS: ("microsecondo", "microsecondi"),
        TimeUnit.MILLISECONDS: ("millisecondo", "millisecondi"),
        TimeUnit.SECONDS: ("secondo", "secondi"),
        TimeUnit.MINUTES: ("minuto", "minuti"),
        TimeUnit.HOURS: ("ora", "ore"),
        TimeUnit.DAYS: ("giorno", "giorni"),
        TimeUnit.WEEKS: ("settimana", "settimane"),
        TimeUnit.MONTHS: ("mese", "mesi"),
        TimeUnit.YEARS: ("anno", "anni"),
    }

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return super().get_word(unit, count)


class Portuguese(_SingularPlural):
    """Portuguese: "5 dias atrás"."""

    NOW = "agora"
    OLD = "antigo"
    AGO = "atrás"
    FORMS = {
        TimeUnit.NANOSECONDS: ("nanosegundo", "nanosegundos"),
        TimeUnit.MICROSECONDS: ("microsegundo", "microsegundos"),
        TimeUnit.MILLISECONDS: ("milisegundo", "milisegundos"),
        TimeUnit.SECONDS: ("segundo", "segundos"),
        TimeUnit.MINUTES: ("minuto", "minutos"),
        TimeUnit.HOURS: ("hora", "horas"),
        TimeUnit.DAYS: ("dia", "dias"),
        TimeUnit.WEEKS: ("semana", "semanas"),
        TimeUnit.MONTHS: ("mês", "meses"),
        TimeUnit.YEARS: ("ano", "anos"),
    }

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return super().get_word(unit, count)


class Romanian(_SingularPlural):
    """Romanian: "acum 5 zile"."""

    NOW = "acum"
    OLD = "demult"
    AGO = "acum"
    AGO_FIRST = True
    FORMS = {
        TimeUnit.NANOSECONDS: ("nanosecundă", "nanosecunde"),
        TimeUnit.MICROSECONDS: ("microsecundă", "microsecunde"),
        TimeUnit.MILLISECONDS: ("milisecundă", "milisecunde"),
        TimeUnit.SECONDS: ("secundă", "secunde"),
        TimeUnit.MINUTES: ("minut", "minute"),
        TimeUnit.HOURS: ("oră", "ore"),
        TimeUnit.DAYS: ("zi", "zile"),
        TimeUnit.WEEKS: ("săptămână", "săptămâni"),
        TimeUnit.MONTHS: ("lună", "luni"),
        TimeUnit.YEARS: ("an", "ani"),
    }

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return super().get_word(unit, count)