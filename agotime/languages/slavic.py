"""Russian, Ukrainian, Belarusian and Polish, with their three plural forms."""

from __future__ import annotations

from agotime.language import Language
from agotime.units import TimeUnit

# Each table maps a unit to its (accusative, genitive, genitive plural) forms.
_Forms = dict[TimeUnit, tuple[str, str, str]]


def _form_index(count: int) -> int:
    """Pick the grammatical form used with ``count``.

    0 is the accusative singular ("1", "21", "101"), 1 the genitive singular
    ("2"-"4", "22"), 2 the genitive plural ("0", "5"-"20", "111").
    """
    if 11 <= count % 100 <= 20:
        return 2
    last = count % 10
    if last == 1:
        return 0
    if 2 <= last <= 4:
        return 1
    return 2


_RUSSIAN: _Forms = {
    TimeUnit.NANOSECONDS: ("наносекунду", "наносекунды", "наносекунд"),
    TimeUnit.MICROSECONDS: ("микросекунду", "микросекунды", "микросекунд"),
    TimeUnit.MILLISECONDS: ("миллисекунду", "миллисекунды", "миллисекунд"),
    TimeUnit.SECONDS: ("секунду", "секунды", "секунд"),
    TimeUnit.MINUTES: ("минуту", "минуты", "минут"),
    TimeUnit.HOURS: ("час", "часа", "часов"),
    TimeUnit.DAYS: ("день", "дня", "дней"),
    TimeUnit.WEEKS: ("неделю", "недели", "недель"),
    TimeUnit.MONTHS: ("месяц", "месяца", "месяцев"),
    TimeUnit.YEARS: ("год", "года", "лет"),
}

_UKRAINIAN: _Forms = {
    TimeUnit.NANOSECONDS: ("наносекунду", "наносекунди", "наносекунд"),
    TimeUnit.MICROSECONDS: ("мікросекунду", "мікросекунди", "мікросекунд"),
    TimeUnit.MILLISECONDS: ("мілісекунду", "мілісекунди", "мілісекунд"),
    TimeUnit.SECONDS: ("секунду", "секунди", "секунд"),
    TimeUnit.MINUTES: ("хвилину", "хвилини", "хвилин"),
    TimeUnit.HOURS: ("годину", "години", "годин"),
    TimeUnit.DAYS: ("день", "дня", "днів"),
    TimeUnit.WEEKS: ("тиждень", "тижня", "тижнів"),
    TimeUnit.MONTHS: ("місяць", "місяця", "місяців"),
    TimeUnit.YEARS: ("рік", "роки", "років"),
}

_BELARUSIAN: _Forms = {
    TimeUnit.NANOSECONDS: ("нанасэкунду", "нанасэкунды", "нанасэкундаў"),
    TimeUnit.MICROSECONDS: ("мікрасэкунду", "мікрасэкунды", "мікрасэкундаў"),
    TimeUnit.MILLISECONDS: ("мілісэкунду", "мілісэкунды", "мілісэкундаў"),
    TimeUnit.SECONDS: ("сэкунду", "сэкунды", "сэкундаў"),
    TimeUnit.MINUTES: ("хвіліну", "хвіліны", "хвілін"),
    TimeUnit.HOURS: ("гадзіну", "гадзіны", "галзін"),
    TimeUnit.DAYS: ("дзень", "дні", "дней"),
    TimeUnit.WEEKS: ("тыдзень", "тыдні", "тыдняў"),
    TimeUnit.MONTHS: ("месяц", "месяца", "месяцаў"),
    TimeUnit.YEARS: ("год", "гады", "гадоў"),
}

_POLISH: _Forms = {
    TimeUnit.NANOSECONDS: ("nanosekundę", "nanosekundy", "nanosekund"),
    TimeUnit.MICROSECONDS: ("mikrosekundę", "mikrosekundy", "mikrosekund"),
    TimeUnit.MILLISECONDS: ("milisekundę", "milisekundy", "milisekund"),
    TimeUnit.SECONDS: ("sekundę", "sekundy", "sekund"),
    TimeUnit.MINUTES: ("minutę", "minuty", "minut"),
    TimeUnit.HOURS: ("godzinę", "godziny", "godzin"),
    TimeUnit.DAYS: ("dzień", "dni", "dni"),
    TimeUnit.WEEKS: ("tydzień", "tygodnie", "tygodni"),
    TimeUnit.MONTHS: ("miesiąc", "miesiące", "miesięcy"),
    TimeUnit.YEARS: ("lat", "lata", "lat"),
}


class Russian(Language):
    """Russian: "5 минут назад"."""

    NOW = "сейчас"
    OLD = "давно"
    AGO = "назад"

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return _RUSSIAN[unit][_form_index(count)]


class Ukrainian(Language):
    """Ukrainian: "5 хвилин тому"."""

    NOW = "зараз"
    OLD = "давно"
    AGO = "тому"

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return _UKRAINIAN[unit][_form_index(count)]


class Belarusian(Language):
    """Belarusian: "5 хвілін таму"."""

    NOW = "зараз"
    OLD = "даўно"
    AGO = "таму"

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return _BELARUSIAN[unit][_form_index(count)]


class Polish(Language):
    """Polish: "5 minut temu"."""

    NOW = "teraz"
    OLD = "dawno"
    AGO = "temu"

    def get_word(self, unit: TimeUnit, count: int) -> str:
        if unit is TimeUnit.YEARS and count == 1:
            return "rok"
        return _POLISH[unit][_form_index(count)]