import pytest

from agotime.languages.english import English
from agotime.units import TimeUnit


@pytest.mark.parametrize(
    "unit, word",
    [
        (TimeUnit.NANOSECONDS, "nanosecond"),
        (TimeUnit.MICROSECONDS, "microsecond"),
        (TimeUnit.MILLISECONDS, "millisecond"),
        (TimeUnit.SECONDS, "second"),
        (TimeUnit.MINUTES, "minute"),
        (TimeUnit.HOURS, "hour"),
        (TimeUnit.DAYS, "day"),
        (TimeUnit.WEEKS, "week"),
        (TimeUnit.MONTHS, "month"),
        (TimeUnit.YEARS, "year"),
    ],
)
def test_singular(unit, word):
    assert English().get_word(unit, 1) == word


@pytest.mark.parametrize(
    "unit, word",
    [
        (TimeUnit.NANOSECONDS, "nanoseconds"),
        (TimeUnit.MICROSECONDS, "microseconds"),
        (TimeUnit.MILLISECONDS, "milliseconds"),
        (TimeUnit.SECONDS, "seconds"),
        (TimeUnit.MINUTES, "minutes"),
        (TimeUnit.HOURS, "hours"),
        (TimeUnit.DAYS, "days"),
        (TimeUnit.WEEKS, "weeks"),
        (TimeUnit.MONTHS, "months"),
        (TimeUnit.YEARS, "years"),
    ],
)
def test_plural(unit, word):
    assert English().get_word(unit, 2) == word


@pytest.mark.parametrize("count", [0, 2, 11, 21, 101])
def test_any_count_but_one_is_plural(count):
    lang = English()
    for unit in TimeUnit:
        assert lang.get_word(unit, count) == lang.get_word(unit, 1) + "s"


def test_fixed_words():
    lang = English()
    assert lang.too_low() == "now"
    assert lang.too_high() == "old"
    assert lang.ago() == "ago"


def test_word_order_and_spacing():
    lang = English()
    assert lang.place_ago_before() is False
    assert lang.extra_space() == " "