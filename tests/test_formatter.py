import datetime
from dataclasses import replace

import pytest

from agotime.formatter import Formatter, Style, format_5chars, format_duration
from agotime.language import Language
from agotime.units import Duration, TimeUnit


def ds(secs):
    return Duration.from_secs(secs)


def dn(secs, nanos):
    return Duration(secs, nanos)


class _Before(Language):
    NOW = "nw"
    OLD = "od"
    AGO = "before"
    AGO_FIRST = True

    def get_word(self, unit, count):
        return "u" if count == 1 else "us"


class _NoSpace(Language):
    NOW = "nw"
    OLD = "od"
    AGO = "!"
    SEPARATOR = ""

    def get_word(self, unit, count):
        return "x"


def test_default_hour():
    assert Formatter().convert(ds(3600)) == "1 hour ago"


def test_default_day():
    assert Formatter().convert(ds(3600 * 24)) == "1 day ago"


def test_num_items():
    d = ds(3600 + 60 + 3)
    f = Formatter(num_items=1)
    assert f.convert(d) == "1 hour ago"
    assert replace(f, num_items=2).convert(d) == "1 hour 1 minute ago"
    assert replace(f, num_items=3).convert(d) == "1 hour 1 minute 3 seconds ago"
    assert replace(f, num_items=4).convert(d) == "1 hour 1 minute 3 seconds ago"


def test_num_items_zero_rejected():
    with pytest.raises(ValueError):
        Formatter(num_items=0)


def test_max_unit():
    f = Formatter(max_unit=TimeUnit.HOURS)
    assert f.convert(ds(60)) == "1 minute ago"
    assert f.convert(ds(3600)) == "1 hour ago"
    assert f.convert(ds(24 * 3600)) == "24 hours ago"
    assert f.convert(ds(30 * 24 * 3600)) == "720 hours ago"


def test_min_unit_minutes():
    f = Formatter(min_unit=TimeUnit.MINUTES)
    assert f.convert(ds(30)) == "now"
    assert f.convert(ds(90)) == "1 minute ago"


def test_min_unit_precision():
    f = Formatter(num_items=99)
    d = dn(1 * 3600 * 24 + 2 * 3600 + 3 * 60 + 4, 500_000_000)
    assert f.convert(d) == "1 day 2 hours 3 minutes 4 seconds ago"
    assert replace(f, min_unit=TimeUnit.HOURS).convert(d) == "1 day 2 hours ago"
    assert (
        replace(f, min_unit=TimeUnit.MICROSECONDS).convert(d)
        == "1 day 2 hours 3 minutes 4 seconds 500 milliseconds ago"
    )
    assert replace(f, min_unit=TimeUnit.MONTHS).convert(d) == "now"


def test_too_low_override():
    f = Formatter(min_unit=TimeUnit.MONTHS, too_low="this month")
    assert f.convert(ds(24 * 3600)) == "this month"


def test_too_low_variants():
    f = Formatter(min_unit=TimeUnit.MINUTES)
    d = ds(30)
    assert f.convert(d) == "now"
    assert replace(f, too_low="-").convert(d) == "-"
    assert replace(f, too_low="").convert(d) == ""
    assert replace(f, too_low="0").convert(d) == "0 minutes ago"


def test_too_high_override():
    f = Formatter(max_duration=ds(3600 * 24 * 30), too_high="ancient")
    assert f.convert(ds(1_000_000_000_000)) == "ancient"


def test_max_duration_default_old():
    f = Formatter(max_duration=ds(3600 * 24 * 30))
    assert f.convert(ds(1_000_000_000)) == "old"


def test_ago_override():
    f = Formatter()
    d = ds(60)
    assert f.convert(d) == "1 minute ago"
    assert replace(f, ago="later").convert(d) == "1 minute later"
    assert replace(f, ago="").convert(d) == "1 minute"


def test_convert_accepts_timedelta():
    assert Formatter().convert(datetime.timedelta(hours=2)) == "2 hours ago"


def test_convert_datetimes():
    f = Formatter(num_items=2)
    tz = datetime.timezone(datetime.timedelta(hours=3))
    start = datetime.datetime(2013, 12, 19, 15, 0, tzinfo=tz)
    end = datetime.datetime(2013, 12, 23, 17, 0, tzinfo=tz)
    assert f.convert_datetimes(start, end) == "4 days 2 hours ago"


def test_convert_datetimes_reversed():
    tz = datetime.timezone.utc
    start = datetime.datetime(2013, 12, 23, tzinfo=tz)
    end = datetime.datetime(2013, 12, 19, tzinfo=tz)
    assert Formatter().convert_datetimes(start, end) == "???"


def test_ago_before_language():
    f = Formatter(language=_Before())
    assert f.convert(ds(1)) == "before 1 u"
    assert f.convert(ds(0)) == "nw"


def test_extra_space_empty():
    f = Formatter(language=_NoSpace())
    assert f.convert(ds(5)) == "5 x!"


@pytest.mark.parametrize(
    "d, expected",
    [
        (ds(0), "now"),
        (dn(0, 500_000_000), "500 milliseconds ago"),
        (ds(1), "1 second ago"),
        (dn(1, 500_000_000), "1 second ago"),
        (ds(59), "59 seconds ago"),
        (ds(60), "1 minute ago"),
        (ds(65), "1 minute ago"),
        (ds(119), "1 minute ago"),
        (ds(120), "2 minutes ago"),
        (ds(3599), "59 minutes ago"),
        (ds(3600), "1 hour ago"),
        (ds(1_000_000), "1 week ago"),
        (ds(1_000_000_000), "31 years ago"),
    ],
)
def test_long(d, expected):
    assert format_duration(d, Style.LONG) == expected


@pytest.mark.parametrize(
    "d, expected",
    [
        (ds(0), "just now"),
        (dn(0, 500_000_000), "just now"),
        (ds(1), "1 second ago"),
        (dn(1, 500_000_000), "1 second ago"),
        (ds(59), "59 seconds ago"),
        (ds(60), "1 minute ago"),
        (ds(65), "1 minute ago"),
        (ds(119), "1 minute ago"),
        (ds(120), "2 minutes ago"),
        (ds(3599), "59 minutes ago"),
        (ds(3600), "1 hour ago"),
        (ds(1_000_000), "1 week ago"),
        (ds(1_000_000_000), "31 years ago"),
    ],
)
def test_human(d, expected):
    assert format_duration(d, Style.HUMAN) == expected


@pytest.mark.parametrize(
    "d, expected",
    [
        (ds(0), " now "),
        (dn(0, 500_000_000), " now "),
        (ds(1), "01sec"),
        (dn(1, 500_000_000), "01sec"),
        (ds(59), "59sec"),
        (ds(60), "01min"),
        (ds(65), "01min"),
        (ds(119), "01min"),
        (ds(120), "02min"),
        (ds(3599), "59min"),
        (ds(3600), "01hou"),
        (ds(1_000_000), "11day"),
        (ds(1_000_000_000), "31Yea"),
    ],
)
def test_short(d, expected):
    assert format_duration(d, Style.SHORT) == expected


def test_5chars_month_and_old():
    assert format_5chars(ds(2_628_003)) == "01Mon"
    assert format_5chars(ds(99 * 12 * 2_628_003)) == "99Yea"
    assert format_5chars(ds(99 * 12 * 2_628_003 + 1)) == " OLD "


@pytest.mark.parametrize("secs", [0, 1, 59, 60, 3600, 86400, 2_628_003, 10**9, 10**12])
def test_5chars_always_five(secs):
    assert len(format_5chars(ds(secs))) == 5