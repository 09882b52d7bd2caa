"""Chinese, Japanese, Thai and Turkish, whose unit words do not change with the number."""

from __future__ import annotations

from typing import ClassVar

from agotime.language import Language
from agotime.units import TimeUnit


class _OneForm(Language):
    """A language that uses the same word whatever the count."""

    WORDS: ClassVar[dict[TimeUnit, str]]

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return self.WORDS[unit]


class Chinese(_OneForm):
    """Chinese: "5 天之前"."""

    NOW = "刚刚"
    OLD = "大于"
    AGO = "之前"
    WORDS = {
        TimeUnit.NANOSECONDS: "纳秒",
        TimeUnit.MICROSECONDS: "微秒",
        TimeUnit.MILLISECONDS: "毫秒",
        TimeUnit.SECONDS: "秒",
        TimeUnit.MINUTES: "分",
        TimeUnit.HOURS: "小时",
        TimeUnit.DAYS: "天",
        TimeUnit.WEEKS: "周",
        TimeUnit.MONTHS: "月",
        TimeUnit.YEARS: "年",
    }

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return super().get_word(unit, count)


class Japanese(_OneForm):
    """Japanese: "5 日 前"."""

    NOW = "今"
    OLD = "後"
    AGO = "前"
    WORDS = {
        TimeUnit.NANOSECONDS: "ナノ秒",
        TimeUnit.MICROSECONDS: "マイクロ秒",
        TimeUnit.MILLISECONDS: "ミリ秒",
        TimeUnit.SECONDS: "秒",
        TimeUnit.MINUTES: "分",
        TimeUnit.HOURS: "時間",
        TimeUnit.DAYS: "日",
        TimeUnit.WEEKS: "週間",
        TimeUnit.MONTHS: "月",
        TimeUnit.YEARS: "年",
    }

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return super().get_word(unit, count)


class Thai(_OneForm):
    """Thai, written without a space before the "ago" word."""

    NOW = "ตอนนี้"
    OLD = "นานมาแล้ว"
    AGO = "ที่แล้ว"
    SEPARATOR = ""
    WORDS = {
        TimeUnit.NANOSECONDS: "นาโนวินาที",
        TimeUnit.MICROSECONDS: "ไมโครวินาที",
        TimeUnit.MILLISECONDS: "มิลลิวินาที",
        TimeUnit.SECONDS: "วินาที",
        TimeUnit.MINUTES: "นาที",
        TimeUnit.HOURS: "ชั่วโมง",
        TimeUnit.DAYS: "วัน",
        TimeUnit.WEEKS: "สัปดาห์",
        TimeUnit.MONTHS: "เดือน",
        TimeUnit.YEARS: "ปี",
    }

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return super().get_word(unit, count)


class Turkish(_OneForm):
    """Turkish: "5 gün önce"."""

    NOW = "şimdi"
    OLD = "eski"
    AGO = "önce"
    WORDS = {
        TimeUnit.NANOSECONDS: "nanosaniye",
        TimeUnit.MICROSECONDS: "mikrosaniye",
        TimeUnit.MILLISECONDS: "milisaniye",
        TimeUnit.SECONDS: "saniye",
        TimeUnit.MINUTES: "dakika",
        TimeUnit.HOURS: "saat",
        TimeUnit.DAYS: "gün",
        TimeUnit.WEEKS: "hafta",
        TimeUnit.MONTHS: "ay",
        TimeUnit.YEARS: "yıl",
    }

    def get_word(self, unit: TimeUnit, count: int) -> str:
        return super().get_word(unit, count)