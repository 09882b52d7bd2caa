"""Looking up a supported language by its English name or ISO 639-1 code."""

from __future__ import annotations

from agotime.language import Language
from agotime.languages.english import English
from agotime.languages.germanic import Danish, German, Swedish
from agotime.languages.romance import French, Italian, Portuguese, Romanian, Spanish
from agotime.languages.slavic import Belarusian, Polish, Russian, Ukrainian
from agotime.languages.uninflected import Chinese, Japanese, Thai, Turkish

_BY_NAME: dict[str, type[Language]] = {
    "English": English,
    "Chinese": Chinese,
    "Japanese": Japanese,
    "Russian": Russian,
    "German": German,
    "Belarusian": Belarusian,
    "Polish": Polish,
    "Swedish": Swedish,
    "Romanian": Romanian,
    "Turkish": Turkish,
    "French": French,
    "Spanish": Spanish,
    "Danish": Danish,
    "Portuguese": Portuguese,
    "Italian": Italian,
    "Ukrainian": Ukrainian,
    "Thai": Thai,
}

_NAME_BY_CODE: dict[str, str] = {
    "en": "English",
    "zh": "Chinese",
    "ja": "Japanese",
    "ru": "Russian",
    "de": "German",
    "be": "Belarusian",
    "pl": "Polish",
    "sv": "Swedish",
    "ro": "Romanian",
    "tr": "Turkish",
    "fr": "French",
    "es": "Spanish",
    "da": "Danish",
    "pt": "Portuguese",
    "it": "Italian",
    "uk": "Ukrainian",
    "th": "Thai",
}


class UnknownLanguageError(LookupError):
    """Raised when no supported language matches a name or code."""


def from_name(name: str) -> Language:
    """Return a fresh instance of the language with this English name."""
    try:
        return _BY_NAME[name]()
    except KeyError:
        raise UnknownLanguageError(f"unsupported language: {name!r}") from None


def from_code(code: str) -> Language:
    """Return a fresh instance of the language with this ISO 639-1 code."""
    try:
        name = _NAME_BY_CODE[code]
    except KeyError:
        raise UnknownLanguageError(f"unsupported language code: {code!r}") from None
    return from_name(name)