# agotime

Turn a duration into a short, human-readable phrase such as `1 hour ago`,
`2 days 3 hours ago` or `il y a 1 minute`. The result is lossy on purpose:
months and years are approximate (a month is 2,628,003 seconds, a year twelve
of those) and are not based on a calendar, and fractional results like
"1.5 days" are never produced.

## Installation

```
pip install agotime
```

## Library usage

```python
from agotime.formatter import Formatter
from agotime.units import Duration, TimeUnit

f = Formatter()
f.convert(Duration.from_secs(3600))             # "1 hour ago"

f = Formatter(num_items=3)
f.convert(Duration.from_secs(3600 + 60 + 3))    # "1 hour 1 minute 3 seconds ago"

f = Formatter(max_unit=TimeUnit.HOURS)
f.convert(Duration.from_secs(24 * 3600))        # "24 hours ago"

f = Formatter(min_unit=TimeUnit.MINUTES)
f.convert(Duration.from_secs(30))               # "now"
```

`Duration` holds whole seconds plus nanoseconds (`Duration(secs, nanos)`).
`Formatter.convert` also accepts a `datetime.timedelta`; a negative one raises
`ValueError`.

`Formatter` is an immutable dataclass. Its fields:

- `language`: the `Language` to phrase in (default `English()`).
- `num_items`: how many units to emit (default 1; must be positive, otherwise
  `ValueError`). Zero parts such as "0 minutes" are skipped.
- `min_unit` / `max_unit`: the smallest and largest `TimeUnit` to use
  (defaults `SECONDS` and `YEARS`). A duration shorter than `min_unit` gives
  the `too_low` text.
- `too_low`: text used in place of the language's "now". The special value
  `"0"` gives output like `0 minutes ago`.
- `too_high` and `max_duration`: text used in place of the language's "old"
  once the duration goes past `max_duration`.
- `ago`: text used in place of the language's "ago". An empty string leaves it
  out.

The span between two datetimes can be formatted too. If `end` comes before
`start`, the result is `"???"`:

```python
from datetime import datetime, timezone
from agotime.formatter import Formatter

f = Formatter(num_items=2)
start = datetime(2013, 12, 19, 15, tzinfo=timezone.utc)
end = datetime(2013, 12, 23, 17, tzinfo=timezone.utc)
f.convert_datetimes(start, end)                 # "4 days 2 hours ago"
```

### Simple styles

`format_5chars(d)` always returns a five-character string such as `" now "`,
`"07min"`, `"02Yea"` or `" OLD "` (beyond 99 years).

`format_duration(d, style)` formats in English with one of the `Style` values:
`Style.LONG` (down to nanoseconds, e.g. `"500 milliseconds ago"`),
`Style.HUMAN` (seconds and up, with `"just now"` for anything shorter) and
`Style.SHORT` (the same as `format_5chars`).

### Units

`agotime.units` also provides `TimeUnit.min_duration()`, `bigger_unit()` and
`smaller_unit()`, plus `dominant_time_unit(d)` and `split_up(d, unit)`, which
returns the count of `unit` in `d` and the remainder.

## Languages

Languages included: English, Russian, Ukrainian, Belarusian, Polish, French,
Spanish, Italian, Portuguese, Romanian, German, Danish, Swedish, Chinese,
Japanese, Thai and Turkish.

```python
from agotime.formatter import Formatter
from agotime.languages.registry import from_code
from agotime.units import Duration

f = Formatter(language=from_code("ru"))
f.convert(Duration.from_secs(3600))             # "1 час назад"
```

`from_name("German")` looks a language up by its English name instead of its
code. Both raise `UnknownLanguageError` (a `LookupError`) for anything
unsupported.

To add a language of your own, subclass `agotime.language.Language`: set the
class attributes `NOW`, `OLD` and `AGO`, implement `get_word(unit, count)`,
and set `AGO_FIRST = True` if "ago" goes before the amount or change
`SEPARATOR` (default a single space) if it is joined differently.

## Command line

```
agotime <ISO 639-1 language code>
```

The command reads whole non-negative numbers of seconds from standard input,
one per line, and prints each one formatted with up to three units:

```
$ printf '3663\n60\n' | agotime en
1 hour 1 minute 3 seconds ago
1 minute ago
```

An unknown language code or a line that is not an unsigned number prints an
error to standard error and exits with status 1.

## What it does not do

Parsing a phrase back into a duration is not supported, and the command line
only takes whole seconds.