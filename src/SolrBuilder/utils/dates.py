"""Date parsing and formatting helpers.

Formats are written with moment-style tokens (``YYYY-MM-DD HH:mm:ss``) because
that is how Solr-facing callers describe their inputs. Parsing is lenient:
any run of punctuation or whitespace in the value matches any separator in the
format, so ``2020/01/22`` satisfies ``YYYY-MM-DD``. Values that do not fit the
token pattern fall back to ``dateutil``.

Supported tokens:

- ``YYYY`` / ``YY``: year
- ``MM`` / ``M``: month, ``DD`` / ``D``: day of month, ``DDD``: day of year
- ``HH`` / ``H``: 24h hour, ``hh`` / ``h``: 12h hour, ``A``: AM/PM
- ``mm`` / ``m``: minute, ``ss`` / ``s``: second, ``SSS``: milliseconds
- ``Z``: UTC offset, ``x``: Unix epoch milliseconds
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Any, Final

from dateutil import parser as dt_parser
from dateutil import tz

from SolrBuilder.utils.log import log

INPUT_FORMATS: Final[dict[str, str]] = {
    "SIMPLE_ISO": "YYYY-MM-DD HH:mm:ss",
    "ORDINAL_DATE": "YYYY-DDD",
    "MILLIS": "x",
    "ISO": "YYYY-MM-DDTHH:mm:ss.SSSZ",
    "CALENDAR_DATE": "YYYY-MM-DD",
}

DEFAULT_INPUT_FORMAT = INPUT_FORMATS["SIMPLE_ISO"]
DEFAULT_OUTPUT_FORMAT = "DD/MM/YYYY"

_TOKEN_RE = re.compile(r"YYYY|YY|DDD|DD|D|MM|M|HH|H|hh|h|mm|m|SSS|ss|s|A|Z|x")
_SEPARATOR_RE = re.compile(r"[^0-9A-Za-z]+")

_TOKEN_PATTERNS: Final[dict[str, str]] = {
    "YYYY": r"\d{4}",
    "YY": r"\d{2}",
    "MM": r"\d{1,2}",
    "M": r"\d{1,2}",
    "DDD": r"\d{1,3}",
    "DD": r"\d{1,2}",
    "D": r"\d{1,2}",
    "HH": r"\d{1,2}",
    "H": r"\d{1,2}",
    "hh": r"\d{1,2}",
    "h": r"\d{1,2}",
    "mm": r"\d{1,2}",
    "m": r"\d{1,2}",
    "SSS": r"\d{1,9}",
    "ss": r"\d{1,2}",
    "s": r"\d{1,2}",
    "A": r"[AP]M",
    "Z": r"Z|[+-]\d{2}:?\d{2}",
    "x": r"-?\d+",
}


def resolve_format(fmt: str) -> str:
    """Resolve an ``INPUT_FORMATS`` key (e.g. ``"ISO"``) to its pattern."""
    return INPUT_FORMATS.get(fmt, fmt)


@lru_cache(maxsize=64)
def _compile_format(fmt: str) -> tuple[re.Pattern[str], tuple[str, ...]]:
    parts: list[str] = []
    tokens: list[str] = []
    pos = 0
    for match in _TOKEN_RE.finditer(fmt):
        parts.append(_literal_pattern(fmt[pos : match.start()]))
        token = match.group(0)
        parts.append(f"({_TOKEN_PATTERNS[token]})")
        tokens.append(token)
        pos = match.end()
    parts.append(_literal_pattern(fmt[pos:]))
    return re.compile("".join(parts), re.IGNORECASE), tuple(tokens)


def _literal_pattern(literal: str) -> str:
    out: list[str] = []
    pos = 0
    for sep in _SEPARATOR_RE.finditer(literal):
        out.append(re.escape(literal[pos : sep.start()]))
        out.append(r"[^0-9A-Za-z]+")
        pos = sep.end()
    out.append(re.escape(literal[pos:]))
    return "".join(out)


def _parse_offset(raw: str) -> tzinfo:
    if raw.upper() == "Z":
        return tz.UTC
    sign = -1 if raw[0] == "-" else 1
    digits = raw[1:].replace(":", "")
    seconds = sign * (int(digits[:2]) * 3600 + int(digits[2:]) * 60)
    return tz.tzoffset(None, seconds)


def _from_epoch_millis(millis: float) -> datetime:
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


def _build_datetime(values: dict[str, str]) -> datetime:
    if "x" in values:
        return _from_epoch_millis(int(values["x"]))

    if "YYYY" in values:
        year = int(values["YYYY"])
    elif "YY" in values:
        short = int(values["YY"])
        year = 2000 + short if short < 69 else 1900 + short
    else:
        year = 1970

    month = int(values.get("MM") or values.get("M") or 1)
    day = int(values.get("DD") or values.get("D") or 1)

    hour = int(values.get("HH") or values.get("H") or 0)
    if "hh" in values or "h" in values:
        hour = int(values.get("hh") or values.get("h")) % 12
        if values.get("A", "").upper() == "PM":
            hour += 12

    minute = int(values.get("mm") or values.get("m") or 0)
    second = int(values.get("ss") or values.get("s") or 0)
    fraction = values.get("SSS", "")
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    zone = _parse_offset(values["Z"]) if "Z" in values else None

    if "DDD" in values:
        base = datetime(year, 1, 1, hour, minute, second, microsecond, tzinfo=zone)
        return base + timedelta(days=int(values["DDD"]) - 1)
    return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=zone)


def parse_date(value: Any, input_format: str = DEFAULT_INPUT_FORMAT) -> datetime | None:
    """Parse a date value using a moment-style input format.

    Args:
        value: Date string, epoch milliseconds, or a ``datetime``.
        input_format: Token pattern or an ``INPUT_FORMATS`` key.

    Returns:
        Parsed datetime, or None when the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return _from_epoch_millis(value)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    pattern, tokens = _compile_format(resolve_format(input_format))
    match = pattern.fullmatch(text)
    if match is not None:
        try:
            return _build_datetime(dict(zip(tokens, match.groups())))
        except (OverflowError, ValueError) as e:
            log.debug("Date out of range: value=%s format=%s error=%s", text, input_format, e)
            return None

    try:
        return dt_parser.parse(text)
    except (OverflowError, ValueError):
        return None


def _render_token(token: str, dt: datetime) -> str:
    if token == "YYYY":
        return f"{dt.year:04d}"
    if token == "YY":
        return f"{dt.year % 100:02d}"
    if token == "MM":
        return f"{dt.month:02d}"
    if token == "M":
        return str(dt.month)
    if token == "DDD":
        return str(dt.timetuple().tm_yday)
    if token == "DD":
        return f"{dt.day:02d}"
    if token == "D":
        return str(dt.day)
    if token == "HH":
        return f"{dt.hour:02d}"
    if token == "H":
        return str(dt.hour)
    if token in ("hh", "h"):
        hour = dt.hour % 12 or 12
        return f"{hour:02d}" if token == "hh" else str(hour)
    if token == "mm":
        return f"{dt.minute:02d}"
    if token == "m":
        return str(dt.minute)
    if token == "ss":
        return f"{dt.second:02d}"
    if token == "s":
        return str(dt.second)
    if token == "SSS":
        return f"{dt.microsecond // 1000:03d}"
    if token == "A":
        return "PM" if dt.hour >= 12 else "AM"
    if token == "Z":
        offset = dt.utcoffset() or timedelta(0)
        total = int(offset.total_seconds())
        sign = "-" if total < 0 else "+"
        hours, rem = divmod(abs(total), 3600)
        return f"{sign}{hours:02d}:{rem // 60:02d}"
    # x
    aware = dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)
    return str(int(aware.timestamp() * 1000))


def format_date(dt: datetime, output_format: str = DEFAULT_OUTPUT_FORMAT) -> str:
    """Render a datetime with a moment-style output format."""
    return _TOKEN_RE.sub(lambda m: _render_token(m.group(0), dt), resolve_format(output_format))


def format_custom_date(
    value: Any,
    output_format: str = DEFAULT_OUTPUT_FORMAT,
    input_format: str = DEFAULT_INPUT_FORMAT,
    output_timezone: str | None = None,
    input_timezone: str | None = None,
) -> str:
    """Parse ``value`` with ``input_format`` and re-render it with ``output_format``.

    Naive values are read as wall time in ``input_timezone`` when given,
    otherwise in ``output_timezone``. Aware values are converted to
    ``output_timezone``.

    Args:
        value: Date string, epoch milliseconds, or datetime.
        output_format: Desired moment-style output pattern.
        input_format: Pattern used to parse string input.
        output_timezone: IANA zone name (or ``UTC``) of the rendered value.
        input_timezone: Zone assumed for naive input.

    Returns:
        The formatted date, or the input unchanged when it cannot be parsed.
    """
    parsed = parse_date(value, input_format)
    if parsed is None:
        log.debug("Unparseable date left unchanged: value=%r format=%s", value, input_format)
        return value if isinstance(value, str) else str(value)

    if output_timezone:
        out_zone = tz.gettz(output_timezone)
        if out_zone is None:
            log.warning("Unknown output timezone ignored: %s", output_timezone)
        else:
            if parsed.tzinfo is None:
                in_zone = tz.gettz(input_timezone) if input_timezone else None
                parsed = parsed.replace(tzinfo=in_zone or out_zone)
            parsed = parsed.astimezone(out_zone)

    return format_date(parsed, output_format)

