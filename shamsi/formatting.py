"""
Rendering and parsing of Persian dates as text.

Patterns use the familiar ``yyyy/MM/dd HH:mm:ss`` tokens:

======  ==========================================
yyyy    4-digit year
yy      2-digit year
MMMM    month name (Persian script)
MM      2-digit month
M       month without padding
dddd    day name (Persian script)
dd      2-digit day of month
d       day of month without padding
HH      2-digit hour (24h)
H       hour without padding
mm      2-digit minute
ss      2-digit second
'...'   literal text
======  ==========================================

Any other character is copied as is. Numeric fields are rendered by Django's
``dateformat`` over the already-converted Persian fields.
"""
import re
from typing import NamedTuple, Optional

from django.utils import dateformat

from shamsi.calendar_utils import to_gregorian, to_persian
from shamsi.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_DATETIME_FORMAT,
    DEFAULT_DATETIME_SECONDS_FORMAT,
    day_name,
    month_name,
)
from shamsi.digits import to_english_digits
from shamsi.exceptions import FormatError

_TOKEN_RE = re.compile(r"'[^']*'|yyyy|yy|MMMM|MM|M|dddd|dd|d|HH|H|mm|ss|.", re.DOTALL)
_SEPARATORS_RE = re.compile(r"[/-]")

# pattern token -> django dateformat character
_DJANGO_FORMAT_CHARS = {
    'yyyy': 'Y',
    'yy': 'y',
    'MM': 'm',
    'M': 'n',
    'dd': 'd',
    'd': 'j',
    'HH': 'H',
    'H': 'G',
    'mm': 'i',
    'ss': 's',
}


class PersianDateTimeFields(NamedTuple):
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    weekday: Optional[int] = None  # 0 = Saturday

    @classmethod
    def from_gregorian(cls, value):
        persian = to_persian(value)
        return cls(
            persian.year,
            persian.month,
            persian.day_of_month,
            getattr(value, 'hour', 0),
            getattr(value, 'minute', 0),
            getattr(value, 'second', 0),
            persian.day_of_week,
        )


def render(fields: PersianDateTimeFields, pattern: str = DEFAULT_DATE_FORMAT) -> str:
    if not isinstance(pattern, str):
        raise FormatError(f"Format pattern must be a string, got {pattern!r}")

    formatter = dateformat.DateFormat(fields)
    pieces = []
    for token in _TOKEN_RE.findall(pattern):
        if token in _DJANGO_FORMAT_CHARS:
            pieces.append(formatter.format(_DJANGO_FORMAT_CHARS[token]))
        elif token == 'MMMM':
            pieces.append(month_name(fields.month - 1))
        elif token == 'dddd':
            if fields.weekday is None:
                raise FormatError("Pattern uses 'dddd' but the fields carry no weekday")
            pieces.append(day_name(fields.weekday))
        elif len(token) > 1 and token.startswith("'"):
            pieces.append(token[1:-1])
        else:
            pieces.append(token)
    return ''.join(pieces)


def parse(text: str):
    """
    Splits ``yyyy/MM/dd`` or ``yyyy-MM-dd`` text into (year, month, day).

    Persian digits are accepted. Components after the third are ignored.
    """
    if not isinstance(text, str) or not text.strip():
        raise FormatError(f"Invalid Persian date {text!r}. Use yyyy/MM/dd or yyyy-MM-dd")

    parts = _SEPARATORS_RE.split(to_english_digits(text.strip()))
    if len(parts) < 3:
        raise FormatError(f"Invalid Persian date format {text!r}. Use yyyy/MM/dd or yyyy-MM-dd")

    try:
        year, month, day = (int(part) for part in parts[:3])
    except ValueError as exc:
        raise FormatError(f"Error parsing Persian date {text!r}: {exc}") from exc
    return year, month, day


def to_persian_string(value, pattern: str = '') -> str:
    """
    Renders a Gregorian date or datetime as Persian text; ``yyyy/MM/dd`` when no pattern is given.
    """
    return render(PersianDateTimeFields.from_gregorian(value), pattern or DEFAULT_DATE_FORMAT)


def to_persian_with_time(value, include_seconds: bool = False) -> str:
    pattern = DEFAULT_DATETIME_SECONDS_FORMAT if include_seconds else DEFAULT_DATETIME_FORMAT
    return to_persian_string(value, pattern)


def to_persian_date_text(value) -> str:
    """e.g. ``'یک‌شنبه 16 اردیبهشت 1403'``"""
    return to_persian_string(value, 'dddd d MMMM yyyy')


def parse_persian_date(text: str):
    """Gregorian ``datetime`` at midnight of the Persian date in ``text``."""
    return to_gregorian(*parse(text))
