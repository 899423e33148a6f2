"""
Date arithmetic in Persian calendar terms.

Every function takes a Gregorian ``datetime.date`` or ``datetime.datetime``
and returns a new value of the same type; the time of day is kept unless the
function says otherwise.
"""
import datetime
from typing import NamedTuple

from shamsi.calendar_utils import to_persian
from shamsi.exceptions import InvalidArgument, InvalidState
from shamsi.persian_date import PersianDate


class PersianDateRange(NamedTuple):
    start: datetime.date
    end: datetime.date

    def contains(self, value) -> bool:
        return is_between(value, self.start, self.end)


def _with_persian_date(value, persian: PersianDate):
    civil = persian.to_gregorian()
    return value.replace(year=civil.year, month=civil.month, day=civil.day)


def add_days(value, days: int):
    try:
        return value + datetime.timedelta(days=days)
    except OverflowError as exc:
        raise InvalidArgument(f"Adding {days} days to {value} leaves the supported range") from exc


def add_years(value, years: int):
    """
    Adds Persian years. 30 Esfand of a leap year becomes 29 Esfand when the
    target year is not leap.
    """
    return _with_persian_date(value, to_persian(value).years_later(years))


def add_months(value, months: int):
    """
    Adds Persian months, clamping the day to the target month's length.

    >>> add_months(datetime.date(2024, 3, 20), -1)  # 1403/01/01 -> 1402/12/01
    datetime.date(2024, 2, 20)
    """
    return _with_persian_date(value, to_persian(value).months_later(months))


def week_of_month(value) -> int:
    return (to_persian(value).day_of_month - 1) // 7 + 1


def month_range(value) -> PersianDateRange:
    """
    First and last day of the Persian month containing ``value``, both at midnight.
    """
    persian = to_persian(value)
    start = _with_persian_date(value, PersianDate(persian.year, persian.month, 1))
    if isinstance(start, datetime.datetime):
        start = start.replace(hour=0, minute=0, second=0, microsecond=0)
    end = add_days(add_months(start, 1), -1)
    if end < start:
        raise InvalidState(f"Month range of {value} ends before it starts: {start} > {end}")
    return PersianDateRange(start, end)


def days_between(first, second) -> int:
    """
    Whole days from ``first`` to ``second``, truncated toward zero, so that
    ``days_between(a, b) == -days_between(b, a)``.
    """
    delta = second - first
    if delta.days < 0 and (delta.seconds or delta.microseconds):
        return delta.days + 1
    return delta.days


def is_between(value, start, end) -> bool:
    return start <= value <= end


def months_between(first, second) -> int:
    """Persian month distance, ignoring the day of month."""
    return to_persian(first).months_distance_to(to_persian(second))
