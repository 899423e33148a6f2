import datetime

from shamsi.civil_date import CivilDate
from shamsi.exceptions import InvalidArgument
from shamsi.persian.leap_year_rule import LeapYearRule
from shamsi.persian_date import PersianDate


def persian_to_jd(year, month, day):
    """
    Determine Julian day from Persian date
    """
    return PersianDate(year, month, day).to_jdn()


def jd_to_persian(jd):
    """
    Calculate Persian date from Julian day
    """
    p = PersianDate(jdn=jd)

    return (p.year, p.month, p.day_of_month)


def civil_to_jd(year, month, day):
    """
    Determine Julian day from Civil date
    """
    return CivilDate(year, month, day).to_jdn()


def jd_to_civil(jd):
    """
    Calculate Civil date from Julian day
    """
    c = CivilDate(jdn=jd)

    return (c.year, c.month, c.day_of_month)


def to_persian(value: datetime.date) -> PersianDate:
    """
    Persian date of a Gregorian ``date`` or ``datetime``; the time of day is ignored.

    Raises ``InvalidArgument`` for instants before 1 Farvardin 1 AP (622-03-21).
    """
    return PersianDate.from_gregorian(value)


def to_gregorian(year, month, day, hour=0, minute=0, second=0, microsecond=0) -> datetime.datetime:
    """
    Gregorian instant of a Persian date and an optional time of day.
    """
    civil = PersianDate(year, month, day).to_gregorian()
    try:
        return datetime.datetime.combine(civil, datetime.time(hour, minute, second, microsecond))
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"Invalid time of day {hour}:{minute}:{second}.{microsecond}: {exc}") from exc


def get_today_persian_date():
    return to_persian(datetime.date.today())


def persian_year(value):
    return to_persian(value).year


def persian_month(value):
    return to_persian(value).month


def persian_day(value):
    return to_persian(value).day_of_month


def persian_day_of_week(value):
    """0 is Saturday, 6 is Friday."""
    return to_persian(value).day_of_week


def persian_day_of_year(value):
    return to_persian(value).day_of_year


def is_persian_leap_year(value):
    return LeapYearRule.is_leap(persian_year(value))


def persian_month_days(value):
    return to_persian(value).month_length
