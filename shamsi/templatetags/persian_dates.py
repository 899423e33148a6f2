import datetime
import logging

from django import template

from shamsi import digits
from shamsi.calendar_utils import to_persian as _to_persian_date
from shamsi.conf import get_setting
from shamsi.constants import PY_TO_PERSIAN_WDAY, day_name, month_name
from shamsi.exceptions import PersianDateError
from shamsi.formatting import to_persian_date_text, to_persian_string

logger = logging.getLogger(__name__)

register = template.Library()


def _localize_digits(text):
    return digits.to_persian_digits(text) if get_setting('USE_PERSIAN_DIGITS') else text


@register.filter
def to_persian(value, fmt=None):
    """
    Convert a Python datetime/date to a Persian-formatted string.
    Usage in template: {{ some_datetime|to_persian:"yyyy/MM/dd" }}
    """
    if not value:
        return ""
    if not isinstance(value, datetime.date):
        return value
    if not fmt:
        fmt = get_setting('DATETIME_FORMAT' if isinstance(value, datetime.datetime) else 'DATE_FORMAT')
    try:
        return _localize_digits(to_persian_string(value, fmt))
    except PersianDateError:
        logger.debug("Cannot render %r as a Persian date", value, exc_info=True)
        return value  # fallback to original


@register.filter
def persian_text(value):
    """{{ some_date|persian_text }} -> 'یک‌شنبه 16 اردیبهشت 1403'"""
    if not value:
        return ""
    if not isinstance(value, datetime.date):
        return value
    try:
        return _localize_digits(to_persian_date_text(value))
    except PersianDateError:
        logger.debug("Cannot render %r as Persian text", value, exc_info=True)
        return value


@register.filter
def persian_month_name(value, in_english=False):
    """
    Accepts a date or a month number (1-12).
    """
    try:
        month = _to_persian_date(value).month if isinstance(value, datetime.date) else int(value)
        return month_name(month - 1, bool(in_english))
    except (TypeError, ValueError):
        logger.debug("Cannot resolve a Persian month from %r", value, exc_info=True)
        return ""


@register.filter
def persian_digits(value):
    if value is None:
        return ""
    return digits.to_persian_digits(str(value))


@register.filter
def english_digits(value):
    if value is None:
        return ""
    return digits.to_english_digits(str(value))


@register.simple_tag
def persian_now():
    now = datetime.datetime.now()
    dayname = day_name(PY_TO_PERSIAN_WDAY[now.weekday()])
    date_str = to_persian_string(now, 'yyyy-MM-dd')  # always ASCII digits

    # return both pieces in a dict
    return {
        'dayname': dayname,
        'date_str': date_str,
    }
