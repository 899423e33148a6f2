from shamsi.arithmetic import (
    PersianDateRange,
    add_days,
    add_months,
    add_years,
    days_between,
    is_between,
    month_range,
    months_between,
    week_of_month,
)
from shamsi.calendar_utils import (
    is_persian_leap_year,
    persian_day,
    persian_day_of_week,
    persian_day_of_year,
    persian_month,
    persian_month_days,
    persian_year,
    to_gregorian,
    to_persian,
)
from shamsi.constants import day_name, month_name
from shamsi.digits import to_english_digits, to_persian_digits
from shamsi.exceptions import FormatError, InvalidArgument, InvalidState, PersianDateError
from shamsi.formatting import (
    PersianDateTimeFields,
    parse,
    parse_persian_date,
    render,
    to_persian_date_text,
    to_persian_string,
    to_persian_with_time,
)
from shamsi.persian.leap_year_rule import LeapYearRule
from shamsi.persian_date import PersianDate

__version__ = '1.0.0'
