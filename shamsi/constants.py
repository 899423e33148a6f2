from shamsi.exceptions import InvalidArgument

# Persian month names, in calendar order
PERSIAN_MONTHS = (
    'فروردین', 'اردیبهشت', 'خرداد', 'تیر', 'مرداد', 'شهریور',
    'مهر', 'آبان', 'آذر', 'دی', 'بهمن', 'اسفند',
)

PERSIAN_MONTHS_EN = (
    'Farvardin', 'Ordibehesht', 'Khordad', 'Tir', 'Mordad', 'Shahrivar',
    'Mehr', 'Aban', 'Azar', 'Dey', 'Bahman', 'Esfand',
)

# Persian week starts on Saturday: 0 = Sat ... 6 = Fri
PERSIAN_WDAYS = (
    'شنبه', 'یک‌شنبه', 'دوشنبه', 'سه‌شنبه', 'چهارشنبه', 'پنج‌شنبه', 'جمعه',
)

# python date.weekday() (Mon=0 ... Sun=6) -> Persian weekday index
PY_TO_PERSIAN_WDAY = {
    0: 2,  # Mon
    1: 3,  # Tue
    2: 4,  # Wed
    3: 5,  # Thu
    4: 6,  # Fri
    5: 0,  # Sat
    6: 1,  # Sun
}

DEFAULT_DATE_FORMAT = 'yyyy/MM/dd'
DEFAULT_DATETIME_FORMAT = 'yyyy/MM/dd HH:mm'
DEFAULT_DATETIME_SECONDS_FORMAT = 'yyyy/MM/dd HH:mm:ss'


def month_name(index: int, in_english: bool = False) -> str:
    """Month name by zero-based index (0 = Farvardin)."""
    if not 0 <= index < 12:
        raise InvalidArgument(f"Month index must be in 0..11, got {index}")
    return PERSIAN_MONTHS_EN[index] if in_english else PERSIAN_MONTHS[index]


def day_name(weekday: int) -> str:
    """Day name by Persian weekday index (0 = Saturday)."""
    if not 0 <= weekday < 7:
        raise InvalidArgument(f"Weekday index must be in 0..6, got {weekday}")
    return PERSIAN_WDAYS[weekday]
