import datetime

from shamsi.abstract_date import AbstractDate
from shamsi.civil_date import CivilDate
from shamsi.exceptions import InvalidArgument
from shamsi.persian.cycle_converter import CycleConverter
from shamsi.persian.leap_year_rule import LeapYearRule
from shamsi.util.twelve_months_year import TwelveMonthsYear
from shamsi.year_month_date import YearMonthDate


class PersianDate(AbstractDate, YearMonthDate):
    """
    A date of the Persian (Solar Hijri) calendar.

    >>> PersianDate(date=CivilDate(2024, 5, 5))
    PersianDate(1403, 2, 16)
    """

    def __init__(self, year=None, month=None, day_of_month=None, jdn=None, date=None):
        super().__init__(year=year, month=month, day_of_month=day_of_month, jdn=jdn, date=date)

    @classmethod
    def from_gregorian(cls, value: datetime.date):
        return cls(date=CivilDate.from_date(value))

    def to_gregorian(self) -> datetime.date:
        return CivilDate(jdn=self.to_jdn()).to_date()

    def validate(self, year, month, day_of_month):
        for name, value in (("year", year), ("month", month), ("day", day_of_month)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgument(f"Persian {name} must be an integer, got {value!r}")
        if not 1 <= day_of_month <= LeapYearRule.month_length(year, month):
            raise InvalidArgument(
                f"Persian day must be in 1..{LeapYearRule.month_length(year, month)} "
                f"for {year}/{month:02d}, got {day_of_month}"
            )

    def to_jdn(self):
        return CycleConverter.to_jdn(self.year, self.month, self.day_of_month)

    def from_jdn(self, jdn):
        return CycleConverter.from_jdn(jdn)

    @property
    def day(self):
        return self.day_of_month

    @property
    def day_of_year(self):
        return PersianDate.days_in_previous_months(self.month) + self.day_of_month

    @property
    def day_of_week(self):
        """0 is Saturday, 6 is Friday."""
        return (self.to_jdn() + 2) % 7

    @property
    def is_leap(self):
        return LeapYearRule.is_leap(self.year)

    @property
    def month_length(self):
        return LeapYearRule.month_length(self.year, self.month)

    @classmethod
    def days_in_month(cls, year, month):
        return LeapYearRule.month_length(year, month)

    def month_start_of_months_distance(self, months_distance):
        return TwelveMonthsYear.month_start_of_months_distance(self, months_distance, PersianDate)

    def months_distance_to(self, date):
        return TwelveMonthsYear.months_distance_to(self, date)

    @staticmethod
    def month_from_days_count(days):
        return next(i for i, d in enumerate(PersianDate.days_to_month) if d >= days)

    @staticmethod
    def days_in_previous_months(month):
        return PersianDate.days_to_month[month - 1]

    days_to_month = (0, 31, 62, 93, 124, 155, 186, 216, 246, 276, 306, 336, 366)
