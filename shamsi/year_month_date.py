from abc import ABC, abstractmethod

from shamsi.util.twelve_months_year import TwelveMonthsYear


class YearMonthDate(ABC):
    """
    A date in a calendar whose years are made of twelve numbered months.
    """

    @abstractmethod
    def month_start_of_months_distance(self, months_distance: int):
        pass

    @abstractmethod
    def months_distance_to(self, date):
        pass

    @classmethod
    @abstractmethod
    def days_in_month(cls, year: int, month: int) -> int:
        pass

    def months_later(self, months_distance: int):
        """
        Same day of month, ``months_distance`` months away. A day that does
        not exist in the target month is clamped to the month's last day.
        """
        year, month = TwelveMonthsYear.shift_month(self.year, self.month, months_distance)
        day = min(self.day_of_month, self.days_in_month(year, month))
        return type(self)(year, month, day)

    def years_later(self, years: int):
        year = self.year + years
        day = min(self.day_of_month, self.days_in_month(year, self.month))
        return type(self)(year, self.month, day)
