from bisect import bisect_right

from shamsi.exceptions import InvalidArgument


class LeapYearRule:
    """
    33-year intercalation cycle of the Persian calendar.

    A year is leap when ``year % 33`` is one of ``leap_remainders``. This
    reproduces the official leap years from 1206 to 1498 AP.
    """
    cycle_years = 33
    leap_remainders = (1, 5, 9, 13, 17, 22, 26, 30)
    days_in_cycle = 33 * 365 + 8  # 12053

    # Months 1-6 have 31 days, 7-11 have 30 and Esfand has 29 (30 in leap years)
    month_lengths = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)

    @staticmethod
    def check_year(year: int):
        if year < 1:
            raise InvalidArgument(f"Persian year must be >= 1, got {year}")

    @staticmethod
    def check_month(month: int):
        if not 1 <= month <= 12:
            raise InvalidArgument(f"Persian month must be in 1..12, got {month}")

    @staticmethod
    def is_leap(year: int) -> bool:
        LeapYearRule.check_year(year)
        return year % LeapYearRule.cycle_years in LeapYearRule.leap_remainders

    @staticmethod
    def month_length(year: int, month: int) -> int:
        LeapYearRule.check_year(year)
        LeapYearRule.check_month(month)
        if month == 12 and LeapYearRule.is_leap(year):
            return 30
        return LeapYearRule.month_lengths[month - 1]

    @staticmethod
    def days_in_year(year: int) -> int:
        return 366 if LeapYearRule.is_leap(year) else 365

    @staticmethod
    def leap_years_before(year: int) -> int:
        """
        Counts the leap years in [1, year).

        :param year: Persian year, >= 1.
        :return: Number of leap years strictly before ``year``.
        """
        LeapYearRule.check_year(year)
        cycles, remainder = divmod(year - 1, LeapYearRule.cycle_years)
        return cycles * len(LeapYearRule.leap_remainders) + bisect_right(LeapYearRule.leap_remainders, remainder)
