from shamsi.exceptions import InvalidArgument, InvalidState
from shamsi.persian.leap_year_rule import LeapYearRule


class CycleConverter:
    """
    Persian date <-> Julian Day Number using the 33-year leap cycle.
    """
    persian_epoch = 1948320  # Jdn of 1 Farvardin 1 AP, proleptic Gregorian 622-03-21

    @staticmethod
    def year_start_jdn(year: int) -> int:
        return CycleConverter.persian_epoch + 365 * (year - 1) + LeapYearRule.leap_years_before(year)

    @staticmethod
    def to_jdn(year: int, month: int, day: int) -> int:
        from shamsi.persian_date import PersianDate
        if not 1 <= day <= LeapYearRule.month_length(year, month):
            raise InvalidArgument(
                f"Persian day must be in 1..{LeapYearRule.month_length(year, month)} "
                f"for {year}/{month:02d}, got {day}"
            )
        return CycleConverter.year_start_jdn(year) + PersianDate.days_in_previous_months(month) + day - 1

    @staticmethod
    def from_jdn(jdn: int):
        from shamsi.persian_date import PersianDate
        if jdn < CycleConverter.persian_epoch:
            raise InvalidArgument(f"Julian day {jdn} is before the Persian epoch")

        # The mean year of the cycle puts the estimate within one year of the answer
        year = (jdn - CycleConverter.persian_epoch) * LeapYearRule.cycle_years // LeapYearRule.days_in_cycle + 1
        while year > 1 and CycleConverter.year_start_jdn(year) > jdn:
            year -= 1
        while CycleConverter.year_start_jdn(year + 1) <= jdn:
            year += 1

        day_of_year = jdn - CycleConverter.year_start_jdn(year) + 1
        if not 1 <= day_of_year <= LeapYearRule.days_in_year(year):
            raise InvalidState(f"Day {day_of_year} does not fit in Persian year {year}")
        month = PersianDate.month_from_days_count(day_of_year)
        day = day_of_year - PersianDate.days_in_previous_months(month)
        return [year, month, day]
