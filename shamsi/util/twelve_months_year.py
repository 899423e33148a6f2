from shamsi.abstract_date import AbstractDate


class TwelveMonthsYear:
    @staticmethod
    def shift_month(year: int, month: int, months_distance: int):
        """
        Moves a (year, month) pair by a number of months.

        Floored division keeps negative distances correct: month 1 moved by -1
        lands on month 12 of the previous year.

        :param year: The base year.
        :param month: The base month, 1-based.
        :param months_distance: The number of months to move, may be negative.
        :return: The new (year, month) pair.
        """
        year_delta, month_index = divmod(month - 1 + months_distance, 12)
        return year + year_delta, month_index + 1

    @staticmethod
    def month_start_of_months_distance(base_date: AbstractDate, months_distance: int, create_date):
        """
        Returns the date at the start of the month after a given number of months from the base date.

        :param base_date: The base date to start from.
        :param months_distance: The number of months to move.
        :param create_date: A function to create a date object.
        :return: The new date at the start of the calculated month.
        """
        year, month = TwelveMonthsYear.shift_month(base_date.year, base_date.month, months_distance)
        return create_date(year, month, 1)

    @staticmethod
    def months_distance_to(base_date: AbstractDate, to_date: AbstractDate) -> int:
        """
        Calculates the number of months between the base date and the target date.

        :param base_date: The starting date.
        :param to_date: The target date.
        :return: The number of months between the two dates.
        """
        return ((to_date.year - base_date.year) * 12) + to_date.month - base_date.month
