import datetime

from shamsi.abstract_date import AbstractDate
from shamsi.exceptions import InvalidArgument


class CivilDate(AbstractDate):
    """
    Proleptic Gregorian date, the calendar of ``datetime.date``.
    """
    # date.toordinal() + ordinal_jdn_offset == Julian Day Number
    ordinal_jdn_offset = 1721425
    min_jdn = datetime.date.min.toordinal() + ordinal_jdn_offset
    max_jdn = datetime.date.max.toordinal() + ordinal_jdn_offset

    def __init__(self, year=None, month=None, day_of_month=None, jdn=None, date=None):
        super().__init__(year=year, month=month, day_of_month=day_of_month, jdn=jdn, date=date)

    @classmethod
    def from_date(cls, value: datetime.date):
        return cls(value.year, value.month, value.day)

    def to_date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day_of_month)

    def validate(self, year, month, day_of_month):
        try:
            datetime.date(year, month, day_of_month)
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"Invalid Gregorian date {year}/{month}/{day_of_month}: {exc}") from exc

    # Converters
    def to_jdn(self):
        a = (14 - self.month) // 12
        y = self.year + 4800 - a
        m = self.month + 12 * a - 3
        return (
            self.day_of_month
            + (153 * m + 2) // 5
            + 365 * y
            + y // 4
            - y // 100
            + y // 400
            - 32045
        )

    def from_jdn(self, jdn):
        if not CivilDate.min_jdn <= jdn <= CivilDate.max_jdn:
            raise InvalidArgument(f"Julian day {jdn} is outside the supported Gregorian range")
        a = jdn + 32044
        b = (4 * a + 3) // 146097
        c = a - (146097 * b) // 4
        d = (4 * c + 3) // 1461
        e = c - (1461 * d) // 4
        m = (5 * e + 2) // 153
        day = e - (153 * m + 2) // 5 + 1
        month = m + 3 - 12 * (m // 10)
        year = 100 * b + d - 4800 + m // 10
        return [year, month, day]
