class AbstractDate:
    """
    Abstract class representing a date as (year, month, day_of_month).

    A date can be built from its three components, from a Julian Day Number
    (``jdn``) or from another ``AbstractDate`` of any calendar (``date``).
    Instances are values: they are never changed after construction.
    """

    def __init__(self, year=None, month=None, day_of_month=None, jdn=None, date=None):
        if jdn is not None:
            result = self.from_jdn(jdn)
        elif date is not None:
            result = self.from_jdn(date.to_jdn())
        else:
            result = (year, month, day_of_month)
            self.validate(*result)
        self._year, self._month, self._day_of_month = result

    @property
    def year(self):
        return self._year

    @property
    def month(self):
        return self._month

    @property
    def day_of_month(self):
        return self._day_of_month

    def validate(self, year, month, day_of_month):
        pass

    def to_jdn(self):
        raise NotImplementedError("Subclasses must implement this method")

    def from_jdn(self, jdn):
        raise NotImplementedError("Subclasses must implement this method")

    def __iter__(self):
        return iter((self._year, self._month, self._day_of_month))

    def __eq__(self, other):
        if other is None or not isinstance(other, AbstractDate):
            return NotImplemented
        return type(self) is type(other) and tuple(self) == tuple(other)

    def __lt__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return tuple(self) < tuple(other)

    def __le__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return tuple(self) <= tuple(other)

    def __hash__(self):
        result = self._year
        result = 31 * result + self._month
        result = 31 * result + self._day_of_month
        return result

    def __repr__(self):
        return f"{type(self).__name__}({self._year}, {self._month}, {self._day_of_month})"
