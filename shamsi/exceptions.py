class PersianDateError(ValueError):
    """
    Base class for every error raised by the calendar library.
    """


class InvalidArgument(PersianDateError):
    """
    A year, month, day or index is outside its valid range.
    """


class FormatError(PersianDateError):
    """
    Text could not be parsed into a Persian date.
    """


class InvalidState(PersianDateError):
    """
    An internal calendar invariant was broken. This is a bug, not bad input.
    """
