_DIGITS = "0123456789"
_PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
_ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

_TO_PERSIAN = str.maketrans(_DIGITS, _PERSIAN_DIGITS)
_TO_ENGLISH = str.maketrans(_PERSIAN_DIGITS + _ARABIC_INDIC_DIGITS, _DIGITS * 2)


def to_persian_digits(value):
    """
    Replaces ASCII digits with Persian digit glyphs; other characters are kept.
    """
    if not value:
        return value
    return str(value).translate(_TO_PERSIAN)


def to_english_digits(value):
    """
    Replaces Persian (and Arabic-Indic) digit glyphs with ASCII digits.
    """
    if not value:
        return value
    return str(value).translate(_TO_ENGLISH)
