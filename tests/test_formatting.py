import datetime

import pytest

from shamsi.calendar_utils import to_gregorian, to_persian
from shamsi.exceptions import FormatError, InvalidArgument
from shamsi.formatting import (
    PersianDateTimeFields,
    parse,
    parse_persian_date,
    render,
    to_persian_date_text,
    to_persian_string,
    to_persian_with_time,
)


def test_canonical_scenario():
    value = datetime.date(2024, 5, 5)
    text = to_persian_string(value)
    assert text == "1403/02/16"
    assert parse(text) == (1403, 2, 16)
    assert parse_persian_date(text) == datetime.datetime(2024, 5, 5)


def test_empty_pattern_uses_default():
    assert to_persian_string(datetime.date(2024, 5, 5), '') == "1403/02/16"
    assert render(PersianDateTimeFields(1403, 2, 16)) == "1403/02/16"


def test_with_time():
    value = datetime.datetime(2024, 5, 5, 14, 30, 45)
    assert to_persian_with_time(value) == "1403/02/16 14:30"
    assert to_persian_with_time(value, include_seconds=True) == "1403/02/16 14:30:45"
    assert to_persian_string(value, "yyyy/MM/dd HH:mm:ss") == "1403/02/16 14:30:45"


def test_time_fields_of_a_plain_date_are_zero():
    assert to_persian_with_time(datetime.date(2024, 5, 5), True) == "1403/02/16 00:00:00"


@pytest.mark.parametrize(
    "pattern,expected",
    [
        ("yyyy-MM-dd", "0098-01-05"),
        ("yy/M/d", "98/1/5"),
        ("H:mm", "7:05"),
        ("HH'h'mm", "07h05"),
        ("dd MMMM yyyy", "05 فروردین 0098"),
        ("'yyyy' yyyy", "yyyy 0098"),
        ("[yyyy]", "[0098]"),
    ],
)
def test_render_tokens(pattern, expected):
    fields = PersianDateTimeFields(98, 1, 5, 7, 5, 9, 0)
    assert render(fields, pattern) == expected


def test_render_day_name_needs_weekday():
    with pytest.raises(FormatError):
        render(PersianDateTimeFields(1403, 2, 16), "dddd")


def test_render_rejects_non_string_pattern():
    with pytest.raises(FormatError):
        render(PersianDateTimeFields(1403, 2, 16), None)


def test_persian_date_text():
    assert to_persian_date_text(datetime.date(2024, 5, 5)) == "یک‌شنبه 16 اردیبهشت 1403"
    assert to_persian_date_text(datetime.date(2025, 3, 21)) == "جمعه 1 فروردین 1404"


def test_fields_from_gregorian():
    fields = PersianDateTimeFields.from_gregorian(datetime.datetime(2024, 5, 5, 8, 9, 10))
    assert fields == PersianDateTimeFields(1403, 2, 16, 8, 9, 10, 1)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1403/02/16", (1403, 2, 16)),
        ("1403-2-16", (1403, 2, 16)),
        ("1403/2-16", (1403, 2, 16)),
        ("۱۴۰۳/۰۲/۱۶", (1403, 2, 16)),
        (" 1403/12/30 ", (1403, 12, 30)),
        ("1403/02/16/99", (1403, 2, 16)),
    ],
)
def test_parse(text, expected):
    assert parse(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "1403/02", "14030216", "1403/aa/16", "1403/02/16 10:20", None, 1403])
def test_parse_rejects_malformed_text(text):
    with pytest.raises(FormatError):
        parse(text)


def test_parse_persian_date_rejects_missing_day():
    with pytest.raises(InvalidArgument):
        parse_persian_date("1404/12/30")
    assert parse_persian_date("1403/12/30") == datetime.datetime(2025, 3, 20)


def test_render_parse_round_trip():
    value = datetime.date(2020, 1, 1)
    while value < datetime.date(2026, 1, 1):
        assert parse_persian_date(to_persian_string(value)).date() == value
        value += datetime.timedelta(days=3)


def test_rendered_date_time_parses_back_to_date():
    value = to_gregorian(1399, 12, 30, 22, 10)
    text = to_persian_with_time(value)
    assert text == "1399/12/30 22:10"
    assert tuple(to_persian(value)) == parse(text.split(' ')[0])
