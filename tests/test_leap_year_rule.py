import pytest

from shamsi.exceptions import InvalidArgument
from shamsi.persian.cycle_converter import CycleConverter
from shamsi.persian.leap_year_rule import LeapYearRule

# Published leap years of the official calendar between 1206 and 1498 AP
OFFICIAL_LEAP_YEARS = [
    1210, 1214, 1218, 1222, 1226, 1230, 1234, 1238, 1243, 1247, 1251, 1255, 1259, 1263,
    1267, 1271, 1276, 1280, 1284, 1288, 1292, 1296, 1300, 1304, 1309, 1313, 1317, 1321,
    1325, 1329, 1333, 1337, 1342, 1346, 1350, 1354, 1358, 1362, 1366, 1370, 1375, 1379,
    1383, 1387, 1391, 1395, 1399, 1403, 1408, 1412, 1416, 1420, 1424, 1428, 1432, 1436,
    1441, 1445, 1449, 1453, 1457, 1461, 1465, 1469, 1474, 1478, 1482, 1486, 1490, 1494,
    1498,
]


def test_reference_years():
    assert LeapYearRule.is_leap(1403)
    assert not LeapYearRule.is_leap(1404)
    assert LeapYearRule.month_length(1403, 12) == 30
    assert LeapYearRule.month_length(1404, 12) == 29


def test_matches_official_leap_years():
    computed = [y for y in range(1206, 1499) if LeapYearRule.is_leap(y)]
    assert computed == OFFICIAL_LEAP_YEARS


def test_year_starts_match_official_table():
    # Jdn of 1 Farvardin 1206 from the official table, then 365/366 day steps
    jdn = 2388438
    for year in range(1206, 1499):
        assert CycleConverter.year_start_jdn(year) == jdn
        jdn += 366 if year in OFFICIAL_LEAP_YEARS else 365


@pytest.mark.parametrize("month,length", [(1, 31), (6, 31), (7, 30), (11, 30), (12, 29)])
def test_month_lengths_of_common_year(month, length):
    assert LeapYearRule.month_length(1404, month) == length


def test_leap_iff_esfand_has_30_days():
    for year in range(1, 3001):
        assert LeapYearRule.is_leap(year) == (LeapYearRule.month_length(year, 12) == 30)


def test_month_lengths_sum_to_year_length():
    for year in range(1, 3001):
        total = sum(LeapYearRule.month_length(year, m) for m in range(1, 13))
        assert total == (366 if LeapYearRule.is_leap(year) else 365)
        assert total == LeapYearRule.days_in_year(year)


def test_eight_leap_years_per_cycle():
    for start in (1, 34, 1387, 2971):
        assert sum(LeapYearRule.is_leap(y) for y in range(start, start + 33)) == 8


def test_leap_years_before_counts_preceding_leaps():
    count = 0
    for year in range(1, 2000):
        assert LeapYearRule.leap_years_before(year) == count
        count += LeapYearRule.is_leap(year)


@pytest.mark.parametrize("year", [0, -1, -33])
def test_year_before_one_is_rejected(year):
    with pytest.raises(InvalidArgument):
        LeapYearRule.is_leap(year)
    with pytest.raises(InvalidArgument):
        LeapYearRule.month_length(year, 1)


@pytest.mark.parametrize("month", [0, 13, -1])
def test_month_out_of_range_is_rejected(month):
    with pytest.raises(InvalidArgument):
        LeapYearRule.month_length(1403, month)
