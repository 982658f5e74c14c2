import pytest

from tododesk.dates import days_in_month, is_leap, is_valid_date


@pytest.mark.parametrize("year", [2000, 2024, 1600, 2400])
def test_leap_years(year):
    assert is_leap(year) is True


@pytest.mark.parametrize("year", [1900, 2023, 2100, 2025])
def test_common_years(year):
    assert is_leap(year) is False


def test_february_length_follows_leap_rule():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2025, 2) == 28
    assert days_in_month(1900, 2) == 28


@pytest.mark.parametrize("month", [1, 3, 5, 7, 8, 10, 12])
def test_long_months(month):
    assert days_in_month(2025, month) == 31


@pytest.mark.parametrize("month", [4, 6, 9, 11])
def test_short_months(month):
    assert days_in_month(2025, month) == 30


@pytest.mark.parametrize("month", [0, 13, -1])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(ValueError):
        days_in_month(2025, month)


@pytest.mark.parametrize(
    "text", ["2025/04/20", "2025/01/31", "2024/12/01", "0001/06/30"]
)
def test_valid_dates(text):
    assert is_valid_date(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "2025/4/20",
        "2025-04-20",
        "2025/04/2",
        "2025/04/200",
        "2025/13/01",
        "2025/00/10",
        "2025/04/00",
        "2025/04/31",
        "2025/06/31",
        "2025/11/31",
        "2025/02/31",
        "2025/04/32",
        "abcd/ef/gh",
        "",
        "none",
    ],
)
def test_invalid_dates(text):
    assert is_valid_date(text) is False


def test_separators_must_be_slashes():
    assert is_valid_date("2025.04.20") is False
    assert is_valid_date("2025/04.20") is False