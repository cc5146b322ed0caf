"""Unit tests for calendar-month windows"""

import pytest
from datetime import date, datetime
from wealthwatch.domain.exceptions import InvalidWindowError
from wealthwatch.utils.date_utils import in_range, month_label, month_window


def test_month_window_current_month():
    window = month_window(1, today=date(2024, 6, 15))
    assert window.start == date(2024, 6, 1)
    assert window.end == date(2024, 6, 30)


def test_month_window_spans_months_back():
    window = month_window(3, today=date(2024, 6, 15))
    assert window.start == date(2024, 4, 1)
    assert window.end == date(2024, 6, 30)


def test_month_window_with_offset_is_previous_period():
    # Previous 6-month window for a 6-month report
    window = month_window(6, offset_months=6, today=date(2024, 6, 15))
    assert window.start == date(2023, 7, 1)
    assert window.end == date(2023, 12, 31)


def test_month_window_crosses_year_boundary():
    window = month_window(2, today=date(2024, 1, 10))
    assert window.start == date(2023, 12, 1)
    assert window.end == date(2024, 1, 31)


def test_month_window_offset_from_month_end_lands_on_shorter_month():
    """March 31 minus one month is February, ending on the leap day"""
    window = month_window(1, offset_months=1, today=date(2024, 3, 31))
    assert window.start == date(2024, 2, 1)
    assert window.end == date(2024, 2, 29)


@pytest.mark.parametrize("months_back, offset", [(0, 0), (-1, 0), (1, -1)])
def test_month_window_rejects_invalid_arguments(months_back, offset):
    with pytest.raises(InvalidWindowError):
        month_window(months_back, offset_months=offset, today=date(2024, 6, 15))


def test_invalid_window_is_value_error():
    with pytest.raises(ValueError):
        month_window(0)


def test_in_range_is_inclusive():
    start, end = date(2024, 6, 1), date(2024, 6, 30)
    assert in_range(date(2024, 6, 1), start, end)
    assert in_range(date(2024, 6, 30), start, end)
    assert not in_range(date(2024, 5, 31), start, end)
    assert not in_range(date(2024, 7, 1), start, end)


def test_in_range_ignores_time_of_day():
    assert in_range(datetime(2024, 6, 30, 23, 59), date(2024, 6, 1), date(2024, 6, 30))


def test_month_label():
    assert month_label(date(2024, 1, 5)) == "Jan 2024"
