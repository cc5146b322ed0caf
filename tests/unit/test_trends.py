"""Unit tests for trend detection"""

import pytest
from wealthwatch.domain.trends import classify_trend, percent_change


def test_percent_change():
    assert percent_change(300, 200) == 50
    assert percent_change(100, 200) == -50


def test_percent_change_zero_baseline():
    """No prior spending counts as a 100% rise, or no change when still zero"""
    assert percent_change(250, 0) == 100
    assert percent_change(0, 0) == 0


@pytest.mark.parametrize(
    "change, expected",
    [
        (0, "stable"),
        (4.99, "stable"),
        (-4.99, "stable"),
        (5, "increasing"),
        (-5, "decreasing"),
        (50, "increasing"),
        (-100, "decreasing"),
    ],
)
def test_classify_trend_deadband(change, expected):
    assert classify_trend(change) == expected
