# This project was developed with assistance from AI tools.
"""Tests for date arithmetic and display helpers."""

from datetime import date, datetime

import pytest

from mortgage_api.services.dates import add_months, to_date_string
from mortgage_api.services.formatting import (
    calculate_dti,
    calculate_ltv,
    format_currency,
    format_percentage,
)


class TestAddMonths:
    def test_simple(self):
        assert add_months(date(2025, 3, 10), 1) == date(2025, 4, 10)

    def test_year_rollover(self):
        assert add_months(date(2025, 11, 15), 3) == date(2026, 2, 15)

    def test_clamps_to_month_end(self):
        assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)
        assert add_months(date(2025, 3, 31), 1) == date(2025, 4, 30)

    def test_leap_february(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_clamping_does_not_carry_forward(self):
        assert add_months(date(2025, 1, 31), 2) == date(2025, 3, 31)

    def test_many_months(self):
        assert add_months(date(2025, 1, 15), 360) == date(2055, 1, 15)

    def test_negative(self):
        assert add_months(date(2025, 3, 31), -1) == date(2025, 2, 28)


def test_to_date_string():
    assert to_date_string(date(2025, 2, 5)) == "2025-02-05"
    assert to_date_string(datetime(2025, 2, 5, 23, 59)) == "2025-02-05"


class TestFormatting:
    @pytest.mark.parametrize(
        "amount,expected",
        [
            (1896.2041, "$1,896.20"),
            (0, "$0.00"),
            (1234567.891, "$1,234,567.89"),
            (-42.5, "-$42.50"),
        ],
    )
    def test_currency(self, amount, expected):
        assert format_currency(amount) == expected

    def test_percentage(self):
        assert format_percentage(6.5) == "6.500%"
        assert format_percentage(0.12345) == "0.123%"


class TestRatios:
    def test_ltv(self):
        assert calculate_ltv(300000, 360000) == pytest.approx(83.3333, rel=1e-4)

    def test_ltv_without_price(self):
        assert calculate_ltv(0, 0) == 0.0

    def test_dti(self):
        assert calculate_dti(2000, 8000) == 25.0

    def test_dti_without_income(self):
        assert calculate_dti(500, 0) == 0.0
