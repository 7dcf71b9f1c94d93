"""格式化函数测试"""
import pytest

from utils.formatters import fmt_break_even, fmt_currency, fmt_percentage, fmt_time_period


class TestCurrency:
    @pytest.mark.parametrize("value,expected", [
        (1234567.891, "$1,234,567.89"),
        (0, "$0.00"),
        (2528.2719, "$2,528.27"),
        (-1234, "-$1,234.00"),
        (-0.001, "$0.00"),
    ])
    def test_format(self, value, expected):
        assert fmt_currency(value) == expected


class TestPercentage:
    def test_three_decimals(self):
        assert fmt_percentage(6.5) == "6.500%"
        assert fmt_percentage(0) == "0.000%"


class TestTimePeriod:
    @pytest.mark.parametrize("months,expected", [
        (0, "0 months"),
        (-5, "0 months"),
        (1, "1 month"),
        (11, "11 months"),
        (12, "1 year"),
        (24, "2 years"),
        (13, "1 year, 1 month"),
        (62, "5 years, 2 months"),
    ])
    def test_format(self, months, expected):
        assert fmt_time_period(months) == expected


class TestBreakEven:
    def test_never(self):
        assert fmt_break_even(999) == "Never"

    def test_months(self):
        assert fmt_break_even(11) == "11 months"
        assert fmt_break_even(30) == "2 years, 6 months"

    def test_long_break_even_is_not_never(self):
        assert fmt_break_even(1000) == "83 years, 4 months"
