"""
Tests for the price adjustment rules: calculation, rounding, the zero
floor and the ordered validation checks.
"""
import pytest

from pricing_profiles.engine.errors import (
    InvalidAdjustmentValue,
    InvalidBasePrice,
    PercentageOutOfRange,
    PricingValidationError,
    ResultWouldBeNegative,
)
from pricing_profiles.engine.models import AdjustmentIncrement, AdjustmentType, PricingAdjustment
from pricing_profiles.engine.price_calculator import (
    calculate_price,
    format_currency,
    raw_adjusted_price,
    round_price,
    validate_adjustment,
)

INC = AdjustmentIncrement.INCREASE
DEC = AdjustmentIncrement.DECREASE


def fixed(increment, value):
    return PricingAdjustment(AdjustmentType.FIXED, increment, value)


def dynamic(increment, value):
    return PricingAdjustment(AdjustmentType.DYNAMIC, increment, value)


class TestCalculatePrice:

    def test_fixed_increase(self):
        assert calculate_price(100, fixed(INC, 20)) == 120

    def test_fixed_decrease(self):
        assert calculate_price(100, fixed(DEC, 20)) == 80

    def test_fixed_decimal_amounts(self):
        assert calculate_price(100.50, fixed(INC, 15.99)) == pytest.approx(116.49)

    def test_dynamic_increase(self):
        assert calculate_price(100, dynamic(INC, 20)) == 120

    def test_dynamic_decrease(self):
        assert calculate_price(100, dynamic(DEC, 20)) == 80

    def test_dynamic_half_price(self):
        assert calculate_price(200, dynamic(DEC, 50)) == 100

    @pytest.mark.parametrize("price,adjustment,expected", [
        (100, dynamic(INC, 33.333), 133.33),
        (279.06, dynamic(INC, 10), 306.97),
        (215.04, dynamic(DEC, 12.5), 188.16),
    ])
    def test_rounds_to_cents(self, price, adjustment, expected):
        assert calculate_price(price, adjustment) == pytest.approx(expected)

    def test_large_fixed_decrease_floors_at_zero(self):
        assert calculate_price(100, fixed(DEC, 150)) == 0

    def test_full_percentage_decrease_is_zero(self):
        assert calculate_price(100, dynamic(DEC, 100)) == 0

    def test_zero_value_leaves_price_unchanged(self):
        assert calculate_price(245.50, fixed(INC, 0)) == pytest.approx(245.50)

    def test_does_not_validate(self):
        """Out-of-range inputs still produce a (floored) price."""
        assert calculate_price(-100, fixed(INC, 10)) == 0
        assert calculate_price(100, dynamic(INC, 150)) == 250


class TestRounding:

    def test_round_half_up(self):
        assert round_price(0.125) == pytest.approx(0.13)
        assert round_price(2.675000001) == pytest.approx(2.68)

    def test_raw_price_is_not_floored(self):
        assert raw_adjusted_price(100, fixed(DEC, 150)) == -50


class TestValidateAdjustment:

    def test_valid_adjustment(self):
        assert validate_adjustment(100, fixed(INC, 10)) is True

    def test_negative_base_price(self):
        with pytest.raises(InvalidBasePrice, match="Based on price cannot be negative"):
            validate_adjustment(-100, fixed(INC, 10))

    def test_negative_adjustment_value(self):
        with pytest.raises(InvalidAdjustmentValue, match="Adjustment value cannot be negative"):
            validate_adjustment(100, fixed(INC, -10))

    def test_percentage_over_100(self):
        with pytest.raises(PercentageOutOfRange, match="Percentage adjustment cannot exceed 100%"):
            validate_adjustment(100, dynamic(INC, 150))

    def test_percentage_check_ignores_increment(self):
        with pytest.raises(PercentageOutOfRange):
            validate_adjustment(100, dynamic(DEC, 100.01))

    def test_fixed_over_100_is_allowed(self):
        assert validate_adjustment(100, fixed(INC, 250)) is True

    def test_checks_run_in_order(self):
        with pytest.raises(InvalidBasePrice):
            validate_adjustment(-1, dynamic(INC, -500))
        with pytest.raises(InvalidAdjustmentValue):
            validate_adjustment(1, dynamic(INC, -500))

    def test_decrease_below_zero_is_rejected(self):
        with pytest.raises(ResultWouldBeNegative, match="negative price"):
            validate_adjustment(100, fixed(DEC, 150))

    def test_decrease_to_exactly_zero_is_allowed(self):
        assert validate_adjustment(100, fixed(DEC, 100)) is True
        assert validate_adjustment(100, dynamic(DEC, 100)) is True

    def test_errors_share_a_base_class(self):
        with pytest.raises(PricingValidationError) as exc_info:
            validate_adjustment(100, dynamic(INC, 101))
        assert exc_info.value.code == "percentage_out_of_range"
        assert isinstance(exc_info.value, ValueError)


class TestFormatCurrency:

    @pytest.mark.parametrize("amount,expected", [
        (100, "$100.00"),
        (279.06, "$279.06"),
        (1234.56, "$1,234.56"),
        (0, "$0.00"),
        (1000000, "$1,000,000.00"),
    ])
    def test_format(self, amount, expected):
        assert format_currency(amount) == expected


def test_adjustment_describe():
    assert dynamic(DEC, 10).describe() == "-10%"
    assert fixed(INC, 5).describe() == "+$5.00"
