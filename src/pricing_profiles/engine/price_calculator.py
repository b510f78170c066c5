"""
Price Adjustment Engine - pure calculation and validation of price adjustments.

A price is adjusted either by a fixed amount or by a percentage of itself,
upwards or downwards. Results are rounded to cents and never go below zero.
"""
import math

from .errors import (
    InvalidAdjustmentValue,
    InvalidBasePrice,
    PercentageOutOfRange,
    ResultWouldBeNegative,
)
from .models import AdjustmentIncrement, AdjustmentType, PricingAdjustment


def round_price(amount: float) -> float:
    """Round to 2 decimals, halves rounding up (round(100 * x) / 100)."""
    return math.floor(amount * 100 + 0.5) / 100


def adjustment_delta(based_on_price: float, adjustment: PricingAdjustment) -> float:
    """The absolute amount the adjustment moves the price by."""
    if adjustment.adjustment_type == AdjustmentType.FIXED:
        return adjustment.value
    return (adjustment.value / 100) * based_on_price


def raw_adjusted_price(based_on_price: float, adjustment: PricingAdjustment) -> float:
    """Adjusted price before rounding and before the zero floor."""
    delta = adjustment_delta(based_on_price, adjustment)
    if adjustment.adjustment_increment == AdjustmentIncrement.INCREASE:
        return based_on_price + delta
    return based_on_price - delta


def calculate_price(based_on_price: float, adjustment: PricingAdjustment) -> float:
    """
    Calculate the new price for an adjustment.

    Args:
        based_on_price: The price to adjust from (not validated here)
        adjustment: The adjustment to apply

    Returns:
        The adjusted price rounded to cents, minimum 0
    """
    return max(0.0, round_price(raw_adjusted_price(based_on_price, adjustment)))


def validate_adjustment(based_on_price: float, adjustment: PricingAdjustment) -> bool:
    """
    Check an adjustment against a base price.

    Checks run in order and the first failure is raised. The final check
    looks at the unfloored result, so a decrease larger than the price is
    rejected here even though calculate_price would floor it to 0.

    Returns:
        True when the adjustment is valid

    Raises:
        PricingValidationError: one of its subclasses, naming the failed check
    """
    if based_on_price < 0:
        raise InvalidBasePrice()

    if adjustment.value < 0:
        raise InvalidAdjustmentValue()

    if adjustment.adjustment_type == AdjustmentType.DYNAMIC and adjustment.value > 100:
        raise PercentageOutOfRange()

    if round_price(raw_adjusted_price(based_on_price, adjustment)) < 0:
        raise ResultWouldBeNegative()

    return True


def format_currency(amount: float, symbol: str = "$") -> str:
    """Format an amount for display, e.g. 1234.56 -> '$1,234.56'."""
    return f"{symbol}{amount:,.2f}"
