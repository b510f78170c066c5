"""Engine subpackage - price adjustment rules and bulk calculation."""
from .models import (
    AdjustmentIncrement,
    AdjustmentType,
    PricingAdjustment,
    PricingProfile,
    Product,
    ProductFilter,
    ProductPricing,
)
from .price_calculator import calculate_price, validate_adjustment
from .pricing_engine import PricingEngine

__all__ = [
    'AdjustmentIncrement', 'AdjustmentType', 'PricingAdjustment', 'PricingProfile',
    'Product', 'ProductFilter', 'ProductPricing', 'PricingEngine',
    'calculate_price', 'validate_adjustment',
]
