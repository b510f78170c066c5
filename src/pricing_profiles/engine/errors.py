"""
Exception hierarchy for pricing operations.

Validation failures carry a stable ``code`` so callers can map them
without matching on message text.
"""
from typing import Optional


class PricingError(Exception):
    """Base class for all pricing errors."""


class PricingValidationError(PricingError, ValueError):
    """An adjustment or base price is out of range."""
    code = "validation_error"
    default_message = "Invalid pricing adjustment"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidBasePrice(PricingValidationError):
    code = "invalid_base_price"
    default_message = "Based on price cannot be negative"


class InvalidAdjustmentValue(PricingValidationError):
    code = "invalid_adjustment_value"
    default_message = "Adjustment value cannot be negative"


class PercentageOutOfRange(PricingValidationError):
    code = "percentage_out_of_range"
    default_message = "Percentage adjustment cannot exceed 100%"


class ResultWouldBeNegative(PricingValidationError):
    code = "result_would_be_negative"
    default_message = "Adjustment would result in negative price"


class NotFoundError(PricingError, LookupError):
    """A referenced entity id is not in the store."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} '{entity_id}' not found")
        self.entity = entity
        self.entity_id = entity_id


class MalformedRequestError(PricingError, ValueError):
    """The caller sent a request with the wrong shape (missing or mistyped fields)."""
