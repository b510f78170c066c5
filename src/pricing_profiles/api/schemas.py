"""
Request and response models for the HTTP API.

JSON field names are camelCase; Python attributes stay snake_case.
"""
from dataclasses import asdict
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..engine.models import (
    AdjustmentIncrement,
    AdjustmentType,
    PricingAdjustment,
    PricingProfile,
    Product,
    ProductPricing,
)


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AdjustmentModel(ApiModel):
    """A pricing adjustment."""
    adjustment_type: AdjustmentType
    adjustment_increment: AdjustmentIncrement
    value: float

    def to_domain(self) -> PricingAdjustment:
        return PricingAdjustment(self.adjustment_type, self.adjustment_increment, self.value)


class ProductPricingModel(ApiModel):
    product_id: str
    based_on_price: float
    adjustment: AdjustmentModel
    new_price: float

    @classmethod
    def from_domain(cls, pricing: ProductPricing) -> 'ProductPricingModel':
        return cls.model_validate(asdict(pricing))

    def to_domain(self) -> ProductPricing:
        return ProductPricing(
            product_id=self.product_id,
            based_on_price=self.based_on_price,
            adjustment=self.adjustment.to_domain(),
            new_price=self.new_price,
        )


class ProductResponse(ApiModel):
    id: str
    title: str
    sku_code: str
    brand: str
    category_id: str
    sub_category_id: str
    segment_id: Optional[str] = None
    global_wholesale_price: float

    @classmethod
    def from_domain(cls, product: Product) -> 'ProductResponse':
        return cls.model_validate(asdict(product))


class ProductCreate(ApiModel):
    """Request model for creating a product. A missing id is generated."""
    id: Optional[str] = None
    title: str
    sku_code: str
    brand: str
    category_id: str
    sub_category_id: str
    segment_id: Optional[str] = None
    global_wholesale_price: float = Field(ge=0)


class ProductUpdate(ApiModel):
    """Request model for updating a product. Only supplied fields change."""
    title: Optional[str] = None
    sku_code: Optional[str] = None
    brand: Optional[str] = None
    category_id: Optional[str] = None
    sub_category_id: Optional[str] = None
    segment_id: Optional[str] = None
    global_wholesale_price: Optional[float] = Field(default=None, ge=0)

    @field_validator(
        'title', 'sku_code', 'brand', 'category_id', 'sub_category_id', 'global_wholesale_price',
    )
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class ProfileResponse(ApiModel):
    id: str
    name: str
    description: Optional[str] = None
    based_on_profile: str
    product_pricings: list[ProductPricingModel]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, profile: PricingProfile) -> 'ProfileResponse':
        return cls.model_validate(asdict(profile))


class ProfileCreate(ApiModel):
    """Request model for saving a pricing profile. Required fields are checked by the service."""
    name: Optional[str] = None
    description: Optional[str] = None
    based_on_profile: Optional[str] = None
    product_pricings: Optional[list[ProductPricingModel]] = None


class ProfileUpdate(ApiModel):
    """Request model for updating a pricing profile."""
    name: Optional[str] = None
    description: Optional[str] = None
    based_on_profile: Optional[str] = None
    product_pricings: Optional[list[ProductPricingModel]] = None

    @field_validator('name', 'based_on_profile')
    @classmethod
    def required_text(cls, value):
        if value is None or not value.strip():
            raise ValueError("may not be null or empty")
        return value


class CalculateRequest(ApiModel):
    """Request model for previewing prices."""
    product_ids: Any = None
    based_on_profile: str = "global"
    adjustment: Optional[AdjustmentModel] = None
    strict: bool = False
