"""
Data models for products, adjustments and pricing profiles.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class AdjustmentType(str, Enum):
    FIXED = "Fixed"
    DYNAMIC = "Dynamic"


class AdjustmentIncrement(str, Enum):
    INCREASE = "Increase"
    DECREASE = "Decrease"


class SubCategory(str, Enum):
    WINE = "Wine"
    BEER = "Beer"
    LIQUOR_SPIRITS = "Liquor & Spirits"
    CIDER = "Cider"
    PREMIXED_RTD = "Premixed & Ready-to-Drink"
    OTHER = "Other"


class Segment(str, Enum):
    RED = "Red"
    WHITE = "White"
    ROSE = "Rose"
    ORANGE = "Orange"
    SPARKLING = "Sparkling"
    PORT_DESSERT = "Port/Dessert"


@dataclass
class Product:
    """A catalog entry. The id is assigned by the creator and never regenerated."""
    id: str
    title: str
    sku_code: str
    brand: str
    category_id: str
    sub_category_id: str
    global_wholesale_price: float
    segment_id: Optional[str] = None


@dataclass(frozen=True)
class PricingAdjustment:
    """How to move a price: by a fixed amount or a percentage, up or down."""
    adjustment_type: AdjustmentType
    adjustment_increment: AdjustmentIncrement
    value: float

    @classmethod
    def fixed(cls, increment: AdjustmentIncrement, value: float) -> 'PricingAdjustment':
        return cls(AdjustmentType.FIXED, increment, value)

    @classmethod
    def dynamic(cls, increment: AdjustmentIncrement, value: float) -> 'PricingAdjustment':
        return cls(AdjustmentType.DYNAMIC, increment, value)

    def describe(self) -> str:
        """Human-readable form, e.g. '+10%' or '-$5.00'."""
        sign = "+" if self.adjustment_increment == AdjustmentIncrement.INCREASE else "-"
        if self.adjustment_type == AdjustmentType.DYNAMIC:
            return f"{sign}{self.value:g}%"
        return f"{sign}${self.value:.2f}"


@dataclass
class ProductPricing:
    """Result of applying an adjustment to one product's base price."""
    product_id: str
    based_on_price: float
    adjustment: PricingAdjustment
    new_price: float


@dataclass
class PricingProfile:
    """A named, saved set of computed product prices."""
    id: str
    name: str
    based_on_profile: str
    created_at: datetime
    updated_at: datetime
    product_pricings: list[ProductPricing] = field(default_factory=list)
    description: Optional[str] = None


@dataclass
class ProductFilter:
    """Catalog filter. Empty or missing fields impose no constraint."""
    search: Optional[str] = None
    category: Optional[str] = None
    sub_category: Optional[str] = None
    segment: Optional[str] = None
    brand: Optional[str] = None

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))


class _Patch:
    """
    Base for partial updates.

    Only fields explicitly passed to the constructor are applied; a field
    left out is untouched. None clears a field, and is only accepted for
    the fields listed in _nullable.
    """
    _patchable: tuple[str, ...] = ()
    _nullable: tuple[str, ...] = ()

    def __init__(self, **changes: Any):
        unknown = set(changes) - set(self._patchable)
        if unknown:
            raise TypeError(f"{type(self).__name__} cannot set: {', '.join(sorted(unknown))}")
        cleared = sorted(k for k, v in changes.items() if v is None and k not in self._nullable)
        if cleared:
            raise ValueError(f"{type(self).__name__} cannot clear: {', '.join(cleared)}")
        self._check(changes)
        self._changes = dict(changes)

    def _check(self, changes: dict) -> None:
        """Hook for field-level checks on the supplied values."""

    @classmethod
    def from_dict(cls, data: dict) -> '_Patch':
        """Build a patch from a dict, silently ignoring fields that may not be patched."""
        return cls(**{k: v for k, v in data.items() if k in cls._patchable})

    @property
    def changes(self) -> dict:
        return dict(self._changes)

    def apply_to(self, target) -> None:
        for name, value in self._changes.items():
            setattr(target, name, value)

    def __bool__(self) -> bool:
        return bool(self._changes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._changes!r})"


class ProductPatch(_Patch):
    _patchable = (
        'title', 'sku_code', 'brand', 'category_id', 'sub_category_id',
        'segment_id', 'global_wholesale_price',
    )
    _nullable = ('segment_id',)

    def _check(self, changes: dict) -> None:
        price = changes.get('global_wholesale_price')
        if price is not None and price < 0:
            raise ValueError("global_wholesale_price cannot be negative")


class ProfilePatch(_Patch):
    _patchable = ('name', 'description', 'based_on_profile', 'product_pricings')
    _nullable = ('description',)
