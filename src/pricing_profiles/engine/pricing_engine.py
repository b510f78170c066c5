"""
Pricing Engine - bulk price calculation for a product selection.

Resolves the selected product ids against the catalog and applies one
adjustment to each product's basis price.
"""
from typing import TYPE_CHECKING, Iterable, Optional

import structlog

from .models import PricingAdjustment, Product, ProductPricing
from .price_calculator import calculate_price, validate_adjustment

if TYPE_CHECKING:
    from ..store.catalog import CatalogRepository

logger = structlog.get_logger(__name__)

GLOBAL_BASIS = "global"


class PricingEngine:
    """
    Applies a pricing adjustment across a selection of catalog products.

    Resolution order:
    1. Look up each product id in the catalog, skipping unknown ids
    2. Take the basis price (the global wholesale price)
    3. Optionally validate the adjustment against that price (strict mode)
    4. Calculate the new price
    """

    def __init__(self, catalog: 'CatalogRepository', default_basis: str = GLOBAL_BASIS):
        self.catalog = catalog
        self.default_basis = default_basis

    def basis_price(self, product: Product, based_on_profile: str) -> float:
        """
        Price an adjustment is computed from.

        Only the global wholesale price is supported; any other basis falls
        back to it.
        """
        if based_on_profile != GLOBAL_BASIS:
            logger.debug(
                "basis_fallback",
                requested=based_on_profile,
                used=GLOBAL_BASIS,
                product_id=product.id,
            )
        return product.global_wholesale_price

    def price_product(
        self,
        product: Product,
        adjustment: PricingAdjustment,
        based_on_profile: Optional[str] = None,
        strict: bool = False,
    ) -> ProductPricing:
        """Calculate the adjusted price for a single product."""
        based_on_price = self.basis_price(product, based_on_profile or self.default_basis)
        if strict:
            validate_adjustment(based_on_price, adjustment)
        return ProductPricing(
            product_id=product.id,
            based_on_price=based_on_price,
            adjustment=adjustment,
            new_price=calculate_price(based_on_price, adjustment),
        )

    def calculate_for_selection(
        self,
        product_ids: Iterable[str],
        adjustment: PricingAdjustment,
        based_on_profile: Optional[str] = None,
        strict: bool = False,
    ) -> list[ProductPricing]:
        """
        Calculate adjusted prices for every known product in the selection.

        Args:
            product_ids: Selected ids; unknown ids are skipped, order is kept
            adjustment: Adjustment applied to every product
            based_on_profile: Price basis, defaults to the engine's default
            strict: Validate the adjustment against each product's price first

        Returns:
            One ProductPricing per resolved product, in selection order

        Raises:
            PricingValidationError: in strict mode, for the first invalid product
        """
        product_ids = list(product_ids)
        products = self.catalog.get_by_ids(product_ids)

        pricings = [
            self.price_product(product, adjustment, based_on_profile, strict=strict)
            for product in products
        ]

        logger.info(
            "selection_priced",
            requested=len(product_ids),
            resolved=len(products),
            skipped=len(product_ids) - len(products),
            adjustment=adjustment.describe(),
            basis=based_on_profile or self.default_basis,
            strict=strict,
        )
        return pricings
