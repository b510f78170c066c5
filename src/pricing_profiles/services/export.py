"""
Profile export - tabular views of saved pricing profiles.

Builds a DataFrame per profile (one row per product pricing, in profile
order) for CSV download and summary figures.
"""
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from ..engine.models import PricingProfile, ProductPricing
from ..store.catalog import CatalogRepository

EXPORT_COLUMNS = [
    'Product ID', 'Title', 'SKU', 'Brand', 'Based On Price',
    'Adjustment', 'New Price', 'Difference',
]


def pricings_to_frame(
    pricings: list[ProductPricing],
    catalog: Optional[CatalogRepository] = None,
) -> pd.DataFrame:
    """
    Flatten product pricings into a DataFrame.

    Product details come from the catalog when given; products no longer
    in the catalog keep their row with blank details.
    """
    rows = []
    for pricing in pricings:
        product = catalog.get_by_id(pricing.product_id) if catalog else None
        rows.append({
            'Product ID': pricing.product_id,
            'Title': product.title if product else '',
            'SKU': product.sku_code if product else '',
            'Brand': product.brand if product else '',
            'Based On Price': pricing.based_on_price,
            'Adjustment': pricing.adjustment.describe(),
            'New Price': pricing.new_price,
            'Difference': round(pricing.new_price - pricing.based_on_price, 2),
        })
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def profile_to_frame(profile: PricingProfile, catalog: Optional[CatalogRepository] = None) -> pd.DataFrame:
    return pricings_to_frame(profile.product_pricings, catalog)


def export_profile_csv(
    profile: PricingProfile,
    catalog: Optional[CatalogRepository] = None,
    path: Optional[Union[str, Path]] = None,
) -> str:
    """Render a profile as CSV text, also writing it to ``path`` when given."""
    csv_text = profile_to_frame(profile, catalog).to_csv(index=False)
    if path is not None:
        Path(path).write_text(csv_text, encoding='utf-8')
    return csv_text


def selection_stats(total_products: int, selected_ids: list[str], pricings: list[ProductPricing]) -> dict:
    """Counts shown alongside a selection: catalog size, selected, calculated."""
    frame = pricings_to_frame(pricings)
    return {
        'total_products': total_products,
        'selected_products': len(selected_ids),
        'calculated_prices': len(frame),
        'total_before': round(float(frame['Based On Price'].sum()), 2) if not frame.empty else 0.0,
        'total_after': round(float(frame['New Price'].sum()), 2) if not frame.empty else 0.0,
    }
