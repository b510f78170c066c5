"""
Seed Catalog - loads the starting product catalog from CSV.

Rows missing an id or with a negative wholesale price are skipped and
reported rather than loaded.
"""
from pathlib import Path
from typing import Optional

import pandas as pd
import structlog

from ..config.settings import get_settings
from ..engine.models import Product

logger = structlog.get_logger(__name__)

REQUIRED_COLUMNS = (
    'id', 'title', 'sku_code', 'brand', 'category_id', 'sub_category_id', 'global_wholesale_price',
)


def load_seed_products(path: Optional[Path] = None) -> list[Product]:
    """
    Read seed products from a CSV file.

    Args:
        path: CSV path; defaults to the configured seed catalog

    Returns:
        Products in file order
    """
    path = Path(path) if path else get_settings().seed_catalog

    if not path.exists():
        raise FileNotFoundError(f"Seed catalog not found at {path}.")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Seed catalog {path} is missing columns: {', '.join(missing)}")

    if 'segment_id' not in df.columns:
        df['segment_id'] = ''

    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()

    df['global_wholesale_price'] = pd.to_numeric(df['global_wholesale_price'], errors='coerce')

    invalid = df[(df['id'] == '') | df['global_wholesale_price'].isna() | (df['global_wholesale_price'] < 0)]
    if not invalid.empty:
        logger.warning("seed_rows_skipped", path=str(path), count=len(invalid))
        df = df.drop(invalid.index)

    products = [
        Product(
            id=row['id'],
            title=row['title'],
            sku_code=row['sku_code'],
            brand=row['brand'],
            category_id=row['category_id'],
            sub_category_id=row['sub_category_id'],
            segment_id=row['segment_id'] or None,
            global_wholesale_price=float(row['global_wholesale_price']),
        )
        for row in df.to_dict(orient='records')
    ]

    logger.info("seed_catalog_loaded", path=str(path), products=len(products))
    return products
