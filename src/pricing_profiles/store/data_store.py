"""
Data Store - owns the catalog and profile repositories for one process.

Constructed once at startup and passed to whatever needs it, rather than
living as a module-level singleton.
"""
from pathlib import Path
from typing import Iterable, Optional

import structlog

from ..data.seed_catalog import load_seed_products
from ..engine.models import Product
from .catalog import CatalogRepository
from .profiles import ProfileRepository

logger = structlog.get_logger(__name__)


class DataStore:
    """Container for the in-memory repositories with an explicit lifecycle."""

    def __init__(
        self,
        catalog: Optional[CatalogRepository] = None,
        profiles: Optional[ProfileRepository] = None,
    ):
        self.catalog = catalog or CatalogRepository()
        self.profiles = profiles or ProfileRepository()
        self.is_open = False

    @classmethod
    def seeded(cls, products: Optional[Iterable[Product]] = None, seed_path: Optional[Path] = None) -> 'DataStore':
        """Build a store whose catalog starts with the given (or CSV seed) products."""
        if products is None:
            products = load_seed_products(seed_path)
        return cls(catalog=CatalogRepository(products))

    def open(self) -> 'DataStore':
        self.is_open = True
        logger.info("data_store_opened", products=len(self.catalog), profiles=len(self.profiles))
        return self

    def close(self) -> None:
        """Drop all state. Nothing is persisted."""
        logger.info("data_store_closed", products=len(self.catalog), profiles=len(self.profiles))
        self.catalog.clear()
        self.profiles.clear()
        self.is_open = False

    def __enter__(self) -> 'DataStore':
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
