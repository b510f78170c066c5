"""
Catalog Repository - products plus a filter pipeline and metadata lookups.
"""
from typing import Callable, Iterable, Optional

from ..engine.models import Product, ProductFilter, ProductPatch
from .entity_store import EntityStore


def _matches_search(term: str) -> Callable[[Product], bool]:
    term = term.lower()
    return lambda p: term in p.title.lower() or term in p.sku_code.lower()


def _matches_field(attr: str, expected: str) -> Callable[[Product], bool]:
    return lambda p: getattr(p, attr) == expected


class CatalogRepository:
    """
    Product catalog backed by an EntityStore.

    Filtering applies each present predicate in turn:
    1. search - case-insensitive substring of title or SKU
    2. category, sub-category, segment, brand - exact match
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._store: EntityStore[Product] = EntityStore(key=lambda p: p.id, name="product")
        for product in products or ():
            self._store.put(product)

    def __len__(self) -> int:
        return len(self._store)

    def ids(self) -> list[str]:
        return self._store.ids()

    def clear(self) -> None:
        self._store.clear()

    def _predicates(self, product_filter: ProductFilter) -> list[Callable[[Product], bool]]:
        predicates = []
        if product_filter.search:
            predicates.append(_matches_search(product_filter.search))
        if product_filter.category:
            predicates.append(_matches_field('category_id', product_filter.category))
        if product_filter.sub_category:
            predicates.append(_matches_field('sub_category_id', product_filter.sub_category))
        if product_filter.segment:
            predicates.append(_matches_field('segment_id', product_filter.segment))
        if product_filter.brand:
            predicates.append(_matches_field('brand', product_filter.brand))
        return predicates

    def get_all(self, product_filter: Optional[ProductFilter] = None) -> list[Product]:
        """List products, optionally narrowed by every field set on the filter."""
        products = self._store.values()
        if product_filter is None or product_filter.is_empty():
            return products

        for predicate in self._predicates(product_filter):
            products = [p for p in products if predicate(p)]
        return products

    def get_by_id(self, product_id: str) -> Optional[Product]:
        return self._store.get(product_id)

    def get_by_ids(self, product_ids: Iterable[str]) -> list[Product]:
        """Look up several products in the order given, dropping unknown or non-string ids."""
        found = []
        for product_id in product_ids:
            if not isinstance(product_id, str):
                continue
            product = self._store.get(product_id)
            if product is not None:
                found.append(product)
        return found

    def create(self, product: Product) -> Product:
        """Store a product, overwriting any existing product with the same id."""
        return self._store.put(product)

    def update(self, product_id: str, patch: ProductPatch) -> Optional[Product]:
        return self._store.modify(product_id, patch.apply_to)

    def delete(self, product_id: str) -> bool:
        return self._store.remove(product_id)

    def _distinct(self, attr: str) -> list[str]:
        values = {getattr(p, attr) for p in self._store.iter_stored()}
        return sorted(v for v in values if v)

    def all_brands(self) -> list[str]:
        return self._distinct('brand')

    def all_categories(self) -> list[str]:
        return self._distinct('category_id')

    def all_sub_categories(self) -> list[str]:
        return self._distinct('sub_category_id')

    def all_segments(self) -> list[str]:
        return self._distinct('segment_id')
