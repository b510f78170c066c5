"""
Products API - FastAPI router for the product catalog.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ..engine.models import Product, ProductFilter, ProductPatch
from ..services.profile_service import generate_id
from ..store.data_store import DataStore
from .deps import get_store
from .schemas import ProductCreate, ProductResponse, ProductUpdate

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(
    search: Optional[str] = None,
    category: Optional[str] = None,
    sub_category: Optional[str] = Query(default=None, alias="subCategory"),
    segment: Optional[str] = None,
    brand: Optional[str] = None,
    store: DataStore = Depends(get_store),
):
    """List products, filtered by title/SKU search and exact attribute matches."""
    product_filter = ProductFilter(
        search=search,
        category=category,
        sub_category=sub_category,
        segment=segment,
        brand=brand,
    )
    return [ProductResponse.from_domain(p) for p in store.catalog.get_all(product_filter)]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, store: DataStore = Depends(get_store)):
    product = store.catalog.get_by_id(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductResponse.from_domain(product)


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(product_data: ProductCreate, store: DataStore = Depends(get_store)):
    """Create a product. An existing product with the same id is replaced."""
    fields = product_data.model_dump()
    fields['id'] = fields['id'] or generate_id(store.catalog.ids())
    created = store.catalog.create(Product(**fields))
    return ProductResponse.from_domain(created)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, updates: ProductUpdate, store: DataStore = Depends(get_store)):
    """Update only the fields provided in the request body."""
    try:
        patch = ProductPatch.from_dict(updates.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    updated = store.catalog.update(product_id, patch)
    if not updated:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductResponse.from_domain(updated)


@router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: str, store: DataStore = Depends(get_store)):
    if not store.catalog.delete(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return Response(status_code=204)
