"""
Metadata API - distinct brands, categories, sub-categories and segments.
"""
from fastapi import APIRouter, Depends

from ..store.data_store import DataStore
from .deps import get_store

router = APIRouter(prefix="/api/metadata", tags=["metadata"])


@router.get("/brands", response_model=list[str])
async def list_brands(store: DataStore = Depends(get_store)):
    return store.catalog.all_brands()


@router.get("/categories", response_model=list[str])
async def list_categories(store: DataStore = Depends(get_store)):
    return store.catalog.all_categories()


@router.get("/sub-categories", response_model=list[str])
async def list_sub_categories(store: DataStore = Depends(get_store)):
    return store.catalog.all_sub_categories()


@router.get("/segments", response_model=list[str])
async def list_segments(store: DataStore = Depends(get_store)):
    return store.catalog.all_segments()
