"""Dependencies shared by the API routers."""
from fastapi import Request

from ..services.profile_service import ProfileService
from ..store.data_store import DataStore


def get_store(request: Request) -> DataStore:
    return request.app.state.store


def get_profile_service(request: Request) -> ProfileService:
    return request.app.state.profile_service
