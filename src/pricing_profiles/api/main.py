"""
FastAPI application for pricing profiles.

A data store built by the app is created on startup and dropped on
shutdown; a store passed in by the caller is left untouched. Routers
reach it through request.app.state.
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import structlog

from .. import __version__
from ..config.logging import configure_logging
from ..config.settings import Settings, get_settings
from ..engine.pricing_engine import PricingEngine
from ..services.profile_service import ProfileService
from ..store.data_store import DataStore
from .metadata_api import router as metadata_router
from .products_api import router as products_router
from .profiles_api import router as profiles_router

logger = structlog.get_logger(__name__)


def create_app(store: Optional[DataStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        store: Data store to serve; built from the seed catalog on startup when omitted
        settings: Settings override
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        data_store = store
        owns_store = store is None
        if owns_store:
            data_store = DataStore.seeded(seed_path=settings.seed_catalog) if settings.seed_on_start else DataStore()
        data_store.open()
        app.state.store = data_store
        app.state.profile_service = ProfileService(
            data_store,
            engine=PricingEngine(data_store.catalog, default_basis=settings.default_basis),
        )
        try:
            yield
        finally:
            if owns_store:
                data_store.close()

    app = FastAPI(
        title="Pricing Profiles API",
        description="Preview price adjustments and save them as pricing profiles",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("request_rejected", path=request.url.path, errors=len(exc.errors()))
        return JSONResponse(status_code=400, content={"detail": jsonable_errors(exc)})

    app.include_router(products_router)
    app.include_router(profiles_router)
    app.include_router(metadata_router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def build_app() -> FastAPI:
    """Entry point for uvicorn's --factory mode."""
    configure_logging()
    return create_app()
