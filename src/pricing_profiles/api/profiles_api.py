"""
Pricing Profiles API - FastAPI router for previewing and saving profiles.
"""
from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import PlainTextResponse

import structlog

from ..engine.errors import MalformedRequestError, NotFoundError, PricingValidationError
from ..engine.models import ProfilePatch
from ..services.export import export_profile_csv
from ..services.profile_service import ProfileService
from .deps import get_profile_service
from .schemas import (
    CalculateRequest,
    ProductPricingModel,
    ProfileCreate,
    ProfileResponse,
    ProfileUpdate,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/pricing-profiles", tags=["pricing-profiles"])


@router.get("", response_model=list[ProfileResponse])
async def list_profiles(service: ProfileService = Depends(get_profile_service)):
    """List all saved pricing profiles."""
    return [ProfileResponse.from_domain(p) for p in service.list_profiles()]


@router.post("/calculate", response_model=list[ProductPricingModel])
async def calculate_prices(request: CalculateRequest, service: ProfileService = Depends(get_profile_service)):
    """Preview adjusted prices for a selection of products without saving."""
    try:
        pricings = service.calculate(
            request.product_ids,
            request.adjustment.to_domain() if request.adjustment else None,
            request.based_on_profile,
            strict=request.strict,
        )
    except (MalformedRequestError, PricingValidationError) as e:
        logger.warning("calculate_rejected", reason=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    return [ProductPricingModel.from_domain(p) for p in pricings]


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(profile_id: str, service: ProfileService = Depends(get_profile_service)):
    try:
        return ProfileResponse.from_domain(service.get_profile(profile_id))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Pricing profile not found")


@router.get("/{profile_id}/export", response_class=PlainTextResponse)
async def export_profile(profile_id: str, service: ProfileService = Depends(get_profile_service)):
    """Download a profile's prices as CSV."""
    try:
        profile = service.get_profile(profile_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Pricing profile not found")
    return PlainTextResponse(
        export_profile_csv(profile, service.store.catalog),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="pricing_profile_{profile_id}.csv"'},
    )


@router.post("", response_model=ProfileResponse, status_code=201)
async def create_profile(profile_data: ProfileCreate, service: ProfileService = Depends(get_profile_service)):
    """Save a new pricing profile."""
    pricings = None
    if profile_data.product_pricings is not None:
        pricings = [p.to_domain() for p in profile_data.product_pricings]
    try:
        created = service.create_profile(
            name=profile_data.name,
            based_on_profile=profile_data.based_on_profile,
            product_pricings=pricings,
            description=profile_data.description,
        )
    except MalformedRequestError as e:
        logger.warning("profile_rejected", reason=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    return ProfileResponse.from_domain(created)


@router.put("/{profile_id}", response_model=ProfileResponse)
async def update_profile(
    profile_id: str,
    updates: ProfileUpdate,
    service: ProfileService = Depends(get_profile_service),
):
    """Update only the fields provided in the request body."""
    changes = updates.model_dump(exclude_unset=True, exclude={'product_pricings'})
    if 'product_pricings' in updates.model_fields_set:
        changes['product_pricings'] = [p.to_domain() for p in updates.product_pricings or []]
    try:
        patch = ProfilePatch.from_dict(changes)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    try:
        updated = service.update_profile(profile_id, patch)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Pricing profile not found")
    return ProfileResponse.from_domain(updated)


@router.delete("/{profile_id}", status_code=204)
async def delete_profile(profile_id: str, service: ProfileService = Depends(get_profile_service)):
    try:
        service.delete_profile(profile_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Pricing profile not found")
    return Response(status_code=204)
