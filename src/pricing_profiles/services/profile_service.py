"""
Profile Service - the calling side of the profile and pricing operations.

Checks request shape, stamps ids and timestamps on new profiles and turns
missing entities into NotFoundError.
"""
import time
from datetime import datetime
from typing import Any, Callable, Container, Optional

import structlog

from ..engine.errors import MalformedRequestError, NotFoundError
from ..engine.models import PricingAdjustment, PricingProfile, ProductPricing, ProfilePatch
from ..engine.pricing_engine import PricingEngine
from ..store.data_store import DataStore
from ..store.profiles import utc_now

logger = structlog.get_logger(__name__)


def generate_id(existing: Container[str] = ()) -> str:
    """Generate a time-based id (milliseconds since epoch), unique within ``existing``."""
    base = str(int(time.time() * 1000))
    candidate = base
    counter = 1
    while candidate in existing:
        candidate = f"{base}-{counter}"
        counter += 1
    return candidate


class ProfileService:
    """Service for building, saving and managing pricing profiles."""

    def __init__(
        self,
        store: DataStore,
        engine: Optional[PricingEngine] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.engine = engine or PricingEngine(store.catalog)
        self.clock = clock

    def calculate(
        self,
        product_ids: Any,
        adjustment: Optional[PricingAdjustment],
        based_on_profile: Optional[str] = None,
        strict: bool = False,
    ) -> list[ProductPricing]:
        """Preview prices for a selection. Nothing is saved."""
        if not isinstance(product_ids, (list, tuple)):
            raise MalformedRequestError("productIds must be an array")
        if adjustment is None:
            raise MalformedRequestError("adjustment is required")

        return self.engine.calculate_for_selection(product_ids, adjustment, based_on_profile, strict=strict)

    def list_profiles(self) -> list[PricingProfile]:
        return self.store.profiles.get_all()

    def get_profile(self, profile_id: str) -> PricingProfile:
        profile = self.store.profiles.get_by_id(profile_id)
        if profile is None:
            raise NotFoundError("Pricing profile", profile_id)
        return profile

    def create_profile(
        self,
        name: Optional[str],
        based_on_profile: Optional[str],
        product_pricings: Optional[list[ProductPricing]],
        description: Optional[str] = None,
    ) -> PricingProfile:
        """Stamp a new profile with an id and timestamps, then save it."""
        if not name or not based_on_profile or product_pricings is None:
            raise MalformedRequestError("Missing required fields: name, basedOnProfile, productPricings")

        now = self.clock()
        profile = PricingProfile(
            id=generate_id(self.store.profiles.ids()),
            name=name,
            description=description,
            based_on_profile=based_on_profile,
            product_pricings=list(product_pricings),
            created_at=now,
            updated_at=now,
        )
        created = self.store.profiles.create(profile)
        logger.info("profile_created", profile_id=created.id, pricings=len(created.product_pricings))
        return created

    def update_profile(self, profile_id: str, patch: ProfilePatch) -> PricingProfile:
        updated = self.store.profiles.update(profile_id, patch)
        if updated is None:
            raise NotFoundError("Pricing profile", profile_id)
        logger.info("profile_updated", profile_id=profile_id, fields=sorted(patch.changes))
        return updated

    def delete_profile(self, profile_id: str) -> None:
        if not self.store.profiles.delete(profile_id):
            raise NotFoundError("Pricing profile", profile_id)
        logger.info("profile_deleted", profile_id=profile_id)
