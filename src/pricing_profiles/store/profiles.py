"""
Profile Repository - saved pricing profiles with merge-on-update.
"""
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from ..engine.models import PricingProfile, ProfilePatch
from .entity_store import EntityStore


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProfileRepository:
    """
    Pricing profiles backed by an EntityStore.

    The repository stores exactly what it is given on create; stamping the
    id and timestamps is the caller's job. Updates keep id and created_at
    and always move updated_at to the current time.
    """

    def __init__(
        self,
        profiles: Optional[Iterable[PricingProfile]] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._store: EntityStore[PricingProfile] = EntityStore(key=lambda p: p.id, name="pricing_profile")
        self._clock = clock
        for profile in profiles or ():
            self._store.put(profile)

    def __len__(self) -> int:
        return len(self._store)

    def ids(self) -> list[str]:
        return self._store.ids()

    def clear(self) -> None:
        self._store.clear()

    def get_all(self) -> list[PricingProfile]:
        return self._store.values()

    def get_by_id(self, profile_id: str) -> Optional[PricingProfile]:
        return self._store.get(profile_id)

    def create(self, profile: PricingProfile) -> PricingProfile:
        """Store a profile, overwriting any existing profile with the same id."""
        return self._store.put(profile)

    def update(self, profile_id: str, patch: ProfilePatch) -> Optional[PricingProfile]:
        def change(profile: PricingProfile) -> None:
            patch.apply_to(profile)
            profile.updated_at = self._clock()

        return self._store.modify(profile_id, change)

    def delete(self, profile_id: str) -> bool:
        return self._store.remove(profile_id)
