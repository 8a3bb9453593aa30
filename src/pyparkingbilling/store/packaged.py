"""Profile store backed by the profiles shipped with the package."""

from __future__ import annotations

from ..models import ServiceProfile
from .base import ProfileStore
from .loader import get_profile, list_facility_ids


class PackagedProfileStore(ProfileStore):
    def get(self, facility_id: str) -> ServiceProfile | None:
        return get_profile(facility_id)

    def facility_ids(self) -> list[str]:
        return list_facility_ids()
