"""Packaged service profile discovery and loading."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from importlib import resources
from importlib.resources.abc import Traversable

import jsonschema

from ..const import DEFAULT_TIMEZONE, PROFILE_SUFFIX, PROFILES_DIRNAME, SCHEMA_FILENAME
from ..exceptions import ConfigError, ValidationError
from ..models import ScheduleKind, ServiceProfile, TimeslotPrice
from ..util import get_zone, validate_schedule

_LOGGER = logging.getLogger(__name__)
_PROFILE_CACHE: tuple[ServiceProfile, ...] | None = None


def _store_root() -> Traversable:
    return resources.files("pyparkingbilling.store")


def load_profile_schema() -> dict:
    schema_path = _store_root() / SCHEMA_FILENAME
    return json.loads(schema_path.read_text(encoding="utf-8"))


def _build_schedule(entries: list[dict], facility_id: str, kind: ScheduleKind) -> tuple[TimeslotPrice, ...]:
    try:
        schedule = tuple(
            TimeslotPrice(
                start_hour=entry["start_hour"],
                end_hour=entry["end_hour"],
                price_per_hour=entry["price_per_hour"],
            )
            for entry in entries
        )
        validate_schedule(schedule)
    except ValidationError as exc:
        raise ConfigError(f"Profile {facility_id} has an invalid {kind.value} schedule: {exc}") from exc
    return schedule


def build_profile(data: dict, file_stem: str, schema: dict | None = None) -> ServiceProfile:
    if schema is None:
        schema = load_profile_schema()
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as exc:
        raise ConfigError(f"Profile {file_stem} does not match the schema: {exc.message}") from exc
    facility_id = data["facility_id"]
    if facility_id != file_stem:
        raise ConfigError("Profile facility_id must match its file name.")
    timezone = data.get("timezone", DEFAULT_TIMEZONE)
    get_zone(timezone)
    schedules = {
        kind.value: _build_schedule(data[kind.value], facility_id, kind) for kind in ScheduleKind
    }
    return ServiceProfile(facility_id=facility_id, timezone=timezone, **schedules)


def iter_profile_files() -> Iterable[tuple[str, Traversable]]:
    root = _store_root() / PROFILES_DIRNAME
    for entry in root.iterdir():
        if entry.is_file() and entry.name.endswith(PROFILE_SUFFIX):
            yield entry.name[: -len(PROFILE_SUFFIX)], entry


def load_profiles() -> list[ServiceProfile]:
    global _PROFILE_CACHE
    if _PROFILE_CACHE is not None:
        return list(_PROFILE_CACHE)
    _LOGGER.debug("Loading packaged service profiles")
    schema = load_profile_schema()
    profiles: list[ServiceProfile] = []
    for file_stem, profile_path in sorted(iter_profile_files(), key=lambda item: item[0]):
        try:
            data = json.loads(profile_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Profile {file_stem} is not valid JSON.") from exc
        profiles.append(build_profile(data, file_stem, schema))
    _PROFILE_CACHE = tuple(profiles)
    _LOGGER.debug("Loaded %d packaged service profiles", len(profiles))
    return list(_PROFILE_CACHE)


def clear_profile_cache() -> None:
    """Clear cached profiles (used in tests)."""
    global _PROFILE_CACHE
    _PROFILE_CACHE = None


def list_facility_ids() -> list[str]:
    return [profile.facility_id for profile in load_profiles()]


def get_profile(facility_id: str) -> ServiceProfile | None:
    for profile in load_profiles():
        if profile.facility_id == facility_id:
            return profile
    return None
