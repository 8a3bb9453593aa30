import json
from decimal import Decimal
from importlib import resources

import jsonschema
import pytest

from pyparkingbilling.exceptions import ConfigError
from pyparkingbilling.models import ScheduleKind
from pyparkingbilling.store.loader import (
    build_profile,
    get_profile,
    list_facility_ids,
    load_profile_schema,
)
from pyparkingbilling.store.packaged import PackagedProfileStore


def _profile_data(facility_id: str = "pf999") -> dict:
    schedule = [
        {"start_hour": 0, "end_hour": 12, "price_per_hour": "1.25"},
        {"start_hour": 12, "end_hour": 24, "price_per_hour": "2"},
    ]
    return {
        "facility_id": facility_id,
        "weekdays_prices": schedule,
        "weekend_prices": schedule,
        "overrun_weekdays_prices": schedule,
        "overrun_weekend_prices": schedule,
    }


def test_packaged_profiles_match_schema() -> None:
    root = resources.files("pyparkingbilling.store")
    schema = json.loads((root / "profile.schema.json").read_text(encoding="utf-8"))
    for entry in (root / "profiles").iterdir():
        if not entry.name.endswith(".json"):
            continue
        data = json.loads(entry.read_text(encoding="utf-8"))
        jsonschema.validate(instance=data, schema=schema)


def test_list_facility_ids() -> None:
    assert list_facility_ids() == ["pf001", "pf002"]


def test_get_profile_builds_exact_prices() -> None:
    profile = get_profile("pf002")
    assert profile is not None
    assert profile.timezone == "Europe/Brussels"
    weekdays = profile.schedule(ScheduleKind.WEEKDAYS)
    assert [(slot.start_hour, slot.end_hour) for slot in weekdays] == [(0, 8), (8, 17), (17, 24)]
    assert weekdays[1].price_per_hour == Decimal("2.5")


def test_get_profile_missing_returns_none() -> None:
    assert get_profile("missing") is None
    assert PackagedProfileStore().get("missing") is None


def test_build_profile_defaults_timezone() -> None:
    profile = build_profile(_profile_data(), "pf999")
    assert profile.timezone == "UTC"
    assert profile.weekend_prices[0].price_per_hour == Decimal("1.25")


def test_build_profile_rejects_schema_violation() -> None:
    data = _profile_data()
    data["weekdays_prices"][0]["price_per_hour"] = 1.25
    with pytest.raises(ConfigError):
        build_profile(data, "pf999")


def test_build_profile_rejects_name_mismatch() -> None:
    with pytest.raises(ConfigError):
        build_profile(_profile_data("pf998"), "pf999")


def test_build_profile_rejects_gapped_schedule() -> None:
    data = _profile_data()
    data["weekend_prices"] = [{"start_hour": 0, "end_hour": 12, "price_per_hour": "1"}]
    with pytest.raises(ConfigError):
        build_profile(data, "pf999", load_profile_schema())


def test_build_profile_rejects_unknown_timezone() -> None:
    data = _profile_data()
    data["timezone"] = "Nowhere/Special"
    with pytest.raises(ConfigError):
        build_profile(data, "pf999")
