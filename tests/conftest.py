from __future__ import annotations

import pytest

from pyparkingbilling.models import Customer
from pyparkingbilling.store.loader import clear_profile_cache
from pyparkingbilling.store.memory import InMemoryCustomerStore, InMemorySessionStore
from pyparkingbilling.store.packaged import PackagedProfileStore


@pytest.fixture(autouse=True)
def _fresh_profile_cache():
    clear_profile_cache()
    yield
    clear_profile_cache()


@pytest.fixture
def customers() -> InMemoryCustomerStore:
    return InMemoryCustomerStore(
        [
            Customer("c001", frozenset({"pf001"})),
            Customer("c002", frozenset({"pf001", "pf002"})),
            Customer("c003", frozenset({"pf002"})),
            Customer("c004"),
        ]
    )


@pytest.fixture
def sessions() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def profiles() -> PackagedProfileStore:
    return PackagedProfileStore()
