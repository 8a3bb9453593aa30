"""Lookup stores for profiles, sessions and customers."""

from .base import CustomerStore, ProfileStore, SessionStore
from .memory import InMemoryCustomerStore, InMemoryProfileStore, InMemorySessionStore
from .packaged import PackagedProfileStore

__all__ = [
    "CustomerStore",
    "InMemoryCustomerStore",
    "InMemoryProfileStore",
    "InMemorySessionStore",
    "PackagedProfileStore",
    "ProfileStore",
    "SessionStore",
]
