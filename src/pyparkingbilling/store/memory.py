"""In-memory store implementations."""

from __future__ import annotations

from collections.abc import Iterable

from ..exceptions import ValidationError
from ..models import Customer, ServiceProfile, Session
from .base import CustomerStore, ProfileStore, SessionStore


class InMemoryProfileStore(ProfileStore):
    def __init__(self, profiles: Iterable[ServiceProfile] = ()) -> None:
        self._profiles: dict[str, ServiceProfile] = {}
        for profile in profiles:
            self.put(profile)

    def put(self, profile: ServiceProfile) -> None:
        if not isinstance(profile, ServiceProfile):
            raise ValidationError("profile must be a ServiceProfile.")
        self._profiles[profile.facility_id] = profile

    def get(self, facility_id: str) -> ServiceProfile | None:
        return self._profiles.get(facility_id)

    def facility_ids(self) -> list[str]:
        return list(self._profiles)


class InMemorySessionStore(SessionStore):
    def __init__(self, sessions: Iterable[Session] = ()) -> None:
        self._sessions: list[Session] = []
        for session in sessions:
            self.add(session)

    def add(self, session: Session) -> None:
        if not isinstance(session, Session):
            raise ValidationError("session must be a Session.")
        self._sessions.append(session)

    def list_by_facility(self, facility_id: str) -> list[Session]:
        return [session for session in self._sessions if session.parking_facility_id == facility_id]


class InMemoryCustomerStore(CustomerStore):
    def __init__(self, customers: Iterable[Customer] = ()) -> None:
        self._customers: dict[str, Customer] = {}
        for customer in customers:
            self.put(customer)

    def put(self, customer: Customer) -> None:
        if not isinstance(customer, Customer):
            raise ValidationError("customer must be a Customer.")
        self._customers[customer.id] = customer

    def get(self, customer_id: str) -> Customer | None:
        return self._customers.get(customer_id)
