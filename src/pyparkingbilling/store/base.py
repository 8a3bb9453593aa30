"""Store interfaces consumed by the invoice service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import Customer, ServiceProfile, Session


class ProfileStore(ABC):
    """Service profiles keyed by parking facility id."""

    @abstractmethod
    def get(self, facility_id: str) -> ServiceProfile | None:
        """Return the profile for a facility, or None when unknown."""

    @abstractmethod
    def facility_ids(self) -> list[str]:
        """Return the ids of all known facilities."""


class SessionStore(ABC):
    """Parking sessions, queried per facility."""

    @abstractmethod
    def list_by_facility(self, facility_id: str) -> list[Session]:
        """Return the sessions recorded at a facility."""

    @abstractmethod
    def add(self, session: Session) -> None:
        """Record a session."""


class CustomerStore(ABC):
    """Customers keyed by id."""

    @abstractmethod
    def get(self, customer_id: str) -> Customer | None:
        """Return the customer, or None when unknown."""
