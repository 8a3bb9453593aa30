"""Per-customer invoices for a parking facility."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .calculator import calculate_price
from .exceptions import FacilityNotFoundError, InvalidSessionError, ValidationError
from .models import Customer, Invoice, ServiceProfile, Session
from .store.base import CustomerStore, ProfileStore, SessionStore

_LOGGER = logging.getLogger(__name__)


class InvoiceService:
    """Group a facility's sessions per customer and price them."""

    def __init__(
        self,
        profile_store: ProfileStore,
        session_store: SessionStore,
        customer_store: CustomerStore,
    ) -> None:
        if profile_store is None or session_store is None or customer_store is None:
            raise ValidationError("Profile, session and customer stores are required.")
        self._profile_store = profile_store
        self._session_store = session_store
        self._customer_store = customer_store

    def invoices_for(self, facility_id: str) -> list[Invoice]:
        _LOGGER.debug("Invoices for facility %s started", facility_id)
        profile = self._require_profile(facility_id)
        grouped = self._group_by_customer(self._session_store.list_by_facility(facility_id))
        invoices = [
            self._build_invoice(profile, customer_id, sessions)
            for customer_id, sessions in grouped.items()
        ]
        _LOGGER.debug(
            "Invoices for facility %s completed: %d invoices",
            facility_id,
            len(invoices),
        )
        return invoices

    def invoice_for(self, facility_id: str, customer_id: str) -> Invoice | None:
        _LOGGER.debug("Invoice for facility %s started", facility_id)
        profile = self._require_profile(facility_id)
        grouped = self._group_by_customer(self._session_store.list_by_facility(facility_id))
        sessions = grouped.get(customer_id)
        if not sessions:
            _LOGGER.debug("Facility %s has no sessions for the customer", facility_id)
            return None
        invoice = self._build_invoice(profile, customer_id, sessions)
        _LOGGER.debug("Invoice for facility %s completed", facility_id)
        return invoice

    def _require_profile(self, facility_id: str) -> ServiceProfile:
        profile = self._profile_store.get(facility_id)
        if profile is None:
            raise FacilityNotFoundError(facility_id)
        return profile

    def _group_by_customer(self, sessions: Iterable[Session]) -> dict[str, list[Session]]:
        grouped: dict[str, list[Session]] = {}
        for session in sessions:
            if session is None or not session.customer_id or not session.parking_facility_id:
                raise InvalidSessionError("Session is missing its customer or facility id.")
            grouped.setdefault(session.customer_id, []).append(session)
        return grouped

    def _lookup_customer(self, customer_id: str) -> Customer | None:
        customer = self._customer_store.get(customer_id)
        if customer is None:
            _LOGGER.warning("Unknown customer on facility sessions; pricing at overrun rates")
        return customer

    def _build_invoice(
        self,
        profile: ServiceProfile,
        customer_id: str,
        sessions: list[Session],
    ) -> Invoice:
        customer = self._lookup_customer(customer_id)
        return Invoice(
            parking_facility_id=profile.facility_id,
            customer_id=customer_id,
            amount=calculate_price(profile, sessions, customer),
        )
