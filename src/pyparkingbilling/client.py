"""Client facade for facility discovery and invoicing."""

from __future__ import annotations

import asyncio

from .invoice import InvoiceService
from .models import Invoice
from .store.base import CustomerStore, ProfileStore, SessionStore
from .store.memory import InMemoryCustomerStore, InMemorySessionStore
from .store.packaged import PackagedProfileStore


class Client:
    """Async facade over the invoice service.

    Invoice computation is CPU bound and runs in a worker thread so callers on
    an event loop are never blocked. Stores default to the packaged profiles
    and empty in-memory session and customer stores.
    """

    def __init__(
        self,
        *,
        profile_store: ProfileStore | None = None,
        session_store: SessionStore | None = None,
        customer_store: CustomerStore | None = None,
    ) -> None:
        self._profile_store = profile_store or PackagedProfileStore()
        self._session_store = session_store or InMemorySessionStore()
        self._customer_store = customer_store or InMemoryCustomerStore()
        self._service: InvoiceService | None = None

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        self._service = None

    @property
    def session_store(self) -> SessionStore:
        return self._session_store

    @property
    def customer_store(self) -> CustomerStore:
        return self._customer_store

    async def list_facilities(self) -> list[str]:
        return await asyncio.to_thread(self._profile_store.facility_ids)

    async def get_invoices(self, facility_id: str) -> list[Invoice]:
        return await asyncio.to_thread(self._ensure_service().invoices_for, facility_id)

    async def get_invoice(self, facility_id: str, customer_id: str) -> Invoice | None:
        return await asyncio.to_thread(
            self._ensure_service().invoice_for,
            facility_id,
            customer_id,
        )

    def _ensure_service(self) -> InvoiceService:
        if self._service is None:
            self._service = InvoiceService(
                self._profile_store,
                self._session_store,
                self._customer_store,
            )
        return self._service
