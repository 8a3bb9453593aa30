"""Print invoices for a parking facility from a JSON data file.

Run from the repository root with:
  PYTHONPATH=src python scripts/invoice_report.py pf001 --data sessions.json

The data file holds customers and sessions:
  {
    "customers": [{"id": "c001", "contracted_facility_ids": ["pf001"]}],
    "sessions": [
      {"customer_id": "c001", "parking_facility_id": "pf001",
       "start": "2018-12-13T06:30:00", "end": "2018-12-13T18:30:00"}
    ]
  }

Naive timestamps are read as facility wall-clock time. The data file can also
be given with the INVOICE_DATA_FILE environment variable.

Debug helpers:
  --debug enables debug logging for the library.
  --customer limits the report to a single customer.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from pyparkingbilling import Client
from pyparkingbilling.exceptions import PyParkingBillingError, ValidationError
from pyparkingbilling.models import Customer, Invoice, Session
from pyparkingbilling.store.memory import InMemoryCustomerStore, InMemorySessionStore
from pyparkingbilling.util import parse_timestamp

_LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("facility_id", help="Parking facility id, e.g. pf001.")
    parser.add_argument("--data", default=os.getenv("INVOICE_DATA_FILE"))
    parser.add_argument("--customer", default=None)
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def _load_data(path: str) -> dict[str, Any]:
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValidationError(f"Could not read data file {path}.") from exc


def _build_customers(entries: list[dict[str, Any]]) -> InMemoryCustomerStore:
    return InMemoryCustomerStore(
        Customer(entry["id"], frozenset(entry.get("contracted_facility_ids", ())))
        for entry in entries
    )


def _build_sessions(entries: list[dict[str, Any]]) -> InMemorySessionStore:
    return InMemorySessionStore(
        Session(
            entry.get("customer_id", ""),
            entry.get("parking_facility_id", ""),
            parse_timestamp(entry["start"]),
            parse_timestamp(entry["end"]),
        )
        for entry in entries
    )


def _format_invoice(invoice: Invoice) -> str:
    return f"{invoice.customer_id} | {invoice.parking_facility_id} | {invoice.amount}"


async def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    if not args.data:
        print("Missing data file: pass --data or set INVOICE_DATA_FILE", file=sys.stderr)
        return 2

    try:
        data = _load_data(args.data)
        customers = _build_customers(data.get("customers", []))
        sessions = _build_sessions(data.get("sessions", []))
        async with Client(session_store=sessions, customer_store=customers) as client:
            if args.customer:
                invoice = await client.get_invoice(args.facility_id, args.customer)
                invoices = [invoice] if invoice is not None else []
            else:
                invoices = await client.get_invoices(args.facility_id)
    except (PyParkingBillingError, KeyError) as exc:
        _LOGGER.debug("Invoice report failed", exc_info=True)
        print(f"Error: {exc.__class__.__name__}: {exc}", file=sys.stderr)
        return 1

    print(f"Facility: {args.facility_id}")
    print(f"Invoices: {len(invoices)}")
    for invoice in invoices:
        print(f"- {_format_invoice(invoice)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
