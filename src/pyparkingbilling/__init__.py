"""pyParkingBilling package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .calculator import calculate_price, decompose, exact_cost, session_cost
from .client import Client
from .exceptions import (
    ConfigError,
    FacilityNotFoundError,
    InvalidIntervalError,
    InvalidSessionError,
    NotFoundError,
    PyParkingBillingError,
    ValidationError,
)
from .invoice import InvoiceService
from .models import (
    ActualTimeslot,
    Customer,
    DayType,
    Invoice,
    ScheduleKind,
    ServiceProfile,
    Session,
    TimeslotPrice,
)
from .schedule import resolve

try:
    __version__ = version("pyparkingbilling")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "ActualTimeslot",
    "Client",
    "ConfigError",
    "Customer",
    "DayType",
    "FacilityNotFoundError",
    "InvalidIntervalError",
    "InvalidSessionError",
    "Invoice",
    "InvoiceService",
    "NotFoundError",
    "PyParkingBillingError",
    "ScheduleKind",
    "ServiceProfile",
    "Session",
    "TimeslotPrice",
    "ValidationError",
    "__version__",
    "calculate_price",
    "decompose",
    "exact_cost",
    "resolve",
    "session_cost",
]
