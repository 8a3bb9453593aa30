"""Library exceptions."""

from __future__ import annotations


class PyParkingBillingError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        self.detail = detail if detail is not None else message
        super().__init__(message if message is not None else (self.detail or ""))
        self.error_code = error_code if error_code is not None else self.default_error_code
        self.user_message = user_message


class ValidationError(PyParkingBillingError):
    """Raised when inputs fail validation."""

    error_type = "validation"
    default_error_code = "validation_error"


class InvalidIntervalError(ValidationError):
    """Raised when a session does not end after it starts."""

    default_error_code = "invalid_interval"


class InvalidSessionError(ValidationError):
    """Raised when a session lacks its customer or facility id."""

    default_error_code = "invalid_session"


class NotFoundError(PyParkingBillingError):
    """Raised when a looked-up entity does not exist."""

    error_type = "not_found"
    default_error_code = "not_found"


class FacilityNotFoundError(NotFoundError):
    """Raised when no service profile exists for a parking facility."""

    default_error_code = "facility_not_found"

    def __init__(self, facility_id: str, **kwargs: str | None) -> None:
        self.facility_id = facility_id
        super().__init__(f"Invalid parking facility id '{facility_id}'", **kwargs)


class ConfigError(PyParkingBillingError):
    """Raised when packaged pricing data is missing or malformed."""

    error_type = "config"
    default_error_code = "config_error"
