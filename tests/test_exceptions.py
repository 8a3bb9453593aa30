from pyparkingbilling.exceptions import (
    ConfigError,
    FacilityNotFoundError,
    InvalidIntervalError,
    InvalidSessionError,
    NotFoundError,
    PyParkingBillingError,
    ValidationError,
)


def test_error_defaults() -> None:
    exc = PyParkingBillingError("base error")
    assert exc.error_type == "unknown"
    assert exc.error_code is None
    assert exc.detail == "base error"
    assert exc.user_message is None


def test_error_detail_fallback() -> None:
    exc = ConfigError(detail="short detail")
    assert str(exc) == "short detail"
    assert exc.detail == "short detail"
    assert exc.error_code == "config_error"


def test_error_overrides() -> None:
    exc = ValidationError(
        "bad price",
        error_code="bad_price",
        detail="price was negative",
        user_message="Check the tariff.",
    )
    assert exc.error_type == "validation"
    assert exc.error_code == "bad_price"
    assert exc.detail == "price was negative"
    assert exc.user_message == "Check the tariff."


def test_facility_not_found_carries_id() -> None:
    exc = FacilityNotFoundError("nonExistingParkingFacilityId")
    assert isinstance(exc, NotFoundError)
    assert exc.facility_id == "nonExistingParkingFacilityId"
    assert str(exc) == "Invalid parking facility id 'nonExistingParkingFacilityId'"
    assert exc.error_type == "not_found"


def test_error_types_have_codes() -> None:
    assert ValidationError("nope").error_code == "validation_error"
    assert InvalidIntervalError("nope").error_code == "invalid_interval"
    assert InvalidSessionError("nope").error_code == "invalid_session"
    assert NotFoundError("nope").error_code == "not_found"
    assert FacilityNotFoundError("pf").error_code == "facility_not_found"
    assert ConfigError("nope").error_code == "config_error"
    assert issubclass(InvalidIntervalError, ValidationError)
