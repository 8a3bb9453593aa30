from datetime import UTC, datetime
from decimal import Decimal
from fractions import Fraction
from zoneinfo import ZoneInfo

import pytest

from pyparkingbilling.exceptions import InvalidIntervalError, InvalidSessionError, ValidationError
from pyparkingbilling.models import ActualTimeslot, Customer, ServiceProfile, Session, TimeslotPrice


def test_timeslot_price_coerces_strings() -> None:
    slot = TimeslotPrice(0, 7, "0.5")
    assert slot.price_per_hour == Decimal("0.5")


@pytest.mark.parametrize(
    ("start_hour", "end_hour", "price"),
    [
        (-1, 7, "1"),
        (0, 25, "1"),
        (7, 7, "1"),
        (8, 7, "1"),
        (0, 7, "-1"),
        (0, 7, 0.5),
        (0, 7, "abc"),
        (0, 7, "NaN"),
    ],
)
def test_timeslot_price_rejects_invalid(start_hour: int, end_hour: int, price: object) -> None:
    with pytest.raises(ValidationError):
        TimeslotPrice(start_hour, end_hour, price)


def test_service_profile_stores_schedules_as_tuples() -> None:
    schedule = [TimeslotPrice(0, 24, "1")]
    profile = ServiceProfile("pf", schedule, schedule, schedule, schedule)
    assert isinstance(profile.weekdays_prices, tuple)
    assert profile.timezone == "UTC"


def test_service_profile_requires_facility_id() -> None:
    with pytest.raises(ValidationError):
        ServiceProfile("", (), (), (), ())


@pytest.mark.parametrize(("customer_id", "facility_id"), [("", "pf001"), ("c001", ""), (None, "pf001")])
def test_session_requires_ids(customer_id: str | None, facility_id: str) -> None:
    with pytest.raises(InvalidSessionError):
        Session(customer_id, facility_id, datetime(2018, 12, 14), datetime(2018, 12, 14, 1))


def test_session_requires_end_after_start() -> None:
    with pytest.raises(InvalidIntervalError):
        Session("c001", "pf001", datetime(2018, 12, 14, 1), datetime(2018, 12, 14, 1))


def test_session_rejects_mixed_timezones() -> None:
    with pytest.raises(ValidationError):
        Session("c001", "pf001", datetime(2018, 12, 14), datetime(2018, 12, 14, 1, tzinfo=UTC))


def test_session_compares_instants_in_repeated_hour() -> None:
    zone = ZoneInfo("Europe/Brussels")
    start = datetime(2018, 10, 28, 2, 50, tzinfo=zone)
    end = datetime(2018, 10, 28, 2, 10, fold=1, tzinfo=zone)
    assert Session("c001", "pf001", start, end).end is end
    with pytest.raises(InvalidIntervalError):
        Session("c001", "pf001", end, start)


def test_customer_contract_lookup() -> None:
    customer = Customer("c001", {"pf001"})
    assert customer.contracted_facility_ids == frozenset({"pf001"})
    assert customer.has_contract_for("pf001")
    assert not customer.has_contract_for("pf002")
    assert not Customer("c004").has_contract_for("pf001")


def test_actual_timeslot_exact_amount() -> None:
    slot = ActualTimeslot(datetime(2018, 12, 14, 8, 0), datetime(2018, 12, 14, 8, 20), Decimal("2.5"))
    assert slot.hours == Fraction(1, 3)
    assert slot.amount == Fraction(5, 6)
