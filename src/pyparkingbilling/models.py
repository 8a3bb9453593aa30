"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from fractions import Fraction

from .const import DEFAULT_TIMEZONE, HOURS_PER_DAY, MICROSECONDS_PER_HOUR, ONE_MICROSECOND
from .exceptions import InvalidIntervalError, InvalidSessionError, ValidationError


class DayType(Enum):
    WEEKDAY = "weekday"
    WEEKEND = "weekend"


class ScheduleKind(Enum):
    """The four schedules held by a service profile."""

    WEEKDAYS = "weekdays_prices"
    WEEKEND = "weekend_prices"
    OVERRUN_WEEKDAYS = "overrun_weekdays_prices"
    OVERRUN_WEEKEND = "overrun_weekend_prices"


def to_price(value: Decimal | str | int) -> Decimal:
    if isinstance(value, bool) or isinstance(value, float):
        raise ValidationError("Prices must be Decimal, str or int, not float.")
    try:
        price = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError) as exc:
        raise ValidationError(f"Invalid price value {value!r}.") from exc
    if not price.is_finite():
        raise ValidationError("Prices must be finite.")
    if price < 0:
        raise ValidationError("Prices must not be negative.")
    return price


@dataclass(frozen=True, slots=True)
class TimeslotPrice:
    start_hour: int
    end_hour: int
    price_per_hour: Decimal

    def __post_init__(self) -> None:
        for hour in (self.start_hour, self.end_hour):
            if isinstance(hour, bool) or not isinstance(hour, int):
                raise ValidationError("Timeslot hours must be integers.")
            if not 0 <= hour <= HOURS_PER_DAY:
                raise ValidationError(f"Timeslot hour {hour} is outside 0-{HOURS_PER_DAY}.")
        if self.start_hour >= self.end_hour:
            raise ValidationError("Timeslot start_hour must be before end_hour.")
        object.__setattr__(self, "price_per_hour", to_price(self.price_per_hour))


Schedule = tuple[TimeslotPrice, ...]


@dataclass(frozen=True, slots=True)
class ServiceProfile:
    facility_id: str
    weekdays_prices: Schedule
    weekend_prices: Schedule
    overrun_weekdays_prices: Schedule
    overrun_weekend_prices: Schedule
    timezone: str = DEFAULT_TIMEZONE

    def __post_init__(self) -> None:
        if not isinstance(self.facility_id, str) or not self.facility_id:
            raise ValidationError("facility_id must be a non-empty string.")
        for kind in ScheduleKind:
            object.__setattr__(self, kind.value, tuple(getattr(self, kind.value)))

    def schedule(self, kind: ScheduleKind) -> Schedule:
        return getattr(self, kind.value)


@dataclass(frozen=True, slots=True)
class Session:
    customer_id: str
    parking_facility_id: str
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if not self.customer_id:
            raise InvalidSessionError("Session customer_id is required.")
        if not self.parking_facility_id:
            raise InvalidSessionError("Session parking_facility_id is required.")
        if not isinstance(self.start, datetime) or not isinstance(self.end, datetime):
            raise ValidationError("Session start and end must be datetimes.")
        if (self.start.tzinfo is None) != (self.end.tzinfo is None):
            raise ValidationError("Session start and end must both be naive or both be aware.")
        start, end = self.start, self.end
        if start.tzinfo is not None:
            # Same-zone aware datetimes compare on wall clock; compare instants.
            start, end = start.astimezone(UTC), end.astimezone(UTC)
        if end <= start:
            raise InvalidIntervalError("Session end must be after start.")


@dataclass(frozen=True, slots=True)
class Customer:
    id: str
    contracted_facility_ids: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "contracted_facility_ids", frozenset(self.contracted_facility_ids))

    def has_contract_for(self, facility_id: str) -> bool:
        return facility_id in self.contracted_facility_ids


@dataclass(frozen=True, slots=True)
class ActualTimeslot:
    """A session clipped to one tier on one calendar day.

    Bounds are naive wall-clock datetimes for naive sessions and UTC datetimes
    for timezone-aware sessions.
    """

    start: datetime
    end: datetime
    price_per_hour: Decimal

    @property
    def hours(self) -> Fraction:
        return Fraction((self.end - self.start) // ONE_MICROSECOND, MICROSECONDS_PER_HOUR)

    @property
    def amount(self) -> Fraction:
        return self.hours * Fraction(self.price_per_hour)


@dataclass(frozen=True, slots=True)
class Invoice:
    parking_facility_id: str
    customer_id: str
    amount: Decimal
