"""Shared utilities for validation and time normalization."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, date, datetime, time
from decimal import ROUND_HALF_EVEN, Context, Decimal
from fractions import Fraction
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .const import DECIMAL_PRECISION, HOURS_PER_DAY, ONE_DAY, WEEKEND_DAYS
from .exceptions import ConfigError, InvalidIntervalError, ValidationError
from .models import TimeslotPrice

_DECIMAL_CONTEXT = Context(prec=DECIMAL_PRECISION, rounding=ROUND_HALF_EVEN)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp; naive values are facility wall-clock time."""
    if not isinstance(value, str) or not value:
        raise ValidationError("Timestamp must be a non-empty string.")
    raw = value.strip()
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError("Timestamp is not a valid ISO 8601 value.") from exc


def get_zone(name: str) -> ZoneInfo:
    if not isinstance(name, str) or not name:
        raise ConfigError("Timezone must be a non-empty string.")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(f"Unknown timezone '{name}'.") from exc


def truncate_to_minute(value: datetime) -> datetime:
    return value.replace(second=0, microsecond=0)


def facility_date(value: datetime, zone: ZoneInfo | None) -> date:
    """Calendar date of ``value`` on the facility's wall clock."""
    if zone is None:
        return value.date()
    return value.astimezone(zone).date()


def normalize_interval(
    start: datetime,
    end: datetime,
    timezone: str,
) -> tuple[datetime, datetime, ZoneInfo | None]:
    """Validate a session interval and truncate it to whole minutes.

    Naive instants are facility wall-clock time and are returned unchanged
    apart from truncation, together with a ``None`` zone. Aware instants are
    returned in UTC with the facility zone, so that comparisons and durations
    measure real elapsed time across daylight saving changes.
    """
    if not isinstance(start, datetime) or not isinstance(end, datetime):
        raise ValidationError("start and end must be datetimes.")
    if (start.tzinfo is None) != (end.tzinfo is None):
        raise ValidationError("start and end must both be naive or both be aware.")
    zone = None
    if start.tzinfo is not None:
        zone = get_zone(timezone)
        start, end = start.astimezone(UTC), end.astimezone(UTC)
    if end <= start:
        raise InvalidIntervalError("end must be after start.")
    return truncate_to_minute(start), truncate_to_minute(end), zone


def is_weekend(day: date) -> bool:
    return day.weekday() in WEEKEND_DAYS


def anchor_hour(day: date, hour: int, zone: ZoneInfo | None = None) -> datetime:
    """Absolute instant of ``hour`` on ``day``; hour 24 is midnight of the next day.

    With a zone the hour is read on the facility wall clock and returned in UTC.
    """
    if hour == HOURS_PER_DAY:
        day, hour = day + ONE_DAY, 0
    anchored = datetime.combine(day, time(hour), tzinfo=zone)
    if zone is None:
        return anchored
    return anchored.astimezone(UTC)


def overlaps(
    start: datetime,
    end: datetime,
    slot_start: datetime,
    slot_end: datetime,
) -> bool:
    return start < slot_end and slot_start < end


def validate_schedule(schedule: Sequence[TimeslotPrice]) -> None:
    """Check that a schedule tiles the day without gaps or overlaps."""
    if not schedule:
        raise ValidationError("Schedule must contain at least one timeslot.")
    expected_start = 0
    for slot in sorted(schedule, key=lambda item: item.start_hour):
        if slot.start_hour < expected_start:
            raise ValidationError(f"Timeslot starting at hour {slot.start_hour} overlaps.")
        if slot.start_hour > expected_start:
            raise ValidationError(f"Schedule has a gap at hour {expected_start}.")
        expected_start = slot.end_hour
    if expected_start != HOURS_PER_DAY:
        raise ValidationError(f"Schedule has a gap at hour {expected_start}.")


def fraction_to_decimal(value: Fraction) -> Decimal:
    """Round an exact amount to ``Decimal`` once, ignoring the caller's context."""
    return _DECIMAL_CONTEXT.divide(Decimal(value.numerator), Decimal(value.denominator))
