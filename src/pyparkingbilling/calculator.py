"""Session cost calculation against tiered time-of-day schedules.

A session is walked one calendar day at a time. For every day the schedule
that applies (weekday or weekend, contracted or overrun) is resolved again,
each timeslot is anchored to that day and clipped to the session, and the
clipped pieces are priced with exact arithmetic. An instant that falls exactly
on a timeslot boundary belongs to the later timeslot.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from fractions import Fraction
from zoneinfo import ZoneInfo

from .const import ONE_DAY
from .exceptions import ValidationError
from .models import ActualTimeslot, Customer, ServiceProfile, Session
from .schedule import resolve
from .util import (
    anchor_hour,
    facility_date,
    fraction_to_decimal,
    normalize_interval,
    overlaps,
)

_LOGGER = logging.getLogger(__name__)


def max_days(start: datetime, end: datetime) -> int:
    """Upper bound on the number of calendar days a walk may visit."""
    if end <= start:
        return 0
    return -(-(end - start) // ONE_DAY) + 1


def _day_bound(start: datetime, end: datetime, zone: ZoneInfo | None) -> int:
    bound = max_days(start, end)
    if zone is None:
        return bound
    # A 23-hour day fits more calendar days into the same elapsed time.
    return max(bound, (facility_date(end, zone) - facility_date(start, zone)).days + 1)


def decompose(
    profile: ServiceProfile,
    start: datetime,
    end: datetime,
    is_contracted: bool,
) -> list[ActualTimeslot]:
    """Split a session into pieces aligned to calendar days and timeslots.

    Timezone-aware sessions are walked on the facility's wall-clock calendar,
    but timeslots are anchored as UTC instants, so a piece lasts the real time
    elapsed in it, also on daylight saving change days.
    """
    if profile is None:
        raise ValidationError("A service profile is required.")
    session_start, session_end, zone = normalize_interval(start, end, profile.timezone)
    slots: list[ActualTimeslot] = []
    base_date = facility_date(session_start, zone)
    for offset in range(_day_bound(session_start, session_end, zone)):
        day = base_date + offset * ONE_DAY
        overlapped = False
        for timeslot in resolve(profile, day, is_contracted):
            slot_start = anchor_hour(day, timeslot.start_hour, zone)
            slot_end = anchor_hour(day, timeslot.end_hour, zone)
            if not overlaps(session_start, session_end, slot_start, slot_end):
                continue
            overlapped = True
            slots.append(
                ActualTimeslot(
                    start=max(session_start, slot_start),
                    end=min(session_end, slot_end),
                    price_per_hour=timeslot.price_per_hour,
                )
            )
        if not overlapped or anchor_hour(day + ONE_DAY, 0, zone) >= session_end:
            break
    return slots


def exact_cost(
    profile: ServiceProfile,
    start: datetime,
    end: datetime,
    is_contracted: bool,
) -> Fraction:
    """Return the unrounded cost of parking from ``start`` to ``end``.

    Costs are additive at this level: splitting a session at any minute gives
    parts that sum exactly to the cost of the whole.
    """
    if profile is None:
        raise ValidationError("A service profile is required.")
    _LOGGER.debug(
        "Session cost for facility %s started (contracted=%s)",
        profile.facility_id,
        is_contracted,
    )
    slots = decompose(profile, start, end, is_contracted)
    total = sum((slot.amount for slot in slots), Fraction(0))
    _LOGGER.debug(
        "Session cost for facility %s completed: %d timeslots priced",
        profile.facility_id,
        len(slots),
    )
    return total


def session_cost(
    profile: ServiceProfile,
    start: datetime,
    end: datetime,
    is_contracted: bool,
) -> Decimal:
    """Return the cost of parking from ``start`` to ``end`` as ``Decimal``.

    The exact amount from :func:`exact_cost` is rounded once, to 28 significant
    digits, independently of the caller's decimal context. Amounts that do not
    terminate in decimal (a single minute at 2.5 per hour) are therefore not
    additive after rounding; add :func:`exact_cost` results instead.
    """
    return fraction_to_decimal(exact_cost(profile, start, end, is_contracted))


def calculate_price(
    profile: ServiceProfile,
    sessions: Iterable[Session],
    customer: Customer | None,
) -> Decimal:
    """Sum the cost of a customer's sessions.

    The contract status is derived per session from the facility it was parked
    at. Without a customer record every session is priced at overrun rates.
    The batch is summed exactly and rounded to ``Decimal`` once.
    """
    if profile is None:
        raise ValidationError("A service profile is required.")
    _LOGGER.debug("Batch price for facility %s started", profile.facility_id)
    total = Fraction(0)
    count = 0
    for session in sessions:
        if session is None:
            raise ValidationError("Session is required.")
        is_contracted = customer is not None and customer.has_contract_for(
            session.parking_facility_id
        )
        total += exact_cost(profile, session.start, session.end, is_contracted)
        count += 1
    _LOGGER.debug(
        "Batch price for facility %s completed: %d sessions",
        profile.facility_id,
        count,
    )
    return fraction_to_decimal(total)
