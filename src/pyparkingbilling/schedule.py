"""Schedule resolution by day type and contract status."""

from __future__ import annotations

from datetime import date

from .models import DayType, Schedule, ScheduleKind, ServiceProfile
from .util import is_weekend

_SCHEDULE_TABLE: dict[tuple[DayType, bool], ScheduleKind] = {
    (DayType.WEEKDAY, True): ScheduleKind.WEEKDAYS,
    (DayType.WEEKEND, True): ScheduleKind.WEEKEND,
    (DayType.WEEKDAY, False): ScheduleKind.OVERRUN_WEEKDAYS,
    (DayType.WEEKEND, False): ScheduleKind.OVERRUN_WEEKEND,
}


def day_type(day: date) -> DayType:
    return DayType.WEEKEND if is_weekend(day) else DayType.WEEKDAY


def schedule_kind(day: date, is_contracted: bool) -> ScheduleKind:
    return _SCHEDULE_TABLE[(day_type(day), bool(is_contracted))]


def resolve(profile: ServiceProfile, day: date, is_contracted: bool) -> Schedule:
    """Return the ordered timeslots that apply on ``day``."""
    return profile.schedule(schedule_kind(day, is_contracted))
