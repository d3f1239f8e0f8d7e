from __future__ import annotations

import re
from datetime import datetime, time, timedelta, timezone
from typing import Sequence

from airport_math.domain.entities import (
    DepartureBreakdown,
    DepartureCalculation,
    DeparturePreferences,
    FlightInfo,
    RouteInfo,
    TimeUntil,
)
from airport_math.domain.exceptions import InvalidInputError
from airport_math.domain.services import round_half_up

MIN_SAFETY_LEVEL = 0
MAX_SAFETY_LEVEL = 5

# Minutes between reaching the airport and boarding, indexed by safety level.
GATE_WAIT_BY_LEVEL: tuple[int, ...] = (10, 30, 45, 60, 90, 120)

_FLIGHT_TIME_RE = re.compile(r"^([0-1]?[0-9]|2[0-3]):([0-5][0-9])$")


def is_valid_flight_time(time_str: str) -> bool:
    """Return True for "H:MM" or "HH:MM" between 00:00 and 23:59."""
    return _FLIGHT_TIME_RE.match(time_str.strip()) is not None


def _wall_clock_in_zone_of(wall: datetime, now: datetime) -> datetime:
    """Attach the zone of now to a naive wall-clock time on the same date.

    A fixed offset equal to the host's current offset (what now_local returns)
    stands for the host zone, so the offset is resolved again for wall itself.
    Any other tzinfo, e.g. a ZoneInfo, works out its own offset per datetime.
    """
    tz = now.tzinfo
    if tz is None:
        return wall
    if isinstance(tz, timezone) and now.utcoffset() == now.astimezone().utcoffset():
        return wall.astimezone()
    return wall.replace(tzinfo=tz)


def flight_time_today(time_str: str, now: datetime) -> datetime:
    """Combine "HH:MM" with the calendar date of now, in the time zone of now.

    The offset is the one in force at the flight time, which differs from the
    offset of now on daylight-saving change days.
    No cross-midnight handling: a time earlier than now yields a past datetime.
    Raises InvalidInputError when time_str is not HH:MM.
    """
    match = _FLIGHT_TIME_RE.match(time_str.strip())
    if match is None:
        raise InvalidInputError(f"Invalid departure time {time_str!r}, expected HH:MM")
    wall = datetime.combine(now.date(), time(int(match.group(1)), int(match.group(2))))
    return _wall_clock_in_zone_of(wall, now)


def clamp_safety_level(level: int) -> int:
    return max(MIN_SAFETY_LEVEL, min(MAX_SAFETY_LEVEL, int(level)))


def gate_wait_minutes(level: int) -> int:
    return GATE_WAIT_BY_LEVEL[clamp_safety_level(level)]


def baggage_minutes(level: int, has_checked_bags: bool) -> int:
    if not has_checked_bags:
        return 0
    return round_half_up(10 + 4 * clamp_safety_level(level))


def security_minutes(level: int) -> int:
    return round_half_up(10 + 7 * clamp_safety_level(level))


def passport_minutes(level: int, needs_passport_control: bool) -> int:
    if not needs_passport_control:
        return 0
    return round_half_up(10 + 6 * clamp_safety_level(level))


def safety_buffer_minutes(level: int) -> int:
    return 5 * clamp_safety_level(level)


def calculate_departure(
    flight: FlightInfo,
    route: RouteInfo,
    prefs: DeparturePreferences | None = None,
    *,
    now: datetime,
) -> DepartureCalculation:
    """Work out when to leave so the traveller reaches the gate in time.

    leave_time = flight_time - (travel + gate wait + baggage + security
                                + passport + safety + additional buffer)

    Every buffer scales with the safety margin level, clamped to [0, 5].
    ``now`` only supplies the calendar date for the flight time, so equal
    inputs always give equal output.
    """
    if prefs is None:
        prefs = DeparturePreferences()

    level = clamp_safety_level(prefs.safety_margin_level)
    flight_time = flight_time_today(flight.departure_time, now)

    gate_wait = gate_wait_minutes(level)
    baggage = baggage_minutes(level, prefs.has_checked_bags)
    security = security_minutes(level)
    passport = passport_minutes(level, prefs.needs_passport_control)
    safety = safety_buffer_minutes(level)
    additional = max(0, int(prefs.additional_buffer))

    total_buffer = gate_wait + baggage + security + passport + safety + additional
    travel = route.duration

    return DepartureCalculation(
        flight_time=flight_time,
        check_in_buffer=gate_wait,
        gate_wait=gate_wait,
        travel_time=travel,
        baggage_time=baggage,
        security_time=security,
        passport_time=passport,
        safety_buffer=safety,
        additional_buffer=additional,
        total_buffer=total_buffer,
        leave_time=flight_time - timedelta(minutes=travel + total_buffer),
        arrival_deadline=flight_time - timedelta(minutes=gate_wait),
        breakdown=DepartureBreakdown(
            travel=travel,
            check_in=gate_wait,
            baggage=baggage,
            security=security,
            passport=passport,
            safety=safety + additional,
        ),
    )


def calculate_for_routes(
    flight: FlightInfo,
    routes: Sequence[RouteInfo],
    prefs: DeparturePreferences | None = None,
    *,
    now: datetime,
) -> list[tuple[DepartureCalculation, RouteInfo]]:
    """Apply calculate_departure to every route, keeping input order."""
    return [(calculate_departure(flight, route, prefs, now=now), route) for route in routes]


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------

def is_overdue(leave_time: datetime, now: datetime) -> bool:
    """True once now has passed leave_time. Leaving exactly now is not overdue."""
    return leave_time < now


def time_until(leave_time: datetime, now: datetime) -> TimeUntil:
    """Whole minutes between now and leave_time, split into hours and minutes."""
    diff_seconds = (leave_time - now).total_seconds()
    total_minutes = int(abs(diff_seconds) // 60)
    hours, minutes = divmod(total_minutes, 60)
    return TimeUntil(
        hours=hours,
        minutes=minutes,
        total_minutes=total_minutes,
        is_overdue=diff_seconds < 0,
    )


def summarize(calculation: DepartureCalculation, now: datetime) -> str:
    """One-line status: overdue, urgent (under an hour) or relaxed."""
    remaining = time_until(calculation.leave_time, now)
    if remaining.is_overdue:
        return f"You should have left {remaining.hours}h {remaining.minutes}m ago!"
    if remaining.total_minutes < 60:
        return f"Leave in {remaining.total_minutes} minutes!"
    return f"Leave in {remaining.hours}h {remaining.minutes}m"
