"""Field validators for reservation and table payloads.

Every validator is a pure function of the submitted ``data`` mapping and
returns ``CONTINUE`` or ``Fail(error)``.
"""

import calendar
import re
from datetime import date, datetime, time
from typing import Any, Iterable, Mapping, Optional

from app.errors import (
    InvalidCapacity,
    InvalidDate,
    InvalidField,
    InvalidPeopleCount,
    InvalidStatus,
    InvalidTableName,
    InvalidText,
    InvalidTime,
    MissingField,
)
from app.models.reservation import ReservationStatus
from app.pipeline.stages import CONTINUE, Fail, StageResult

RESERVATION_FIELDS = frozenset({
    "first_name",
    "last_name",
    "mobile_number",
    "reservation_date",
    "reservation_time",
    "people",
    "status",
    "created_at",
    "updated_at",
    "reservation_id",
})

REQUIRED_RESERVATION_FIELDS = (
    "first_name",
    "last_name",
    "mobile_number",
    "reservation_date",
    "reservation_time",
    "people",
)

TABLE_FIELDS = frozenset({
    "table_name",
    "capacity",
    "reservation_id",
    "table_id",
    "created_at",
    "updated_at",
})

REQUIRED_TABLE_FIELDS = ("table_name", "capacity")

TEXT_FIELDS = ("first_name", "last_name", "mobile_number")

# 24-hour HH:MM or HH:MM:SS
TIME_PATTERN = re.compile(r"^(?:[01][0-9]|2[0-3]):[0-5][0-9](?::[0-5][0-9])?$")

# Statuses a reservation may not be created or edited into
OCCUPYING_STATUSES = frozenset({ReservationStatus.SEATED.value, ReservationStatus.FINISHED.value})

KNOWN_STATUSES = frozenset(status.value for status in ReservationStatus)

MIN_TABLE_NAME_LENGTH = 2


def parse_date(value: Any) -> Optional[date]:
    """Parse an ISO ``YYYY-MM-DD`` string, None when it is not a real date"""
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def parse_time(value: Any) -> Optional[time]:
    """Parse a 24-hour ``HH:MM[:SS]`` string, None when malformed"""
    if not isinstance(value, str) or not TIME_PATTERN.match(value):
        return None
    return time.fromisoformat(value)


def is_positive_int(value: Any) -> bool:
    # bool is an int subclass, JSON true must not count as one guest
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def has_valid_fields(data: Mapping[str, Any], allowed: Iterable[str] = RESERVATION_FIELDS) -> StageResult:
    """Reject any key outside the recognized set, naming all offenders"""
    allowed = frozenset(allowed)
    invalid = [key for key in data if key not in allowed]
    if invalid:
        return Fail(InvalidField(invalid))
    return CONTINUE


def has_field(data: Mapping[str, Any], name: str) -> StageResult:
    if not data.get(name):
        return Fail(MissingField(name))
    return CONTINUE


def is_text(data: Mapping[str, Any], name: str) -> StageResult:
    if not isinstance(data.get(name), str):
        return Fail(InvalidText(name))
    return CONTINUE


def is_valid_date(
    data: Mapping[str, Any],
    now: Optional[datetime] = None,
    closed_weekday: int = calendar.TUESDAY,
) -> StageResult:
    """
    The reservation date must be a real date, not on the closed weekday and
    not in the past. When ``reservation_time`` is well formed the full moment
    is compared against ``now``, otherwise the start of the day.
    """
    reservation_date = parse_date(data.get("reservation_date"))
    if reservation_date is None:
        return Fail(InvalidDate("Invalid reservation_date"))

    if reservation_date.weekday() == closed_weekday:
        return Fail(InvalidDate(f"Restaurant is closed on {calendar.day_name[closed_weekday]}s"))

    reservation_time = parse_time(data.get("reservation_time")) or time.min
    moment = datetime.combine(reservation_date, reservation_time)
    if moment < (now or datetime.now()):
        return Fail(InvalidDate("Reservation must be set in the future"))

    return CONTINUE


def is_valid_time(data: Mapping[str, Any]) -> StageResult:
    if parse_time(data.get("reservation_time")) is None:
        return Fail(InvalidTime("Invalid reservation_time"))
    return CONTINUE


def is_valid_people(data: Mapping[str, Any]) -> StageResult:
    if not is_positive_int(data.get("people")):
        return Fail(InvalidPeopleCount("Invalid number of people"))
    return CONTINUE


def is_creatable_status(data: Mapping[str, Any]) -> StageResult:
    """New or edited reservations cannot start out seated or finished"""
    status = data.get("status")
    if status is None or status == "":
        return CONTINUE
    if not isinstance(status, str):
        return Fail(InvalidStatus("status must be text"))
    if status in OCCUPYING_STATUSES:
        return Fail(InvalidStatus(f"status is {status}"))
    if status not in KNOWN_STATUSES:
        return Fail(InvalidStatus(f"Unknown status: {status}"))
    return CONTINUE


def is_valid_table_name(data: Mapping[str, Any]) -> StageResult:
    table_name = data.get("table_name")
    if not isinstance(table_name, str) or len(table_name.strip()) < MIN_TABLE_NAME_LENGTH:
        return Fail(InvalidTableName(
            f"table_name must be at least {MIN_TABLE_NAME_LENGTH} characters long"
        ))
    return CONTINUE


def is_valid_capacity(data: Mapping[str, Any]) -> StageResult:
    if not is_positive_int(data.get("capacity")):
        return Fail(InvalidCapacity("capacity must be a positive whole number"))
    return CONTINUE
