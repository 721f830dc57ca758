"""Reservation data access"""

import re
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.models.reservation import Reservation, ReservationStatus
from app.pipeline.validators import parse_date, parse_time

logger = structlog.get_logger()

EDITABLE_FIELDS = (
    "first_name",
    "last_name",
    "mobile_number",
    "reservation_date",
    "reservation_time",
    "people",
    "status",
)

# Punctuation stripped from stored numbers before matching a search
MOBILE_PUNCTUATION = ("(", ")", "-", " ", ".", "+")


def to_id(value: Any) -> Optional[int]:
    """Coerce a path/body identifier, None when it cannot name a row"""
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _column_values(fields: Mapping[str, Any]) -> Dict[str, Any]:
    values = {}
    for name in EDITABLE_FIELDS:
        if name not in fields:
            continue
        value = fields[name]
        if name == "reservation_date" and isinstance(value, str):
            value = parse_date(value)
        elif name == "reservation_time" and isinstance(value, str):
            value = parse_time(value)
        values[name] = value
    if not values.get("status"):
        values.pop("status", None)
    return values


class ReservationService:
    """Reservation collaborator used by the request pipelines"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def read(self, reservation_id: Any) -> Optional[Reservation]:
        key = to_id(reservation_id)
        if key is None:
            return None
        return await self.db.get(Reservation, key)

    async def list(self, on_date: Optional[date] = None) -> List[Reservation]:
        """Reservations still on the floor plan, optionally for one day"""
        query = select(Reservation).where(
            Reservation.status != ReservationStatus.FINISHED.value
        )
        if on_date is not None:
            query = query.where(Reservation.reservation_date == on_date)
        query = query.order_by(
            Reservation.reservation_date,
            Reservation.reservation_time,
            Reservation.reservation_id,
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def search(self, mobile_number: str) -> List[Reservation]:
        """Match a full or partial mobile number regardless of formatting"""
        digits = re.sub(r"\D", "", mobile_number) or mobile_number

        stored = Reservation.mobile_number
        for char in MOBILE_PUNCTUATION:
            stored = func.replace(stored, char, "")

        result = await self.db.execute(
            select(Reservation)
            .where(stored.like(f"%{digits}%"))
            .order_by(Reservation.reservation_date, Reservation.reservation_time)
        )
        return list(result.scalars().all())

    async def create(self, fields: Mapping[str, Any]) -> Reservation:
        values = _column_values(fields)
        values.setdefault("status", ReservationStatus.BOOKED.value)

        reservation = Reservation(**values)
        self.db.add(reservation)
        await self.db.commit()
        await self.db.refresh(reservation)

        logger.info(
            "Reservation created",
            reservation_id=reservation.reservation_id,
            reservation_date=str(reservation.reservation_date),
            people=reservation.people,
        )
        return reservation

    async def status(self, reservation_id: Any, fields: Mapping[str, Any]) -> Reservation:
        """Persist new field values (status included) on an existing reservation"""
        reservation = await self.read(reservation_id)
        if reservation is None:
            raise LookupError(f"reservation {reservation_id} vanished before update")

        previous = reservation.status
        for name, value in _column_values(fields).items():
            setattr(reservation, name, value)

        await self.db.commit()
        await self.db.refresh(reservation)

        logger.info(
            "Reservation updated",
            reservation_id=reservation.reservation_id,
            previous_status=previous,
            status=reservation.status,
        )
        return reservation
