"""Reservation schemas"""

from datetime import date, datetime, time
from typing import Optional, List
from pydantic import BaseModel


class ReservationResponse(BaseModel):
    """Reservation response"""
    reservation_id: int
    first_name: str
    last_name: str
    mobile_number: str
    reservation_date: date
    reservation_time: time
    people: int
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ReservationEnvelope(BaseModel):
    data: ReservationResponse


class ReservationListEnvelope(BaseModel):
    data: List[ReservationResponse]
