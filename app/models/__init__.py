"""Database models"""

from app.models.reservation import Reservation, ReservationStatus
from app.models.table import Table

__all__ = [
    "Reservation",
    "ReservationStatus",
    "Table",
]
