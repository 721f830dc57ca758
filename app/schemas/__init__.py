"""Pydantic schemas for response serialization and documentation"""

from app.schemas.reservation import (
    ReservationResponse,
    ReservationEnvelope,
    ReservationListEnvelope,
)
from app.schemas.table import (
    TableResponse,
    TableEnvelope,
    TableListEnvelope,
)
from app.schemas.error import ErrorResponse
from app.schemas.envelope import DataEnvelope

__all__ = [
    "ReservationResponse",
    "ReservationEnvelope",
    "ReservationListEnvelope",
    "TableResponse",
    "TableEnvelope",
    "TableListEnvelope",
    "ErrorResponse",
    "DataEnvelope",
]
