"""Reservation management API endpoints"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.pipeline import pipelines
from app.schemas.envelope import DataEnvelope
from app.schemas.error import ErrorResponse
from app.schemas.reservation import ReservationEnvelope, ReservationListEnvelope
from app.api.deps import build_context, respond

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.get("", response_model=ReservationListEnvelope, responses=ERROR_RESPONSES)
async def list_reservations(
    request: Request,
    response: Response,
    date: Optional[str] = Query(None, description="Reservations on this YYYY-MM-DD date"),
    mobile_number: Optional[str] = Query(None, description="Full or partial mobile number"),
    db: AsyncSession = Depends(get_db),
):
    """List reservations for a date, or search them by mobile number"""
    ctx = build_context(request, db)
    return await respond(pipelines.LIST, ctx, response)


@router.post("", response_model=ReservationEnvelope, status_code=201, responses=ERROR_RESPONSES)
async def create_reservation(
    request: Request,
    response: Response,
    envelope: Optional[DataEnvelope] = None,
    db: AsyncSession = Depends(get_db),
):
    """Create a new reservation"""
    ctx = build_context(request, db, envelope)
    return await respond(pipelines.CREATE, ctx, response)


@router.get("/{reservation_id}", response_model=ReservationEnvelope, responses=ERROR_RESPONSES)
async def get_reservation(
    reservation_id: str,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Get reservation details"""
    ctx = build_context(request, db)
    return await respond(pipelines.READ, ctx, response)


@router.put("/{reservation_id}", response_model=ReservationEnvelope, responses=ERROR_RESPONSES)
async def update_reservation(
    reservation_id: str,
    request: Request,
    response: Response,
    envelope: Optional[DataEnvelope] = None,
    db: AsyncSession = Depends(get_db),
):
    """Edit every field of a reservation"""
    ctx = build_context(request, db, envelope)
    return await respond(pipelines.UPDATE, ctx, response)


@router.put("/{reservation_id}/status", response_model=ReservationEnvelope, responses=ERROR_RESPONSES)
async def update_reservation_status(
    reservation_id: str,
    request: Request,
    response: Response,
    envelope: Optional[DataEnvelope] = None,
    db: AsyncSession = Depends(get_db),
):
    """Move a booked reservation to its next status"""
    ctx = build_context(request, db, envelope)
    return await respond(pipelines.STATUS_UPDATE, ctx, response)
