"""Table and seating API endpoints"""

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.pipeline import pipelines
from app.schemas.envelope import DataEnvelope
from app.schemas.error import ErrorResponse
from app.schemas.table import TableEnvelope, TableListEnvelope
from app.api.deps import build_context, respond

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.get("", response_model=TableListEnvelope)
async def list_tables(
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """List tables by name"""
    ctx = build_context(request, db)
    return await respond(pipelines.TABLE_LIST, ctx, response)


@router.post("", response_model=TableEnvelope, status_code=201, responses=ERROR_RESPONSES)
async def create_table(
    request: Request,
    response: Response,
    envelope: Optional[DataEnvelope] = None,
    db: AsyncSession = Depends(get_db),
):
    """Create a new table, optionally seating a booked reservation at it"""
    ctx = build_context(request, db, envelope)
    return await respond(pipelines.TABLE_CREATE, ctx, response)


@router.put("/{table_id}/seat", response_model=TableEnvelope, responses=ERROR_RESPONSES)
async def seat_reservation(
    table_id: str,
    request: Request,
    response: Response,
    envelope: Optional[DataEnvelope] = None,
    db: AsyncSession = Depends(get_db),
):
    """Seat the reservation named in the body at this table"""
    ctx = build_context(request, db, envelope)
    return await respond(pipelines.TABLE_SEAT, ctx, response)


@router.delete("/{table_id}/seat", response_model=TableEnvelope, responses=ERROR_RESPONSES)
async def free_table(
    table_id: str,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Finish the seated reservation and free the table"""
    ctx = build_context(request, db)
    return await respond(pipelines.TABLE_FREE, ctx, response)
