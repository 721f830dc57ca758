"""Identifier extraction and existence checks"""

from app.errors import MissingIdentifier, NotFound
from app.pipeline.stages import CONTINUE, Fail, RequestContext, StageResult


def extract_reservation_id(ctx: RequestContext) -> StageResult:
    """
    Take the reservation id from the route (``/reservations/{id}``), falling
    back to the body (``PUT /tables/{table_id}/seat`` names it in ``data``).
    """
    reservation_id = ctx.params.get("reservation_id") or ctx.data.get("reservation_id")
    if not reservation_id:
        return Fail(MissingIdentifier("reservation_id"))
    ctx.locals["reservation_id"] = reservation_id
    return CONTINUE


async def reservation_exists(ctx: RequestContext) -> StageResult:
    reservation_id = ctx.locals["reservation_id"]
    reservation = await ctx.reservations.read(reservation_id)
    if reservation is None:
        return Fail(NotFound(f"Reservation doesn't exist: {reservation_id}"))
    ctx.locals["reservation"] = reservation
    return CONTINUE


def extract_table_id(ctx: RequestContext) -> StageResult:
    table_id = ctx.params.get("table_id")
    if not table_id:
        return Fail(MissingIdentifier("table_id"))
    ctx.locals["table_id"] = table_id
    return CONTINUE


async def table_exists(ctx: RequestContext) -> StageResult:
    table_id = ctx.locals["table_id"]
    table = await ctx.tables.read(table_id)
    if table is None:
        return Fail(NotFound(f"Table doesn't exist: {table_id}"))
    ctx.locals["table"] = table
    return CONTINUE
