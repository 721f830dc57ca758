"""Terminal handlers: the last stage of each pipeline"""

from app.errors import InvalidDate
from app.pipeline.stages import Fail, RequestContext, Respond, StageResult
from app.pipeline.validators import parse_date
from app.schemas.reservation import ReservationResponse
from app.schemas.table import TableResponse

# Store-managed columns a client may echo back but never sets
READ_ONLY_FIELDS = ("reservation_id", "created_at", "updated_at")


def reservation_payload(reservation) -> dict:
    return ReservationResponse.model_validate(reservation).model_dump(mode="json")


def table_payload(table) -> dict:
    return TableResponse.model_validate(table).model_dump(mode="json")


async def create_reservation(ctx: RequestContext) -> StageResult:
    fields = {k: v for k, v in ctx.data.items() if k not in READ_ONLY_FIELDS}
    reservation = await ctx.reservations.create(fields)
    return Respond(201, {"data": reservation_payload(reservation)})


async def read_reservation(ctx: RequestContext) -> StageResult:
    return Respond(200, {"data": reservation_payload(ctx.locals["reservation"])})


async def list_reservations(ctx: RequestContext) -> StageResult:
    """Search by mobile number when given, otherwise list by date"""
    mobile_number = ctx.query.get("mobile_number")
    if mobile_number:
        reservations = await ctx.reservations.search(mobile_number)
    else:
        raw_date = ctx.query.get("date")
        on_date = None
        if raw_date:
            on_date = parse_date(raw_date)
            if on_date is None:
                return Fail(InvalidDate(f"Invalid date: {raw_date}"))
        reservations = await ctx.reservations.list(on_date)
    return Respond(200, {"data": [reservation_payload(r) for r in reservations]})


async def update_status(ctx: RequestContext) -> StageResult:
    reservation = ctx.locals["reservation"]
    updated = await ctx.reservations.status(
        reservation.reservation_id, {"status": ctx.data["status"]}
    )
    return Respond(200, {"data": reservation_payload(updated)})


async def update_reservation(ctx: RequestContext) -> StageResult:
    reservation = ctx.locals["reservation"]
    fields = {k: v for k, v in ctx.data.items() if k not in READ_ONLY_FIELDS}
    updated = await ctx.reservations.status(reservation.reservation_id, fields)
    return Respond(200, {"data": reservation_payload(updated)})


async def create_table(ctx: RequestContext) -> StageResult:
    table = await ctx.tables.create(ctx.data, ctx.locals.get("reservation"))
    return Respond(201, {"data": table_payload(table)})


async def list_tables(ctx: RequestContext) -> StageResult:
    tables = await ctx.tables.list()
    return Respond(200, {"data": [table_payload(t) for t in tables]})


async def seat_table(ctx: RequestContext) -> StageResult:
    table = await ctx.tables.seat(ctx.locals["table"], ctx.locals["reservation"])
    return Respond(200, {"data": table_payload(table)})


async def free_table(ctx: RequestContext) -> StageResult:
    table = await ctx.tables.free(ctx.locals["table"])
    return Respond(200, {"data": table_payload(table)})
