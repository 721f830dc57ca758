"""Guards for seating a reservation at a table and freeing it again"""

from app.errors import InsufficientCapacity, TableNotOccupied, TableOccupied
from app.pipeline.stages import CONTINUE, Fail, RequestContext, StageResult


def has_capacity(ctx: RequestContext) -> StageResult:
    table = ctx.locals["table"]
    reservation = ctx.locals["reservation"]
    if table.capacity < reservation.people:
        return Fail(InsufficientCapacity(
            f"Table {table.table_name} has capacity {table.capacity}, "
            f"reservation is for {reservation.people} people"
        ))
    return CONTINUE


def is_free(ctx: RequestContext) -> StageResult:
    table = ctx.locals["table"]
    if table.is_occupied:
        return Fail(TableOccupied(f"Table {table.table_name} is occupied"))
    return CONTINUE


def is_occupied(ctx: RequestContext) -> StageResult:
    table = ctx.locals["table"]
    if not table.is_occupied:
        return Fail(TableNotOccupied(f"Table {table.table_name} is not occupied"))
    return CONTINUE


def fits_new_table(ctx: RequestContext) -> StageResult:
    """A table created already occupied must hold its reservation's party"""
    reservation = ctx.locals["reservation"]
    capacity = ctx.data["capacity"]
    if capacity < reservation.people:
        return Fail(InsufficientCapacity(
            f"Table {ctx.data['table_name'].strip()} has capacity {capacity}, "
            f"reservation is for {reservation.people} people"
        ))
    return CONTINUE
