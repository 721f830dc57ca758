"""Named pipelines, one per API operation"""

from app.config import settings
from app.pipeline import handlers, resolvers, seating, state_machine, validators
from app.pipeline.stages import CONTINUE, Pipeline, RequestContext, StageResult, check
from app.pipeline.validators import (
    REQUIRED_RESERVATION_FIELDS,
    REQUIRED_TABLE_FIELDS,
    TABLE_FIELDS,
    TEXT_FIELDS,
)


RESERVATION_BODY_CHECKS = (
    check(validators.has_valid_fields),
    *(check(validators.has_field, name) for name in REQUIRED_RESERVATION_FIELDS),
    *(check(validators.is_text, name) for name in TEXT_FIELDS),
    check(validators.is_valid_date, closed_weekday=settings.closed_weekday),
    check(validators.is_valid_time),
    check(validators.is_valid_people),
    check(validators.is_creatable_status),
)

RESERVATION_EXISTS = Pipeline("reservation_exists", [
    resolvers.extract_reservation_id,
    resolvers.reservation_exists,
])

CREATE = Pipeline("create", [
    *RESERVATION_BODY_CHECKS,
    handlers.create_reservation,
])

READ = Pipeline("read", [
    RESERVATION_EXISTS,
    handlers.read_reservation,
])

LIST = Pipeline("list", [
    handlers.list_reservations,
])

STATUS_UPDATE = Pipeline("status_update", [
    RESERVATION_EXISTS,
    state_machine.is_booked,
    state_machine.is_allowed_transition,
    handlers.update_status,
])

UPDATE = Pipeline("update", [
    *RESERVATION_BODY_CHECKS,
    RESERVATION_EXISTS,
    state_machine.is_status_change_allowed,
    handlers.update_reservation,
])


SEAT_ON_CREATE = Pipeline("seat_on_create", [
    RESERVATION_EXISTS,
    seating.fits_new_table,
    state_machine.is_seatable,
])


async def seat_on_create_if_given(ctx: RequestContext) -> StageResult:
    """A table may be created already holding a booked reservation"""
    if not ctx.data.get("reservation_id"):
        return CONTINUE
    return await SEAT_ON_CREATE(ctx)


TABLE_CREATE = Pipeline("table_create", [
    check(validators.has_valid_fields, allowed=TABLE_FIELDS),
    *(check(validators.has_field, name) for name in REQUIRED_TABLE_FIELDS),
    check(validators.is_valid_table_name),
    check(validators.is_valid_capacity),
    seat_on_create_if_given,
    handlers.create_table,
])

TABLE_LIST = Pipeline("table_list", [
    handlers.list_tables,
])

TABLE_EXISTS = Pipeline("table_exists", [
    resolvers.extract_table_id,
    resolvers.table_exists,
])

TABLE_SEAT = Pipeline("table_seat", [
    RESERVATION_EXISTS,
    TABLE_EXISTS,
    seating.has_capacity,
    seating.is_free,
    state_machine.is_seatable,
    handlers.seat_table,
])

TABLE_FREE = Pipeline("table_free", [
    TABLE_EXISTS,
    seating.is_occupied,
    handlers.free_table,
])
