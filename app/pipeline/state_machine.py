"""Reservation status state machine"""

from typing import Dict, FrozenSet

from app.errors import InvalidStatus, InvalidTransition, MissingField
from app.models.reservation import ReservationStatus
from app.pipeline.stages import CONTINUE, Fail, RequestContext, StageResult

BOOKED = ReservationStatus.BOOKED.value
SEATED = ReservationStatus.SEATED.value
FINISHED = ReservationStatus.FINISHED.value
CANCELLED = ReservationStatus.CANCELLED.value

TRANSITIONS: Dict[str, FrozenSet[str]] = {
    BOOKED: frozenset({SEATED, CANCELLED}),
    SEATED: frozenset({FINISHED, CANCELLED}),
    FINISHED: frozenset(),
    CANCELLED: frozenset(),
}


def can_transition(current: str, target: str) -> bool:
    return target in TRANSITIONS.get(current, frozenset())


def is_booked(ctx: RequestContext) -> StageResult:
    """Only a booked reservation may change status through the status endpoint"""
    current = ctx.locals["reservation"].status
    if current != BOOKED:
        return Fail(InvalidTransition(f"Reservation status: '{current}'."))
    return CONTINUE


def is_allowed_transition(ctx: RequestContext) -> StageResult:
    current = ctx.locals["reservation"].status
    target = ctx.data.get("status")
    if target is None or target == "":
        return Fail(MissingField("status"))
    if not isinstance(target, str):
        return Fail(InvalidStatus("status must be text"))
    if target not in TRANSITIONS:
        return Fail(InvalidStatus(f"Unknown status: {target}"))
    if not can_transition(current, target):
        return Fail(InvalidTransition(
            f"Cannot change reservation status from '{current}' to '{target}'."
        ))
    return CONTINUE


def is_seatable(ctx: RequestContext) -> StageResult:
    current = ctx.locals["reservation"].status
    if current == SEATED:
        return Fail(InvalidTransition("Reservation is already seated"))
    if not can_transition(current, SEATED):
        return Fail(InvalidTransition(f"Reservation status: '{current}'."))
    return CONTINUE


def is_status_change_allowed(ctx: RequestContext) -> StageResult:
    """An edit may keep the current status, otherwise it must be a legal move from booked"""
    current = ctx.locals["reservation"].status
    target = ctx.data.get("status")
    if not target or target == current:
        return CONTINUE
    if current != BOOKED or not can_transition(current, target):
        return Fail(InvalidTransition(
            f"Cannot change reservation status from '{current}' to '{target}'."
        ))
    return CONTINUE
