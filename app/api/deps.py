"""Shared request plumbing for pipeline-driven endpoints"""

from typing import Any, Dict, Optional

from fastapi import Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.pipeline.stages import Fail, Pipeline, RequestContext, Respond
from app.schemas.envelope import DataEnvelope
from app.services import ReservationService, TableService


def build_context(
    request: Request,
    db: AsyncSession,
    envelope: Optional[DataEnvelope] = None,
) -> RequestContext:
    return RequestContext(
        params=dict(request.path_params),
        query=dict(request.query_params),
        data=dict(envelope.data or {}) if envelope is not None else {},
        reservations=ReservationService(db),
        tables=TableService(db),
    )


async def respond(pipeline: Pipeline, ctx: RequestContext, response: Response) -> Dict[str, Any]:
    """Run a pipeline and hand its body back for the route's response model"""
    outcome = await pipeline.run(ctx)
    if isinstance(outcome, Fail):
        raise outcome.error
    if not isinstance(outcome, Respond):
        raise RuntimeError(f"pipeline {pipeline.name} finished without a response")
    response.status_code = outcome.status_code
    return outcome.body
