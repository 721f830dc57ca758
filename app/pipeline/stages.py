"""
Ordered request pipelines.

A stage is a callable taking the per-request ``RequestContext`` and returning
(or awaiting to) one of:

* ``CONTINUE``          - hand control to the next stage
* ``Fail(error)``       - stop, the error becomes the response
* ``Respond(code, body)`` - stop, the terminal handler produced a response

``Pipeline.run`` folds the stages in order. A pipeline is itself a stage, so
a shared prefix (e.g. "reservation exists") can be spliced into another one.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional, Sequence, Union

import structlog

from app.errors import ReservationAPIError, PipelineStageError

logger = structlog.get_logger()


class Continue:
    """Pass control to the next stage"""

    def __repr__(self) -> str:
        return "CONTINUE"


CONTINUE = Continue()


@dataclass
class Fail:
    """Abort the pipeline with a client-facing error"""
    error: ReservationAPIError


@dataclass
class Respond:
    """Terminal outcome carrying the HTTP status and JSON body"""
    status_code: int
    body: Dict[str, Any]


StageResult = Union[Continue, Fail, Respond]


@dataclass
class RequestContext:
    """Request-scoped state handed from stage to stage"""
    params: Dict[str, Any] = field(default_factory=dict)
    query: Dict[str, Any] = field(default_factory=dict)
    data: Dict[str, Any] = field(default_factory=dict)
    locals: Dict[str, Any] = field(default_factory=dict)
    reservations: Optional[Any] = None
    tables: Optional[Any] = None


Stage = Callable[[RequestContext], Union[StageResult, Awaitable[StageResult]]]


def stage_name(stage: Stage) -> str:
    return getattr(stage, "__name__", None) or repr(stage)


class Pipeline:
    """Named, ordered sequence of stages"""

    def __init__(self, name: str, stages: Sequence[Stage]):
        self.name = name
        self.stages = tuple(stages)
        self.__name__ = name

    def __repr__(self) -> str:
        return f"Pipeline({self.name!r}, {[stage_name(s) for s in self.stages]})"

    async def __call__(self, ctx: RequestContext) -> StageResult:
        return await self.run(ctx)

    async def run(self, ctx: RequestContext) -> StageResult:
        for stage in self.stages:
            name = stage_name(stage)
            try:
                result = stage(ctx)
                if inspect.isawaitable(result):
                    result = await result
            except PipelineStageError:
                raise
            except ReservationAPIError as exc:
                # Collaborators may raise taxonomy errors directly
                result = Fail(exc)
            except Exception as exc:
                logger.error(
                    "Pipeline stage raised",
                    pipeline=self.name,
                    stage=name,
                    error=str(exc),
                )
                raise PipelineStageError(self.name, name, exc) from exc

            if isinstance(result, Fail):
                logger.info(
                    "Pipeline rejected request",
                    pipeline=self.name,
                    stage=name,
                    error=type(result.error).__name__,
                    message=result.error.message,
                )
                return result
            if isinstance(result, Respond):
                return result
            if not isinstance(result, Continue):
                raise PipelineStageError(
                    self.name, name, TypeError(f"stage returned {result!r}")
                )

        return CONTINUE


def check(validator: Callable[..., StageResult], *args: Any, **options: Any) -> Stage:
    """Adapt a validator over the submitted data into a pipeline stage"""

    def stage(ctx: RequestContext) -> StageResult:
        return validator(ctx.data, *args, **options)

    suffix = "_".join(str(arg) for arg in args)
    stage.__name__ = f"{validator.__name__}_{suffix}" if suffix else validator.__name__
    return stage
