"""Error taxonomy and the API error boundary"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

logger = structlog.get_logger()


class ReservationAPIError(Exception):
    """Base class for errors surfaced to clients as {status, message}"""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidField(ReservationAPIError):
    def __init__(self, fields):
        self.fields = list(fields)
        super().__init__(f"Invalid field(s): {', '.join(self.fields)}")


class MissingField(ReservationAPIError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Must include a {field}")


class InvalidDate(ReservationAPIError):
    pass


class InvalidTime(ReservationAPIError):
    pass


class InvalidPeopleCount(ReservationAPIError):
    pass


class InvalidStatus(ReservationAPIError):
    pass


class MissingIdentifier(ReservationAPIError):
    def __init__(self, name: str = "reservation_id"):
        self.name = name
        super().__init__(f"missing {name}")


class InvalidTransition(ReservationAPIError):
    pass


class NotFound(ReservationAPIError):
    status_code = 404


class InvalidTableName(ReservationAPIError):
    pass


class InvalidCapacity(ReservationAPIError):
    pass


class InsufficientCapacity(ReservationAPIError):
    pass


class TableOccupied(ReservationAPIError):
    pass


class TableNotOccupied(ReservationAPIError):
    pass


class InvalidText(ReservationAPIError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} must be text")


class PipelineStageError(ReservationAPIError):
    """Unexpected failure raised from inside a pipeline stage"""
    status_code = 500

    def __init__(self, pipeline: str, stage: str, cause: BaseException):
        self.pipeline = pipeline
        self.stage = stage
        self.cause = cause
        super().__init__("Internal server error")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": status_code, "message": message},
    )


async def api_error_handler(request: Request, exc: ReservationAPIError):
    if exc.status_code >= 500:
        logger.error(
            "Request failed",
            path=request.url.path,
            error=exc.message,
            pipeline=getattr(exc, "pipeline", None),
            stage=getattr(exc, "stage", None),
            exc_info=getattr(exc, "cause", None),
        )
    return error_response(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    if exc.status_code == 404 and message == "Not Found":
        message = f"Path not found: {request.url.path}"
    elif exc.status_code == 405:
        message = f"{request.method} not allowed for {request.url.path}"
    return error_response(exc.status_code, message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return error_response(400, message)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        exc_info=exc,
    )
    return error_response(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Map the error taxonomy onto the {status, message} response shape"""
    app.add_exception_handler(ReservationAPIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
