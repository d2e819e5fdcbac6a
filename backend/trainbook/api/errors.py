"""
Exception handlers rendering every failure as ``{"success": false, "message": ...}``.

Only the human-readable message crosses the boundary; exception details
and stack traces stay in the logs.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from trainbook.core.exceptions import BookingAppError, PersistenceFailure, StoreUnavailable
from trainbook.core.logging import get_logger

logger = get_logger(__name__)


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


async def booking_app_error_handler(request: Request, exc: BookingAppError) -> JSONResponse:
    if isinstance(exc, PersistenceFailure) and exc.booking_id is not None:
        logger.error("persistence_failure", message=exc.message, booking_id=exc.booking_id)
    elif exc.status_code >= 500:
        logger.error("request_error", error_type=type(exc).__name__, message=exc.message)
    return error_response(exc.message, exc.status_code)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("database_error", error=str(exc))
    return error_response(StoreUnavailable.default_message, StoreUnavailable.status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "Not found"
    else:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": message},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_validation_failed", errors=len(exc.errors()))
    return error_response("Invalid request payload", status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingAppError, booking_app_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
