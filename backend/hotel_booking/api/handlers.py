"""
Translation of domain errors into HTTP responses.

Only AppError subclasses are mapped here. Anything else is left to
Starlette's server error middleware and becomes a 500.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hotel_booking.core.errors import AppError
from hotel_booking.core.logging import get_logger
from hotel_booking.core.metrics import record_domain_error

logger = get_logger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.info("domain_error", kind=exc.kind, status_code=exc.status_code, detail=exc.message)
    record_domain_error(exc.kind)

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
