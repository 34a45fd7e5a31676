"""Map domain errors to HTTP responses.

    NotFound            → 404
    Conflict            → 409
    InvalidState        → 409
    InsufficientStock   → 409
    ValidationError     → 400 (Protean field errors and malformed request bodies)
    OrchestrationError  → 503
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

from shared.errors import (
    Conflict,
    FulfillmentError,
    InsufficientStock,
    InvalidState,
    NotFound,
    OrchestrationError,
)

logger = structlog.get_logger(__name__)

STATUS_CODES = [
    (NotFound, 404),
    (Conflict, 409),
    (InvalidState, 409),
    (InsufficientStock, 409),
    (OrchestrationError, 503),
]


def status_code_for(exc: FulfillmentError) -> int:
    for error_cls, status_code in STATUS_CODES:
        if isinstance(exc, error_cls):
            return status_code
    return 500


async def fulfillment_error_handler(request: Request, exc: FulfillmentError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error("Request failed", path=request.url.path, error=type(exc).__name__, message=exc.message)
    return JSONResponse(status_code=status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "ValidationError", "message": "Invalid request", "errors": exc.messages},
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body") or "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=400,
        content={"error": "ValidationError", "message": "Invalid request", "errors": errors},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FulfillmentError, fulfillment_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
