"""Error Handlers — global exception handlers for the base64 API.

Invariants:
    - Base64ServiceError → its http_status with {"error": message}
    - RequestValidationError → 400 {"error": ...}, never Pydantic's detail list
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (Base64ServiceError), validation (Pydantic), catch-all (Exception)
    - A body that is absent, not an object, or has a non-string text has no usable
      text, so it gets the same message as an empty text
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from base64_service.core.errors import Base64ServiceError, MissingInputError
from base64_service.schemas.codec import ErrorResponse

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON body"
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Base64ServiceError)
    async def service_error_handler(request: Request, exc: Base64ServiceError):
        """Handle all domain errors raised by routes and the codec."""
        logger.warning(
            f"{type(exc).__name__}: {exc.message}",
            extra={**exc.log_fields(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=INTERNAL_ERROR_MESSAGE).model_dump(),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    if any(e["type"] == "json_invalid" for e in exc.errors()):
        return ErrorResponse(error=INVALID_JSON_MESSAGE).model_dump()
    return MissingInputError().to_response()
