# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

# Local application imports
from ..domain.exceptions import StoreError, ValidationError

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": str(exc),
            "errors": [violation.to_dict() for violation in exc.violations],
        },
    )


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error(f"Store error while handling {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)},
    )


def register_error_handlers(application: FastAPI) -> None:
    """Map domain exceptions to HTTP responses for the REST surface"""
    application.add_exception_handler(ValidationError, validation_error_handler)
    application.add_exception_handler(StoreError, store_error_handler)
