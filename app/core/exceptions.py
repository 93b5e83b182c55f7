"""
Domain exceptions and their FastAPI handlers.

Services raise these instead of HTTPException so they can be called outside
a request. The handlers render them with the same {"detail": ...} body that
HTTPException produces.
"""

import logging
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class PipelineError(Exception):
    """Base class for hiring pipeline errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(PipelineError):
    """Referenced application, evaluation or other record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidInputError(PipelineError):
    """Required field missing or of the wrong type/value."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(PipelineError):
    """Write would violate a uniqueness rule (e.g. second evaluation)."""

    status_code = status.HTTP_409_CONFLICT


class StorageError(PipelineError):
    """Underlying store unavailable or a query failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Server error"):
        super().__init__(message)


async def pipeline_exception_handler(request: Request, exc: PipelineError) -> JSONResponse:
    if isinstance(exc, StorageError):
        logger.error(f"{type(exc).__name__}: {exc.message} | Path: {request.url.path}")
        # Storage failures are not distinguished by cause for the client
        return JSONResponse(status_code=exc.status_code, content={"detail": "Server error"})

    logger.warning(f"{type(exc).__name__}: {exc.message} | Path: {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed or missing request fields as 400 Bad Request."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'] if part != 'body')}: {error['msg']}"
        for error in errors
    )
    logger.warning(f"ValidationError: {message} | Path: {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": message},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception: {exc} | Path: {request.url.path}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Server error"})
