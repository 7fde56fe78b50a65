import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.core.exceptions import (
    BaseAPIException,
    InternalServerErrorException,
    MalformedRequestException,
)

logger = logging.getLogger(__name__)

async def custom_exception_handler(request: Request, exc: BaseAPIException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Body parsing failures (invalid JSON, non-object body, non-string fields)
    are reported as a 400 instead of FastAPI's default 422.
    """
    logger.debug(f"Rejected malformed body on {request.url.path}: {exc.errors()}")
    return await custom_exception_handler(request, MalformedRequestException())

async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error while processing {request.method} {request.url.path}",
        exc_info=exc,
    )
    return await custom_exception_handler(request, InternalServerErrorException())
