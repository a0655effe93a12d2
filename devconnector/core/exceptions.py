import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from devconnector.services.exceptions import (
    ProfileServiceError,
    ProfileValidationError,
    MalformedURLError,
)

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server Error"


async def custom_http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({
            "field": ".".join(location) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": errors},
    )


async def profile_service_exception_handler(request: Request, exc: ProfileServiceError):
    """Map the service error taxonomy onto status codes and client-safe bodies."""
    if isinstance(exc, (ProfileValidationError, MalformedURLError)):
        return JSONResponse(status_code=exc.status_code, content={"errors": exc.failures})

    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message}",
            exc_info=exc.__cause__ or exc,
        )
        return JSONResponse(status_code=exc.status_code, content={"msg": SERVER_ERROR_MESSAGE})

    return JSONResponse(status_code=exc.status_code, content={"msg": exc.message})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"msg": SERVER_ERROR_MESSAGE},
    )
