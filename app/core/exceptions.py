"""Error taxonomy and the ``{success: false, error}`` response envelope."""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ResourceError(Exception):
    """Base for errors that map directly to an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Forbidden(ResourceError):
    status_code = 403


class BadRequest(ResourceError):
    status_code = 400


class Conflict(ResourceError):
    # duplicate email is reported as a plain 400
    status_code = 400


class NotFound(ResourceError):
    status_code = 404


class InternalError(ResourceError):
    status_code = 500


def error_body(message: str) -> dict:
    return {"success": False, "error": message}


async def resource_error_handler(request: Request, exc: ResourceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(status_code=exc.status_code, content=error_body(message))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        if first.get("type") == "json_invalid":
            return JSONResponse(status_code=400, content=error_body("Invalid JSON body"))
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content=error_body(message))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content=error_body("Internal server error"))
