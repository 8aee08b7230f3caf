"""Middleware that rejects non-admin callers before the request body is read."""

import logging

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.core.exceptions import error_body
from app.deps import authorize_request
from app.services.auth_service import Deny

logger = logging.getLogger(__name__)

GATED_PREFIXES = ("/api/team", "/api/projects")


class AdminGateMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        # CORS preflight carries no credentials
        if request.method == "OPTIONS" or not request.url.path.startswith(GATED_PREFIXES):
            return await call_next(request)

        try:
            decision = await run_in_threadpool(authorize_request, request)
        except Exception:
            logger.exception("Access guard failed on %s %s", request.method, request.url.path)
            return JSONResponse(status_code=500, content=error_body("Internal server error"))

        if isinstance(decision, Deny):
            return JSONResponse(status_code=403, content=error_body(decision.reason))
        return await call_next(request)
