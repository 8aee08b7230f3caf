from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.core.exceptions import (
    ResourceError,
    http_exception_handler,
    resource_error_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.core.logging_config import setup_logging
from app.core.middleware.admin_gate import AdminGateMiddleware
from app.routes.member_routes import router as member_router
from app.routes.project_routes import router as project_router
from app.routes.recommendation_routes import router as recommendation_router

VERSION = "0.1.0"

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="TeamHub Admin API",
    description="Admin-only management of team members and projects.",
    version=VERSION,
)

# CORS wraps the gate so 403 responses still carry CORS headers
app.add_middleware(AdminGateMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(ResourceError, resource_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

@app.get("/", tags=["health"])
def healthcheck():
    return {"status": "ok", "service": "teamhub", "version": VERSION}

app.include_router(member_router)
app.include_router(project_router)
app.include_router(recommendation_router)
