# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Chapel Rotation Service
=======================
Tracks which member of a tenant's rotation currently holds the traveling
chapel, keeps the ledger of past hand-offs, and projects a calendar of
upcoming holders by cycling through the active members.

    members ─► tracking (current holder) ─► history (closed intervals)
        └────────────► calendar (pure projection, never stored)

Port: 8005
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from chapel.controllers import (
    calendar_controller,
    member_controller,
    system_controller,
    tracking_controller,
)
from chapel.core.config import settings
from chapel.core.database import engine, init_schema
from chapel.core.exceptions import StorageUnavailable, ValidationError
from chapel.core.logging import get_logger
from chapel.middleware import MetricsMiddleware, RequestIDMiddleware
from chapel.schemas import ErrorResponse

logger = get_logger(__name__)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    if settings.INIT_SCHEMA:
        try:
            init_schema(engine)
            logger.info("Database schema ready")
        except SQLAlchemyError:
            logger.warning("Could not create schema — DB may not be ready yet")
    logger.info("%s v%s starting", settings.SERVICE_NAME, settings.SERVICE_VERSION)
    yield
    engine.dispose()
    logger.info("Shutting down — connection pool disposed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Chapel Rotation Service",
    description="Rotation roster, current holder, hand-off history and calendar projection.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        503: {"model": ErrorResponse, "description": "Storage unavailable"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


# ── Exception handlers ────────────────────────────────────────────────────
def _error(request: Request, status_code: int, error: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "detail": detail,
            "request_id": getattr(request.state, "request_id", None),
        },
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return _error(request, 400, "validation_error", str(exc))


@app.exception_handler(StorageUnavailable)
async def storage_unavailable_handler(request: Request, exc: StorageUnavailable):
    return _error(request, 503, "storage_unavailable", str(exc))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return _error(request, 500, "internal_server_error", str(exc))


# ── Routers ───────────────────────────────────────────────────────────────
app.include_router(system_controller.router)
app.include_router(member_controller.router)
app.include_router(tracking_controller.router)
app.include_router(calendar_controller.router)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
