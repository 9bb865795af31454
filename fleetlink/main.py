# fleetlink/main.py
"""
FastAPI application entry point.
Includes request logging, global error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fleetlink.routers import bookings, health, vehicles
from fleetlink.database import create_tables
from fleetlink.config import settings
from fleetlink.schemas.response import error
from fleetlink.utils.errors import FleetLinkError, ValidationError
from fleetlink.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="FleetLink API",
    description="Vehicle registration, availability search and double-booking-safe reservations.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS ─────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Error Handlers ───────────────────────────────────────────────────────────
@app.exception_handler(FleetLinkError)
async def fleetlink_error_handler(request: Request, exc: FleetLinkError):
    return JSONResponse(
        status_code=exc.status_code,
        content=error(exc.status_code, exc.message, exc.errors),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {str(err["loc"][-1]): err["msg"].removeprefix("Value error, ")}
        for err in exc.errors()
    ]
    logger.debug(f"Rejected {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=ValidationError.status_code,
        content=error(ValidationError.status_code, ValidationError.default_message, errors),
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error(exc.status_code, str(exc.detail)),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error(500, "Internal server error"),
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(vehicles.router, prefix="/api/v1", tags=["Vehicles"])
app.include_router(bookings.router, prefix="/api/v1", tags=["Bookings"])
app.include_router(health.router,   prefix="/api/v1", tags=["Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("FleetLink backend starting up...")
    create_tables()
    logger.info("Database tables ready")
    logger.info(f"Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    logger.info("API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("FleetLink backend shutting down...")
