"""MedShare Backend - Main FastAPI Application

Inter-clinic medicine inventory sharing

This module creates and configures the main FastAPI application, including:
- All API routers (clinics, medicines, inventory, surplus, requests,
  matches, transfers, impact)
- Middleware (request ID correlation, CORS)
- Exception handlers
- Health and metrics endpoints
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .dependencies import get_store
from .store import (
    ConflictError,
    InvalidQuantityError,
    NotFoundError,
    StoreError,
    seed_demo_data,
)
from .transfers.status import StateTransitionError

# Observability
from .observability.logging_config import configure_logging
from .observability.middleware import RequestIDMiddleware
from .observability.router import router as observability_router

# Domain Routers
from .clinics.router import router as clinics_router
from .catalog.router import router as medicines_router
from .inventory.router import router as inventory_router
from .surplus.router import router as surplus_router
from .medicine_requests.router import router as requests_router
from .matching.router import router as matching_router
from .transfers.router import router as transfers_router
from .transfers.router import impact_router

# Configure logging
configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)

logger = logging.getLogger(__name__)

_docs_enabled = settings.ENVIRONMENT != "production"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler.

    - Startup: load demo data into an empty store when enabled
    - Shutdown: log only; the store lives and dies with the process
    """
    logger.info(f"{settings.APP_NAME} starting up...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    store = get_store()
    if settings.SEED_DEMO_DATA and not store.list_clinics():
        seed_demo_data(store)

    yield

    logger.info(f"{settings.APP_NAME} shutting down...")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Inter-clinic medicine surplus sharing and matching",
    version="0.1.0",
    docs_url="/docs" if _docs_enabled else None,
    redoc_url="/redoc" if _docs_enabled else None,
    openapi_url="/openapi.json" if _docs_enabled else None,
    lifespan=lifespan,
)


# =============================================================================
# MIDDLEWARE CONFIGURATION
# =============================================================================

# Request ID Middleware (must be first for proper correlation)
app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

def _error(status_code: int, error: str, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, **extra},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors.

    Returns a structured error response with field-level details.
    """
    logger.warning(f"Validation error on {request.method} {request.url.path}")
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "validation_error",
        "Request validation failed",
        details=jsonable_encoder(exc.errors()),
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, "not_found", str(exc))


@app.exception_handler(InvalidQuantityError)
async def invalid_quantity_handler(request: Request, exc: InvalidQuantityError) -> JSONResponse:
    return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, "invalid_quantity", str(exc))


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    logger.info(f"Conflict on {request.method} {request.url.path}: {exc}")
    return _error(status.HTTP_409_CONFLICT, "conflict", str(exc))


@app.exception_handler(StateTransitionError)
async def state_transition_handler(request: Request, exc: StateTransitionError) -> JSONResponse:
    logger.info(f"Rejected transition on {request.method} {request.url.path}: {exc}")
    return _error(status.HTTP_409_CONFLICT, "invalid_transition", str(exc))


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error(f"Store error on {request.method} {request.url.path}", exc_info=exc)
    return _error(status.HTTP_400_BAD_REQUEST, "store_error", str(exc))


@app.exception_handler(Exception)
async def generic_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle uncaught exceptions.

    Full details are logged but not exposed to the client.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}",
        exc_info=exc
    )
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "An unexpected error occurred. Please try again later.",
    )


# =============================================================================
# ROUTER REGISTRATION
# =============================================================================

# Observability (health, metrics)
app.include_router(observability_router)

app.include_router(clinics_router, prefix="/api/v1")
app.include_router(medicines_router, prefix="/api/v1")
app.include_router(inventory_router, prefix="/api/v1")
app.include_router(surplus_router, prefix="/api/v1")
app.include_router(requests_router, prefix="/api/v1")
app.include_router(matching_router, prefix="/api/v1")
app.include_router(transfers_router, prefix="/api/v1")
app.include_router(impact_router, prefix="/api/v1")


# =============================================================================
# ROOT ENDPOINTS
# =============================================================================

@app.get("/", include_in_schema=False)
async def root() -> dict[str, Any]:
    """Root endpoint - API information."""
    return {
        "name": settings.APP_NAME,
        "version": "0.1.0",
        "status": "running",
        "docs": "/docs" if _docs_enabled else None,
    }


# =============================================================================
# DEVELOPMENT SERVER
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "medshare.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )
