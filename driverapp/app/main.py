"""
FastAPI Application Entry Point.

This is the main application file for the Driver App Backend.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from driverapp.app.core.config import settings
from driverapp.app.api.v1.router import router as api_v1_router
from driverapp.app.core.observability import ObservabilityMiddleware, configure_logging
from driverapp.app.db.seed import ensure_roles
from driverapp.app.db.session import engine, Base, AsyncSessionLocal
from driverapp.app.core.exceptions import (
    AppException,
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)

# Import models to ensure they are registered with Base
from driverapp.app.models.user_role import UserRole
from driverapp.app.models.user import User
from driverapp.app.models.trip import Trip
from driverapp.app.models.order_trip import OrderTrip

configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup/shutdown.

    1. Creates database tables on startup.
    2. Seeds the fixed user roles before any request is served.
    3. Disposes of the connection pool on shutdown.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as db:
        await ensure_roles(db)

    yield

    await engine.dispose()

# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    debug=settings.debug,
    description="Ride-booking backend: riders create trips, drivers accept them",
    docs_url="/api-docs",
    lifespan=lifespan,
)

app.add_middleware(ObservabilityMiddleware)

# Register global exception handlers
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        dict: Status and application information
    """
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.api_version,
    }


# Include API router
app.include_router(api_v1_router, prefix="/api")


@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint.

    Returns:
        dict: Welcome message and API documentation links
    """
    return {
        "message": "Welcome to Driver App Backend API",
        "docs": "/api-docs",
        "health": "/health",
    }
