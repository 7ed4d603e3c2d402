# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the EcoPoint API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    EcoPointException,
    ecopoint_exception_handler,
    validation_exception_handler,
)
from app.routers import health, users, waste_types, collection_points, reviews, reports
from app.auth import routes as auth_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown. The Supabase client is created lazily on
    first use, so startup only logs the configuration.
    """
    logger.info(f"Starting EcoPoint API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down EcoPoint API")


# Create FastAPI application
app = FastAPI(
    title="EcoPoint API",
    description="""
## Waste Collection Civic API

Citizens find collection points, file reports and leave reviews; operators
manage their collection points and work the reports filed against them.

### Roles

| Role | Can |
|------|-----|
| **USER** | Browse, file reports |
| **CLIENT** | Everything USER can, plus review collection points |
| **OPERATOR** | Manage own collection points and their reports |
| **ADMIN** | Everything |

### Authentication

`POST /api/auth/login` returns a bearer token and sets a session cookie.
Send the token as `Authorization: Bearer <token>`.
""",
    version=health.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Auth", "description": "Registration, login and token checks"},
        {"name": "Users", "description": "Profile of the logged-in user"},
        {"name": "Waste Types", "description": "Waste categories and disposal guidance"},
        {"name": "Collection Points", "description": "Find and manage collection points"},
        {"name": "Reviews", "description": "Rate collection points"},
        {"name": "Reports", "description": "Report problems at collection points"},
        {"name": "Health", "description": "API health checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Compress responses larger than 1 KB
app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    """Set the security headers on every response."""
    response = await call_next(request)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(EcoPointException)
async def handle_ecopoint_exception(request: Request, exc: EcoPointException):
    """Handle custom EcoPoint exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code}: {exc.message}")
    return await ecopoint_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle request body/query validation errors."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints
app.include_router(
    auth_routes.router,
    prefix="/api/auth",
    tags=["Auth"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

# Profile endpoints
app.include_router(
    users.router,
    prefix="/api/users",
    tags=["Users"]
)

# Waste type catalogue
app.include_router(
    waste_types.router,
    prefix="/api/waste-types",
    tags=["Waste Types"]
)

# Collection point endpoints
app.include_router(
    collection_points.router,
    prefix="/api/collection-points",
    tags=["Collection Points"]
)

# Review endpoints
app.include_router(
    reviews.router,
    prefix="/api/reviews",
    tags=["Reviews"]
)

# Report endpoints
app.include_router(
    reports.router,
    prefix="/api/reports",
    tags=["Reports"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "EcoPoint API",
        "version": health.API_VERSION,
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
