"""Catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.categories import router as categories_router
from app.api.health import router as health_router
from app.api.middleware import setup_middleware
from app.api.products import router as products_router
from app.infrastructure.config import settings
from app.infrastructure.database import create_tables

structlog.configure(
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.log_level.upper())
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting Catalog API",
        version=settings.api_version,
        debug=settings.debug,
        filter_encoding=settings.catalog_filter_encoding.value,
    )

    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("Catalog tables ready")

    yield

    logger.info("Shutting down Catalog API")


app = FastAPI(
    title="Catalog API",
    description="Categories and products with dynamic product filtering",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, admin auth, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(categories_router)
app.include_router(products_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "request_id": request_id,
        },
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request, exc):
    """Handle uncaught exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )

    return JSONResponse(
        status_code=500,
        content={
            "error_code": "INTERNAL_ERROR",
            "message": "An internal error occurred",
            "details": [],
            "request_id": request_id,
        },
    )
