"""API middleware for the Catalog API.

Provides:
- Admin API key gate for write requests
- Request ID correlation
- Error handling
"""

import time
from typing import Any, Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from app.infrastructure.config import settings

logger = structlog.get_logger()


# ============================================================================
# Request ID Middleware
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Binds a correlation ID to the request and to everything it logs.

    The ID is taken from the X-Request-ID header or generated. It is bound
    into the structlog context together with the method and path, so
    catalog service log lines carry it, and echoed in the response header.
    """

    HEADER_NAME = "X-Request-ID"

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request with correlation ID.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response with request ID header.
        """
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid4())
        request.state.request_id = request_id
        start_time = time.perf_counter()

        with structlog.contextvars.bound_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        ):
            try:
                response = await call_next(request)
            except Exception:
                logger.error("Request failed", duration_ms=_elapsed_ms(start_time))
                raise

            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=_elapsed_ms(start_time),
                **_search_fields(request),
            )

        response.headers[self.HEADER_NAME] = request_id
        return response


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


def _search_fields(request: Request) -> dict[str, Any]:
    """Log fields for product searches: raw filters and the encoding used."""
    if request.method != "GET" or request.url.path.rstrip("/") != "/products":
        return {}
    return {
        "filters": dict(request.query_params),
        "filter_encoding": settings.catalog_filter_encoding.value,
    }


# ============================================================================
# Admin API Key Middleware
# ============================================================================


# Methods that read the catalog and never require authentication
READ_METHODS = {"GET", "HEAD", "OPTIONS"}


def _unauthorized(error_code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={
            "error_code": error_code,
            "message": message,
            "details": [],
        },
        headers={"WWW-Authenticate": "Bearer"},
    )


class AdminApiKeyMiddleware(BaseHTTPMiddleware):
    """Middleware gating catalog writes behind the admin API key.

    Reads are public. POST, PUT, PATCH and DELETE need
    "Authorization: Bearer <admin_api_key>".
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Validate API key for write requests.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response or 401 error.
        """
        if request.method in READ_METHODS:
            return await call_next(request)

        auth_header = request.headers.get("Authorization")

        if not auth_header:
            logger.warning("Missing authorization header")
            return _unauthorized("UNAUTHORIZED", "Missing Authorization header")

        parts = auth_header.split(" ", 1)
        if len(parts) != 2 or parts[0].lower() != "bearer":
            logger.warning("Invalid authorization format")
            return _unauthorized(
                "UNAUTHORIZED",
                "Invalid Authorization header format. Use 'Bearer <api_key>'",
            )

        if parts[1] != settings.admin_api_key:
            logger.warning("Invalid API key")
            return _unauthorized("INVALID_API_KEY", "Invalid API key")

        request.state.is_admin = True

        return await call_next(request)


# ============================================================================
# Error Handling Middleware
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turns errors escaping the handlers into a 500 error body.

    Storage failures and any other unhandled exception get the same
    INTERNAL_ERROR response. Storage failures are logged with the
    driver's error class so they can be told apart in the logs.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Handle errors uniformly.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response or error response.
        """
        try:
            return await call_next(request)
        except SQLAlchemyError as e:
            logger.exception("Storage error", error_type=type(e).__name__)
            return _internal_error(request)
        except Exception as e:
            logger.exception("Unhandled exception", error=str(e))
            return _internal_error(request)


def _internal_error(request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error_code": "INTERNAL_ERROR",
            "message": "An internal error occurred",
            "details": [],
            "request_id": getattr(request.state, "request_id", None),
        },
    )


# ============================================================================
# Middleware Setup
# ============================================================================


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Middleware is added in reverse order (last added = first executed).

    Args:
        app: FastAPI application instance.
    """
    # Error handling (catches errors raised by handlers)
    app.add_middleware(ErrorHandlerMiddleware)

    # Admin gate for writes
    app.add_middleware(AdminApiKeyMiddleware)

    # Request ID correlation (outermost, so every response carries the header)
    app.add_middleware(RequestIdMiddleware)
