"""
Centralized error handlers for FastAPI.

Maps customer domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.customers.errors import (
    AddressLookupError,
    AddressNotFoundError,
    CustomerDomainError,
    CustomerPersistenceError,
)

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500
HTTP_502 = 502
HTTP_503 = 503


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Summarize validation failures as 'field: message' pairs.

    Submitted values are left out so customer data never ends up in
    responses or logs.
    """
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ())[1:]) or "body"
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(parts)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies."""
        detail = _describe_validation_errors(exc)
        logger.info("Rejected invalid request: %s", detail)
        return _error_response(HTTP_422, "Invalid request", detail)

    @app.exception_handler(AddressNotFoundError)
    async def handle_address_not_found(
        _request: Request, exc: AddressNotFoundError
    ) -> JSONResponse:
        """Handle unknown zip codes."""
        logger.warning("Address not found: %s", exc.zip_code)
        return _error_response(HTTP_404, "Address not found")

    @app.exception_handler(AddressLookupError)
    async def handle_address_lookup(
        _request: Request, exc: AddressLookupError
    ) -> JSONResponse:
        """Handle zip code API failures."""
        logger.error("Address lookup error: %s", exc.reason)
        return _error_response(HTTP_502, "Address lookup failed")

    @app.exception_handler(CustomerPersistenceError)
    async def handle_customer_persistence(
        _request: Request, exc: CustomerPersistenceError
    ) -> JSONResponse:
        """Handle customer store failures."""
        logger.error("Customer persistence error: %s", exc.reason)
        return _error_response(HTTP_503, "Customer could not be saved")

    @app.exception_handler(CustomerDomainError)
    async def handle_customer_domain(
        _request: Request, exc: CustomerDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled customer domain errors."""
        logger.error("Unhandled customer domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
