"""
Centralized error handlers for FastAPI.

Every failure path ends in a structured 4xx problem response:
- Request bodies rejected by FastAPI become 400 validation problems.
- Faults escaping a domain operation become the generic 400 problem.
- Rate limit violations become 429 problems.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from sampleweb.domain.weather.errors import ForecastDomainError
from sampleweb.shared.errors.rendering import render
from sampleweb.shared.errors.translator import (
    HTTP_429,
    TOO_MANY_REQUESTS_TITLE,
    problem,
    translate_fault,
    validation_problem,
)
from sampleweb.shared.security.headers import SECURE_HEADERS

logger = logging.getLogger(__name__)

BODY_FIELD = "body"


def _field_name(loc: tuple[int | str, ...]) -> str:
    """Return the client-facing field name from a pydantic error location."""
    for part in reversed(loc):
        if isinstance(part, str) and part != BODY_FIELD:
            return part
    return BODY_FIELD


def request_errors_by_field(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group framework validation errors by field, preserving order."""
    grouped: dict[str, list[str]] = {}
    for error in exc.errors():
        field = _field_name(tuple(error.get("loc", ())))
        grouped.setdefault(field, []).append(
            f"The {field} field is invalid: {error.get('msg', 'invalid value')}."
        )
    return grouped


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a problem response.

    Synchronous on purpose: slowapi's middleware calls it directly.
    """
    logger.warning("Rate limit exceeded: %s", exc.detail)
    return render(problem(HTTP_429, TOO_MANY_REQUESTS_TITLE))


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed request bodies as field-level validation errors."""
        errors = request_errors_by_field(exc)
        logger.info("Request rejected by schema validation: %s", list(errors))
        return render(validation_problem(errors))

    @app.exception_handler(ForecastDomainError)
    async def handle_forecast_domain(
        _request: Request, exc: ForecastDomainError
    ) -> JSONResponse:
        """Handle faults raised by the forecast domain."""
        logger.exception("Unhandled forecast domain error: %s", exc.message)
        return render(translate_fault(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        # Runs outside SecurityHeadersMiddleware, so headers are added here.
        return render(translate_fault(exc), headers=SECURE_HEADERS)
