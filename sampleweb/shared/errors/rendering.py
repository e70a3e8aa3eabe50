"""
Rendering of response descriptors through FastAPI.

Failures are sent as ``application/problem+json``; success payloads
as plain JSON. Error diagnostics are logged here, never rendered.
"""

import logging
from collections.abc import Mapping
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from sampleweb.domain.result import Error, Result
from sampleweb.shared.errors.translator import ResponseDescriptor, translate

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"


def render(
    descriptor: ResponseDescriptor, headers: Mapping[str, str] | None = None
) -> JSONResponse:
    """Build the HTTP response for ``descriptor`` with optional extra headers."""
    return JSONResponse(
        status_code=descriptor.status_code,
        content=jsonable_encoder(descriptor.body()),
        headers=dict(headers) if headers else None,
        media_type=PROBLEM_MEDIA_TYPE if descriptor.is_problem else None,
    )


def render_result(result: Result[Any]) -> JSONResponse:
    """Translate ``result`` and render it."""
    if isinstance(result, Error):
        logger.warning("Operation failed: %s", result.message or "no diagnostic")
    return render(translate(result))
