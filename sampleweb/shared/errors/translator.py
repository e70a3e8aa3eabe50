"""
Translation of operation results into HTTP response descriptors.

Pure functions only: no framework imports, no logging, no IO.
The same result always yields an equal descriptor.

Mapping:
    Success  -> 200, body is the payload
    Invalid  -> 400, "One or more validation errors occurred." + errors
    NotFound -> 404, "Resource not found."
    Conflict -> 409, "There was a conflict."
    Error    -> 400, "One or more validation errors occurred."

Uncaught faults use the Error mapping as well; callers of this API
never receive a 500.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, assert_never

from sampleweb.domain.result import (
    Conflict,
    Error,
    Invalid,
    NotFound,
    Result,
    Success,
)

HTTP_200 = 200
HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_429 = 429

VALIDATION_TITLE = "One or more validation errors occurred."
NOT_FOUND_TITLE = "Resource not found."
CONFLICT_TITLE = "There was a conflict."
TOO_MANY_REQUESTS_TITLE = "Too many requests."

PROBLEM_TYPES = {
    HTTP_400: "https://tools.ietf.org/html/rfc9110#section-15.5.1",
    HTTP_404: "https://tools.ietf.org/html/rfc9110#section-15.5.5",
    HTTP_409: "https://tools.ietf.org/html/rfc9110#section-15.5.10",
    HTTP_429: "https://tools.ietf.org/html/rfc6585#section-4",
}


@dataclass(frozen=True)
class ResponseDescriptor:
    """Transport-level description of a response.

    Attributes:
        status_code: HTTP status code.
        title: Human-readable summary; None for success.
        type: Reference URI for the problem type; None for success.
        errors: Field name to messages, only for validation failures.
        value: Success payload, None for failures.
    """

    status_code: int
    title: str | None = None
    type: str | None = None
    errors: dict[str, list[str]] | None = None
    value: Any = None

    @property
    def is_problem(self) -> bool:
        return self.status_code >= HTTP_400

    def body(self) -> Any:
        """Return the JSON-ready response body."""
        if not self.is_problem:
            return self.value
        payload: dict[str, Any] = {
            "type": self.type,
            "title": self.title,
            "status": self.status_code,
        }
        if self.errors:
            payload["errors"] = {
                field: list(messages) for field, messages in self.errors.items()
            }
        return payload


def problem(
    status_code: int,
    title: str,
    errors: Mapping[str, Sequence[str]] | None = None,
) -> ResponseDescriptor:
    """Build a failure descriptor for ``status_code``."""
    return ResponseDescriptor(
        status_code=status_code,
        title=title,
        type=PROBLEM_TYPES.get(status_code),
        errors=(
            {field: list(messages) for field, messages in errors.items()}
            if errors
            else None
        ),
    )


def validation_problem(errors: Mapping[str, Sequence[str]]) -> ResponseDescriptor:
    """Build the 400 descriptor carrying field errors."""
    return problem(HTTP_400, VALIDATION_TITLE, errors)


def translate(result: Result[Any]) -> ResponseDescriptor:
    """Map a result variant to its response descriptor."""
    match result:
        case Success(value):
            return ResponseDescriptor(status_code=HTTP_200, value=value)
        case Invalid():
            return validation_problem(result.errors_by_field())
        case NotFound():
            return problem(HTTP_404, NOT_FOUND_TITLE)
        case Conflict():
            return problem(HTTP_409, CONFLICT_TITLE)
        case Error():
            return problem(HTTP_400, VALIDATION_TITLE)
        case _:
            assert_never(result)


def translate_fault(_exc: BaseException) -> ResponseDescriptor:
    """Map an uncaught fault to the generic 400 descriptor.

    The exception is accepted for symmetry with ``translate`` but never
    leaks into the descriptor.
    """
    return problem(HTTP_400, VALIDATION_TITLE)
