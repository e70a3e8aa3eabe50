"""
Operation result type shared by all bounded contexts.

A domain operation returns exactly one of five variants instead of
raising for expected failures:

    - Success: the operation completed and carries its value.
    - Invalid: input failed validation; carries ordered field errors.
    - NotFound: the referenced resource does not exist.
    - Conflict: the operation conflicts with current state.
    - Error: unclassified failure, with an optional diagnostic message.

Usage:
    result = service.get_forecast(postal_code)
    match result:
        case Success(value):
            ...
        case Invalid(errors):
            ...
        case NotFound() | Conflict() | Error():
            ...

Variants are frozen dataclasses, so instances are immutable values.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar, Union

from sampleweb.domain.errors import ResultAccessError

T = TypeVar("T")
U = TypeVar("U")


class ResultStatus(Enum):
    """Discriminant of a result variant."""

    OK = "ok"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    ERROR = "error"


class ValidationSeverity(Enum):
    """Severity of a single validation failure."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class FieldError:
    """A validation failure addressed to one input field.

    Attributes:
        identifier: Name of the offending field, as seen by API clients.
        error_message: Human-readable message. Includes the field name.
        error_code: Optional machine-readable code of the failed rule.
        severity: How serious the failure is.
    """

    identifier: str
    error_message: str
    error_code: str | None = None
    severity: ValidationSeverity = ValidationSeverity.ERROR


class _Failure:
    """Behavior shared by the non-success variants."""

    status: ClassVar[ResultStatus]

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Failures have no payload; reading one is a programming error."""
        raise ResultAccessError(self.status.value)

    def map(self, func: Callable[[Any], Any]) -> "_Failure":
        return self


@dataclass(frozen=True)
class Success(Generic[T]):
    """The operation completed and produced ``value``."""

    value: T

    status: ClassVar[ResultStatus] = ResultStatus.OK

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> "Success[U]":
        """Return a new Success holding ``func(value)``."""
        return Success(func(self.value))


@dataclass(frozen=True)
class Invalid(_Failure):
    """The input failed validation on one or more fields."""

    errors: tuple[FieldError, ...]

    status: ClassVar[ResultStatus] = ResultStatus.INVALID

    def __post_init__(self) -> None:
        # Accept any iterable but store an immutable, ordered tuple.
        errors = tuple(self.errors)
        if not errors:
            raise ValueError("Invalid result requires at least one field error")
        object.__setattr__(self, "errors", errors)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "Invalid":
        """Build an Invalid result from ``(field, message)`` pairs."""
        return cls(tuple(FieldError(field, message) for field, message in pairs))

    def errors_by_field(self) -> dict[str, list[str]]:
        """Group messages by field, keeping every message in insertion order."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.identifier, []).append(error.error_message)
        return grouped


@dataclass(frozen=True)
class NotFound(_Failure):
    """The referenced resource does not exist."""

    status: ClassVar[ResultStatus] = ResultStatus.NOT_FOUND


@dataclass(frozen=True)
class Conflict(_Failure):
    """The operation conflicts with the current state of the resource."""

    status: ClassVar[ResultStatus] = ResultStatus.CONFLICT


@dataclass(frozen=True)
class Error(_Failure):
    """Unclassified failure.

    ``message`` is a diagnostic for logs and is never sent to clients.
    """

    message: str | None = None

    status: ClassVar[ResultStatus] = ResultStatus.ERROR


Result = Union[Success[T], Invalid, NotFound, Conflict, Error]
