"""
Domain-specific errors for the weather bounded context.

Expected failures (unknown postal code, conflicts) are returned as
Result variants. Errors defined here are faults that escape a domain
operation; they are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class ForecastDomainError(Exception):
    """Base error for all weather domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ForecastBackendError(ForecastDomainError):
    """Raised when the forecast backend fails in an unrecoverable way."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Forecast backend failure: {reason}")
        self.reason = reason
