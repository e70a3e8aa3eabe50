"""
Errors raised by the shared domain kernel.

These signal programming mistakes (contract violations), not
business failures. Business failures are returned as Result variants.
"""


class ResultAccessError(TypeError):
    """Raised when the success payload is read from a non-success result."""

    def __init__(self, status: str) -> None:
        super().__init__(f"Cannot unwrap a result with status '{status}'")
        self.status = status
