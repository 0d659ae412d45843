"""
Domain-specific errors for the results bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from typing import Any


class ResultDomainError(Exception):
    """Base error for all result handling errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UnmappedStatusError(ResultDomainError):
    """Raised when a status has no category or transport code mapping.

    This is a programming defect: the Status enumeration was extended
    without extending the classifier table.
    """

    def __init__(self, status: Any) -> None:
        super().__init__(f"No mapping for status: {status!r}")
        self.status = status


class UnhandledOutcomeError(ResultDomainError):
    """Raised when no registration matched and no unmatched handler is set."""

    def __init__(self, outcome: Any) -> None:
        super().__init__(f"No handler registered for status: {outcome.status}")
        self.outcome = outcome
