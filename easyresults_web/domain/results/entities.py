"""
Domain entities for the results bounded context.

An Outcome is the value produced by application code and handed to a
dispatcher. Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Status(Enum):
    """Library-level status of an operation, independent of any transport."""

    SUCCESS = "success"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL_SERVER_ERROR = "internal_server_error"


class StatusCategory(Enum):
    """Coarse classification of a Status."""

    SUCCESS = "success"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of an operation: a status plus optional message and payload.

    Attributes:
        status: Library status of the operation.
        message: Human-readable message, used as the problem title.
        payload: Optional data carried by the outcome.
    """

    status: Status
    message: Optional[str] = None
    payload: Optional[T] = None

    @classmethod
    def ok(cls, payload: Optional[T] = None, message: Optional[str] = None) -> "Outcome[T]":
        """Build a successful outcome."""
        return cls(status=Status.SUCCESS, message=message, payload=payload)

    @classmethod
    def fail(cls, status: Status, message: Optional[str] = None) -> "Outcome[T]":
        """Build a failed outcome with the given error status."""
        return cls(status=status, message=message)

    @property
    def is_success(self) -> bool:
        return self.status is Status.SUCCESS

    @property
    def is_failure(self) -> bool:
        return not self.is_success
