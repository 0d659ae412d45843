"""
Port interfaces (ABCs) for the results bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

R = TypeVar("R")


class ProblemResponder(ABC, Generic[R]):
    """Port for building framework responses from transport status codes.

    This is the seam where a web framework plugs in: composite
    registration helpers only ever talk to this interface.
    """

    @abstractmethod
    def problem(
        self,
        status_code: int,
        title: Optional[str],
        detail: Optional[str] = None,
    ) -> R:
        """Return a structured problem response.

        Args:
            status_code: HTTP status code of the response.
            title: Short human-readable summary of the problem.
            detail: Optional longer explanation.
        """
        raise NotImplementedError

    @abstractmethod
    def status_only(self, status_code: int) -> R:
        """Return a response carrying only a status code and no body."""
        raise NotImplementedError
