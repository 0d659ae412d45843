"""
Result dispatcher.

Holds an ordered list of (predicate, producer) registrations and an
optional unmatched producer. Dispatching an outcome invokes the first
registration whose predicate accepts the outcome status; when none does,
the unmatched producer runs; when that is missing too, UnhandledOutcomeError
is raised.

Configure-then-use: all register_* calls must happen before the dispatcher
is shared. Concurrent registration and dispatch is not guarded.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from easyresults_web.domain.results.classifier import (
    classify,
    is_client_error,
    is_server_error,
    is_success,
)
from easyresults_web.domain.results.entities import Outcome, Status
from easyresults_web.domain.results.errors import UnhandledOutcomeError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

Producer = Callable[[Outcome[T]], R]


@dataclass(frozen=True)
class HandlerRegistration(Generic[T, R]):
    """A predicate over statuses paired with the producer it guards.

    Attributes:
        name: Label used in logs, e.g. "client_error" or "status:NOT_FOUND".
        predicate: Returns True when the registration handles a status.
        produce: Builds the response for a matching outcome.
    """

    name: str
    predicate: Callable[[Status], bool]
    produce: Producer

    def matches(self, status: Status) -> bool:
        return self.predicate(status)


class ResultDispatcher(Generic[T, R]):
    """Ordered, first-match-wins registry of outcome producers.

    Every register_* method returns the dispatcher itself so registrations
    can be chained. Registering the same category twice is allowed, but the
    second registration can never be reached.
    """

    def __init__(self) -> None:
        self._registrations: list[HandlerRegistration[T, R]] = []
        self._unmatched: Optional[Producer] = None

    @property
    def registrations(self) -> tuple[HandlerRegistration[T, R], ...]:
        """Registrations in evaluation order."""
        return tuple(self._registrations)

    @property
    def has_unmatched_handler(self) -> bool:
        return self._unmatched is not None

    def register_on_success(self, producer: Producer) -> "ResultDispatcher[T, R]":
        """Handle every success status with ``producer``."""
        return self._append("success", is_success, producer)

    def register_on_client_error(self, producer: Producer) -> "ResultDispatcher[T, R]":
        """Handle every client error status with ``producer``."""
        return self._append("client_error", is_client_error, producer)

    def register_on_server_error(self, producer: Producer) -> "ResultDispatcher[T, R]":
        """Handle every server error status with ``producer``."""
        return self._append("server_error", is_server_error, producer)

    def register_on_status(
        self, status: Status, producer: Producer
    ) -> "ResultDispatcher[T, R]":
        """Handle exactly one status with ``producer``.

        Raises:
            UnmappedStatusError: If ``status`` is not a known Status.
        """
        classify(status)
        return self._append(f"status:{status.name}", lambda s: s is status, producer)

    def register_on_unmatched(self, producer: Producer) -> "ResultDispatcher[T, R]":
        """Set the producer used when no registration matches.

        A later call replaces the previous unmatched producer.
        """
        if self._unmatched is not None:
            logger.warning("Replacing existing unmatched handler")
        self._unmatched = producer
        return self

    def dispatch(self, outcome: Outcome[T]) -> R:
        """Produce the response for ``outcome``.

        Args:
            outcome: The outcome to handle.

        Returns:
            Whatever the selected producer returns.

        Raises:
            UnmappedStatusError: If the outcome status is not a known Status.
            UnhandledOutcomeError: If nothing matched and no unmatched
                handler is registered.
        """
        status = outcome.status
        classify(status)

        for registration in self._registrations:
            if registration.matches(status):
                logger.debug("Dispatching status=%s to %s", status.name, registration.name)
                return registration.produce(outcome)

        if self._unmatched is not None:
            logger.debug("Dispatching status=%s to unmatched handler", status.name)
            return self._unmatched(outcome)

        logger.warning("No handler for status=%s", status.name)
        raise UnhandledOutcomeError(outcome)

    def _append(
        self,
        name: str,
        predicate: Callable[[Status], bool],
        producer: Producer,
    ) -> "ResultDispatcher[T, R]":
        if any(existing.name == name for existing in self._registrations):
            logger.warning("Handler %s registered twice; the later one is unreachable", name)
        self._registrations.append(
            HandlerRegistration(name=name, predicate=predicate, produce=producer)
        )
        logger.debug("Registered %s handler at position %d", name, len(self._registrations))
        return self
