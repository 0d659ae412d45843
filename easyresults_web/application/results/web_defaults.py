"""
Default web registration policies.

Free functions that attach standard producers to a ResultDispatcher:
error statuses become problem responses, anything left unmatched becomes
a bare status-code response. Each helper returns the dispatcher it was
given so calls can be chained.

Registration order is fixed: client error, server error, then unmatched.
"""

import logging
from typing import Any, TypeVar

from easyresults_web.domain.results.classifier import to_transport_code
from easyresults_web.domain.results.dispatcher import Producer, ResultDispatcher
from easyresults_web.domain.results.entities import Outcome
from easyresults_web.domain.results.ports import ProblemResponder

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _problem_producer(responder: ProblemResponder[R]) -> Producer:
    def produce(outcome: Outcome[Any]) -> R:
        return responder.problem(
            status_code=to_transport_code(outcome.status),
            title=outcome.message,
        )

    return produce


def _status_only_producer(responder: ProblemResponder[R]) -> Producer:
    def produce(outcome: Outcome[Any]) -> R:
        return responder.status_only(to_transport_code(outcome.status))

    return produce


def use_default_web_client_error_handler(
    dispatcher: ResultDispatcher[Any, R], responder: ProblemResponder[R]
) -> ResultDispatcher[Any, R]:
    """Return a problem response for every client error outcome."""
    return dispatcher.register_on_client_error(_problem_producer(responder))


def use_default_web_server_error_handler(
    dispatcher: ResultDispatcher[Any, R], responder: ProblemResponder[R]
) -> ResultDispatcher[Any, R]:
    """Return a problem response for every server error outcome."""
    return dispatcher.register_on_server_error(_problem_producer(responder))


def use_web_default_error_handler(
    dispatcher: ResultDispatcher[Any, R], responder: ProblemResponder[R]
) -> ResultDispatcher[Any, R]:
    """Register client and server error handlers, in that order."""
    use_default_web_client_error_handler(dispatcher, responder)
    use_default_web_server_error_handler(dispatcher, responder)
    return dispatcher


def use_web_default_unmatched_handler(
    dispatcher: ResultDispatcher[Any, R], responder: ProblemResponder[R]
) -> ResultDispatcher[Any, R]:
    """Answer unmatched outcomes with their status code and no body."""
    return dispatcher.register_on_unmatched(_status_only_producer(responder))


def use_web_defaults_handler(
    dispatcher: ResultDispatcher[Any, R], responder: ProblemResponder[R]
) -> ResultDispatcher[Any, R]:
    """Register every default web behavior.

    Args:
        dispatcher: The dispatcher to configure.
        responder: Builds the framework responses.

    Returns:
        The same dispatcher, configured.
    """
    use_web_default_error_handler(dispatcher, responder)
    use_web_default_unmatched_handler(dispatcher, responder)
    return dispatcher


def build_web_dispatcher(responder: ProblemResponder[R]) -> ResultDispatcher[Any, R]:
    """Create a new dispatcher configured with the web defaults."""
    logger.debug("Building web dispatcher with %s", type(responder).__name__)
    return use_web_defaults_handler(ResultDispatcher(), responder)
