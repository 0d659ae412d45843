"""
Dependency injection for result handling.

Provides FastAPI dependency functions returning the process-wide
responder and default dispatcher. The dispatcher is fully configured
before it is first returned and never registered on afterwards.
"""

from functools import lru_cache
from typing import Any

from starlette.responses import Response

from easyresults_web.application.results.web_defaults import build_web_dispatcher
from easyresults_web.domain.results.dispatcher import ResultDispatcher
from easyresults_web.domain.results.entities import Outcome
from easyresults_web.infrastructure.results.fastapi_responder import (
    FastAPIProblemResponder,
)


@lru_cache
def get_problem_responder() -> FastAPIProblemResponder:
    """Build the FastAPI responder from application settings."""
    return FastAPIProblemResponder()


@lru_cache
def get_result_dispatcher() -> ResultDispatcher[Any, Response]:
    """Build the default web dispatcher once per process."""
    return build_web_dispatcher(get_problem_responder())


def outcome_to_response(outcome: Outcome[Any]) -> Response:
    """Dispatch ``outcome`` through the default web dispatcher."""
    return get_result_dispatcher().dispatch(outcome)
