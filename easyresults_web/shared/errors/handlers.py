"""
Centralized error handlers for FastAPI.

Maps result handling errors to HTTP problem responses.
No stack traces or internal details are exposed to clients.
All error responses go through a ProblemResponder.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from starlette.responses import Response

from easyresults_web.domain.results.errors import (
    ResultDomainError,
    UnhandledOutcomeError,
    UnmappedStatusError,
)
from easyresults_web.domain.results.ports import ProblemResponder
from easyresults_web.infrastructure.results.fastapi_responder import (
    FastAPIProblemResponder,
)

logger = logging.getLogger(__name__)

HTTP_500 = 500


def register_error_handlers(
    app: FastAPI, responder: Optional[ProblemResponder[Response]] = None
) -> None:
    """Register all result error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        responder: Builds the problem responses. Defaults to a
            FastAPIProblemResponder using application settings.
    """
    problems = responder or FastAPIProblemResponder()

    @app.exception_handler(UnhandledOutcomeError)
    async def handle_unhandled_outcome(
        _request: Request, exc: UnhandledOutcomeError
    ) -> Response:
        """Handle outcomes no registration accepted."""
        logger.error("Unhandled outcome: %s", exc.outcome.status)
        return problems.problem(status_code=HTTP_500, title="Unhandled outcome")

    @app.exception_handler(UnmappedStatusError)
    async def handle_unmapped_status(
        _request: Request, exc: UnmappedStatusError
    ) -> Response:
        """Handle statuses missing from the classifier tables."""
        logger.error("Unmapped status: %r", exc.status)
        return problems.problem(status_code=HTTP_500, title="Internal server error")

    @app.exception_handler(ResultDomainError)
    async def handle_result_domain(
        _request: Request, exc: ResultDomainError
    ) -> Response:
        """Catch-all for unhandled result domain errors."""
        logger.error("Unhandled result domain error: %s", exc.message)
        return problems.problem(status_code=HTTP_500, title="Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> Response:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return problems.problem(status_code=HTTP_500, title="Internal server error")
