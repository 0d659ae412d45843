"""
Application entry point.

Creates the FastAPI application and wires together:
- Error handlers (centralized result-error-to-HTTP mapping)
- Logging configuration

Routes belong to the integrating service; they return
``outcome_to_response(outcome)`` from their handlers.
No business logic belongs here.
"""

from fastapi import FastAPI

from easyresults_web.core.config import settings
from easyresults_web.interfaces.results.dependencies import get_problem_responder
from easyresults_web.shared.errors.handlers import register_error_handlers
from easyresults_web.shared.logging import configure_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Configures logging and registers error handlers that share the
    responder used by the default result dispatcher.
    This is the composition root of the application.

    Returns:
        A configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, package_level=settings.package_log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    register_error_handlers(app, get_problem_responder())

    return app


app = create_app()
