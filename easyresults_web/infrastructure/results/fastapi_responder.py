"""
FastAPI adapter for the ProblemResponder port.

Builds Starlette responses: problem bodies as application/problem+json,
and bare status-code responses with no body. A problem without a title
gets the standard reason phrase of its status code.
"""

from http import HTTPStatus
from typing import Optional

from fastapi.responses import JSONResponse
from starlette.responses import Response

from easyresults_web.core.config import Settings, settings as default_settings
from easyresults_web.domain.results.ports import ProblemResponder
from easyresults_web.interfaces.results.schemas import ProblemDetails


def _reason_phrase(status_code: int) -> Optional[str]:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return None


class FastAPIProblemResponder(ProblemResponder[Response]):
    """Implements ProblemResponder with FastAPI/Starlette response types."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or default_settings

    def problem(
        self,
        status_code: int,
        title: Optional[str],
        detail: Optional[str] = None,
    ) -> JSONResponse:
        body = ProblemDetails(
            type=self._settings.problem_type,
            title=title if title is not None else _reason_phrase(status_code),
            status=status_code,
            detail=detail,
        )
        return JSONResponse(
            status_code=status_code,
            content=body.model_dump(exclude_none=True),
            media_type=self._settings.problem_media_type,
        )

    def status_only(self, status_code: int) -> Response:
        return Response(status_code=status_code)
