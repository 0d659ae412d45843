"""
Status category classifier.

Pure, total functions over the closed Status enumeration:
- classify: Status -> StatusCategory
- to_transport_code: Status -> HTTP status code

A value outside the tables raises UnmappedStatusError. There is no
default branch: extending Status requires extending both tables.
"""

from http import HTTPStatus

from easyresults_web.domain.results.entities import Status, StatusCategory
from easyresults_web.domain.results.errors import UnmappedStatusError

_CATEGORIES: dict[Status, StatusCategory] = {
    Status.SUCCESS: StatusCategory.SUCCESS,
    Status.BAD_REQUEST: StatusCategory.CLIENT_ERROR,
    Status.UNAUTHORIZED: StatusCategory.CLIENT_ERROR,
    Status.FORBIDDEN: StatusCategory.CLIENT_ERROR,
    Status.NOT_FOUND: StatusCategory.CLIENT_ERROR,
    Status.CONFLICT: StatusCategory.CLIENT_ERROR,
    Status.INTERNAL_SERVER_ERROR: StatusCategory.SERVER_ERROR,
}

_TRANSPORT_CODES: dict[Status, HTTPStatus] = {
    Status.SUCCESS: HTTPStatus.OK,
    Status.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
    Status.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
    Status.FORBIDDEN: HTTPStatus.FORBIDDEN,
    Status.NOT_FOUND: HTTPStatus.NOT_FOUND,
    Status.CONFLICT: HTTPStatus.CONFLICT,
    Status.INTERNAL_SERVER_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def classify(status: Status) -> StatusCategory:
    """Return the category of a status.

    Raises:
        UnmappedStatusError: If the status is not in the category table.
    """
    try:
        return _CATEGORIES[status]
    except (KeyError, TypeError) as exc:
        raise UnmappedStatusError(status) from exc


def to_transport_code(status: Status) -> int:
    """Map a library status to its HTTP status code.

    Raises:
        UnmappedStatusError: If the status is not in the transport table.
    """
    try:
        return int(_TRANSPORT_CODES[status])
    except (KeyError, TypeError) as exc:
        raise UnmappedStatusError(status) from exc


def is_success(status: Status) -> bool:
    return classify(status) is StatusCategory.SUCCESS


def is_client_error(status: Status) -> bool:
    return classify(status) is StatusCategory.CLIENT_ERROR


def is_server_error(status: Status) -> bool:
    return classify(status) is StatusCategory.SERVER_ERROR
