"""
Tests for the results domain layer.

Tests the Outcome entity, the status classifier and domain errors in
isolation. No external dependencies or IO required.
"""

import dataclasses

import pytest

from easyresults_web.domain.results.classifier import (
    classify,
    is_client_error,
    is_server_error,
    is_success,
    to_transport_code,
)
from easyresults_web.domain.results.entities import Outcome, Status, StatusCategory
from easyresults_web.domain.results.errors import (
    ResultDomainError,
    UnhandledOutcomeError,
    UnmappedStatusError,
)

EXPECTED_CODES = {
    Status.SUCCESS: 200,
    Status.BAD_REQUEST: 400,
    Status.UNAUTHORIZED: 401,
    Status.FORBIDDEN: 403,
    Status.NOT_FOUND: 404,
    Status.CONFLICT: 409,
    Status.INTERNAL_SERVER_ERROR: 500,
}

CLIENT_ERRORS = [
    Status.BAD_REQUEST,
    Status.UNAUTHORIZED,
    Status.FORBIDDEN,
    Status.NOT_FOUND,
    Status.CONFLICT,
]


class TestOutcomeEntity:
    """Tests for the Outcome entity."""

    def test_outcome_defaults(self) -> None:
        """Message and payload default to None."""
        outcome = Outcome(Status.NOT_FOUND)
        assert outcome.message is None
        assert outcome.payload is None

    def test_outcome_is_immutable(self) -> None:
        """Outcome fields cannot be reassigned."""
        outcome = Outcome(Status.CONFLICT, "Conflict")
        with pytest.raises(dataclasses.FrozenInstanceError):
            outcome.status = Status.SUCCESS  # type: ignore[misc]

    def test_ok_constructor(self) -> None:
        outcome = Outcome.ok({"id": 1})
        assert outcome.status is Status.SUCCESS
        assert outcome.payload == {"id": 1}
        assert outcome.is_success
        assert not outcome.is_failure

    def test_fail_constructor(self) -> None:
        outcome = Outcome.fail(Status.FORBIDDEN, "Forbidden")
        assert outcome.status is Status.FORBIDDEN
        assert outcome.message == "Forbidden"
        assert outcome.payload is None
        assert outcome.is_failure


class TestClassifier:
    """Tests for status classification and transport code mapping."""

    def test_every_status_has_a_transport_code(self) -> None:
        """The transport table covers the whole enumeration."""
        assert {status: to_transport_code(status) for status in Status} == EXPECTED_CODES

    def test_every_status_has_exactly_one_category(self) -> None:
        for status in Status:
            category = classify(status)
            assert isinstance(category, StatusCategory)
            flags = [is_success(status), is_client_error(status), is_server_error(status)]
            assert flags.count(True) == 1

    @pytest.mark.parametrize("status", CLIENT_ERRORS)
    def test_client_errors(self, status: Status) -> None:
        assert classify(status) is StatusCategory.CLIENT_ERROR

    def test_server_error(self) -> None:
        assert classify(Status.INTERNAL_SERVER_ERROR) is StatusCategory.SERVER_ERROR

    def test_success(self) -> None:
        assert classify(Status.SUCCESS) is StatusCategory.SUCCESS

    def test_transport_code_is_plain_int(self) -> None:
        assert type(to_transport_code(Status.NOT_FOUND)) is int

    @pytest.mark.parametrize("value", ["not_found", 404, None])
    def test_unknown_status_raises(self, value: object) -> None:
        """Values outside the enumeration never fall back to a default."""
        with pytest.raises(UnmappedStatusError):
            classify(value)  # type: ignore[arg-type]
        with pytest.raises(UnmappedStatusError):
            to_transport_code(value)  # type: ignore[arg-type]


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_unmapped_status_error_message(self) -> None:
        """UnmappedStatusError keeps the offending value."""
        error = UnmappedStatusError("teapot")
        assert error.status == "teapot"
        assert "teapot" in error.message
        assert isinstance(error, ResultDomainError)

    def test_unhandled_outcome_error_message(self) -> None:
        """UnhandledOutcomeError names the status of the outcome."""
        outcome = Outcome(Status.CONFLICT)
        error = UnhandledOutcomeError(outcome)
        assert error.outcome is outcome
        assert "CONFLICT" in str(error)
