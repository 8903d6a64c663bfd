"""Unit tests for mapping use case errors to HTTP responses."""

import pytest

from threads.domain.error import (
    DomainError,
    NotFoundError,
    PersistenceError,
    StructuralIntegrityError,
    ValidationError,
)
from threads.interface.error import to_http_exception


class TestToHttpException:
    """Tests for to_http_exception."""

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (NotFoundError("Thread", "abc"), 404),
            (StructuralIntegrityError("root", "child"), 409),
            (PersistenceError("creating thread", "connection reset"), 503),
            (ValidationError("text is empty"), 400),
            (DomainError("bad input"), 400),
            (ValueError("page must be positive"), 400),
            (RuntimeError("boom"), 500),
        ],
    )
    def test_status_codes(self, error, status_code):
        assert to_http_exception(error, "do something").status_code == status_code

    def test_store_error_keeps_operation_in_detail(self):
        exc = to_http_exception(
            PersistenceError("deleting thread", "timeout"), "delete thread"
        )

        assert exc.detail == "failed deleting thread: timeout"

    def test_unexpected_error_hides_message(self):
        exc = to_http_exception(RuntimeError("secret internals"), "list feed")

        assert exc.detail == "Failed to list feed"
