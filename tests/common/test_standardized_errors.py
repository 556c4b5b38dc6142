"""Tests for standardized error handling."""

import pytest
from hashbrown.common import HashbrownError, FileProcessingError
from hashbrown.engine.errors import (
    DigestError, NotFoundError, ReadFailureError,
    UnsupportedAlgorithmError, DigestCancelledError
)


class TestStandardizedErrors:
    """Test standardized error types."""

    def test_hashbrown_error_base(self):
        """Test base HashbrownError functionality."""
        error = HashbrownError("Test error", file_path="/test/path")

        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.context == {"file_path": "/test/path"}

    def test_error_without_context(self):
        """Test that context defaults to an empty dict."""
        error = FileProcessingError("No context")

        assert error.context == {}

    def test_engine_errors_share_the_base(self):
        """Every engine error is a FileProcessingError and a HashbrownError."""
        for error_class in (
            NotFoundError, ReadFailureError, UnsupportedAlgorithmError, DigestCancelledError
        ):
            error = error_class("failure", file_path="/test/path")
            assert isinstance(error, DigestError)
            assert isinstance(error, FileProcessingError)
            assert isinstance(error, HashbrownError)

    def test_error_context_preservation(self):
        """Test that error context is preserved."""
        error = ReadFailureError(
            "Read failed",
            file_path="/test/path",
            bytes_read=4096,
        )

        assert error.context["file_path"] == "/test/path"
        assert error.context["bytes_read"] == 4096

    def test_errors_are_raisable(self):
        """Test that errors can be raised and caught by base class."""
        with pytest.raises(HashbrownError) as exc_info:
            raise NotFoundError("missing", file_path="/nope")

        assert exc_info.value.message == "missing"
