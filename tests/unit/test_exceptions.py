"""Unit tests for the error taxonomy."""

import pytest

from elevenlabs_client.exceptions import (
    STATUS_ERRORS,
    APIConnectionError,
    APIError,
    APITimeoutError,
    AuthenticationError,
    BadRequestError,
    ElevenLabsError,
    ForbiddenError,
    MissingParameterError,
    NotFoundError,
    RateLimitError,
    UnprocessableEntityError,
    error_for_status,
)


class TestStatusTable:
    """Tests for the status to error table."""

    def test_known_statuses(self):
        """Test every well-known status has its own class."""
        assert STATUS_ERRORS == {
            400: BadRequestError,
            401: AuthenticationError,
            403: ForbiddenError,
            404: NotFoundError,
            422: UnprocessableEntityError,
            429: RateLimitError,
        }

    @pytest.mark.parametrize("status_code", [402, 405, 409, 413, 500, 502, 504])
    def test_other_statuses_are_generic(self, status_code):
        """Test unlisted statuses map to APIError."""
        assert error_for_status(status_code) is APIError


class TestHierarchy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize("error_class", list(STATUS_ERRORS.values()))
    def test_status_errors_are_api_errors(self, error_class):
        assert issubclass(error_class, APIError)
        assert issubclass(error_class, ElevenLabsError)

    def test_missing_parameter_is_value_error(self):
        """Test local argument errors are also ValueErrors."""
        error = MissingParameterError("voice_id")

        assert isinstance(error, ValueError)
        assert not isinstance(error, APIError)
        assert error.parameter == "voice_id"
        assert str(error) == "voice_id is required"

    def test_missing_parameter_custom_message(self):
        error = MissingParameterError("feedback", "feedback must be one of: like, dislike")

        assert str(error) == "feedback must be one of: like, dislike"

    def test_timeout_is_connection_error(self):
        assert issubclass(APITimeoutError, APIConnectionError)
        assert not issubclass(APIConnectionError, APIError)


class TestMessages:
    """Tests for error messages and attributes."""

    def test_default_messages(self):
        """Test subclasses fall back to their own message."""
        assert str(AuthenticationError(status_code=401)) == "Invalid API key or authentication failed"
        assert str(NotFoundError(status_code=404)) == "Resource not found"

    def test_generic_default_includes_status(self):
        assert str(APIError(status_code=500)) == "API request failed with status 500"

    def test_body_kept(self):
        error = BadRequestError("Invalid voice", status_code=400, body={"detail": "Invalid voice"})

        assert error.body == {"detail": "Invalid voice"}
        assert repr(error) == "BadRequestError(message='Invalid voice', status_code=400)"

    def test_rate_limit_without_retry_after(self):
        error = RateLimitError("Slow down")

        assert error.status_code == 429
        assert error.retry_after is None
        assert str(error) == "Slow down"

    def test_rate_limit_ignores_unparseable_retry_after(self):
        """Test an HTTP-date Retry-After is not treated as seconds."""
        error = RateLimitError(retry_after="Wed, 21 Oct 2026 07:28:00 GMT")

        assert error.retry_after is None
