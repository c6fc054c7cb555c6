"""
Unit tests for exception hierarchy.
"""

from sparkpost.adapters.base import HttpResponse
from sparkpost.exceptions import (
    CapabilityError,
    ConfigurationError,
    HttpStatusError,
    InvalidAddressError,
    InvalidConfigurationError,
    RequestError,
    SparkPostError,
    TransportError,
)


class TestExceptionHierarchy:
    """Test that exception hierarchy is correctly defined."""

    def test_base_exception(self):
        """Test that SparkPostError is the base exception."""
        error = SparkPostError("test error")
        assert isinstance(error, Exception)
        assert str(error) == "test error"

    def test_errors_inherit_from_base(self):
        """Test that every client error inherits from SparkPostError."""
        for cls in (
            ConfigurationError,
            InvalidConfigurationError,
            CapabilityError,
            RequestError,
            TransportError,
            HttpStatusError,
            InvalidAddressError,
        ):
            assert issubclass(cls, SparkPostError)

    def test_status_error_is_transport_error(self):
        assert issubclass(HttpStatusError, TransportError)

    def test_invalid_address_is_value_error(self):
        assert issubclass(InvalidAddressError, ValueError)


class TestRequestError:
    """Test RequestError cause handling."""

    def test_keeps_cause(self):
        cause = ValueError("bad")
        error = RequestError(cause)
        assert error.cause is cause
        assert "bad" in str(error)
        assert error.status_code is None
        assert error.body is None

    def test_lifts_status_and_json_body(self):
        response = HttpResponse(
            status_code=422,
            content=b'{"errors": [{"code": "1400"}]}',
            reason="Unprocessable Entity",
        )
        error = RequestError(HttpStatusError(response))
        assert error.status_code == 422
        assert error.body == {"errors": [{"code": "1400"}]}

    def test_non_json_body_kept_as_text(self):
        response = HttpResponse(status_code=502, content=b"Bad Gateway", reason="Bad Gateway")
        error = RequestError(HttpStatusError(response))
        assert error.status_code == 502
        assert error.body == "Bad Gateway"

    def test_transport_error_without_response(self):
        error = RequestError(TransportError("refused"))
        assert error.status_code is None
        assert error.body is None


class TestHttpStatusError:
    def test_message_and_status(self):
        error = HttpStatusError(HttpResponse(status_code=404, reason="Not Found"))
        assert str(error) == "HTTP 404 Not Found"
        assert error.status_code == 404

    def test_message_without_reason(self):
        assert str(HttpStatusError(HttpResponse(status_code=500))) == "HTTP 500"
