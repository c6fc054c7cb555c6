"""
Exception hierarchy for the SparkPost client.

All custom exceptions inherit from SparkPostError base class.
"""

import json
from typing import Any, Optional


class SparkPostError(Exception):
    """Base exception for all SparkPost client errors."""
    pass


# Configuration Errors
class ConfigurationError(SparkPostError):
    """Raised when no usable API key is present after merging options."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when a configuration file is invalid or malformed."""
    pass


# Dispatch Errors
class CapabilityError(SparkPostError):
    """Raised when async dispatch is requested but the HTTP client is sync-only."""
    pass


# Transport Errors
class TransportError(SparkPostError):
    """Raised by the bundled adapters when a request cannot be completed."""

    def __init__(self, message: str, response: Optional[Any] = None) -> None:
        super().__init__(message)
        self.response = response


class HttpStatusError(TransportError):
    """Raised by the bundled adapters when the API answers with status >= 400."""

    def __init__(self, response: Any) -> None:
        super().__init__(
            f"HTTP {response.status_code} {response.reason}".rstrip(),
            response=response,
        )

    @property
    def status_code(self) -> int:
        return self.response.status_code


class RequestError(SparkPostError):
    """
    Wraps any exception raised by the HTTP client during a synchronous send.

    The original exception is kept on ``cause`` (and as ``__cause__`` when
    raised with ``from``). If the cause carries an API response, its status
    code and decoded body are lifted onto this error.
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        self.status_code: Optional[int] = None
        self.body: Any = None

        response = getattr(cause, "response", None)
        if isinstance(cause, TransportError) and response is not None:
            self.status_code = response.status_code
            self.body = _decode_error_body(response.content)

        super().__init__(f"Request failed: {cause}")


# Payload Errors
class InvalidAddressError(SparkPostError, ValueError):
    """Raised when a shorthand email address cannot be parsed."""
    pass


def _decode_error_body(content: bytes) -> Any:
    if not content:
        return None
    try:
        return json.loads(content)
    except ValueError:
        return content.decode("utf-8", errors="replace")
