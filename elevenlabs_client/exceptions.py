"""
ElevenLabs Python Client - Exceptions

This module contains all custom exceptions raised by the client.

Two failure families are kept apart:

- ``MissingParameterError`` is raised locally, before any request is sent.
- ``APIError`` and its subclasses are raised after the API answered with a
  non-2xx status.
"""

from typing import Any, Dict, Optional, Type


class ElevenLabsError(Exception):
    """
    Base exception for all client errors.

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}')"


class MissingParameterError(ElevenLabsError, ValueError):
    """
    Raised when a required argument is missing or blank.

    This error never involves the network: it is raised before the
    request is built.

    Attributes:
        parameter: Name of the offending argument
    """

    def __init__(self, parameter: str, message: Optional[str] = None) -> None:
        self.parameter = parameter
        super().__init__(message or f"{parameter} is required")


class APIConnectionError(ElevenLabsError):
    """
    Raised when no HTTP response could be obtained.

    This can occur when:
    - DNS resolution or the TCP/TLS handshake fails
    - The connection drops mid-request
    """

    def __init__(self, message: str = "Connection to the API failed") -> None:
        super().__init__(message)


class APITimeoutError(APIConnectionError):
    """Raised when the request exceeds the configured timeout."""

    def __init__(self, message: str = "Request timed out") -> None:
        super().__init__(message)


class APIError(ElevenLabsError):
    """
    Raised for any non-2xx response.

    Subclasses refine the well-known statuses so callers can catch
    narrowly (``NotFoundError``) or broadly (``APIError``).

    Attributes:
        status_code: HTTP status of the response
        body: Parsed JSON body when available, else the raw text
    """

    default_message = "API request failed"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        if not message:
            message = self.default_message
            if status_code is not None and type(self) is APIError:
                message = f"{message} with status {status_code}"
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message='{self.message}', "
            f"status_code={self.status_code})"
        )


class BadRequestError(APIError):
    """Raised on 400 responses."""

    default_message = "Bad request - invalid parameters"


class AuthenticationError(APIError):
    """
    Raised on 401 responses.

    This occurs when the API key is invalid, revoked, or missing
    from the request.
    """

    default_message = "Invalid API key or authentication failed"


class ForbiddenError(APIError):
    """
    Raised on 403 responses.

    The key is valid but lacks permission for the requested resource.
    """

    default_message = "Access forbidden"


class NotFoundError(APIError):
    """Raised on 404 responses."""

    default_message = "Resource not found"


class UnprocessableEntityError(APIError):
    """
    Raised on 422 responses.

    The request was well formed but the API rejected its contents.
    The validation details are available on ``body``.
    """

    default_message = "Unprocessable entity - invalid data"


class RateLimitError(APIError):
    """
    Raised on 429 responses.

    Attributes:
        retry_after: Number of seconds to wait before retrying, when
            the API sent a ``Retry-After`` header
    """

    default_message = "Rate limit exceeded"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = 429,
        body: Any = None,
        retry_after: Optional[str] = None,
    ) -> None:
        super().__init__(message, status_code=status_code, body=body)
        try:
            self.retry_after = int(retry_after) if retry_after else None
        except ValueError:
            self.retry_after = None

    def __str__(self) -> str:
        base = super().__str__()
        if self.retry_after:
            return f"{base}. Retry after {self.retry_after} seconds."
        return base


# Canonical status -> error mapping. Anything else outside 2xx is APIError.
STATUS_ERRORS: Dict[int, Type[APIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def error_for_status(status_code: int) -> Type[APIError]:
    """Return the error class raised for ``status_code``."""
    return STATUS_ERRORS.get(status_code, APIError)
