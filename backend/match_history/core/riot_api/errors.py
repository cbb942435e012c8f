"""Error types raised by the Riot API client.

A single error channel: every transport or HTTP failure surfaces as a
RiotAPIError (or subclass) carrying the observed status code, if any.
"""

from typing import Any, Dict, Optional, Type


class RiotAPIError(Exception):
    """Base exception for Riot API errors with status code tracking."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        url: Optional[str] = None,
    ) -> None:
        """
        Initialize RiotAPIError.

        Args:
            message: Human-readable message from the response body or transport
            status_code: HTTP status code, None for transport failures
            response_data: Parsed JSON error body, if the response had one
            url: Request URL that failed
        """
        super().__init__(message)
        self.message: str = message
        self.status_code: Optional[int] = status_code
        self.response_data: Dict[str, Any] = response_data or {}
        self.url: Optional[str] = url

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code:
            return f"Riot API Error {self.status_code}: {self.message}"
        return f"Riot API Error: {self.message}"


class BadRequestError(RiotAPIError):
    """Bad request (400) - invalid parameters."""


class AuthenticationError(RiotAPIError):
    """Authentication error (401) - missing API key."""


class ForbiddenError(RiotAPIError):
    """Forbidden error (403) - invalid or expired API key."""


class NotFoundError(RiotAPIError):
    """Not found error (404) - resource doesn't exist."""


class RateLimitError(RiotAPIError):
    """Rate limit error (429). Not retried by this client."""


class ServiceUnavailableError(RiotAPIError):
    """Service unavailable (503) - Riot servers down."""


_ERRORS_BY_STATUS: Dict[int, Type[RiotAPIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
    503: ServiceUnavailableError,
}


def error_for_status(
    status_code: int,
    message: str,
    response_data: Optional[Dict[str, Any]] = None,
    url: Optional[str] = None,
) -> RiotAPIError:
    """Build the RiotAPIError subclass matching an HTTP status code."""
    error_cls = _ERRORS_BY_STATUS.get(status_code, RiotAPIError)
    return error_cls(
        message, status_code=status_code, response_data=response_data, url=url
    )
