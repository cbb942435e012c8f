"""Service-level exceptions and their HTTP rendering.

Every error that reaches the caller is rendered as ``{"error": message}``
with the status code carried by the exception.
"""

from typing import Any, Dict

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class ServiceException(Exception):
    """Base exception for errors reported to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context

    def to_body(self) -> Dict[str, str]:
        """Serialize to the JSON error body."""
        return {"error": self.message}


class ConfigurationError(ServiceException):
    """Required process configuration (the Riot API key) is missing."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ValidationError(ServiceException):
    """Client supplied invalid input."""

    status_code = status.HTTP_400_BAD_REQUEST


class SummonerNotFoundError(ServiceException):
    """Summoner name does not resolve to a known player."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, summoner_name: str) -> None:
        super().__init__(
            f"Summoner '{summoner_name}' not found.", summoner_name=summoner_name
        )
        self.summoner_name = summoner_name


class ForbiddenCredentialError(ServiceException):
    """Riot API rejected the configured key."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self) -> None:
        super().__init__("Riot API Key forbidden. Check if it expired or is invalid.")


class ExternalServiceError(ServiceException):
    """Generic upstream or transport failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


async def service_exception_handler(
    request: Request, exc: ServiceException
) -> JSONResponse:
    """Render a ServiceException as a JSON error response."""
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        "Request failed",
        path=request.url.path,
        status_code=exc.status_code,
        error_type=type(exc).__name__,
        error=exc.message,
        **exc.context,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach service exception handlers to the application."""
    app.add_exception_handler(ServiceException, service_exception_handler)  # type: ignore[arg-type]
