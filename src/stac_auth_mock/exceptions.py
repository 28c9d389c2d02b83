"""Errors surfaced to API clients."""

from typing import Optional

from fastapi import Request, status
from starlette.responses import JSONResponse


class StacApiError(Exception):
    """Base error rendered as a STAC API ``{code, description}`` body."""

    code: str = "ServerError"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, description: str, headers: Optional[dict[str, str]] = None):
        """Initialize the error."""
        super().__init__(description)
        self.description = description
        self.headers = headers or {}

    def to_response(self) -> JSONResponse:
        """Render the error as a JSON response."""
        return JSONResponse(
            {"code": self.code, "description": self.description},
            status_code=self.status_code,
            headers=self.headers,
        )


class Unauthorized(StacApiError):
    """Request did not carry valid credentials."""

    code = "Unauthorized"
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(StacApiError):
    """Requested resource does not exist."""

    code = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND


async def stac_api_error_handler(request: Request, exc: StacApiError) -> JSONResponse:
    """Exception handler rendering ``StacApiError`` subclasses."""
    return exc.to_response()
