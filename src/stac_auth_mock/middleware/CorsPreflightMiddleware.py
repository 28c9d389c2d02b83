"""Middleware answering OPTIONS requests before authentication."""

import logging
from dataclasses import dataclass
from typing import Sequence

from starlette.datastructures import Headers
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)


@dataclass
class CorsPreflightMiddleware:
    """
    Respond to every OPTIONS request with 204 and the configured CORS headers.

    Requested methods and headers are not validated, and requests without
    ``Access-Control-Request-Method`` are answered too, so that no OPTIONS
    request ever reaches the auth gate.
    """

    app: ASGIApp
    allow_origins: Sequence[str]
    allow_methods: Sequence[str]
    allow_headers: Sequence[str]
    allow_credentials: bool = True

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Answer OPTIONS requests, pass everything else through."""
        if scope["type"] != "http" or scope["method"] != "OPTIONS":
            return await self.app(scope, receive, send)

        origin = Headers(scope=scope).get("Origin")
        headers = {
            "Access-Control-Allow-Methods": ", ".join(self.allow_methods),
            "Access-Control-Allow-Headers": ", ".join(self.allow_headers),
            "Vary": "Origin",
        }

        allow_all_origins = "*" in self.allow_origins
        if origin and (allow_all_origins or origin in self.allow_origins):
            # A credentialed response may not use the wildcard origin
            if allow_all_origins and not self.allow_credentials:
                headers["Access-Control-Allow-Origin"] = "*"
            else:
                headers["Access-Control-Allow-Origin"] = origin
            if self.allow_credentials:
                headers["Access-Control-Allow-Credentials"] = "true"
        elif origin:
            logger.debug("Origin %r not allowed for preflight", origin)

        response = Response(status_code=204, headers=headers)
        return await response(scope, receive, send)
