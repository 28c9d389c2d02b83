"""Middleware running an ordered list of request stages ahead of the app."""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Sequence, TypeAlias

from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

Stage: TypeAlias = Callable[[Request], Awaitable[Optional[Response]]]


@dataclass
class RequestPipeline:
    """
    Run each stage in order before handing the request to the wrapped app.

    A stage returns ``None`` to let the request continue, or a ``Response`` to
    terminate it. Once a stage responds, later stages and the app never run.
    """

    app: ASGIApp
    stages: Sequence[Stage]

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Run stages, then the app."""
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        request = Request(scope, receive)
        for stage in self.stages:
            response = await stage(request)
            if response is not None:
                logger.debug(
                    "%s short-circuited %s %s with %s",
                    type(stage).__name__,
                    request.method,
                    request.url.path,
                    response.status_code,
                )
                return await response(scope, receive, send)

        return await self.app(scope, receive, send)
