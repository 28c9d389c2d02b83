"""
STAC Auth Mock API.

This module defines the FastAPI application for the STAC Auth Mock server, which
serves a small static STAC API behind a configurable authentication gate.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from .auth import AuthGate
from .config import Settings
from .exceptions import StacApiError, stac_api_error_handler
from .fixtures import StacFixtures
from .handlers import StacHandler
from .lifespan import lifespan
from .middleware import CorsPreflightMiddleware, RequestPipeline

logger = logging.getLogger(__name__)


def configure_app(
    app: FastAPI,
    settings: Optional[Settings] = None,
    fixtures: Optional[StacFixtures] = None,
) -> FastAPI:
    """
    Apply the STAC routes, auth gate and CORS policy to a FastAPI application.

    Args:
        app: FastAPI application to configure
        settings: Settings to apply, read from the environment if omitted
        fixtures: Documents to serve, the built-in collections if omitted
    """
    settings = settings or Settings()
    fixtures = fixtures or StacFixtures.default(settings.public_url)

    #
    # Handlers
    #
    app.include_router(StacHandler(fixtures=fixtures).router)
    app.add_exception_handler(StacApiError, stac_api_error_handler)

    #
    # Middleware (order is important, last added = first to run)
    #
    app.add_middleware(
        RequestPipeline,
        stages=[AuthGate.from_settings(settings)],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
        allow_credentials=settings.cors.allow_credentials,
    )

    # OPTIONS requests are answered first and never reach the auth gate
    app.add_middleware(
        CorsPreflightMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
        allow_credentials=settings.cors.allow_credentials,
    )

    return app


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """FastAPI Application Factory."""
    settings = settings or Settings()

    app = FastAPI(
        title="STAC Auth Mock",
        openapi_url=None,  # Every path sits behind the auth gate, docs included
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan(settings),
    )
    return configure_app(app, settings)
