"""Reusable lifespan handler for FastAPI applications."""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from .config import Settings

logger = logging.getLogger(__name__)


def log_auth_summary(settings: Settings) -> None:
    """Log the active auth method and its credentials to aid manual testing."""
    logger.info("STAC API server running on %s", settings.public_url)
    logger.info("Authentication method: %s", settings.auth_method)
    if settings.auth_method == "basic":
        logger.info(
            "Basic Auth - Username: %s, Password: %s",
            settings.basic_auth_username,
            settings.basic_auth_password,
        )
    elif settings.auth_method == "apikey":
        logger.info("API Key: %s", settings.api_key)


def lifespan(settings: Settings | None = None, **settings_kwargs: Any):
    """Create a lifespan handler that reports the server configuration.

    Parameters
    ----------
    settings : Settings | None, optional
        Pre-built settings instance. If omitted, a new one is constructed from
        ``settings_kwargs``.
    **settings_kwargs : Any
        Keyword arguments used to build the settings if ``settings`` is not
        provided.

    Returns
    -------
    Callable[[FastAPI], AsyncContextManager[Any]]
        A callable suitable for the ``lifespan`` parameter of ``FastAPI``.
    """
    if settings is None:
        settings = Settings(**settings_kwargs)

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        log_auth_summary(settings)

        # Log all middleware connected to the app
        logger.info(
            "Connected middleware:\n%s",
            "\n".join([f" - {m.cls.__name__}" for m in app.user_middleware]),
        )

        yield

    return _lifespan


__all__ = ["lifespan", "log_auth_summary"]
