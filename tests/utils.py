"""Utilities for testing."""

from fastapi import FastAPI

from stac_auth_mock import Settings, create_app

ROUTES = ["/", "/conformance", "/collections", "/collections/test-collection"]

BASIC_UNAUTHORIZED = {
    "code": "Unauthorized",
    "description": "Access denied. Valid credentials required.",
}
APIKEY_UNAUTHORIZED = {
    "code": "Unauthorized",
    "description": "Access denied. Valid API key required.",
}


class AppFactory:
    """Factory for creating test apps with default settings."""

    def __init__(self, **defaults):
        """Initialize the factory with default settings."""
        self.defaults = defaults

    def __call__(self, **overrides) -> FastAPI:
        """Create a new app with the given overrides."""
        return create_app(
            Settings.model_validate(
                {
                    **self.defaults,
                    **overrides,
                },
            )
        )
