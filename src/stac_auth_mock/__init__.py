"""
STAC Auth Mock package.

This package contains a mock STAC API that serves a handful of static documents
behind a selectable authentication gate (none, HTTP Basic or API key), for
exercising the authentication flows of STAC clients.
"""

from .app import configure_app, create_app
from .config import Settings
from .lifespan import lifespan

__all__ = [
    "create_app",
    "configure_app",
    "lifespan",
    "Settings",
]
