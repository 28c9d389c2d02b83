"""Pytest fixtures."""

import base64
import os
from unittest.mock import patch

import pytest


@pytest.fixture
def basic_auth_header():
    """Build a Basic ``Authorization`` header value."""

    def build_header(username: str, password: str) -> str:
        token = base64.b64encode(f"{username}:{password}".encode()).decode()
        return f"Basic {token}"

    return build_header


@pytest.fixture(autouse=True, scope="module")
def mock_env():
    """Clear environment variables to avoid polluting configs from runtime env."""
    with patch.dict(os.environ, clear=True):
        yield
