"""Tests for configuring an external FastAPI application."""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from stac_auth_mock import Settings, configure_app, create_app
from stac_auth_mock.fixtures import StacFixtures, default_collections


def test_configure_app_adds_stac_routes():
    """Ensure `configure_app` registers the STAC routes and middleware."""
    app = FastAPI()
    settings = Settings(auth_method="none")

    configure_app(app, settings)
    client = TestClient(app)

    for path in [
        "/",
        "/conformance",
        "/collections",
        "/collections/test-collection",
    ]:
        response = client.get(path)
        assert response.status_code == 200, path
        assert response.headers["content-type"] == "application/json"

    assert [m.cls.__name__ for m in app.user_middleware] == [
        "CorsPreflightMiddleware",
        "CORSMiddleware",
        "RequestPipeline",
    ]


def test_duplicate_collection_ids_rejected():
    """Fixture sets may not repeat a collection identifier."""
    base_url = "http://localhost:3000"
    collections = default_collections(base_url)
    with pytest.raises(ValueError, match="Duplicate collection ids: test-collection"):
        StacFixtures(base_url=base_url, collections=[*collections, collections[0]])


def test_configure_app_custom_fixtures():
    """Custom fixture sets replace the built-in collections."""
    base_url = "http://localhost:3000"
    fixtures = StacFixtures(
        base_url=base_url, collections=default_collections(base_url)[1:]
    )
    app = configure_app(FastAPI(), Settings(auth_method="none"), fixtures=fixtures)
    client = TestClient(app)

    assert [c["id"] for c in client.get("/collections").json()["collections"]] == [
        "sample-imagery"
    ]
    assert client.get("/collections/test-collection").status_code == 404


def test_startup_summary_basic(caplog):
    """Startup logs the auth method and Basic credentials."""
    app = create_app(
        Settings(
            auth_method="basic",
            basic_auth_username="alice",
            basic_auth_password="wonderland",
        )
    )
    with caplog.at_level(logging.INFO, logger="stac_auth_mock"):
        with TestClient(app):
            pass

    assert "STAC API server running on http://localhost:3000" in caplog.text
    assert "Authentication method: basic" in caplog.text
    assert "Basic Auth - Username: alice, Password: wonderland" in caplog.text


def test_startup_summary_apikey(caplog):
    """Startup logs the API key in apikey mode."""
    app = create_app(Settings(auth_method="apikey", api_key="s3cret"))
    with caplog.at_level(logging.INFO, logger="stac_auth_mock"):
        with TestClient(app):
            pass

    assert "Authentication method: apikey" in caplog.text
    assert "API Key: s3cret" in caplog.text
    assert "Basic Auth" not in caplog.text


def test_startup_summary_none(caplog):
    """Startup logs no credentials when auth is disabled."""
    app = create_app(Settings(auth_method="none"))
    with caplog.at_level(logging.INFO, logger="stac_auth_mock"):
        with TestClient(app):
            pass

    assert "Authentication method: none" in caplog.text
    assert "API Key" not in caplog.text
    assert "Basic Auth" not in caplog.text
