"""
Unit tests for backend/main.py
"""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import patch

from backend.main import (
    LOG_FORMAT,
    _init_sentry,
    configure_logging,
    create_app,
)
from backend.settings import Settings


@pytest.mark.unit
class TestCreateApp:
    """Test the create_app() factory function."""

    def test_create_app_returns_fastapi_instance(self):
        """create_app() should return a FastAPI application instance."""
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        assert isinstance(app, FastAPI)

    def test_create_app_uses_default_settings_when_none_provided(self):
        """create_app() should use get_settings() when no settings provided."""
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_settings = Settings(environment="test", _env_file=None)
            mock_get_settings.return_value = mock_settings

            app = create_app(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(app, FastAPI)

    def test_create_app_configures_app_metadata(self):
        """create_app() should configure app title and version."""
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)

        assert app.title == "Workout XP API"
        assert app.version == "1.0.0"

    def test_create_app_registers_log_route(self):
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)

        assert app.url_path_for("log_workout") == "/log"


@pytest.mark.unit
class TestInitSentry:
    """Test Sentry initialization."""

    def test_init_sentry_skipped_when_no_dsn(self):
        """Sentry should not be initialized when DSN is not set."""
        settings = Settings(sentry_dsn=None, _env_file=None)

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_not_called()

    def test_init_sentry_called_when_dsn_provided(self):
        """Sentry should be initialized when DSN is provided."""
        settings = Settings(
            sentry_dsn="https://test@sentry.io/123",
            environment="test",
            _env_file=None
        )

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_called_once_with(
                dsn="https://test@sentry.io/123",
                environment="test",
                traces_sample_rate=0.1,
                profiles_sample_rate=0.1,
                enable_tracing=True,
            )


@pytest.mark.unit
class TestConfigureLogging:
    """Test process-wide logging setup."""

    def test_configure_logging_uses_settings_level(self):
        settings = Settings(log_level="WARNING", _env_file=None)

        with patch("backend.main.logging.basicConfig") as mock_basic_config:
            configure_logging(settings)

        mock_basic_config.assert_called_once()
        kwargs = mock_basic_config.call_args.kwargs
        assert kwargs["level"] == "WARNING"
        assert kwargs["format"] == LOG_FORMAT

    def test_log_format_carries_source_location(self):
        assert "%(filename)s" in LOG_FORMAT
        assert "%(lineno)d" in LOG_FORMAT
        assert "%(asctime)s" in LOG_FORMAT


@pytest.mark.integration
class TestAppIntegration:
    """Integration tests for the created app."""

    def test_unknown_path_returns_plain_text_404(self):
        settings = Settings(environment="test", _env_file=None)
        client = TestClient(create_app(settings=settings))

        response = client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.text == "Not Found\n"
        assert response.headers["content-type"].startswith("text/plain")

    def test_preflight_options_not_allowed(self):
        """Cross-origin preflight gets the same 405 as any other non-POST."""
        settings = Settings(environment="test", _env_file=None)
        client = TestClient(create_app(settings=settings))

        response = client.options(
            "/log",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 405
        assert response.text == "Method Not Allowed\n"
        assert "access-control-allow-origin" not in response.headers
