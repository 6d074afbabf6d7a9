"""
Tests for API configuration and logging setup.
"""

import logging

from api.config import ApiConfig
from api.logging_setup import setup_logging


class TestApiConfig:

    def test_defaults(self):
        config = ApiConfig()

        assert config.port == 3000
        assert config.rate_limit_max_requests == 100
        assert config.rate_limit_window_seconds == 900.0
        assert config.is_development is True
        assert config.validate() == []

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("FRONTEND_URL", "https://app.example.org")
        monkeypatch.setenv("BASE_URL", "https://api.example.org/")
        monkeypatch.setenv("RATE_LIMIT_MAX_REQUESTS", "10")
        monkeypatch.setenv("DEFAULT_ACCOUNT_AGE_DAYS", "0")

        config = ApiConfig.from_env()

        assert config.port == 8080
        assert config.is_development is False
        assert config.frontend_url == "https://app.example.org"
        assert config.callback_url == "https://api.example.org/api/reclaim/callback"
        assert config.rate_limit_max_requests == 10
        assert config.default_account_age_days == 0

    def test_validate_reports_errors(self):
        config = ApiConfig(
            port=0,
            log_format="xml",
            rate_limit_window_seconds=0,
            rate_limit_max_requests=-1,
            default_account_age_days=-5,
        )

        errors = config.validate()

        assert len(errors) == 5
        assert any("port" in error for error in errors)
        assert any("log_format" in error for error in errors)


class TestSetupLogging:

    def test_installs_single_root_handler(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            logger = setup_logging("debug", "json")

            assert logger.name == "api"
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert logging.getLogger("uvicorn.access").level == logging.INFO
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)
