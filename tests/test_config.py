"""Tests for settings, errors and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from bank_of_thailand.core.config import (
    DEFAULT_BASE_URL,
    ConfigLoader,
    Settings,
    load_settings,
    load_yaml_config,
)
from bank_of_thailand.core.errors import BOTError, ErrorKind
from bank_of_thailand.core.logging import LoggerMixin, get_logger, setup_logging


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.api_token is None
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout == 30
        assert settings.max_retries == 3
        assert settings.log_level == "INFO"

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("BOT_API_TOKEN", "env_token")
        monkeypatch.setenv("BOT_TIMEOUT", "60")

        settings = Settings()

        assert settings.api_token == "env_token"
        assert settings.timeout == 60

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_negative_values_rejected(self):
        with pytest.raises(ValidationError):
            Settings(timeout=-1)
        with pytest.raises(ValidationError):
            Settings(max_retries=-1)

    def test_validate_for_requests(self):
        Settings(api_token="token").validate_for_requests()

        with pytest.raises(BOTError) as exc_info:
            Settings(api_token="").validate_for_requests()
        assert exc_info.value.kind == ErrorKind.CONFIGURATION

    def test_is_valid(self):
        assert Settings(api_token="token").is_valid() is True
        assert Settings().is_valid() is False
        assert Settings(api_token="token", base_url="").is_valid() is False

    def test_with_overrides_returns_copy(self):
        original = Settings(api_token="a")
        updated = original.with_overrides(api_token="b", timeout=10)

        assert updated is not original
        assert updated.api_token == "b"
        assert updated.timeout == 10
        assert original.api_token == "a"
        assert original.with_overrides() is original

    def test_load_settings_returns_new_instances(self):
        assert load_settings(api_token="x") is not load_settings(api_token="x")


class TestYamlConfig:
    """Tests for YAML overlay."""

    def test_yaml_overlay(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BOT_API_TOKEN", "env_token")
        path = tmp_path / "config.yaml"
        path.write_text("api_token: yaml_token\ntimeout: 45\n", encoding="utf-8")

        settings = ConfigLoader(str(path)).load()

        assert settings.api_token == "yaml_token"
        assert settings.timeout == 45

    def test_overrides_beat_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("api_token: yaml_token\n", encoding="utf-8")

        settings = load_settings(str(path), api_token="explicit", timeout=None)

        assert settings.api_token == "explicit"
        assert settings.timeout == 30

    def test_config_file_from_environment(self, tmp_path, monkeypatch):
        path = tmp_path / "bot.yaml"
        path.write_text("base_url: https://example.test\n", encoding="utf-8")
        monkeypatch.setenv("BOT_CONFIG_FILE", str(path))

        assert load_settings().base_url == "https://example.test"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_yaml_config(str(tmp_path / "nope.yaml"))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_yaml_config(str(path)) == {}

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(BOTError) as exc_info:
            load_yaml_config(str(path))
        assert exc_info.value.kind == ErrorKind.CONFIGURATION


class TestErrors:
    def test_to_dict(self):
        error = BOTError("Server error (502)", kind=ErrorKind.SERVER, status_code=502, url="https://x")

        assert error.to_dict() == {
            "error": "server",
            "message": "Server error (502)",
            "status_code": 502,
            "retry_after": None,
            "url": "https://x",
            "details": {},
        }

    def test_recoverable(self):
        assert BOTError("x", kind=ErrorKind.SERVER).recoverable is True
        assert BOTError("x", kind=ErrorKind.AUTHENTICATION).recoverable is False
        assert BOTError.configuration("x").recoverable is False

    def test_kind_accepts_string(self):
        assert BOTError("x", kind="not_found").kind == ErrorKind.NOT_FOUND


class TestLogging:
    def test_get_logger_prefix(self):
        assert get_logger("http").name == "bank_of_thailand.http"
        assert get_logger("bank_of_thailand.cli").name == "bank_of_thailand.cli"

    def test_logger_mixin(self):
        class Thing(LoggerMixin):
            pass

        assert Thing().logger.name == "bank_of_thailand.Thing"

    def test_setup_logging_sets_level(self, tmp_path):
        setup_logging(config_path=str(tmp_path / "missing.yaml"), log_level="DEBUG")
        assert logging.getLogger("bank_of_thailand").level == logging.DEBUG

    def test_setup_logging_from_yaml(self, tmp_path):
        path = tmp_path / "logging.yaml"
        path.write_text(
            "version: 1\n"
            "disable_existing_loggers: false\n"
            "loggers:\n"
            "  bank_of_thailand:\n"
            "    level: ERROR\n",
            encoding="utf-8",
        )

        setup_logging(config_path=str(path), log_level="WARNING")

        assert logging.getLogger("bank_of_thailand").level == logging.WARNING
