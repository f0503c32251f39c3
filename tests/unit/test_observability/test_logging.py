"""Unit tests for logging configuration."""

import io
import json
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

from stencil_config.observability import (
    bind_theme_logger,
    configure_logging,
    get_logger,
    redact_secret_fields,
)
from stencil_config.observability.logging import REDACTED_VALUE


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore default structlog configuration after each test."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.unit
    def test_json_output(self) -> None:
        """Test that JSON output carries event, level and bound context."""
        output = io.StringIO()
        configure_logging(output=output, json_format=True)

        bind_theme_logger(Path("/theme"), "config", operation="save").info(
            "config_saved", config_path="/theme/config.stencil.json"
        )

        record = json.loads(output.getvalue().strip())
        assert record["event"] == "config_saved"
        assert record["level"] == "info"
        assert record["theme_path"] == "/theme"
        assert record["component"] == "config"
        assert record["operation"] == "save"
        assert record["config_path"] == "/theme/config.stencil.json"
        assert "timestamp" in record

    @pytest.mark.unit
    def test_level_filtering(self) -> None:
        """Test that messages below the configured level are dropped."""
        output = io.StringIO()
        configure_logging(level=30, output=output, json_format=True)

        get_logger().info("api_host_fallback")

        assert output.getvalue() == ""

    @pytest.mark.unit
    def test_console_output(self) -> None:
        """Test that console output contains the event name."""
        output = io.StringIO()
        configure_logging(output=output)

        get_logger().warning("legacy_config_detected", legacy_file=".stencil")

        assert "legacy_config_detected" in output.getvalue()
        assert ".stencil" in output.getvalue()

    @pytest.mark.unit
    def test_tokens_redacted_in_output(self) -> None:
        """Test that token values never reach the rendered output."""
        output = io.StringIO()
        configure_logging(output=output, json_format=True)

        get_logger().info("env_value_set", STENCIL_ACCESS_TOKEN="secret-abc")

        assert "secret-abc" not in output.getvalue()
        record = json.loads(output.getvalue().strip())
        assert record["STENCIL_ACCESS_TOKEN"] == REDACTED_VALUE


class TestRedactSecretFields:
    """Tests for the redaction processor."""

    @pytest.mark.unit
    def test_replaces_token_values(self) -> None:
        """Test that config and env var spellings are both redacted."""
        event_dict = {
            "event": "config_saved",
            "accessToken": "abc",
            "STENCIL_GITHUB_TOKEN": "gh",
            "apiHost": "https://api.example.com",
        }

        result = redact_secret_fields(None, "info", event_dict)

        assert result["accessToken"] == REDACTED_VALUE
        assert result["STENCIL_GITHUB_TOKEN"] == REDACTED_VALUE
        assert result["apiHost"] == "https://api.example.com"

    @pytest.mark.unit
    def test_empty_values_untouched(self) -> None:
        """Test that empty or missing tokens are left as they are."""
        event_dict = {"event": "config_saved", "accessToken": None, "githubToken": ""}

        result = redact_secret_fields(None, "info", event_dict)

        assert result["accessToken"] is None
        assert result["githubToken"] == ""


class TestBindThemeLogger:
    """Tests for bind_theme_logger."""

    @pytest.mark.unit
    def test_binds_theme_and_component(self) -> None:
        """Test that theme path, component and extra context are bound."""
        with capture_logs() as logs:
            bind_theme_logger(Path("/theme"), "env_file", key="K").debug("env_value_set")

        assert logs == [
            {
                "event": "env_value_set",
                "log_level": "debug",
                "component": "env_file",
                "theme_path": "/theme",
                "key": "K",
            }
        ]

    @pytest.mark.unit
    def test_binds_onto_given_logger(self) -> None:
        """Test that context is layered onto an injected logger."""
        with capture_logs() as logs:
            base = get_logger().bind(request="r1")
            bind_theme_logger(Path("/theme"), "config", base).info("config_saved")

        assert logs[0]["request"] == "r1"
        assert logs[0]["component"] == "config"
