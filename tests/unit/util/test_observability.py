"""Unit tests for logging and Logfire setup helpers."""

import logging

from inviteflow.config import ObservabilitySettings, Settings
from inviteflow.util.logging import resolve_log_level
from inviteflow.util.observability import should_send_to_logfire


class TestShouldSendToLogfire:
    def test_console_only_without_token(self):
        assert should_send_to_logfire(ObservabilitySettings()) is False

    def test_token_enables_sending(self):
        assert should_send_to_logfire(ObservabilitySettings(logfire_token="t")) is True

    def test_explicit_flag_wins(self):
        observability = ObservabilitySettings(logfire_token="t", send_to_logfire=False)

        assert should_send_to_logfire(observability) is False


class TestResolveLogLevel:
    def test_override(self):
        settings = Settings(
            _env_file=None, observability=ObservabilitySettings(log_level="error")
        )

        assert resolve_log_level(settings) == logging.ERROR

    def test_debug(self):
        settings = Settings(_env_file=None, debug=True)

        assert resolve_log_level(settings) == logging.DEBUG

    def test_test_environment_is_quiet(self):
        settings = Settings(_env_file=None, environment="test")

        assert resolve_log_level(settings) == logging.WARNING
