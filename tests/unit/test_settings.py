"""Unit tests for MailSinkSettings and SinkConfig.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

import logging

import pytest

from mailsink.config.settings import MailSinkSettings
from mailsink.core.exceptions import MailSinkConfigError
from mailsink.models.sink_config import SinkConfig
from mailsink.writers.handler import MailSinkHandler
from mailsink.writers.smtp import MailSink

_ENV = {
    "MAIL_SINK_ACCOUNT": " log@example.com ",
    "MAIL_SINK_SECRET": "wrce fmkh xlvn jiht",
    "MAIL_SINK_SUBJECT": "[test] errors",
    "MAIL_SINK_RELAY": "smtp.example.com:587",
    "MAIL_SINK_RECIPIENTS": "a@x.com, b@y.com,,",
}


@pytest.fixture
def env(monkeypatch) -> None:
    for key, value in _ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def clean_env(monkeypatch) -> None:
    for key in _ENV:
        monkeypatch.delenv(key, raising=False)


class TestMailSinkSettings:
    """Tests for environment loading."""

    def test_loads_from_env(self, env):
        """Test values are read, trimming only account and relay."""
        settings = MailSinkSettings(_env_file=None)

        assert settings.MAIL_SINK_ACCOUNT == "log@example.com"
        assert settings.MAIL_SINK_SECRET == "wrce fmkh xlvn jiht"
        assert settings.recipient_list() == ["a@x.com", "b@y.com"]

    def test_missing_fields_reported(self, clean_env):
        """Test validate_sink_config names every missing variable."""
        settings = MailSinkSettings(_env_file=None)

        with pytest.raises(MailSinkConfigError) as exc_info:
            settings.validate_sink_config()

        message = str(exc_info.value)
        for name in (
            "MAIL_SINK_ACCOUNT",
            "MAIL_SINK_SECRET",
            "MAIL_SINK_RELAY",
            "MAIL_SINK_RECIPIENTS",
        ):
            assert name in message

    def test_invalid_level_rejected(self, env, monkeypatch):
        """Test MAIL_SINK_LEVEL must be a logging level name."""
        monkeypatch.setenv("MAIL_SINK_LEVEL", "LOUD")

        with pytest.raises(ValueError):
            MailSinkSettings(_env_file=None)

    def test_build_sink(self, env):
        """Test build_sink constructs a sink without contacting the relay."""
        sink = MailSinkSettings(_env_file=None).build_sink()

        assert isinstance(sink, MailSink)
        assert sink.recipients == ("a@x.com", "b@y.com")
        assert sink.envelope.header.startswith(b"To: a@x.com;b@y.com\r\n")
        assert sink.auth.host == "smtp.example.com"
        assert sink.auth.password == "wrce fmkh xlvn jiht"

    def test_build_handler(self, env, monkeypatch):
        """Test build_handler applies MAIL_SINK_LEVEL."""
        monkeypatch.setenv("MAIL_SINK_LEVEL", "CRITICAL")

        handler = MailSinkSettings(_env_file=None).build_handler()

        assert isinstance(handler, MailSinkHandler)
        assert handler.level == logging.CRITICAL
        handler.close()

    def test_build_sink_requires_config(self, clean_env):
        """Test build_sink refuses an incomplete configuration."""
        with pytest.raises(MailSinkConfigError):
            MailSinkSettings(_env_file=None).build_sink()


class TestSinkConfig:
    """Tests for the SinkConfig model."""

    def test_accepts_unvalidated_values(self):
        """Test relay and recipients are stored as given."""
        config = SinkConfig(
            account="log@example.com",
            secret="testpassword",
            relay_address="not a host",
            recipients=[],
        )

        assert config.recipients == ()
        assert config.subject == ""
        assert "testpassword" not in repr(config)

    def test_create_sink(self):
        """Test create_sink passes every parameter through."""
        config = SinkConfig(
            account="log@example.com",
            secret="testpassword",
            subject="x",
            relay_address="smtp.example.com",
            recipients=["a@x.com"],
        )

        sink = config.create_sink()

        assert sink.account == "log@example.com"
        assert sink.subject == "x"
        assert sink.relay_address == "smtp.example.com"
        assert sink.recipients == ("a@x.com",)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
