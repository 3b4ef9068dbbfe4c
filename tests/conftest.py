"""Pytest configuration and fixtures for mail sink tests.

Provides reusable fixtures for unit tests including mocked SMTP
connections and transports. No test touches the network.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

import logging
import logging.handlers
from typing import Any, Generator
from unittest.mock import MagicMock

import pytest

from mailsink.clients.smtp import SMTPTransport
from mailsink.writers.smtp import MailSink


# =============================================================================
# Sink Configuration Fixtures
# =============================================================================
@pytest.fixture
def sink_kwargs() -> dict[str, Any]:
    """Construction parameters giving a 120-byte header."""
    return {
        "account": "log@example.com",
        "secret": "testpassword",
        "subject": "x",
        "relay_address": "smtp.example.com:587",
        "recipients": ["a@x.com", "b@y.com"],
    }


# =============================================================================
# SMTP Fixtures
# =============================================================================
@pytest.fixture
def mock_smtp_connection() -> MagicMock:
    """Create a mock SMTP connection advertising STARTTLS and AUTH."""
    smtp = MagicMock()
    smtp.ehlo.return_value = (250, b"OK")
    smtp.has_extn.side_effect = lambda name: name.lower() in {"starttls", "auth"}
    smtp.starttls.return_value = (220, b"TLS ready")
    smtp.docmd.return_value = (235, b"Authentication successful")
    smtp.mail.return_value = (250, b"OK")
    smtp.rcpt.return_value = (250, b"OK")
    smtp.data.return_value = (250, b"Queued")
    smtp.quit.return_value = (221, b"Bye")
    return smtp


@pytest.fixture
def mock_transport() -> MagicMock:
    """Create a mock SMTPTransport that accepts every message."""
    transport = MagicMock(spec=SMTPTransport)
    transport.send_mail.return_value = None
    return transport


@pytest.fixture
def sink(sink_kwargs: dict[str, Any], mock_transport: MagicMock) -> MailSink:
    """Create a MailSink wired to the mock transport."""
    return MailSink(**sink_kwargs, transport=mock_transport)


# =============================================================================
# Logging Fixtures
# =============================================================================
@pytest.fixture
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Remove handlers installed by setup_logging() and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
