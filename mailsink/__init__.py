"""mailsink - log output delivered by email.

A byte-writer log sink that mails each write as a plain-text message over
SMTP, reusing a precomputed header for every send.

Architecture:
    - Envelope cache (header rendered once, body appended and reset per write)
    - PLAIN authentication context bound to the relay host
    - Per-message SMTP transport (no pooling, no retry)
    - logging.Handler adapter for the standard logging pipeline

Modules:
    - core: Exceptions, logger
    - config: Pydantic v2 settings
    - models: Envelope, authentication, sink configuration
    - clients: External integrations (SMTP)
    - writers: MailSink and MailSinkHandler

Usage:
    import logging

    from mailsink import MailSink, MailSinkHandler

    sink = MailSink(
        account="alerts@example.com",
        secret="app-password",
        subject="[prod] errors",
        relay_address="smtp.example.com:587",
        recipients=["ops@example.com", "dev@example.com"],
    )
    handler = MailSinkHandler(sink, level=logging.ERROR)
    logging.getLogger().addHandler(handler)

Author: Odiseo
Created: 2025-10-18
Version: 1.0.0
"""

__version__ = "1.0.0"

# Clients
from mailsink.clients import SMTPTransport

# Configuration
from mailsink.config import MailSinkSettings

# Core utilities
from mailsink.core import (
    MailAuthError,
    MailDeliveryError,
    MailSinkConfigError,
    MailSinkError,
    get_logger,
    setup_logging,
)

# Models
from mailsink.models import Envelope, PlainAuth, SinkConfig, auth_domain

# Writers
from mailsink.writers import ByteWriter, MailSink, MailSinkHandler

__all__ = [
    # Version
    "__version__",
    # Core
    "MailSinkError",
    "MailSinkConfigError",
    "MailAuthError",
    "MailDeliveryError",
    "get_logger",
    "setup_logging",
    # Configuration
    "MailSinkSettings",
    # Models
    "Envelope",
    "PlainAuth",
    "SinkConfig",
    "auth_domain",
    # Clients
    "SMTPTransport",
    # Writers
    "ByteWriter",
    "MailSink",
    "MailSinkHandler",
]
