"""Core module for the mail sink.

Provides exceptions and logging configuration shared by every component.

Author: Odiseo
Created: 2025-10-18
Version: 2.0.0
"""

from mailsink.core.exceptions import (
    MailAuthError,
    MailDeliveryError,
    MailSinkConfigError,
    MailSinkError,
)
from mailsink.core.logger import (
    get_logger,
    get_logs_directory,
    log_context,
    setup_logging,
)

__all__ = [
    # Exceptions
    "MailSinkError",
    "MailSinkConfigError",
    "MailAuthError",
    "MailDeliveryError",
    # Logging
    "get_logger",
    "setup_logging",
    "get_logs_directory",
    "log_context",
]
