"""Mail sink configuration with Pydantic v2.

Opt-in loader for applications that configure their log mail destination
from environment variables or a .env file. ``MailSink`` itself reads no
environment and validates nothing; validation lives here.

Author: Odiseo
Created: 2025-10-18
Version: 1.0.0
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mailsink.core.exceptions import MailSinkConfigError
from mailsink.core.logger import get_logger, setup_logging
from mailsink.models.sink_config import SinkConfig
from mailsink.writers.handler import MailSinkHandler
from mailsink.writers.smtp import MailSink

logger = get_logger(__name__)


class MailSinkSettings(BaseSettings):
    """Mail sink configuration.

    Loads settings from environment variables and .env file using Pydantic v2.
    All settings are case-sensitive.

    Attributes:
        MAIL_SINK_ACCOUNT: SMTP login identity and From address.
        MAIL_SINK_SECRET: SMTP password.
        MAIL_SINK_SUBJECT: Subject line for every log mail.
        MAIL_SINK_RELAY: Relay as host or host:port.
        MAIL_SINK_RECIPIENTS: Comma-separated destination addresses.
        MAIL_SINK_LEVEL: Minimum record level mailed by the handler.
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_TO_FILE: Whether to log to file.
        LOG_DIR: Directory for log files.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ========================================================================
    # Mail Sink Configuration
    # ========================================================================
    MAIL_SINK_ACCOUNT: str = Field(
        default="",
        description="SMTP login identity and From address",
    )
    MAIL_SINK_SECRET: str = Field(
        default="",
        description="SMTP password",
    )
    MAIL_SINK_SUBJECT: str = Field(
        default="Application log",
        description="Subject line for every log mail",
    )
    MAIL_SINK_RELAY: str = Field(
        default="",
        description="SMTP relay as host or host:port",
    )
    MAIL_SINK_RECIPIENTS: str = Field(
        default="",
        description="Comma-separated destination addresses",
    )
    MAIL_SINK_LEVEL: str = Field(
        default="ERROR",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Minimum level of records sent by mail",
    )

    # ========================================================================
    # Logging Configuration
    # ========================================================================
    LOG_LEVEL: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level",
    )
    LOG_TO_FILE: bool = Field(
        default=False,
        description="Whether to log to file",
    )
    LOG_DIR: str = Field(
        default="./logs",
        description="Directory for log files",
    )

    @field_validator("MAIL_SINK_ACCOUNT", "MAIL_SINK_RELAY")
    @classmethod
    def strip_value(cls, v: str) -> str:
        return v.strip()

    def recipient_list(self) -> list[str]:
        """Split MAIL_SINK_RECIPIENTS, dropping blanks and keeping order."""
        return [r.strip() for r in self.MAIL_SINK_RECIPIENTS.split(",") if r.strip()]

    def validate_sink_config(self) -> None:
        """Validate complete mail sink configuration.

        Raises:
            MailSinkConfigError: If required settings are missing.
        """
        missing_fields = []

        if not self.MAIL_SINK_ACCOUNT:
            missing_fields.append("MAIL_SINK_ACCOUNT")

        if not self.MAIL_SINK_SECRET:
            missing_fields.append("MAIL_SINK_SECRET")

        if not self.MAIL_SINK_RELAY:
            missing_fields.append("MAIL_SINK_RELAY")

        if not self.recipient_list():
            missing_fields.append("MAIL_SINK_RECIPIENTS")

        if missing_fields:
            raise MailSinkConfigError(
                f"Required mail sink settings missing: {', '.join(missing_fields)}. "
                f"Set these environment variables to enable log mails."
            )

    def get_sink_config(self) -> SinkConfig:
        """Get the sink construction parameters as a SinkConfig."""
        return SinkConfig(
            account=self.MAIL_SINK_ACCOUNT,
            secret=self.MAIL_SINK_SECRET,
            subject=self.MAIL_SINK_SUBJECT,
            relay_address=self.MAIL_SINK_RELAY,
            recipients=self.recipient_list(),
        )

    def build_sink(self) -> MailSink:
        """Validate settings and construct a MailSink.

        Raises:
            MailSinkConfigError: If required settings are missing.
        """
        self.validate_sink_config()
        return self.get_sink_config().create_sink()

    def build_handler(self) -> MailSinkHandler:
        """Construct a MailSinkHandler at MAIL_SINK_LEVEL.

        Raises:
            MailSinkConfigError: If required settings are missing.
        """
        handler = MailSinkHandler(
            self.build_sink(), level=getattr(logging, self.MAIL_SINK_LEVEL)
        )
        logger.info(f"Mail sink handler ready (level={self.MAIL_SINK_LEVEL})")
        return handler

    def configure_logging(self) -> None:
        """Apply LOG_LEVEL, LOG_TO_FILE and LOG_DIR through setup_logging()."""
        setup_logging(
            log_dir=Path(self.LOG_DIR),
            log_level=self.LOG_LEVEL,
            console_level=self.LOG_LEVEL,
            enable_file=self.LOG_TO_FILE,
        )
