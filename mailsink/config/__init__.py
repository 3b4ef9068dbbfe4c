"""Configuration module for the mail sink.

Loads and validates mail sink settings from environment variables or .env file.

Author: Odiseo
Created: 2025-10-18
Version: 1.0.0
"""

from mailsink.config.settings import MailSinkSettings

__all__ = ["MailSinkSettings"]
