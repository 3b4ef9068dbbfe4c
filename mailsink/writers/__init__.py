"""Writers module for the mail sink.

Contains the mail-backed byte writer and its logging handler adapter.

Author: Odiseo
Created: 2025-10-18
Version: 1.0.0
"""

from mailsink.writers.base import ByteWriter
from mailsink.writers.handler import MailSinkHandler
from mailsink.writers.smtp import MailSink

__all__ = ["ByteWriter", "MailSink", "MailSinkHandler"]
