"""Clients module for the mail sink.

Contains the SMTP relay integration.

Author: Odiseo
Created: 2025-10-18
Version: 1.0.0
"""

from mailsink.clients.smtp import SMTPTransport, split_relay_address

__all__ = ["SMTPTransport", "split_relay_address"]
