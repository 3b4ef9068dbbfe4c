"""Mail sink configuration model.

Carries the five construction parameters of a ``MailSink`` as one value.

Author: Odiseo
Created: 2025-10-18
Version: 1.0.0
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from mailsink.writers.smtp import MailSink


class SinkConfig(BaseModel):
    """Destination configuration for one mail sink.

    Values are stored as given; no address or host validation is done
    here, matching ``MailSink`` which accepts any strings.

    Attributes:
        account: SMTP login identity, also used as the From address.
        secret: SMTP password.
        subject: Subject line for every log mail.
        relay_address: Relay as ``host`` or ``host:port``.
        recipients: Ordered destination addresses.
    """

    model_config = ConfigDict(frozen=True)

    account: str = Field(..., description="SMTP login identity and From address")
    secret: str = Field(..., repr=False, description="SMTP password")
    subject: str = Field(default="", description="Fixed subject line")
    relay_address: str = Field(..., description="Relay host or host:port")
    recipients: tuple[str, ...] = Field(
        default=(), description="Ordered destination addresses"
    )

    def create_sink(self) -> MailSink:
        """Construct a ``MailSink`` from this configuration."""
        from mailsink.writers.smtp import MailSink

        return MailSink(
            account=self.account,
            secret=self.secret,
            subject=self.subject,
            relay_address=self.relay_address,
            recipients=self.recipients,
        )
