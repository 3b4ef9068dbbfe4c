"""SMTP transport for log mail delivery.

Runs one complete SMTP session per message: connect, EHLO, STARTTLS when
the relay offers it, AUTH when an authenticator is given, MAIL/RCPT/DATA, QUIT.
No connection is kept between sends.

Features:
- Opportunistic STARTTLS with certificate verification
- Pluggable authenticator (PLAIN by default, see mailsink.models.auth)
- Aborts before DATA when any recipient is refused

Author: Odiseo
Version: 2.1.0
"""

from __future__ import annotations

import smtplib
import ssl
from collections.abc import Sequence

from mailsink.core.logger import get_logger, log_context
from mailsink.models.auth import Authenticator, auth_domain

logger = get_logger(__name__)

# Accepted replies to RCPT TO
_RCPT_OK = (250, 251)


def split_relay_address(relay_address: str) -> tuple[str, int]:
    """Split ``host[:port]`` into host and port.

    The port defaults to 25 when absent.

    Raises:
        ValueError: If the port part is not a number.
    """
    host = auth_domain(relay_address)
    if ":" not in relay_address:
        return host, smtplib.SMTP_PORT
    return host, int(relay_address.rsplit(":", 1)[1])


class SMTPTransport:
    """Per-message SMTP delivery.

    Stateless between calls, so one instance can serve any number of sinks.
    Errors from smtplib, the socket layer or the authenticator propagate
    unchanged to the caller.

    Attributes:
        timeout: Socket timeout in seconds, or None for the socket default.
        local_hostname: Name sent in EHLO, or None for the local FQDN.
    """

    def __init__(
        self,
        timeout: float | None = None,
        local_hostname: str | None = None,
    ) -> None:
        """Initialize SMTP transport.

        Args:
            timeout: Optional socket timeout. The sink never sets one.
            local_hostname: Optional EHLO name.
        """
        self.timeout = timeout
        self.local_hostname = local_hostname

    def _create_connection(self, host: str, port: int) -> smtplib.SMTP:
        """Open a new SMTP connection.

        Returns:
            Connected SMTP session.
        """
        logger.debug(f"Connecting to SMTP relay: {host}:{port}")
        kwargs: dict[str, object] = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self.local_hostname is not None:
            kwargs["local_hostname"] = self.local_hostname
        return smtplib.SMTP(host, port, **kwargs)

    def _start_tls(self, smtp: smtplib.SMTP) -> bool:
        """Upgrade to TLS when the relay advertises STARTTLS.

        Returns:
            True if the session is now encrypted.
        """
        if not smtp.has_extn("starttls"):
            return False

        logger.debug("Starting TLS...")
        smtp.starttls(context=ssl.create_default_context())
        smtp.ehlo()
        return True

    def send_mail(
        self,
        relay_address: str,
        auth: Authenticator | None,
        sender: str,
        recipients: Sequence[str],
        message: bytes,
    ) -> None:
        """Deliver one message.

        Args:
            relay_address: Relay as ``host`` or ``host:port``.
            auth: Authenticator, or None to send without authenticating.
                A relay that does not advertise AUTH is refused when set.
            sender: Envelope sender (MAIL FROM).
            recipients: Envelope recipients (RCPT TO), in order.
            message: Complete message, headers included.

        Raises:
            smtplib.SMTPException: On any protocol-level rejection, including
                SMTPNotSupportedError when ``auth`` is set and the relay has no AUTH.
            OSError: On connection failures.
            MailAuthError: If the authenticator refuses the connection.
            ValueError: If the relay port is not a number.
        """
        host, port = split_relay_address(relay_address)
        smtp = self._create_connection(host, port)
        try:
            smtp.ehlo()
            tls = self._start_tls(smtp)

            if auth is not None:
                if not smtp.has_extn("auth"):
                    raise smtplib.SMTPNotSupportedError(
                        "SMTP AUTH extension not supported by server"
                    )
                logger.debug("Authenticating...")
                auth.authenticate(smtp, host, tls)

            code, resp = smtp.mail(sender)
            if code != 250:
                raise smtplib.SMTPSenderRefused(code, resp, sender)

            for recipient in recipients:
                code, resp = smtp.rcpt(recipient)
                if code not in _RCPT_OK:
                    raise smtplib.SMTPRecipientsRefused({recipient: (code, resp)})

            code, resp = smtp.data(message)
            if code != 250:
                raise smtplib.SMTPDataError(code, resp)

            smtp.quit()
            logger.debug(
                log_context("send_mail", relay=relay_address, recipients=recipients, size=len(message))
            )
        finally:
            smtp.close()
