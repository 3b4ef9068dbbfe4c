"""Mail-backed log sink.

Each write is delivered as one plain-text email. The message header is
rendered once at construction and reused for every send; only the body
changes between writes.

Concurrency:
    A MailSink is NOT safe for concurrent use. Two simultaneous writes on
    one instance are undefined behavior: their bodies can interleave in the
    shared buffer. Serialize calls on the caller side, use one sink per
    worker, or attach the sink through ``MailSinkHandler``, which runs under
    the logging handler lock.

Author: Odiseo
Created: 2025-10-18
Version: 1.0.0
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from mailsink.clients.smtp import SMTPTransport
from mailsink.core.exceptions import MailDeliveryError, MailSinkError
from mailsink.core.logger import get_logger, log_context
from mailsink.models.auth import Authenticator, PlainAuth, auth_domain
from mailsink.models.envelope import Envelope

logger = get_logger(__name__)

AuthFactory = Callable[[str, str, str], Authenticator]


class MailSink:
    """Byte writer that mails every write to a fixed recipient list.

    Attributes:
        account: SMTP login identity, also the From address and envelope sender.
        relay_address: Relay as ``host`` or ``host:port``.
        recipients: Ordered destination addresses.
        subject: Subject line used for every message.
        envelope: Cached header plus pending body.
        auth: Authentication context bound to the relay host.
        transport: SMTP transport used for delivery.
    """

    def __init__(
        self,
        account: str,
        secret: str,
        subject: str,
        relay_address: str,
        recipients: Sequence[str],
        *,
        transport: SMTPTransport | None = None,
        auth_factory: AuthFactory = PlainAuth.bind,
    ) -> None:
        """Initialize mail sink.

        No argument is validated. An empty recipient list renders an empty
        ``To:`` value, and a relay address without a port binds the
        credentials to the whole string.

        Args:
            account: SMTP login identity and sender address.
            secret: SMTP password.
            subject: Subject line for every log mail.
            relay_address: Relay as ``host`` or ``host:port``.
            recipients: Destination addresses, in To-line order.
            transport: SMTP transport (a new SMTPTransport if None).
            auth_factory: Builds the authenticator from
                (account, secret, relay host).
        """
        self.account = account
        self._secret = secret
        self.subject = subject
        self.relay_address = relay_address
        self.recipients = tuple(recipients)

        self.envelope = Envelope(account, subject, self.recipients)

        self._auth_factory = auth_factory
        self.auth_host = auth_domain(relay_address)
        self.auth = auth_factory(account, secret, self.auth_host)

        self.transport = transport if transport is not None else SMTPTransport()
        self._closed = False
        self._writing = False

        logger.info(
            f"Mail sink initialized: {relay_address} "
            f"({len(self.recipients)} recipients, header={self.header_length} bytes)"
        )

    @property
    def header_length(self) -> int:
        return self.envelope.header_length

    @property
    def closed(self) -> bool:
        return self._closed

    def _auth_for_send(self) -> Authenticator:
        """Return the cached authenticator, or a fresh one if it keeps state."""
        if self.auth.stateless:
            return self.auth
        return self._auth_factory(self.account, self._secret, self.auth_host)

    def write(self, body: bytes | str) -> int:
        """Mail ``body`` to every recipient.

        The returned count is the length of the whole message, header
        included: ``write(b"hello")`` with a 120-byte header returns 125.
        The envelope is back to header-only when this returns or raises.

        Args:
            body: Message body. ``str`` is encoded as UTF-8.

        Returns:
            Number of bytes sent (header + body).

        Raises:
            MailDeliveryError: If the relay could not be reached or rejected
                the message. The transport error is chained as __cause__.
            MailSinkError: If the sink is closed, or if called again while a
                write on this sink is still in progress.
        """
        if self._closed:
            raise MailSinkError("write to closed mail sink")
        # The failure log below can route back here (e.g. a StreamHandler
        # targeting this sink) while the envelope still holds this body.
        if self._writing:
            raise MailSinkError("re-entrant write on mail sink")
        if isinstance(body, str):
            body = body.encode("utf-8")

        self._writing = True
        try:
            with self.envelope.pending(body) as payload:
                bytes_written = len(payload)
                try:
                    self.transport.send_mail(
                        self.relay_address,
                        self._auth_for_send(),
                        self.account,
                        self.recipients,
                        payload,
                    )
                except Exception as e:
                    logger.error(
                        f"Failed to send log mail: "
                        f"{log_context('write', relay=self.relay_address, size=bytes_written)}: {e}"
                    )
                    raise MailDeliveryError(
                        f"Failed to send log mail via {self.relay_address}: {e}",
                        bytes_written=bytes_written,
                        relay_address=self.relay_address,
                    ) from e
        finally:
            self._writing = False

        return bytes_written

    def writable(self) -> bool:
        return not self._closed

    def flush(self) -> None:
        """No-op: every write is sent immediately."""

    def close(self) -> None:
        """Release the sink. Further writes raise MailSinkError."""
        if not self._closed:
            self._closed = True
            self.envelope.reset()
            logger.debug("Mail sink closed")

    def __enter__(self) -> MailSink:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close sink."""
        self.close()

    def __repr__(self) -> str:
        return (
            f"MailSink(account={self.account!r}, relay_address={self.relay_address!r}, "
            f"recipients={list(self.recipients)!r})"
        )
