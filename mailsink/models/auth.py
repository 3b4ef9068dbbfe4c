"""SMTP authentication context.

Defines the authenticator protocol used by the transport and the PLAIN
mechanism bound to a relay host at sink construction time.

Author: Odiseo
Created: 2025-10-18
Version: 1.0.0
"""

from __future__ import annotations

import base64
import smtplib
from typing import ClassVar, Protocol

from pydantic import BaseModel, ConfigDict, Field

from mailsink.core.exceptions import MailAuthError

_LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})

# Replies accepted after AUTH
_AUTH_OK = (235, 503)


def auth_domain(relay_address: str) -> str:
    """Return the host part of a relay address.

    Everything before the first ``:`` is the host. An address without a
    port is returned unchanged; malformed addresses are not rejected.

    Examples:
        >>> auth_domain("smtp.example.com:587")
        'smtp.example.com'
        >>> auth_domain("smtp.example.com")
        'smtp.example.com'
    """
    return relay_address.split(":")[0]


def is_localhost(name: str) -> bool:
    return name in _LOCAL_HOSTS


class Authenticator(Protocol):
    """Authentication mechanism run once per SMTP session.

    ``stateless`` tells the sink whether one instance may be reused for
    every send. Mechanisms that keep per-session state must set it to False
    so a fresh instance is built for each send.
    """

    stateless: ClassVar[bool]

    def authenticate(self, smtp: smtplib.SMTP, server_name: str, tls: bool) -> None:
        ...


class PlainAuth(BaseModel):
    """SASL PLAIN credentials bound to one relay host.

    Immutable and stateless, so a single instance is safe to reuse across
    sends. Refuses to send the password over a connection that is neither
    TLS nor to localhost, and refuses when the connected server name is not
    the host the credentials were bound to.

    Attributes:
        identity: Authorization identity (usually empty).
        username: Login identity.
        password: Login secret.
        host: Relay host the credentials may be sent to.
    """

    model_config = ConfigDict(frozen=True)

    stateless: ClassVar[bool] = True

    identity: str = Field(default="", description="Authorization identity")
    username: str = Field(..., description="SMTP login identity")
    password: str = Field(..., repr=False, description="SMTP login secret")
    host: str = Field(..., description="Relay host the credentials are bound to")

    @classmethod
    def bind(cls, username: str, password: str, host: str) -> PlainAuth:
        """Bind credentials to a relay host. Default sink auth factory."""
        return cls(username=username, password=password, host=host)

    def initial_response(self) -> bytes:
        """Build the PLAIN response (``identity NUL username NUL password``).

        Encoded as UTF-8, so non-ASCII accounts and passwords are sent
        as-is. ``smtplib.SMTP.auth`` only encodes ASCII, so the exchange
        below is driven with ``docmd``.
        """
        return f"{self.identity}\0{self.username}\0{self.password}".encode("utf-8")

    def authenticate(self, smtp: smtplib.SMTP, server_name: str, tls: bool) -> None:
        """Run AUTH PLAIN on an open session.

        Sends the response with the AUTH command. If the relay answers 334
        instead (no initial response accepted), the same response is sent
        again as the reply to the empty challenge.

        Args:
            smtp: Connected session (after EHLO, and STARTTLS when offered).
            server_name: Host the session is connected to.
            tls: Whether the session is encrypted.

        Raises:
            MailAuthError: If the connection is unsafe for PLAIN.
            smtplib.SMTPAuthenticationError: If the relay rejects the credentials.
        """
        if not tls and not is_localhost(server_name):
            raise MailAuthError("unencrypted connection")
        if server_name != self.host:
            raise MailAuthError("wrong host name")

        response = base64.b64encode(self.initial_response()).decode("ascii")
        code, resp = smtp.docmd("AUTH", f"PLAIN {response}")
        if code == 334:
            code, resp = smtp.docmd(response)
        # 503: already authenticated
        if code not in _AUTH_OK:
            raise smtplib.SMTPAuthenticationError(code, resp)
