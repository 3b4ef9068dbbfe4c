"""Envelope cache for outbound log mails.

Holds a precomputed plain-text mail header followed by a mutable body
region. The header is rendered once and never touched again; the body
region is filled by ``append()`` and discarded by ``reset()``.

States:
    header-only          -> append() -> header+pending-body
    header+pending-body  -> reset()  -> header-only

Author: Odiseo
Created: 2025-10-18
Version: 1.0.0
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

CRLF = b"\r\n"
RECIPIENT_SEPARATOR = ";"
MIME_VERSION = "1.0"
CONTENT_TYPE = 'text/plain; charset="utf-8"'


def render_header(account: str, subject: str, recipients: Sequence[str]) -> bytes:
    """Render the fixed message header.

    Args:
        account: Sender address, used for the From line.
        subject: Subject line.
        recipients: Destination addresses, joined with ``;`` in order.

    Returns:
        UTF-8 encoded header, terminated by an empty line.
    """
    lines = [
        f"To: {RECIPIENT_SEPARATOR.join(recipients)}",
        f"From: {account}",
        f"Subject: {subject}",
        f"MIME-Version: {MIME_VERSION}",
        f"Content-Type: {CONTENT_TYPE}",
        "",
    ]
    return b"".join(line.encode("utf-8") + CRLF for line in lines)


class Envelope:
    """Cached header plus pending body.

    Not thread-safe. The first ``header_length`` bytes never change after
    construction.

    Attributes:
        header_length: Byte offset of the header/body boundary.
    """

    def __init__(self, account: str, subject: str, recipients: Sequence[str]) -> None:
        header = render_header(account, subject, recipients)
        self._buffer = bytearray(header)
        self._header = bytes(header)
        self.header_length = len(header)

    @property
    def header(self) -> bytes:
        """Immutable header bytes."""
        return self._header

    @property
    def payload(self) -> bytes:
        """Full message: header followed by the pending body."""
        return bytes(self._buffer)

    @property
    def body(self) -> bytes:
        """Pending body, empty in the header-only state."""
        return bytes(self._buffer[self.header_length :])

    @property
    def is_pending(self) -> bool:
        return len(self._buffer) > self.header_length

    def __len__(self) -> int:
        return len(self._buffer)

    def append(self, body: bytes) -> None:
        """Append body bytes after the header."""
        self._buffer += body

    def reset(self) -> None:
        """Truncate back to the header. Idempotent."""
        del self._buffer[self.header_length :]

    @contextmanager
    def pending(self, body: bytes) -> Iterator[bytes]:
        """Append ``body`` and yield the full payload, resetting on exit.

        The reset runs on every exit path, so a failed send never leaks its
        body into the next message.

        Example:
            with envelope.pending(b"disk almost full") as payload:
                transport.send_mail(..., payload)
        """
        self.append(body)
        try:
            yield self.payload
        finally:
            self.reset()

    def __repr__(self) -> str:
        return (
            f"Envelope(header_length={self.header_length}, "
            f"pending={len(self._buffer) - self.header_length})"
        )
