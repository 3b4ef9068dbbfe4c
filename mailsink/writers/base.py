"""Byte writer protocol: the contract a logging pipeline needs from a sink."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteWriter(Protocol):
    """Destination that accepts log output and reports bytes written.

    Failures are raised, not returned.
    """

    def write(self, data: bytes) -> int: ...
