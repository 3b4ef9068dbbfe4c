"""logging.Handler adapter for byte writers.

Lets a MailSink (or any ByteWriter) receive records from the standard
logging pipeline. ``logging`` holds the handler lock around ``emit()``, so
a sink attached here sees serialized writes even from many threads.

Author: Odiseo
Created: 2025-10-18
Version: 1.0.0
"""

from __future__ import annotations

import logging

from mailsink.writers.base import ByteWriter

# Records from these loggers are never mailed, to avoid feedback loops
_OWN_LOGGER_PREFIX = "mailsink"


def _is_foreign_record(record: logging.LogRecord) -> bool:
    name = record.name
    return not (name == _OWN_LOGGER_PREFIX or name.startswith(_OWN_LOGGER_PREFIX + "."))


class MailSinkHandler(logging.Handler):
    """Handler writing each formatted record to a byte writer.

    One record produces one write, so with a MailSink one record is one
    email. Delivery failures go through ``Handler.handleError``.

    Attributes:
        sink: Destination writer.
        terminator: Appended to every formatted record.
    """

    terminator = "\n"

    def __init__(self, sink: ByteWriter, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.sink = sink
        self.addFilter(_is_foreign_record)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record) + self.terminator
            self.sink.write(msg.encode("utf-8"))
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.acquire()
        try:
            close = getattr(self.sink, "close", None)
            if close is not None:
                close()
        finally:
            self.release()
            super().close()

    def __repr__(self) -> str:
        level = logging.getLevelName(self.level)
        return f"<{self.__class__.__name__} {self.sink!r} ({level})>"
