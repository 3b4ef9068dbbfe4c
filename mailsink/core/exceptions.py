"""Custom exceptions for the mail sink.

Defines specific exception types for configuration, authentication and
delivery failures so callers can handle them precisely.

Author: Odiseo
Created: 2025-10-18
Version: 1.0.0
"""


class MailSinkError(Exception):
    """Base exception for all mail sink errors.

    Allows consumers to catch every mail-sink failure with a single
    except block.

    Example:
        try:
            sink.write(b"disk almost full")
        except MailSinkError as e:
            print(f"Log mail not delivered: {e}")
    """

    pass


class MailSinkConfigError(MailSinkError):
    """Exception raised for configuration errors.

    Only raised by the opt-in settings layer. ``MailSink`` itself never
    validates its construction parameters.

    Example:
        raise MailSinkConfigError("MAIL_SINK_RELAY environment variable not set")
    """

    pass


class MailAuthError(MailSinkError):
    """Exception raised when an authenticator refuses to run.

    PLAIN authentication sends the password in clear, so it refuses
    unencrypted non-local connections and mismatched server names.
    """

    pass


class MailDeliveryError(MailSinkError):
    """Exception raised when a write could not be delivered to the relay.

    The underlying transport exception is chained as ``__cause__`` without
    classification.

    Attributes:
        message (str): Description of the failure.
        bytes_written (int): Buffer length (header + body) at send time.
        relay_address (str, optional): Relay the send was attempted against.

    Example:
        raise MailDeliveryError(
            "Failed to send log mail via smtp.example.com:587",
            bytes_written=125,
            relay_address="smtp.example.com:587",
        )
    """

    def __init__(
        self,
        message: str,
        bytes_written: int = 0,
        relay_address: str | None = None,
    ):
        """Initialize delivery error.

        Args:
            message: Error description.
            bytes_written: Length of the message that was attempted.
            relay_address: Optional relay address.
        """
        super().__init__(message)
        self.bytes_written = bytes_written
        self.relay_address = relay_address
