"""Unit tests for the authentication context.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

import base64
import smtplib
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from mailsink.core.exceptions import MailAuthError
from mailsink.models.auth import PlainAuth, auth_domain


class TestAuthDomain:
    """Tests for relay host extraction."""

    @pytest.mark.parametrize("relay_address,expected", [
        ("smtp.example.com:587", "smtp.example.com"),
        ("smtp.example.com", "smtp.example.com"),
        ("smtp.example.com:", "smtp.example.com"),
        ("", ""),
    ])
    def test_auth_domain(self, relay_address, expected):
        """Test auth_domain keeps everything before the first colon."""
        assert auth_domain(relay_address) == expected


class TestPlainAuth:
    """Tests for PLAIN authentication."""

    @pytest.fixture
    def auth(self) -> PlainAuth:
        return PlainAuth.bind("log@example.com", "testpassword", "smtp.example.com")

    @pytest.fixture
    def smtp(self) -> MagicMock:
        smtp = MagicMock()
        smtp.docmd.return_value = (235, b"Authentication successful")
        return smtp

    def test_initial_response(self, auth):
        """Test PLAIN response is identity NUL user NUL password."""
        assert auth.initial_response() == b"\0log@example.com\0testpassword"

    def test_is_stateless_and_frozen(self, auth):
        """Test PlainAuth can be reused and cannot be mutated."""
        assert PlainAuth.stateless is True
        with pytest.raises(ValidationError):
            auth.password = "other"

    def test_repr_hides_password(self, auth):
        """Test password does not appear in repr."""
        assert "testpassword" not in repr(auth)

    def test_authenticate_over_tls(self, auth, smtp):
        """Test AUTH PLAIN carries the base64 response on an encrypted session."""
        auth.authenticate(smtp, "smtp.example.com", tls=True)

        expected = base64.b64encode(b"\0log@example.com\0testpassword").decode("ascii")
        smtp.docmd.assert_called_once_with("AUTH", f"PLAIN {expected}")

    def test_non_ascii_credentials_sent_as_utf8(self, smtp):
        """Test non-ASCII account and password are UTF-8 encoded."""
        auth = PlainAuth.bind("jörg@example.com", "pässwort", "smtp.example.com")

        auth.authenticate(smtp, "smtp.example.com", tls=True)

        sent = smtp.docmd.call_args.args[1].removeprefix("PLAIN ")
        assert base64.b64decode(sent) == "\0jörg@example.com\0pässwort".encode("utf-8")

    def test_answers_empty_challenge(self, auth, smtp):
        """Test the response is resent when the relay replies 334."""
        smtp.docmd.side_effect = [(334, b""), (235, b"Authentication successful")]

        auth.authenticate(smtp, "smtp.example.com", tls=True)

        expected = base64.b64encode(auth.initial_response()).decode("ascii")
        assert smtp.docmd.call_count == 2
        smtp.docmd.assert_called_with(expected)

    def test_rejected_credentials(self, auth, smtp):
        """Test a 535 reply raises SMTPAuthenticationError."""
        smtp.docmd.return_value = (535, b"Authentication failed")

        with pytest.raises(smtplib.SMTPAuthenticationError):
            auth.authenticate(smtp, "smtp.example.com", tls=True)

    def test_authenticate_localhost_without_tls(self, smtp):
        """Test localhost relays may authenticate without TLS."""
        auth = PlainAuth.bind("log@example.com", "testpassword", "localhost")

        auth.authenticate(smtp, "localhost", tls=False)

        smtp.docmd.assert_called_once()

    def test_refuses_unencrypted_connection(self, auth, smtp):
        """Test credentials are not sent in clear to a remote relay."""
        with pytest.raises(MailAuthError, match="unencrypted"):
            auth.authenticate(smtp, "smtp.example.com", tls=False)

        smtp.docmd.assert_not_called()

    def test_refuses_wrong_host(self, auth, smtp):
        """Test credentials are only sent to the bound host."""
        with pytest.raises(MailAuthError, match="wrong host name"):
            auth.authenticate(smtp, "evil.example.net", tls=True)

        smtp.docmd.assert_not_called()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
