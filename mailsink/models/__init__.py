"""Models module for the mail sink.

Defines the envelope cache, authentication context and the Pydantic v2
configuration model.

Author: Odiseo
Created: 2025-10-18
Version: 1.0.0
"""

from mailsink.models.auth import Authenticator, PlainAuth, auth_domain
from mailsink.models.envelope import Envelope, render_header
from mailsink.models.sink_config import SinkConfig

__all__ = [
    # Envelope
    "Envelope",
    "render_header",
    # Authentication
    "Authenticator",
    "PlainAuth",
    "auth_domain",
    # Configuration
    "SinkConfig",
]
