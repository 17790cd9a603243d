"""Domain layer - pure logic with no I/O or framework dependencies.

Contents:
    * :mod:`.address` - Display-name address formatting
    * :mod:`.auth` - SMTP PLAIN credential value object
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .address import build_email_address, split_email_address
from .auth import PlainAuth, plain_auth
from .enums import OutputFormat
from .errors import ConfigurationError

__all__ = [
    # Address formatting
    "build_email_address",
    "split_email_address",
    # Authentication
    "PlainAuth",
    "plain_auth",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
]
