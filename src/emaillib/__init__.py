"""Public package surface: the SMTP client, its options and address helpers.

Imports are routed through the architectural layers:
- Domain exports: address formatting, PLAIN credentials, errors
- Application exports: the Client and its option functions
- Adapter exports: the btx_lib_mail message and the ``[email]`` config model
- Composition exports: :func:`new_client` wired to btx_lib_mail
- Metadata: package information

Example:
    >>> from emaillib import new_client, with_dont_send, with_relayhost, with_sender
    >>> client = new_client(
    ...     with_relayhost("smtp.example.com", 25),
    ...     with_sender("Example Inc.", "info@example.com"),
    ...     with_dont_send(),
    ... )
    >>> client.sendmail("John Doe", "jd@example.com", "Hello", "Hi there")
    True
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.email import BtxMessage, EmailConfig, load_email_config_from_dict

# Application exports
from .application.client import (
    Client,
    ClientConfig,
    ClientSettings,
    with_auth,
    with_dont_send,
    with_relayhost,
    with_sender,
)

# Composition exports (wired adapters)
from .composition import get_config, new_client

# Domain exports
from .domain import (
    ConfigurationError,
    PlainAuth,
    build_email_address,
    plain_auth,
    split_email_address,
)

__all__ = [
    "BtxMessage",
    "Client",
    "ClientConfig",
    "ClientSettings",
    "ConfigurationError",
    "EmailConfig",
    "PlainAuth",
    "build_email_address",
    "get_config",
    "load_email_config_from_dict",
    "new_client",
    "plain_auth",
    "print_info",
    "split_email_address",
    "with_auth",
    "with_dont_send",
    "with_relayhost",
    "with_sender",
]
