"""Application layer - the client use case and port definitions.

Contents:
    * :mod:`.client` - Builder-style client composing and dispatching one message
    * :mod:`.ports` - Protocol definitions for adapter implementations
"""

from __future__ import annotations

from .client import (
    Client,
    ClientConfig,
    ClientSettings,
    with_auth,
    with_dont_send,
    with_relayhost,
    with_sender,
)
from .ports import (
    BuildMessageFactory,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadEmailConfigFromDict,
    MailMessage,
    MessageFactory,
)

__all__ = [
    # Client
    "Client",
    "ClientConfig",
    "ClientSettings",
    "with_auth",
    "with_dont_send",
    "with_relayhost",
    "with_sender",
    # Ports
    "BuildMessageFactory",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadEmailConfigFromDict",
    "MailMessage",
    "MessageFactory",
]
