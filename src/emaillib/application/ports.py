"""Application ports: Protocol definitions for adapter implementations.

``MailMessage`` is the narrow interface the client needs from an underlying
mail library: mutable message fields plus a blocking ``send``. The remaining
callable protocols define a ``__call__`` whose signature matches the
corresponding adapter function, so module-level functions satisfy them via
structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``EmailConfig``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.auth import PlainAuth
from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.email.config import EmailConfig


class MailMessage(Protocol):
    """One outgoing email owned by a client.

    Addresses are stored already formatted (``"Name <email>"`` or bare).
    """

    from_address: str
    to: list[str]
    cc: list[str]
    subject: str
    text: str
    html: str
    attachments: list[Path]

    def attach_file(self, path: str | Path) -> None: ...

    def send(self, endpoint: str, auth: PlainAuth | None) -> bool: ...


class MessageFactory(Protocol):
    """Create a fresh, empty :class:`MailMessage`."""

    def __call__(self) -> MailMessage: ...


class BuildMessageFactory(Protocol):
    """Bind transport settings from an EmailConfig into a message factory."""

    def __call__(self, config: EmailConfig) -> MessageFactory: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadEmailConfigFromDict(Protocol):
    """Load EmailConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> EmailConfig: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "BuildMessageFactory",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadEmailConfigFromDict",
    "MailMessage",
    "MessageFactory",
]
