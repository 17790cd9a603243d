"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Email commands from :mod:`.email` (subpackage)
"""

from __future__ import annotations

from .config import cli_config
from .email import cli_send, cli_sendmail
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_info",
    "cli_send",
    "cli_sendmail",
]
