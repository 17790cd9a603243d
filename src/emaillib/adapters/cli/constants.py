"""Shared CLI constants.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - Click settings shared by every command.
    * :data:`ADDRESS_METAVAR` - Placeholder shown for address options in help.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Character budget for truncated tracebacks.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Character budget for ``--traceback`` output.
"""

from __future__ import annotations

from typing import Final

#: ``-h`` as well as ``--help`` on every command.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Addresses are given as ``"Name <email>"`` or a bare ``email``.
ADDRESS_METAVAR: Final[str] = '"NAME <EMAIL>"|EMAIL'

TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "ADDRESS_METAVAR",
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
