"""Email sending CLI commands.

Contents:
    * :func:`.send.cli_send` - Send to TO/CC recipients with optional HTML and attachments.
    * :func:`.sendmail.cli_sendmail` - Send a plain-text message to one recipient.
"""

from __future__ import annotations

from ._common import filter_sentinels
from .send import cli_send
from .sendmail import cli_sendmail

__all__ = ["cli_send", "cli_sendmail", "filter_sentinels"]
