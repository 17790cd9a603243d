"""In-memory delegate messages for testing.

Provides a message implementation that satisfies the same Protocol as the
production :class:`~emaillib.adapters.email.message.BtxMessage` but performs
no SMTP operations.

Contents:
    * :class:`MessageSpy` - Creates in-memory messages and captures their sends.
    * :func:`load_email_config_from_dict_in_memory` - In-memory config loader.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ...domain.auth import PlainAuth
from ..email.config import EmailConfig

if TYPE_CHECKING:
    from ...application.ports import MessageFactory


def _empty_list() -> list[Any]:
    return []


@dataclass
class SpyMessage:
    """A message that records ``send`` calls on its owning spy."""

    spy: MessageSpy = field(repr=False)
    from_address: str = ""
    to: list[str] = field(default_factory=_empty_list)
    cc: list[str] = field(default_factory=_empty_list)
    subject: str = ""
    text: str = ""
    html: str = ""
    attachments: list[Path] = field(default_factory=_empty_list)

    def attach_file(self, path: str | Path) -> None:
        self.attachments.append(Path(path))

    def send(self, endpoint: str, auth: PlainAuth | None) -> bool:
        return self.spy.record(self, endpoint, auth)


@dataclass
class MessageSpy:
    """Captures delegate message operations for test assertions.

    Each test should create its own MessageSpy instance to avoid cross-test
    pollution. ``create_message`` satisfies the MessageFactory protocol.

    Attributes:
        created: Every message created by this spy, oldest first.
        sent: One record per ``send`` call with a snapshot of the message.
        should_fail: When True, sends return False to simulate failure.
        raise_exception: When set, sends raise this exception.

    Example:
        >>> spy = MessageSpy()
        >>> message = spy.create_message()
        >>> message.to.append("jd@example.com")
        >>> message.send("smtp.test.com:25", None)
        True
        >>> spy.sent[0]["to"]
        ['jd@example.com']
    """

    created: list[SpyMessage] = field(default_factory=_empty_list)
    sent: list[dict[str, Any]] = field(default_factory=_empty_list)
    configs: list[EmailConfig] = field(default_factory=_empty_list)
    should_fail: bool = False
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.created.clear()
        self.sent.clear()
        self.configs.clear()
        self.should_fail = False
        self.raise_exception = None

    def create_message(self) -> SpyMessage:
        """Create a fresh, empty message bound to this spy."""
        message = SpyMessage(spy=self)
        self.created.append(message)
        return message

    def build_message_factory(self, config: EmailConfig) -> MessageFactory:
        """Record the transport config and return :meth:`create_message`."""
        self.configs.append(config)
        return self.create_message

    def record(self, message: SpyMessage, endpoint: str, auth: PlainAuth | None) -> bool:
        """Capture a send of ``message`` and return success/failure based on spy state.

        Raises:
            Exception: If raise_exception is set, raises that exception.
        """
        self.sent.append(
            {
                "endpoint": endpoint,
                "auth": auth,
                "from_address": message.from_address,
                "to": list(message.to),
                "cc": list(message.cc),
                "subject": message.subject,
                "text": message.text,
                "html": message.html,
                "attachments": list(message.attachments),
            }
        )
        if self.raise_exception is not None:
            raise self.raise_exception
        return not self.should_fail


def load_email_config_from_dict_in_memory(
    config_dict: Mapping[str, Any],
) -> EmailConfig:
    """Parse email config from dict using the real Pydantic model."""
    email_raw = config_dict.get("email", {})
    return EmailConfig.model_validate(email_raw if email_raw else {})


__all__ = [
    "MessageSpy",
    "SpyMessage",
    "load_email_config_from_dict_in_memory",
]
