"""Builder-style SMTP client around a delegate mail message.

A :class:`Client` is configured once from an ordered sequence of
:data:`ClientConfig` option functions, then accumulates recipients, subject,
body and attachments on the message it owns and hands the message to the
mail library for delivery.

Contents:
    * :class:`ClientSettings` - Immutable relay, credential and sender settings.
    * :data:`ClientConfig` - Option function type.
    * :func:`with_relayhost`, :func:`with_sender`, :func:`with_auth`,
      :func:`with_dont_send` - Option constructors.
    * :class:`Client` - Message assembly and dispatch.

System Role:
    Application layer. The client performs no validation: conflicting or
    missing settings (auth without credentials, empty host) are accepted and
    surface only as whatever the mail library raises on ``send``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from pathlib import Path

from ..domain.address import build_email_address
from ..domain.auth import plain_auth
from .ports import MailMessage, MessageFactory

logger = logging.getLogger(__name__)

_SEPARATOR = "-----------------------------------"
_FOOTER = "=================================="


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Relay, credential and sender settings of a client.

    Zero-valued by default; each option function replaces one concern.
    """

    host: str = ""
    port: int = 0
    username: str = ""
    password: str = field(default="", repr=False)
    use_auth: bool = False
    from_address: str = ""
    dont_send: bool = False

    @property
    def endpoint(self) -> str:
        """Return the ``host:port`` string handed to the mail library.

        Example:
            >>> ClientSettings(host="smtp.example.com", port=587).endpoint
            'smtp.example.com:587'
        """
        return f"{self.host}:{self.port}"


ClientConfig = Callable[[ClientSettings], ClientSettings]
"""Option function applied to the settings during client construction."""


def with_relayhost(host: str, port: int) -> ClientConfig:
    """Configure the relay host name and port to send the email to."""

    def _apply(settings: ClientSettings) -> ClientSettings:
        return replace(settings, host=host, port=port)

    return _apply


def with_sender(name: str, email: str) -> ClientConfig:
    """Configure the sender name and address.

    Example:
        >>> with_sender("Example Inc.", "info@example.com")(ClientSettings()).from_address
        'Example Inc. <info@example.com>'
    """

    def _apply(settings: ClientSettings) -> ClientSettings:
        return replace(settings, from_address=build_email_address(name, email))

    return _apply


def with_auth(username: str, password: str, use_auth: bool) -> ClientConfig:
    """Configure SMTP credentials and whether to authenticate at all."""

    def _apply(settings: ClientSettings) -> ClientSettings:
        return replace(settings, username=username, password=password, use_auth=use_auth)

    return _apply


def with_dont_send() -> ClientConfig:
    """Suppress dispatch: ``send`` reports success without contacting any server."""

    def _apply(settings: ClientSettings) -> ClientSettings:
        return replace(settings, dont_send=True)

    return _apply


class Client:
    """Compose one email at a time and dispatch it through a delegate message.

    Args:
        *options: Option functions applied in order to zero-valued settings.
        message_factory: Creates the delegate message objects.

    Example:
        >>> from emaillib.adapters.memory import MessageSpy
        >>> client = Client(
        ...     with_sender("", "info@example.com"),
        ...     with_dont_send(),
        ...     message_factory=MessageSpy().create_message,
        ... )
        >>> client.to("John Doe", "jd@example.com")
        >>> client.message.to
        ['John Doe <jd@example.com>']
        >>> client.send()
        True
    """

    def __init__(self, *options: ClientConfig, message_factory: MessageFactory) -> None:
        settings = ClientSettings()
        for option in options:
            settings = option(settings)
        self._settings = settings
        self._message_factory = message_factory
        self._message = self._create_message()

    @property
    def settings(self) -> ClientSettings:
        """Return the immutable settings the client was built with."""
        return self._settings

    @property
    def message(self) -> MailMessage:
        """Return the message currently being composed."""
        return self._message

    def _create_message(self) -> MailMessage:
        message = self._message_factory()
        message.from_address = self._settings.from_address
        return message

    def new_message(self) -> None:
        """Discard the current message and start a new one from the configured sender."""
        self._message = self._create_message()

    def debug(self) -> str:
        """Return a dump of the client settings and the current message.

        The password is never included.
        """
        settings = self._settings
        lines = [
            f"From     : {settings.from_address}",
            f"Host/Port: {settings.endpoint}",
            f"Auth?    : {'true' if settings.use_auth else 'false'}",
            f"Username : {settings.username}",
            _SEPARATOR,
            f"Subject  : {self._message.subject}",
            _SEPARATOR,
            "TO:",
        ]
        lines.extend(f"- ({index}) {address}" for index, address in enumerate(self._message.to))
        lines.append("CC:")
        lines.extend(f"- ({index}) {address}" for index, address in enumerate(self._message.cc))
        lines.append(_FOOTER)
        return "\n".join(lines) + "\n"

    def sender(self, name: str, email: str) -> None:
        """Set the From address of the current message."""
        self._message.from_address = build_email_address(name, email)

    def to(self, name: str, email: str) -> None:
        """Append a recipient (TO) to the current message."""
        self._message.to.append(build_email_address(name, email))

    def cc(self, name: str, email: str) -> None:
        """Append a CC recipient to the current message."""
        self._message.cc.append(build_email_address(name, email))

    def subject(self, subject: str) -> None:
        self._message.subject = subject

    def body_text(self, text: str) -> None:
        self._message.text = text

    def body_html(self, html: str) -> None:
        self._message.html = html

    def attach_file(self, path: str | Path) -> None:
        """Attach a file by path; reading and encoding is left to the mail library."""
        self._message.attach_file(path)

    def send(self) -> bool:
        """Send the prepared message.

        Returns:
            ``True`` when suppressed by ``dont_send``, otherwise whatever the
            delegate message reports.

        Raises:
            Exception: Anything the mail library raises propagates unchanged.
        """
        return self._send_smtp_message()

    def sendmail(self, to_name: str, to_email: str, subject: str, message: str) -> bool:
        """Shortcut adding one recipient, a subject and a plain-text body, then sending."""
        self.to(to_name, to_email)
        self._message.subject = subject
        self._message.text = message
        return self._send_smtp_message()

    def _send_smtp_message(self) -> bool:
        settings = self._settings
        if settings.dont_send:
            logger.warning(
                "Sending suppressed (dont_send is set)",
                extra={"recipients": list(self._message.to), "subject": self._message.subject},
            )
            return True

        auth = None
        if settings.use_auth:
            auth = plain_auth("", settings.username, settings.password, settings.host)
        logger.debug(
            "Dispatching message",
            extra={"endpoint": settings.endpoint, "use_auth": settings.use_auth},
        )
        return self._message.send(settings.endpoint, auth)


__all__ = [
    "Client",
    "ClientConfig",
    "ClientSettings",
    "with_auth",
    "with_dont_send",
    "with_relayhost",
    "with_sender",
]
