"""Delegate mail message backed by btx_lib_mail.

:class:`BtxMessage` is the production implementation of the
:class:`~emaillib.application.ports.MailMessage` port. It only holds the
message fields; MIME construction, attachment encoding and the SMTP
conversation are performed by ``btx_lib_mail`` when :meth:`BtxMessage.send`
is called.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from btx_lib_mail.lib_mail import send as btx_send

from emaillib.domain.address import split_email_address
from emaillib.domain.auth import PlainAuth

if TYPE_CHECKING:
    from emaillib.application.ports import MessageFactory

    from .config import EmailConfig

logger = logging.getLogger(__name__)


def _empty_address_list() -> list[str]:
    return []


def _empty_path_list() -> list[Path]:
    return []


def _bare_address(address: str) -> str:
    """Return the ``email`` part of ``"Name <email>"``; btx_lib_mail validates bare addresses only."""
    return split_email_address(address)[1]


def _endpoint_host(endpoint: str) -> str:
    """Return the host part of a ``host:port`` endpoint."""
    return endpoint.rpartition(":")[0] if ":" in endpoint else endpoint


@dataclass(slots=True)
class BtxMessage:
    """One outgoing email, sent through ``btx_lib_mail``.

    Display names are kept on the message but stripped before the handoff
    to btx_lib_mail, which accepts bare addresses only.

    Attributes:
        from_address: Formatted sender address.
        to: Formatted recipient addresses, in append order.
        cc: Formatted CC addresses, in append order. Delivered as additional
            envelope recipients.
        subject: Subject line.
        text: Plain-text body.
        html: HTML body; sent as multipart alternative when set.
        attachments: Files to attach, read by the mail library on send.
        use_starttls: Upgrade the connection with STARTTLS when offered.
        timeout: Socket timeout in seconds.

    Example:
        >>> message = BtxMessage()
        >>> message.to.append("jd@example.com")
        >>> message.attach_file("report.pdf")
        >>> [path.name for path in message.attachments]
        ['report.pdf']
    """

    from_address: str = ""
    to: list[str] = field(default_factory=_empty_address_list)
    cc: list[str] = field(default_factory=_empty_address_list)
    subject: str = ""
    text: str = ""
    html: str = ""
    attachments: list[Path] = field(default_factory=_empty_path_list)
    use_starttls: bool = True
    timeout: float = 30.0

    def attach_file(self, path: str | Path) -> None:
        """Register a file to attach. The file is not read until send."""
        self.attachments.append(Path(path))

    def send(self, endpoint: str, auth: PlainAuth | None) -> bool:
        """Send the message to the relay at ``endpoint``.

        Args:
            endpoint: ``host:port`` of the SMTP relay.
            auth: PLAIN credential, or None to send unauthenticated.

        Returns:
            The result reported by ``btx_lib_mail``.

        Raises:
            RuntimeError: Delivery failed on the relay (raised by btx_lib_mail).
            FileNotFoundError: An attachment does not exist.
            ValueError: ``auth`` was issued for a different host, or a
                recipient or attachment was rejected by btx_lib_mail.
        """
        if auth is not None and auth.host != _endpoint_host(endpoint):
            raise ValueError(f"wrong host name: credential is for {auth.host!r}, endpoint is {endpoint!r}")
        recipients = [_bare_address(address) for address in (*self.to, *self.cc)]
        logger.info(
            "Sending email",
            extra={
                "endpoint": endpoint,
                "sender": self.from_address,
                "recipients": recipients,
                "subject": self.subject,
                "has_html": bool(self.html),
                "attachment_count": len(self.attachments),
                "use_auth": auth is not None,
            },
        )

        try:
            result = btx_send(
                mail_from=_bare_address(self.from_address),
                mail_recipients=recipients,
                mail_subject=self.subject,
                mail_body=self.text,
                mail_body_html=self.html,
                smtphosts=[endpoint],
                attachment_file_paths=list(self.attachments) if self.attachments else None,
                credentials=auth.credentials if auth is not None else None,
                use_starttls=self.use_starttls,
                timeout=self.timeout,
                attachment_allowed_extensions=None,
                attachment_blocked_extensions=None,
                attachment_allowed_directories=None,
                attachment_blocked_directories=None,
                attachment_max_size_bytes=26_214_400,
                attachment_allow_symlinks=False,
                attachment_raise_on_security_violation=True,
                raise_on_missing_attachments=True,
                raise_on_invalid_recipient=True,
            )
        except Exception:
            logger.debug("SMTP delivery failed", exc_info=True)
            raise

        if result:
            logger.info("Email sent successfully", extra={"endpoint": endpoint, "recipients": recipients})
        else:
            logger.warning("Email send returned failure", extra={"endpoint": endpoint, "recipients": recipients})
        return result


def build_message_factory(config: EmailConfig) -> MessageFactory:
    """Return a factory creating :class:`BtxMessage` with the configured transport settings.

    Example:
        >>> from emaillib.adapters.email.config import EmailConfig
        >>> factory = build_message_factory(EmailConfig(timeout=5.0))
        >>> factory().timeout
        5.0
    """
    return functools.partial(BtxMessage, use_starttls=config.use_starttls, timeout=config.timeout)


__all__ = [
    "BtxMessage",
    "build_message_factory",
]
