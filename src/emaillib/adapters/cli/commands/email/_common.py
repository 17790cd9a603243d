"""Shared utilities for the send commands.

Contains configuration loading, client construction, error handling, and the
relay override options shared between ``send`` and ``sendmail``.
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn

import rich_click as click
from lib_layered_config import Config
from pydantic import ValidationError

from emaillib import __init__conf__
from emaillib.adapters.email.config import EmailConfig
from emaillib.application.client import Client
from emaillib.domain.address import split_email_address
from emaillib.domain.errors import ConfigurationError

from ...exit_codes import ExitCode

if TYPE_CHECKING:
    from emaillib.composition import AppServices

logger = logging.getLogger(__name__)

# Keywords that may indicate sensitive data in exception messages
_SENSITIVE_KEYWORDS = frozenset(
    {
        "password",
        "credential",
        "auth",
        "secret",
        "token",
        "login",
    }
)


def sanitize_exception_message(exc: BaseException) -> str:
    """Return a generic message when ``exc`` text may contain credentials.

    Example:
        >>> sanitize_exception_message(RuntimeError("Connection refused"))
        'Connection refused'
        >>> sanitize_exception_message(RuntimeError("535 Auth password rejected"))
        'Email delivery failed. Check SMTP configuration.'
    """
    message = str(exc).lower()
    if any(keyword in message for keyword in _SENSITIVE_KEYWORDS):
        return "Email delivery failed. Check SMTP configuration."
    return str(exc)


def filter_sentinels(**kwargs: Any) -> dict[str, Any]:
    """Drop unset (None) CLI options so they don't override configured values.

    Example:
        >>> filter_sentinels(host="smtp.example.com", port=None)
        {'host': 'smtp.example.com'}
    """
    return {k: v for k, v in kwargs.items() if v is not None}


def apply_validated_overrides(base_config: EmailConfig, overrides: dict[str, Any]) -> EmailConfig:
    """Merge overrides into ``base_config`` and re-run full Pydantic validation.

    Raises:
        ValidationError: When the merged values are invalid.
    """
    if not overrides:
        return base_config
    merged = {**base_config.model_dump(), **overrides}
    return EmailConfig.model_validate(merged)


def relay_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Apply the relay and credential override options to a Click command."""
    options = [
        click.option("--host", default=None, help="Override SMTP relay host"),
        click.option("--port", type=int, default=None, help="Override SMTP relay port"),
        click.option("--username", default=None, help="Override SMTP authentication username"),
        click.option("--password", default=None, help="Override SMTP authentication password"),
        click.option("--auth/--no-auth", "use_auth", default=None, help="Override whether to authenticate"),
        click.option(
            "--dry-run",
            "dont_send",
            is_flag=True,
            default=False,
            help="Compose the message but do not contact the relay",
        ),
    ]
    return functools.reduce(lambda f, opt: opt(f), reversed(options), func)


def handle_validation_error(exc: ValidationError) -> NoReturn:
    """Report invalid configuration or option values and exit with INVALID_ARGUMENT."""
    _handle_send_error(exc, "Invalid configuration", "Invalid configuration value", exit_code=ExitCode.INVALID_ARGUMENT)


def load_email_config(config: Config, services: AppServices, overrides: dict[str, Any]) -> EmailConfig:
    """Build the effective EmailConfig from the ``[email]`` section and CLI overrides.

    Raises:
        SystemExit: When configuration or overrides are invalid (INVALID_ARGUMENT).
    """
    try:
        email_config = services.load_email_config_from_dict(config.as_dict())
        return apply_validated_overrides(email_config, overrides)
    except ValidationError as exc:
        handle_validation_error(exc)


def build_client(email_config: EmailConfig, services: AppServices) -> Client:
    """Construct a Client whose messages are created by the wired message factory."""
    return Client(
        *email_config.to_client_options(),
        message_factory=services.build_message_factory(email_config),
    )


def require_relay_host(email_config: EmailConfig) -> None:
    """Ensure a message can actually be dispatched.

    Raises:
        ConfigurationError: When no relay host is configured and sending is
            not suppressed.
    """
    if not email_config.host and not email_config.dont_send:
        raise ConfigurationError(
            f"No relay host configured (email.host is empty). "
            f"Set it in your config file or pass --host; see `{__init__conf__.shell_command} config`."
        )


def parse_address(value: str) -> tuple[str, str]:
    """Split a ``"Name <email>"`` CLI argument into ``(name, email)``."""
    return split_email_address(value)


def execute_with_email_error_handling(
    *,
    operation: Callable[[], bool],
    recipients: list[str],
    catches_file_not_found: bool = False,
) -> None:
    """Run a send operation and translate failures into exit codes.

    Exception priority order (most specific first):

    1. ConfigurationError -> CONFIG_ERROR (78)
    2. ValueError -> INVALID_ARGUMENT (22)
    3. FileNotFoundError -> FILE_NOT_FOUND (2), when ``catches_file_not_found``
    4. RuntimeError/OSError -> SMTP_FAILURE (69)
    5. Exception -> GENERAL_ERROR (1); re-raised when DEVELOPMENT_MODE is set

    Raises:
        SystemExit: On any error, or when the send reports failure.
    """
    try:
        result = operation()
        _handle_send_result(result, recipients)
    except ConfigurationError as exc:
        _handle_send_error(exc, "Email configuration error", "Configuration error", exit_code=ExitCode.CONFIG_ERROR)
    except ValueError as exc:
        _handle_send_error(
            exc, "Invalid email parameters", "Invalid email parameters", exit_code=ExitCode.INVALID_ARGUMENT
        )
    except FileNotFoundError as exc:
        if not catches_file_not_found:
            raise
        _handle_send_error(exc, "Attachment file not found", "Attachment file not found", exit_code=ExitCode.FILE_NOT_FOUND)
    except (RuntimeError, OSError) as exc:
        _handle_send_error(exc, "SMTP delivery failed", "Failed to send email", exit_code=ExitCode.SMTP_FAILURE)
    except Exception as exc:
        if os.environ.get("DEVELOPMENT_MODE"):
            raise
        _handle_send_error(
            exc,
            "Unexpected error sending email",
            "Unexpected error",
            exit_code=ExitCode.GENERAL_ERROR,
            log_traceback=True,
        )


def _handle_send_result(result: bool, recipients: list[str]) -> None:
    if result:
        click.echo("\nEmail sent successfully!")
        logger.info("Email sent via CLI", extra={"recipients": recipients})
    else:
        click.echo("\nEmail sending failed.", err=True)
        raise SystemExit(ExitCode.SMTP_FAILURE)


def _handle_send_error(
    exc: BaseException,
    log_message: str,
    user_message: str,
    *,
    exit_code: ExitCode = ExitCode.GENERAL_ERROR,
    log_traceback: bool = False,
) -> NoReturn:
    """Log ``exc``, print a sanitized message and exit with ``exit_code``."""
    logger.error(
        log_message,
        extra={"error": sanitize_exception_message(exc), "error_type": type(exc).__name__},
        exc_info=log_traceback,
    )
    click.echo(f"\nError: {user_message} - {sanitize_exception_message(exc)}", err=True)
    raise SystemExit(exit_code)


__all__ = [
    "apply_validated_overrides",
    "build_client",
    "execute_with_email_error_handling",
    "filter_sentinels",
    "handle_validation_error",
    "load_email_config",
    "parse_address",
    "relay_options",
    "require_relay_host",
    "sanitize_exception_message",
]
