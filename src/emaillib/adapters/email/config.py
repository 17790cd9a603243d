"""Email configuration model and loader.

Provides the EmailConfig Pydantic model for the ``[email]`` section of the
layered configuration and the loader that builds it from a configuration
dictionary.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from btx_lib_mail import validate_email_address, validate_smtp_host
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from emaillib.application.client import (
    ClientConfig,
    with_auth,
    with_dont_send,
    with_relayhost,
    with_sender,
)


class EmailConfig(BaseModel):
    """Validated, immutable relay and sender settings.

    Unlike :class:`~emaillib.application.client.Client`, which accepts any
    settings, this model rejects configuration that cannot work before a
    client is built from it.

    Example:
        >>> config = EmailConfig(host="smtp.example.com", port=587, sender_email="info@example.com")
        >>> config.port
        587
    """

    model_config = ConfigDict(frozen=True)

    host: str = ""
    port: int = 25
    username: str | None = None
    password: str | None = None
    use_auth: bool = False
    sender_name: str = ""
    sender_email: str | None = None
    dont_send: bool = False
    use_starttls: bool = True
    timeout: float = 30.0

    @field_validator("host", "sender_name", mode="before")
    @classmethod
    def _strip_text(cls, v: Any) -> Any:
        """Strip surrounding whitespace from free-text values."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("username", "password", "sender_email", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: str | None) -> str | None:
        """Coerce empty or whitespace-only strings to None.

        Treats empty strings from config files as "not configured" rather
        than explicit empty values.

        Example:
            >>> EmailConfig(username="  ").username is None
            True
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate_config(self) -> EmailConfig:
        """Validate configuration values.

        Raises:
            ValueError: When configuration values are invalid.

        Example:
            >>> EmailConfig(port=70000)  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValidationError: ...
        """
        if not 1 <= self.port <= 65535:
            raise ValueError(f"port must be 1-65535, got {self.port}")

        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

        if self.host:
            validate_smtp_host(self.host)

        if self.sender_email is not None:
            validate_email_address(self.sender_email)

        if self.use_auth and (self.username is None or self.password is None):
            raise ValueError("use_auth requires both username and password")

        return self

    def __repr__(self) -> str:
        """Return string representation with password redacted.

        Example:
            >>> config = EmailConfig(username="user", password="secret123")
            >>> "secret123" in repr(config)
            False
            >>> "[REDACTED]" in repr(config)
            True
        """
        fields: list[str] = []
        for name, value in self:
            if name == "password" and value is not None:
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"EmailConfig({', '.join(fields)})"

    def to_client_options(self) -> list[ClientConfig]:
        """Convert to client option functions, applied in relay, auth, sender, send order.

        Example:
            >>> from emaillib.application.client import ClientSettings
            >>> settings = ClientSettings()
            >>> for option in EmailConfig(host="smtp.example.com", port=587).to_client_options():
            ...     settings = option(settings)
            >>> settings.endpoint
            'smtp.example.com:587'
        """
        options: list[ClientConfig] = [
            with_relayhost(self.host, self.port),
            with_auth(self.username or "", self.password or "", self.use_auth),
        ]
        if self.sender_email is not None:
            options.append(with_sender(self.sender_name, self.sender_email))
        if self.dont_send:
            options.append(with_dont_send())
        return options


def load_email_config_from_dict(config_dict: Mapping[str, Any]) -> EmailConfig:
    """Load EmailConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    EmailConfig Pydantic model.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have an ``email`` section.

    Returns:
        Configured email settings with defaults for missing values.

    Example:
        >>> config = load_email_config_from_dict({"email": {"host": "smtp.example.com", "port": 465}})
        >>> config.host, config.port
        ('smtp.example.com', 465)
        >>> load_email_config_from_dict({}).use_auth
        False
    """
    email_section: Any = config_dict.get("email", {})

    # Non-mapping sections (e.g. "email": "invalid") fail Pydantic validation
    if not isinstance(email_section, Mapping):
        return EmailConfig.model_validate(email_section)

    email_raw: dict[str, Any] = dict(cast(Mapping[str, Any], email_section))
    return EmailConfig.model_validate(email_raw)


__all__ = [
    "EmailConfig",
    "load_email_config_from_dict",
]
