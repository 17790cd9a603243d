"""Behaviour tests for the EmailConfig model: defaults, validators, repr and client options."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError as PydanticValidationError

from emaillib.adapters.email.config import EmailConfig, load_email_config_from_dict
from emaillib.application.client import ClientSettings


def _apply(config: EmailConfig) -> ClientSettings:
    settings_ = ClientSettings()
    for option in config.to_client_options():
        settings_ = option(settings_)
    return settings_


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_defaults_describe_an_unauthenticated_port_25_relay() -> None:
    config = EmailConfig()

    assert config.host == ""
    assert config.port == 25
    assert config.username is None
    assert config.password is None
    assert config.use_auth is False
    assert config.sender_email is None
    assert config.dont_send is False
    assert config.use_starttls is True
    assert config.timeout == 30.0


@pytest.mark.os_agnostic
def test_config_is_immutable() -> None:
    config = EmailConfig(host="smtp.test.com")

    with pytest.raises(PydanticValidationError):
        config.host = "other.test.com"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_empty_strings_become_none() -> None:
    config = EmailConfig(username="", password="  ", sender_email="")

    assert config.username is None
    assert config.password is None
    assert config.sender_email is None


@pytest.mark.os_agnostic
def test_host_and_sender_name_are_stripped() -> None:
    config = EmailConfig(host="  smtp.test.com ", sender_name=" Shop ")

    assert config.host == "smtp.test.com"
    assert config.sender_name == "Shop"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("port", [0, -1, 65536])
def test_port_outside_the_tcp_range_is_rejected(port: int) -> None:
    with pytest.raises(PydanticValidationError, match="port must be 1-65535"):
        EmailConfig(port=port)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("timeout", [0, -5.0])
def test_non_positive_timeout_is_rejected(timeout: float) -> None:
    with pytest.raises(PydanticValidationError, match="timeout must be positive"):
        EmailConfig(timeout=timeout)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("address", ["not-an-email", "@", "user@", "@domain.com", "a@@b.com"])
def test_malformed_sender_email_is_rejected(address: str) -> None:
    with pytest.raises(PydanticValidationError, match="invalid email address"):
        EmailConfig(sender_email=address)


@pytest.mark.os_agnostic
def test_malformed_host_is_rejected() -> None:
    with pytest.raises(PydanticValidationError):
        EmailConfig(host="[::1")


@pytest.mark.os_agnostic
def test_use_auth_without_password_is_rejected() -> None:
    with pytest.raises(PydanticValidationError, match="use_auth requires both username and password"):
        EmailConfig(host="smtp.test.com", use_auth=True, username="user")


@pytest.mark.os_agnostic
def test_use_auth_with_both_credentials_is_accepted() -> None:
    config = EmailConfig(host="smtp.test.com", use_auth=True, username="user", password="pw")

    assert config.use_auth is True


@pytest.mark.os_agnostic
@given(port=st.integers(min_value=1, max_value=65535))
@settings(max_examples=50)
def test_every_tcp_port_is_accepted(port: int) -> None:
    assert EmailConfig(port=port).port == port


# ---------------------------------------------------------------------------
# repr
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_repr_redacts_the_password() -> None:
    text = repr(EmailConfig(host="smtp.test.com", username="user", password="secret123"))

    assert "secret123" not in text
    assert "[REDACTED]" in text
    assert "user" in text


@pytest.mark.os_agnostic
def test_repr_without_password_shows_none() -> None:
    assert "password=None" in repr(EmailConfig())


# ---------------------------------------------------------------------------
# Client options
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_client_options_carry_relay_and_credentials() -> None:
    config = EmailConfig(host="smtp.test.com", port=587, use_auth=True, username="user", password="pw")

    settings_ = _apply(config)

    assert settings_.endpoint == "smtp.test.com:587"
    assert settings_.use_auth is True
    assert settings_.username == "user"
    assert settings_.password == "pw"


@pytest.mark.os_agnostic
def test_client_options_format_the_sender() -> None:
    config = EmailConfig(sender_name="Shop", sender_email="info@test.com")

    assert _apply(config).from_address == "Shop <info@test.com>"


@pytest.mark.os_agnostic
def test_client_options_leave_from_empty_without_sender_email() -> None:
    assert _apply(EmailConfig(sender_name="Shop")).from_address == ""


@pytest.mark.os_agnostic
def test_client_options_enable_dont_send() -> None:
    assert _apply(EmailConfig(dont_send=True)).dont_send is True
    assert _apply(EmailConfig()).dont_send is False


# ---------------------------------------------------------------------------
# load_email_config_from_dict
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_load_reads_the_email_section() -> None:
    config = load_email_config_from_dict({"email": {"host": "smtp.test.com", "port": 465, "use_starttls": False}})

    assert config.host == "smtp.test.com"
    assert config.port == 465
    assert config.use_starttls is False


@pytest.mark.os_agnostic
def test_load_handles_missing_email_section() -> None:
    config = load_email_config_from_dict({})

    assert config == EmailConfig()


@pytest.mark.os_agnostic
def test_load_rejects_non_mapping_email_section() -> None:
    with pytest.raises(PydanticValidationError):
        load_email_config_from_dict({"email": "invalid"})


@pytest.mark.os_agnostic
def test_load_treats_empty_toml_strings_as_unset() -> None:
    config = load_email_config_from_dict(
        {"email": {"host": "", "username": "", "password": "", "sender_email": "", "use_auth": False}}
    )

    assert config.host == ""
    assert config.username is None
    assert config.sender_email is None
