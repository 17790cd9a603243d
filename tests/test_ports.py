"""Port behavioural contract tests for the in-memory adapters and the composition root.

Static conformance is asserted under TYPE_CHECKING in the adapter packages;
these tests pin the runtime behaviour.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from lib_layered_config import Config

from emaillib.adapters.email.config import EmailConfig
from emaillib.adapters.email.message import BtxMessage
from emaillib.adapters.memory import (
    MessageSpy,
    SpyMessage,
    get_config_in_memory,
    get_default_config_path_in_memory,
    init_logging_in_memory,
    load_email_config_from_dict_in_memory,
)
from emaillib.application.ports import MailMessage

if TYPE_CHECKING:
    from emaillib.application.ports import GetConfig, GetDefaultConfigPath, InitLogging, LoadEmailConfigFromDict


@pytest.fixture
def get_config_impl() -> GetConfig:
    return get_config_in_memory


@pytest.fixture
def get_default_config_path_impl() -> GetDefaultConfigPath:
    return get_default_config_path_in_memory


@pytest.fixture
def load_email_config_impl() -> LoadEmailConfigFromDict:
    return load_email_config_from_dict_in_memory


@pytest.fixture
def init_logging_impl() -> InitLogging:
    return init_logging_in_memory


@pytest.mark.os_agnostic
def test_get_config_returns_config_with_dict(get_config_impl: GetConfig) -> None:
    config = get_config_impl()

    assert isinstance(config, Config)
    assert isinstance(config.as_dict(), dict)


@pytest.mark.os_agnostic
def test_get_default_config_path_returns_toml_path(get_default_config_path_impl: GetDefaultConfigPath) -> None:
    path = get_default_config_path_impl()

    assert isinstance(path, Path)
    assert path.suffix == ".toml"


@pytest.mark.os_agnostic
def test_load_email_config_returns_email_config(load_email_config_impl: LoadEmailConfigFromDict) -> None:
    result = load_email_config_impl({"email": {"host": "smtp.test.com", "sender_email": "test@example.com"}})

    assert isinstance(result, EmailConfig)
    assert result.host == "smtp.test.com"


@pytest.mark.os_agnostic
def test_load_email_config_accepts_empty_dict(load_email_config_impl: LoadEmailConfigFromDict) -> None:
    assert isinstance(load_email_config_impl({}), EmailConfig)


@pytest.mark.os_agnostic
def test_init_logging_does_not_raise(init_logging_impl: InitLogging) -> None:
    init_logging_impl(Config({}, {}))


# ======================== Delegate message contract ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("message_factory", [BtxMessage, lambda: MessageSpy().create_message()])
def test_fresh_messages_start_empty(message_factory: object) -> None:
    message: MailMessage = message_factory()  # type: ignore[operator]

    assert message.from_address == ""
    assert message.to == []
    assert message.cc == []
    assert message.subject == ""
    assert message.text == ""
    assert message.html == ""
    assert message.attachments == []


@pytest.mark.os_agnostic
@pytest.mark.parametrize("message_factory", [BtxMessage, lambda: MessageSpy().create_message()])
def test_fresh_messages_do_not_share_lists(message_factory: object) -> None:
    first: MailMessage = message_factory()  # type: ignore[operator]
    second: MailMessage = message_factory()  # type: ignore[operator]

    first.to.append("a@example.com")

    assert second.to == []


@pytest.mark.os_agnostic
def test_spy_message_send_snapshots_the_message() -> None:
    spy = MessageSpy()
    message = spy.create_message()
    message.to.append("a@example.com")

    message.send("smtp.test.com:25", None)
    message.to.append("b@example.com")

    assert spy.sent[0]["to"] == ["a@example.com"]
    assert isinstance(message, SpyMessage)


@pytest.mark.os_agnostic
def test_spy_clear_resets_captured_state() -> None:
    spy = MessageSpy(raise_exception=RuntimeError("x"), should_fail=True)
    spy.build_message_factory(EmailConfig())
    spy.create_message()

    spy.clear()

    assert spy.created == []
    assert spy.sent == []
    assert spy.configs == []
    assert spy.should_fail is False
    assert spy.raise_exception is None


# ======================== Composition Wiring Tests ========================


@pytest.mark.os_agnostic
def test_build_production_returns_fully_populated_app_services() -> None:
    from emaillib.composition import AppServices, build_production

    services = build_production()

    assert isinstance(services, AppServices)
    for field_name in services.__dataclass_fields__:
        assert callable(getattr(services, field_name))


@pytest.mark.os_agnostic
def test_build_testing_returns_fully_populated_app_services() -> None:
    from emaillib.composition import AppServices, build_testing

    services = build_testing()

    assert isinstance(services, AppServices)
    for field_name in services.__dataclass_fields__:
        assert callable(getattr(services, field_name))


@pytest.mark.os_agnostic
def test_build_testing_routes_messages_to_the_given_spy() -> None:
    from emaillib.composition import build_testing

    spy = MessageSpy()
    services = build_testing(spy=spy)

    factory = services.build_message_factory(EmailConfig())
    factory().send("smtp.test.com:25", None)

    assert len(spy.sent) == 1
    assert len(spy.configs) == 1


@pytest.mark.os_agnostic
def test_build_production_message_factory_creates_btx_messages() -> None:
    from emaillib.composition import build_production

    factory = build_production().build_message_factory(EmailConfig(timeout=12.0))
    message = factory()

    assert isinstance(message, BtxMessage)
    assert message.timeout == 12.0


@pytest.mark.os_agnostic
def test_new_client_uses_btx_messages() -> None:
    from emaillib.composition import new_client

    assert isinstance(new_client().message, BtxMessage)


@pytest.mark.os_agnostic
def test_reused_spy_reports_success_after_clear() -> None:
    spy = MessageSpy(should_fail=True)
    assert spy.create_message().send("smtp.test.com:25", None) is False

    spy.clear()

    assert spy.create_message().send("smtp.test.com:25", None) is True
