"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config

# Configuration services
from ..adapters.config.loader import get_config, get_default_config_path

# Email services
from ..adapters.email.config import load_email_config_from_dict
from ..adapters.email.message import BtxMessage, build_message_factory

# Logging services
from ..adapters.logging.setup import init_logging
from ..application.client import Client, ClientConfig

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import MessageSpy
    from ..application.ports import (
        BuildMessageFactory,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadEmailConfigFromDict,
        MessageFactory,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_load_email_config_from_dict: LoadEmailConfigFromDict = load_email_config_from_dict
    _assert_build_message_factory: BuildMessageFactory = build_message_factory
    _assert_message_factory: MessageFactory = BtxMessage
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    load_email_config_from_dict: LoadEmailConfigFromDict
    build_message_factory: BuildMessageFactory
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        load_email_config_from_dict=load_email_config_from_dict,
        build_message_factory=build_message_factory,
        init_logging=init_logging,
    )


def build_testing(*, spy: MessageSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional MessageSpy capturing every message the CLI sends.
            When None, a fresh MessageSpy is created.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        MessageSpy,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_email_config_from_dict_in_memory,
    )

    message_spy = spy if spy is not None else MessageSpy()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        load_email_config_from_dict=load_email_config_from_dict_in_memory,
        build_message_factory=message_spy.build_message_factory,
        init_logging=init_logging_in_memory,
    )


def new_client(*options: ClientConfig) -> Client:
    """Return a Client sending through btx_lib_mail, configured by ``options`` in order.

    Example:
        >>> from emaillib.application.client import with_dont_send, with_relayhost
        >>> client = new_client(with_relayhost("smtp.example.com", 587), with_dont_send())
        >>> client.settings.endpoint
        'smtp.example.com:587'
        >>> client.send()
        True
    """
    return Client(*options, message_factory=BtxMessage)


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    # Email
    "load_email_config_from_dict",
    "build_message_factory",
    "new_client",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
