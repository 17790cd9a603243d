"""Shared pytest fixtures for client, CLI and module-entry tests.

All shared fixtures live here and are discovered implicitly by pytest.
Fixture names read as plain English: ``message_spy``, ``email_cli_context``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from emaillib.adapters.memory import MessageSpy

if TYPE_CHECKING:
    from emaillib.composition import AppServices


def _load_dotenv() -> None:
    """Load a project ``.env`` so integration tests can find relay credentials."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _services_with(*, spy: MessageSpy | None = None, **overrides: Any) -> AppServices:
    """Return in-memory services with real logging and selected ports replaced.

    Commands bind lib_log_rich context, so the runtime must be initialised.
    """
    from emaillib.adapters.logging import init_logging
    from emaillib.composition import build_testing

    return replace(build_testing(spy=spy), init_logging=init_logging, **overrides)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when the assertion must not see stderr output.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for commands that need no injection."""
    from emaillib.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from CLI output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset the lib_cli_exit_tools traceback flags and restore them afterwards.

    Use this whenever a test reads or mutates ``lib_cli_exit_tools.config``.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the ``get_config`` cache before the test.

    Only clears before: a test may monkeypatch ``get_config`` and lose
    ``cache_clear``.
    """
    from emaillib.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real ``lib_layered_config.Config`` objects from plain dicts.

    Example:
        def test_email_section(config_factory) -> None:
            config = config_factory({"email": {"host": "smtp.test.com"}})
            assert config.get("email.host") == "smtp.test.com"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def message_spy() -> MessageSpy:
    """Provide a fresh MessageSpy whose ``create_message`` is a MessageFactory."""
    return MessageSpy()


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    The factory keeps production display so ``config`` output is real, but
    reads configuration from the given dict instead of the filesystem.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"email": {"host": "smtp.test.com"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "smtp.test.com" in result.output
    """
    from emaillib.adapters.config.display import display_config

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = _services_with(get_config=_fake_get_config, display_config=display_config)
        return lambda: services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose ``get_config`` records the profile it was called with.

    Example:
        captured: list[str | None] = []
        factory = inject_config_with_profile_capture(Config({}, {}), captured)
        cli_runner.invoke(cli, ["--profile", "staging", "info"], obj=factory)
        assert captured == ["staging"]
    """

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        services = _services_with(get_config=_capturing_get_config)
        return lambda: services

    return _inject


@dataclass
class EmailCliContext:
    """Services factory and message spy for one email CLI test.

    Attributes:
        factory: Callable returning wired AppServices for ``cli_runner.invoke(obj=...)``.
        spy: MessageSpy capturing every message the command sends.
    """

    factory: Callable[[], Any]
    spy: MessageSpy


@pytest.fixture
def email_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], EmailCliContext]:
    """Create an email CLI context from the contents of the ``[email]`` section.

    Example:
        def test_send(cli_runner, email_cli_context) -> None:
            ctx = email_cli_context({"host": "smtp.test.com", "sender_email": "a@b.com"})
            result = cli_runner.invoke(cli, ["sendmail", "--to", "c@d.com", "--subject", "Hi"], obj=ctx.factory)
            assert result.exit_code == 0
            assert ctx.spy.sent[0]["subject"] == "Hi"
    """
    def _create(email_data: dict[str, Any]) -> EmailCliContext:
        spy = MessageSpy()
        config = Config({"email": email_data}, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = _services_with(spy=spy, get_config=_fake_get_config)
        return EmailCliContext(factory=lambda: services, spy=spy)

    return _create
