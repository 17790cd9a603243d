"""Static package metadata surfaced to the CLI and the configuration loader.

Contents:
    * Distribution identifiers (``name``, ``title``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config to locate
      platform-specific configuration directories.
    * :func:`print_info` - human-readable metadata dump for ``emaillib info``.
"""

from __future__ import annotations

from importlib import metadata as _metadata

name = "emaillib"
title = "Compose and dispatch a single email message over SMTP"
shell_command = "emaillib"
homepage = "https://github.com/jakoubek/emaillib"
author = "jakoubek"


def _resolve_version() -> str:
    """Return the installed distribution version, or a placeholder for source trees."""
    try:
        return _metadata.version(name)
    except _metadata.PackageNotFoundError:
        return "0.0.0+unknown"


version = _resolve_version()

#: Vendor, application and slug identifiers for lib_layered_config path discovery.
LAYEREDCONF_VENDOR: str = "jakoubek"
LAYEREDCONF_APP: str = "emaillib"
LAYEREDCONF_SLUG: str = "emaillib"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for emaillib:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
