"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    The client itself accepts any configuration; this is raised at the
    configuration-file and CLI boundaries, where a message is about to be
    dispatched with settings that cannot work (e.g. no relay host).

    Example:
        >>> from emaillib.domain.errors import ConfigurationError
        >>> err = ConfigurationError("No relay host configured")
        >>> str(err)
        'No relay host configured'
    """


__all__ = ["ConfigurationError"]
