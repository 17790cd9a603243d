"""SMTP PLAIN authentication credential."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PlainAuth:
    """Credential for SMTP ``AUTH PLAIN`` against a single relay host.

    Attributes:
        identity: Authorization identity; usually empty so the server
            derives it from ``username``. Informational only, since
            btx_lib_mail authenticates with ``credentials``.
        username: Authentication identity.
        password: Password, excluded from ``repr``.
        host: Relay host the credential is intended for. The delegate
            refuses to use it against any other host.

    Example:
        >>> auth = PlainAuth("", "user", "secret", "smtp.example.com")
        >>> auth.credentials
        ('user', 'secret')
        >>> "secret" in repr(auth)
        False
    """

    identity: str
    username: str
    password: str = field(repr=False)
    host: str

    @property
    def credentials(self) -> tuple[str, str]:
        """Return the ``(username, password)`` pair handed to the mail library."""
        return (self.username, self.password)


def plain_auth(identity: str, username: str, password: str, host: str) -> PlainAuth:
    """Build a PLAIN credential for ``host``."""
    return PlainAuth(identity=identity, username=username, password=password, host=host)


__all__ = [
    "PlainAuth",
    "plain_auth",
]
