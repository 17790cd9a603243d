"""Email address formatting with optional display names."""

from __future__ import annotations

from email.utils import parseaddr


def build_email_address(name: str, email: str) -> str:
    """Combine an optional display name and an address into one header value.

    The address itself is not validated.

    Args:
        name: Display name; an empty string means "no name".
        email: Email address.

    Returns:
        ``email`` when ``name`` is empty, otherwise ``"name <email>"``.

    Example:
        >>> build_email_address("John Doe", "jd@example.com")
        'John Doe <jd@example.com>'
        >>> build_email_address("", "sales@example.com")
        'sales@example.com'
    """
    if not name:
        return email
    return f"{name} <{email}>"


def split_email_address(value: str) -> tuple[str, str]:
    """Split ``"Name <email>"`` or a bare address into ``(name, email)``.

    Used where addresses arrive as single strings (CLI arguments, config
    values) but the client API expects name and address separately.

    Example:
        >>> split_email_address("John Doe <jd@example.com>")
        ('John Doe', 'jd@example.com')
        >>> split_email_address("sales@example.com")
        ('', 'sales@example.com')
    """
    display_name, address = parseaddr(value)
    if not address:
        return "", value.strip()
    return display_name, address


__all__ = [
    "build_email_address",
    "split_email_address",
]
