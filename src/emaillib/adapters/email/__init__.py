"""Email adapter - delegate mail message backed by btx_lib_mail.

Structure:
    * :mod:`.config` - Email configuration model and loader
    * :mod:`.message` - Production delegate message and its factory

Contents:
    * :class:`.config.EmailConfig` - Email configuration container
    * :func:`.config.load_email_config_from_dict` - Config dict loader
    * :class:`.message.BtxMessage` - Delegate message sending via btx_lib_mail
    * :func:`.message.build_message_factory` - Factory with transport settings bound
"""

from __future__ import annotations

from .config import EmailConfig, load_email_config_from_dict
from .message import BtxMessage, build_message_factory

__all__ = [
    "BtxMessage",
    "EmailConfig",
    "build_message_factory",
    "load_email_config_from_dict",
]
