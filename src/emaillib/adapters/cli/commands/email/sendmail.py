"""Sendmail CLI command.

Single-recipient, plain-text shortcut mirroring :meth:`Client.sendmail`.
"""

from __future__ import annotations

import lib_log_rich.runtime
import rich_click as click

from ...constants import ADDRESS_METAVAR, CLICK_CONTEXT_SETTINGS
from ...context import get_cli_context
from ._common import (
    build_client,
    execute_with_email_error_handling,
    filter_sentinels,
    load_email_config,
    parse_address,
    relay_options,
    require_relay_host,
)


@click.command("sendmail", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--to", "recipient", required=True, metavar=ADDRESS_METAVAR, help="Recipient address")
@click.option("--subject", required=True, help="Email subject line")
@click.option("--message", default="", help="Plain-text email body")
@relay_options
@click.pass_context
def cli_sendmail(
    ctx: click.Context,
    recipient: str,
    subject: str,
    message: str,
    host: str | None,
    port: int | None,
    username: str | None,
    password: str | None,
    use_auth: bool | None,
    dont_send: bool,
) -> None:
    """Send a plain-text email to a single recipient."""
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "sendmail", "recipients": [recipient], "subject": subject}

    with lib_log_rich.runtime.bind(job_id="cli-sendmail", extra=extra):
        overrides = filter_sentinels(
            host=host,
            port=port,
            username=username,
            password=password,
            use_auth=use_auth,
            dont_send=True if dont_send else None,
        )
        email_config = load_email_config(cli_ctx.config, cli_ctx.services, overrides)
        client = build_client(email_config, cli_ctx.services)
        to_name, to_email = parse_address(recipient)

        def _send() -> bool:
            require_relay_host(email_config)
            return client.sendmail(to_name, to_email, subject, message)

        execute_with_email_error_handling(
            operation=_send,
            recipients=[recipient],
        )


__all__ = ["cli_sendmail"]
