"""Send CLI command.

Composes one message with any number of TO/CC recipients, optional HTML body
and attachments, and sends it through the configured relay.
"""

from __future__ import annotations

import logging

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

logger = logging.getLogger(__name__)


@click.command("send", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--to",
    "recipients",
    multiple=True,
    required=True,
    metavar=ADDRESS_METAVAR,
    help="Recipient address (can specify multiple)",
)
@click.option("--cc", "cc_recipients", multiple=True, metavar=ADDRESS_METAVAR, help="CC address (can specify multiple)")
@click.option("--subject", required=True, help="Email subject line")
@click.option("--body", default="", help="Plain-text email body")
@click.option("--body-html", default="", help="HTML email body (sent as multipart with plain text)")
@click.option(
    "--from",
    "from_address",
    default=None,
    metavar=ADDRESS_METAVAR,
    help="Override sender address (uses config default if not specified)",
)
@click.option(
    "--attach",
    "attachments",
    multiple=True,
    type=click.Path(path_type=str),
    help="File to attach (can specify multiple)",
)
@click.option("--debug", "show_debug", is_flag=True, default=False, help="Print the composed message before sending")
@relay_options
@click.pass_context
def cli_send(
    ctx: click.Context,
    recipients: tuple[str, ...],
    cc_recipients: tuple[str, ...],
    subject: str,
    body: str,
    body_html: str,
    from_address: str | None,
    attachments: tuple[str, ...],
    show_debug: bool,
    host: str | None,
    port: int | None,
    username: str | None,
    password: str | None,
    use_auth: bool | None,
    dont_send: bool,
) -> None:
    """Send an email to one or more recipients."""
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "send", "recipients": list(recipients), "subject": subject}

    with lib_log_rich.runtime.bind(job_id="cli-send", extra=extra):
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

        if from_address is not None:
            client.sender(*parse_address(from_address))
        for recipient in recipients:
            client.to(*parse_address(recipient))
        for recipient in cc_recipients:
            client.cc(*parse_address(recipient))
        client.subject(subject)
        client.body_text(body)
        if body_html:
            client.body_html(body_html)
        for path in attachments:
            client.attach_file(path)

        if show_debug:
            click.echo(client.debug(), nl=False)

        logger.info(
            "Composed email",
            extra={
                "recipients": list(recipients),
                "cc": list(cc_recipients),
                "has_html": bool(body_html),
                "attachment_count": len(attachments),
            },
        )

        def _send() -> bool:
            require_relay_host(email_config)
            return client.send()

        execute_with_email_error_handling(
            operation=_send,
            recipients=list(recipients),
            catches_file_not_found=True,
        )


__all__ = ["cli_send"]
