"""CLI: slackhook send, slackhook preview"""

import json
from typing import Optional

import click
from rich.console import Console

from slackhook.errors import SlackHookError
from slackhook.message import Message

console = Console()


def _get_client():
    from slackhook.cli.main import _get_client
    return _get_client()


def _message_options(f):
    f = click.option("--no-markdown", is_flag=True, help="Send text literally.")(f)
    f = click.option(
        "-a", "--attachment", "attachments", multiple=True,
        help="Attachment as a JSON object. Repeatable.",
    )(f)
    f = click.option("-i", "--icon", default=None, help="Icon URL or :emoji:.")(f)
    f = click.option("-u", "--username", default=None)(f)
    f = click.option("-c", "--channel", default=None)(f)
    return f


def _build_message(
    text: str,
    channel: Optional[str],
    username: Optional[str],
    icon: Optional[str],
    attachments: tuple[str, ...],
    no_markdown: bool,
) -> Message:
    message = _get_client().compose().set_text(text)
    if channel:
        message.to(channel)
    if username:
        message.from_(username)
    if icon:
        message.with_icon(icon)
    if no_markdown:
        message.disable_markdown()
    for raw in attachments:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"not valid JSON: {e}", param_hint="--attachment")
        message.attach(data)
    return message


@click.command("send")
@click.argument("text")
@_message_options
def send_cmd(text, channel, username, icon, attachments, no_markdown):
    """Post a message to the configured webhook."""
    try:
        message = _build_message(text, channel, username, icon, attachments, no_markdown)
        with console.status("Sending..."):
            message.send()
    except SlackHookError as e:
        console.print(f"[red]{e.code}: {e}[/red]")
        raise SystemExit(1)
    console.print(f"[green]Sent to {message.channel or 'the webhook default channel'}.[/green]")


@click.command("preview")
@click.argument("text")
@_message_options
def preview_cmd(text, channel, username, icon, attachments, no_markdown):
    """Print the JSON payload without sending it."""
    try:
        message = _build_message(text, channel, username, icon, attachments, no_markdown)
    except SlackHookError as e:
        console.print(f"[red]{e.code}: {e}[/red]")
        raise SystemExit(1)
    click.echo(json.dumps(message.to_dict(), indent=2, ensure_ascii=False))
