"""CLI: slackhook config set|show|clear"""

import click
from rich.console import Console
from rich.table import Table

console = Console()

STRING_KEYS = ("endpoint", "channel", "username", "icon")
BOOL_KEYS = ("link_names", "unfurl_links", "unfurl_media", "allow_markdown")
LIST_KEYS = ("markdown_in_attachments",)


def _load_config() -> dict:
    from slackhook.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from slackhook.cli.main import _save_config
    _save_config(cfg)


@click.group()
def config():
    """Stored endpoint and message defaults."""


@config.command("set")
@click.argument("key", type=click.Choice(STRING_KEYS + BOOL_KEYS + LIST_KEYS))
@click.argument("value")
def config_set(key: str, value: str):
    """Store a default. Lists are comma-separated."""
    if key in BOOL_KEYS:
        stored = click.BOOL(value)
    elif key in LIST_KEYS:
        stored = [v.strip() for v in value.split(",") if v.strip()]
    else:
        stored = value
    cfg = _load_config()
    cfg[key] = stored
    _save_config(cfg)
    console.print(f"[green]{key} saved.[/green]")


@config.command("show")
def config_show():
    """Show stored defaults."""
    cfg = _load_config()
    if not cfg:
        console.print("[yellow]Nothing configured. Run `slackhook config set endpoint <url>`.[/yellow]")
        return
    table = Table(title="slackhook config")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in cfg.items():
        table.add_row(key, ", ".join(value) if isinstance(value, list) else str(value))
    console.print(table)


@config.command("clear")
def config_clear():
    """Remove all stored defaults."""
    _save_config({})
    console.print("[green]Config cleared.[/green]")
