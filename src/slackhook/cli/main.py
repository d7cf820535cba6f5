"""
slackhook CLI: `slackhook` command.

Commands:
  slackhook config set|show|clear   Stored endpoint and message defaults
  slackhook send <text>             Post a message to the webhook
  slackhook preview <text>          Print the payload without sending it
"""

import json
import logging
import os
from pathlib import Path

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install slackhook[cli]")

from slackhook.client import Client

console = Console()
DEFAULT_CONFIG_FILE = Path.home() / ".slackhook" / "config.json"


def _config_file() -> Path:
    override = os.environ.get("SLACKHOOK_CONFIG")
    return Path(override) if override else DEFAULT_CONFIG_FILE


def _load_config() -> dict:
    try:
        return json.loads(_config_file().read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    path = _config_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(cfg, indent=2))


def _get_client() -> Client:
    cfg = _load_config()
    endpoint = cfg.get("endpoint")
    if not endpoint:
        console.print("[red]No webhook endpoint configured. Run `slackhook config set endpoint <url>` first.[/red]")
        raise SystemExit(1)
    return Client(endpoint, cfg)


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log webhook activity.")
def main(verbose: bool):
    """slackhook CLI: post messages to a Slack incoming webhook."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


# Register subcommands from separate modules
from slackhook.cli.config import config
from slackhook.cli.send import preview_cmd, send_cmd

main.add_command(config)
main.add_command(send_cmd)
main.add_command(preview_cmd)


if __name__ == "__main__":
    main()
