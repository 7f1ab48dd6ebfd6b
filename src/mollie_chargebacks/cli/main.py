"""
Mollie chargebacks CLI — `mollie-chargebacks` command.

Commands:
  mollie-chargebacks auth login            Store an API key
  mollie-chargebacks chargebacks get       Show one chargeback
  mollie-chargebacks chargebacks list      List chargebacks
"""

import asyncio
import json
import logging
from pathlib import Path

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install mollie-chargebacks[cli]")

from mollie_chargebacks import __version__
from mollie_chargebacks.client import AsyncMollie
from mollie_chargebacks.transport.http import DEFAULT_BASE_URL

console = Console()
CONFIG_FILE = Path.home() / ".mollie" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _get_client() -> AsyncMollie:
    cfg = _load_config()
    if not cfg.get("api_key"):
        console.print("[red]No API key configured. Run `mollie-chargebacks auth login` first.[/red]")
        raise SystemExit(1)
    return AsyncMollie(api_key=cfg["api_key"], base_url=cfg.get("base_url", DEFAULT_BASE_URL))


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP traffic")
def main(verbose: bool):
    """Mollie chargebacks CLI."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")


# Register subcommands from separate modules
from mollie_chargebacks.cli.auth import auth
from mollie_chargebacks.cli.chargebacks import chargebacks

main.add_command(auth)
main.add_command(chargebacks)


if __name__ == "__main__":
    main()
