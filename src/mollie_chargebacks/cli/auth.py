"""CLI: mollie-chargebacks auth login|status|logout"""

from typing import Optional

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from mollie_chargebacks.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from mollie_chargebacks.cli.main import _save_config
    _save_config(cfg)


@click.group()
def auth():
    """API key management."""


@auth.command("login")
@click.option("--api-key", default=None, help="Mollie API key (live_... or test_...)")
@click.option("--base-url", default=None, help="Mollie API base URL")
def auth_login(api_key: Optional[str], base_url: Optional[str]):
    """Save an API key to the config file."""
    cfg = _load_config()
    key = api_key or click.prompt("API key", hide_input=True)
    if not key.startswith(("live_", "test_", "access_")):
        console.print("[yellow]Key does not look like a Mollie API key, saving anyway.[/yellow]")
    cfg["api_key"] = key
    if base_url:
        cfg["base_url"] = base_url
    _save_config(cfg)
    console.print("[green]API key saved to ~/.mollie/config.json[/green]")


@auth.command("status")
def auth_status():
    """Show which key is configured."""
    cfg = _load_config()
    key = cfg.get("api_key")
    if key:
        masked = f"{key[:5]}…{key[-4:]}" if len(key) > 9 else "***"
        console.print(f"[green]Configured[/green] key {masked}")
    else:
        console.print("[yellow]No API key. Run `mollie-chargebacks auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear saved credentials."""
    _save_config({})
    console.print("[green]Logged out.[/green]")
