"""CLI: mollie-chargebacks chargebacks get|list"""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from mollie_chargebacks.errors import MollieError
from mollie_chargebacks.models.chargeback import Chargeback, ChargebackOptions, ListChargebackOptions

console = Console()


def _get_client():
    from mollie_chargebacks.cli.main import _get_client
    return _get_client()


def _run(coro):
    from mollie_chargebacks.cli.main import _run
    return _run(coro)


def _amount(cb: Chargeback) -> str:
    return f"{cb.amount.value} {cb.amount.currency}" if cb.amount else ""


@click.group()
def chargebacks():
    """Chargeback lookups."""


@chargebacks.command("get")
@click.argument("payment_id")
@click.argument("chargeback_id")
@click.option("--include", default=None)
@click.option("--embed", default=None)
@click.option("--json-output", "--json", is_flag=True)
def chargebacks_get(payment_id, chargeback_id, include, embed, json_output):
    """Show a single chargeback of a payment."""
    options = ChargebackOptions(include=include, embed=embed) if include or embed else None

    async def _get():
        client = _get_client()
        try:
            with console.status("Fetching chargeback..."):
                cb = await client.chargebacks.get(payment_id, chargeback_id, options)
        finally:
            await client.close()
        if json_output:
            click.echo(cb.to_json())
            return
        console.print(f"[bold]{cb.id}[/bold] on payment {cb.payment_id}")
        console.print(f"  amount:     {_amount(cb)}")
        if cb.settlement_amount:
            console.print(f"  settlement: {cb.settlement_amount.value} {cb.settlement_amount.currency}")
        console.print(f"  created:    {cb.created_at or ''}")
        console.print(f"  reversed:   {cb.reversed_at or '[dim]open[/dim]'}")

    try:
        _run(_get())
    except MollieError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)


@chargebacks.command("list")
@click.option("--payment", "payment_id", default=None, help="Only chargebacks of this payment")
@click.option("--profile-id", default=None)
@click.option("--include", default=None)
@click.option("--embed", default=None)
@click.option("--json-output", "--json", is_flag=True)
def chargebacks_list(payment_id: Optional[str], profile_id, include, embed, json_output):
    """List chargebacks."""
    options = None
    if include or embed or profile_id:
        options = ListChargebackOptions(include=include, embed=embed, profile_id=profile_id)

    async def _list():
        client = _get_client()
        try:
            with console.status("Listing chargebacks..."):
                if payment_id:
                    result = await client.chargebacks.list_for_payment(payment_id, options)
                else:
                    result = await client.chargebacks.list(options)
        finally:
            await client.close()
        if json_output:
            click.echo(result.model_dump_json(by_alias=True, exclude_none=True, indent=2))
            return
        table = Table(title=f"Chargebacks ({result.count} in page)")
        table.add_column("ID", style="bold")
        table.add_column("Payment")
        table.add_column("Amount")
        table.add_column("Created")
        table.add_column("Reversed")
        for cb in result.chargebacks:
            table.add_row(
                cb.id or "", cb.payment_id or "", _amount(cb),
                str(cb.created_at or ""), str(cb.reversed_at or ""),
            )
        console.print(table)
        if result.has_next():
            console.print("[dim]More results available.[/dim]")

    try:
        _run(_list())
    except MollieError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
