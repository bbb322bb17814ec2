"""Invoice commands."""

import click
from bookit.cli.error_handling import handle_domain_error
from bookit.cli.formatting import format_money
from bookit.domain.errors import DomainError
from bookit.domain.invoice import InvoiceService
from bookit.utils.amount_parser import parse_amount
from bookit.utils.date_parser import parse_date


@click.group()
def invoice_group():
    """Manage invoices that bookings can refer to."""
    pass


@invoice_group.command("create")
@click.argument("code")
@click.argument("title")
@click.option("--date", "value_date", default="today", help="Value date (default: today)")
@click.option("--amount", help="Invoice amount")
@click.option("--balance", help="Open balance")
@click.pass_context
def create_invoice(ctx, code: str, title: str, value_date: str, amount: str | None, balance: str | None):
    """Create an invoice.

    Examples:
        bookit invoice create R-2024-001 "Consulting January" --amount 1200 --balance 200
    """
    db = ctx.obj["db"]
    service = InvoiceService(db)

    try:
        invoice_date = parse_date(value_date)
        invoice_amount = parse_amount(amount) if amount is not None else None
        invoice_balance = parse_amount(balance) if balance is not None else None
        invoice_id = service.create_invoice(
            code=code,
            title=title,
            value_date=invoice_date,
            amount=invoice_amount,
            balance=invoice_balance,
        )
        click.echo(f"Created invoice '{code}' (ID: {invoice_id})")
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)


@invoice_group.command("list")
@click.pass_context
def list_invoices(ctx):
    """List invoices."""
    db = ctx.obj["db"]
    service = InvoiceService(db)

    invoices = service.list_invoices()
    if not invoices:
        click.echo("No invoices found.")
        return

    click.echo(f"{'ID':<6} {'Date':<12} {'Code':<15} {'Amount':>12} {'Balance':>12}  Title")
    click.echo("-" * 80)
    for inv in invoices:
        click.echo(
            f"{inv.id:<6} {str(inv.value_date):<12} {inv.code:<15} "
            f"{format_money(inv.amount):>12} {format_money(inv.balance):>12}  {inv.title}"
        )


def register_commands(cli):
    """Register invoice commands with main CLI."""
    cli.add_command(invoice_group, name="invoice")
