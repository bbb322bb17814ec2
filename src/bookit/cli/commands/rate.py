"""Charge rate commands."""

import click
from bookit.cli.error_handling import handle_domain_error
from bookit.cli.formatting import format_money
from bookit.domain.charge_rate import ChargeRateService
from bookit.domain.errors import DomainError
from bookit.utils.amount_parser import parse_amount
from bookit.utils.date_parser import parse_date


@click.group()
def rate_group():
    """Manage per-person charge rates."""
    pass


@rate_group.command("add")
@click.argument("code")
@click.option("--person", "person_id", type=int, required=True, help="Person ID")
@click.option("--amount", required=True, help="Rate amount")
@click.option("--valid-from", default="today", help="First valid day (default: today)")
@click.pass_context
def add_rate(ctx, code: str, person_id: int, amount: str, valid_from: str):
    """Add a charge rate for a person.

    Examples:
        bookit rate add hourly --person 7 --amount 120 --valid-from 2024-01-01
    """
    db = ctx.obj["db"]
    service = ChargeRateService(db)

    try:
        rate_id = service.add_rate(
            code=code,
            person_id=person_id,
            valid_from=parse_date(valid_from),
            amount=parse_amount(amount),
        )
        click.echo(f"Added charge rate '{code}' for person {person_id} (ID: {rate_id})")
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)


@rate_group.command("list")
@click.option("--code", help="Only rates for this code")
@click.option("--person", "person_id", type=int, help="Only rates for this person")
@click.pass_context
def list_rates(ctx, code: str | None, person_id: int | None):
    """List charge rates."""
    db = ctx.obj["db"]
    service = ChargeRateService(db)

    rates = service.list_rates(code=code, person_id=person_id)
    if not rates:
        click.echo("No charge rates found.")
        return

    click.echo(f"{'Code':<15} {'Person':>6} {'Valid from':<12} {'Amount':>12}")
    click.echo("-" * 50)
    for r in rates:
        click.echo(f"{r.code:<15} {r.person_id:>6} {str(r.valid_from):<12} {format_money(r.amount):>12}")


def register_commands(cli):
    """Register charge rate commands with main CLI."""
    cli.add_command(rate_group, name="rate")
