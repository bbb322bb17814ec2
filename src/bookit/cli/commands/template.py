"""Booking template commands."""

import click
from bookit.cli.account_resolution import resolve_account_or_exit
from bookit.cli.error_handling import handle_domain_error
from bookit.cli.formatting import format_template, format_template_amount
from bookit.domain.account import AccountService
from bookit.domain.booking_template import BookingTemplateService
from bookit.domain.errors import DomainError
from bookit.utils.amount_parser import validate_template_amount


@click.group()
def template_group():
    """Manage booking templates."""
    pass


@template_group.command("create")
@click.argument("code")
@click.argument("title")
@click.option("--amount", help="Amount, e.g. 12.50, a factor like 0.15 or a percentage like 15%")
@click.option(
    "--relates-to",
    "amount_relates_to",
    help="reference_amount, reference_balance or reference_amount_minus_balance",
)
@click.option("--debit", help="Debit account code or ID")
@click.option("--credit", help="Credit account code or ID")
@click.option("--comments", help="Comments copied to bookings")
@click.option("--matcher", help="Regular expression matched against imported descriptions")
@click.option("--position", type=int, help="Line item position")
@click.option("--saldo-list", is_flag=True, help="Include line items in saldo lists")
@click.option("--charge-rate-code", help="Charge rate code for person amounts")
@click.pass_context
def create_template(
    ctx,
    code: str,
    title: str,
    amount: str | None,
    amount_relates_to: str | None,
    debit: str | None,
    credit: str | None,
    comments: str | None,
    matcher: str | None,
    position: int | None,
    saldo_list: bool,
    charge_rate_code: str | None,
):
    """Create a booking template.

    Examples:
        bookit template create RENT "Office rent" --amount 1500 --debit 6000 --credit 1020
        bookit template create VAT:standard "VAT" --amount 0.077 --relates-to reference_amount --debit 1100 --credit 2200
    """
    db = ctx.obj["db"]
    service = BookingTemplateService(db)
    account_service = AccountService(db)

    debit_account_id = resolve_account_or_exit(ctx, account_service, debit)
    credit_account_id = resolve_account_or_exit(ctx, account_service, credit)

    try:
        if amount is not None:
            amount = validate_template_amount(amount)
        template_id = service.create_template(
            code=code,
            title=title,
            amount=amount,
            amount_relates_to=amount_relates_to,
            comments=comments,
            debit_account_id=debit_account_id,
            credit_account_id=credit_account_id,
            matcher=matcher,
            position=position,
            include_in_saldo_list=saldo_list,
            charge_rate_code=charge_rate_code,
        )
        click.echo(f"Created booking template '{code}' (ID: {template_id})")
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)


@template_group.command("list")
@click.option("--type", "template_type", help="Only templates whose code starts with TYPE:")
@click.option(
    "--format",
    "style",
    type=click.Choice(["default", "short", "long"]),
    default="short",
    help="Description style (default: short)",
)
@click.pass_context
def list_templates(ctx, template_type: str | None, style: str):
    """List booking templates ordered by code."""
    db = ctx.obj["db"]
    service = BookingTemplateService(db)
    accounts = {acc.id: acc for acc in AccountService(db).list_accounts()}

    templates = service.list_templates(template_type=template_type)
    if not templates:
        click.echo("No booking templates found.")
        return

    for tpl in templates:
        click.echo(f"{tpl.code:<25} {format_template(tpl, accounts, style)}")


@template_group.command("show")
@click.argument("code")
@click.pass_context
def show_template(ctx, code: str):
    """Show a booking template."""
    db = ctx.obj["db"]
    service = BookingTemplateService(db)
    accounts = {acc.id: acc for acc in AccountService(db).list_accounts()}

    try:
        tpl = service.require_template_by_code(code)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Template ID: {tpl.id}")
    click.echo(f"  Code: {tpl.code}")
    click.echo(f"  Title: {tpl.title}")
    click.echo(f"  Booking: {format_template(tpl, accounts, 'long')}")
    click.echo(f"  Amount: {format_template_amount(tpl)}")
    if tpl.amount_relates_to:
        click.echo(f"  Relates to: {tpl.amount_relates_to}")
    if tpl.charge_rate_code:
        click.echo(f"  Charge rate: {tpl.charge_rate_code}")
    if tpl.matcher:
        click.echo(f"  Matcher: {tpl.matcher}")
    if tpl.tags:
        click.echo(f"  Tags: {', '.join(tpl.tags)}")


@template_group.command("delete")
@click.argument("code")
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_template(ctx, code: str, force: bool):
    """Delete a booking template."""
    db = ctx.obj["db"]
    service = BookingTemplateService(db)

    try:
        tpl = service.require_template_by_code(code)
        if not force and not click.confirm(f"Delete booking template '{code}'?"):
            click.echo("Cancelled.")
            return
        service.delete_template(tpl.id)
        click.echo(f"Deleted booking template '{code}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


@template_group.command("tag")
@click.argument("code")
@click.argument("tag")
@click.pass_context
def tag_template(ctx, code: str, tag: str):
    """Attach a tag to a booking template."""
    db = ctx.obj["db"]
    service = BookingTemplateService(db)

    try:
        tpl = service.require_template_by_code(code)
        service.add_tag(tpl.id, tag)
        click.echo(f"Tagged '{code}' with '{tag}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register booking template commands with main CLI."""
    cli.add_command(template_group, name="template")
