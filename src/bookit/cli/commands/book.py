"""Book command: create bookings from booking templates."""

import click
from bookit.cli.error_handling import handle_domain_error
from bookit.cli.formatting import format_money
from bookit.domain.booking_template import BookingTemplateService
from bookit.domain.errors import DomainError
from bookit.utils.amount_parser import parse_amount


@click.command("book")
@click.argument("code")
@click.option("--reference-type", help="Reference type (invoice or booking)")
@click.option("--reference-id", help="Reference ID")
@click.option("--person", "person_id", type=int, help="Person whose charge rate sets the amount")
@click.option("--amount", help="Override the computed amount")
@click.option("--value-date", help="Value date (YYYY-MM-DD or relative like 'end of month')")
@click.option("--title", help="Override the template title")
@click.option("--comments", help="Override the template comments")
@click.option("--dry-run", is_flag=True, help="Show the booking without saving it")
@click.pass_context
def book(
    ctx,
    code: str,
    reference_type: str | None,
    reference_id: str | None,
    person_id: int | None,
    amount: str | None,
    value_date: str | None,
    title: str | None,
    comments: str | None,
    dry_run: bool,
):
    """Book a template.

    Examples:
        bookit book RENT --value-date "end of month"
        bookit book VAT:standard --reference-type invoice --reference-id 3
        bookit book CONSULTING --person 7 --reference-type invoice --reference-id 3 --dry-run
    """
    db = ctx.obj["db"]
    service = BookingTemplateService(db)

    params = {
        "reference_type": reference_type,
        "reference_id": reference_id,
        "person_id": person_id,
    }
    overrides = {"title": title, "comments": comments, "value_date": value_date}
    params.update({key: value for key, value in overrides.items() if value is not None})

    try:
        if amount is not None:
            params["amount"] = parse_amount(amount)
        if dry_run:
            booking = service.build_booking(code, params)
        else:
            booking = service.create_booking(code, params)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    if booking is None:
        click.echo(f"No booking template '{code}'; nothing booked.", err=True)
        return

    if booking.is_persisted:
        click.echo(f"Created booking {booking.id}")
    else:
        click.echo("Booking (not saved):")
    click.echo(f"  Title: {booking.title}")
    click.echo(f"  Amount: {format_money(booking.amount)}")
    click.echo(f"  Debit account: {booking.debit_account_id}")
    click.echo(f"  Credit account: {booking.credit_account_id}")
    if booking.value_date:
        click.echo(f"  Value date: {booking.value_date}")
    if booking.comments:
        click.echo(f"  Comments: {booking.comments}")


def register_commands(cli):
    """Register book command with main CLI."""
    cli.add_command(book)
