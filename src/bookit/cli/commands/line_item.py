"""Line item command."""

import click
from bookit.cli.error_handling import handle_domain_error
from bookit.cli.formatting import format_line_item
from bookit.domain.booking_template import BookingTemplateService
from bookit.domain.errors import DomainError


@click.command("line-item")
@click.argument("codes", nargs=-1, required=True)
@click.pass_context
def show_line_items(ctx, codes: tuple[str, ...]):
    """Show the line items booking templates expand to.

    Examples:
        bookit line-item RENT VAT:standard
    """
    db = ctx.obj["db"]
    service = BookingTemplateService(db)

    try:
        items = [service.build_line_item(code) for code in codes]
    except DomainError as e:
        handle_domain_error(ctx, e)

    for item in sorted(items, key=lambda i: (i.position is None, i.position or 0)):
        marker = " [saldo]" if item.is_saldo else ""
        click.echo(f"{item.code:<25} {format_line_item(item)}{marker}")


def register_commands(cli):
    """Register line item command with main CLI."""
    cli.add_command(show_line_items)
