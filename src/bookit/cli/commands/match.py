"""Match command: find booking templates for an imported description."""

import click
from bookit.domain.booking_template import BookingTemplateService


@click.command("match")
@click.argument("text")
@click.option("--show-errors", is_flag=True, help="List templates with unusable matchers")
@click.pass_context
def match_text(ctx, text: str, show_errors: bool):
    """Find booking templates whose matcher matches TEXT.

    Examples:
        bookit match "LSV DEBIT SWISSCOM 2024-01"
    """
    db = ctx.obj["db"]
    service = BookingTemplateService(db)

    result = service.match(text)
    if not result.matched:
        click.echo("No matching booking templates.")
    else:
        click.echo(f"Found {len(result.matched)} matching template(s):")
        for tpl in result.matched:
            click.echo(f"  {tpl.code:<25} {tpl.title}")

    if show_errors:
        for error in result.errors:
            click.echo(f"  {error}", err=True)


def register_commands(cli):
    """Register match command with main CLI."""
    cli.add_command(match_text)
