"""Main CLI entry point."""

import logging

import click
from bookit.database.factories import create_sqlite_database

# Import and register all commands at module level
from bookit.cli.commands import (
    account,
    template,
    invoice,
    rate,
    book,
    line_item,
    match,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BOOKIT_DB_PATH environment variable)",
    envvar="BOOKIT_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Bookit - Bookings from booking templates.

    Keep booking templates for recurring postings, book them against
    invoices or per-person charge rates, and match imported descriptions
    to templates.
    """
    ctx.ensure_object(dict)

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s")

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db


# Register all commands
account.register_commands(cli)
template.register_commands(cli)
invoice.register_commands(cli)
rate.register_commands(cli)
book.register_commands(cli)
line_item.register_commands(cli)
match.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
