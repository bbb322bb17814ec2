"""Account management commands."""

import click
from bookit.cli.error_handling import handle_domain_error
from bookit.domain.account import AccountService
from bookit.domain.errors import DomainError


@click.group()
def account_group():
    """Manage ledger accounts."""
    pass


@account_group.command("create")
@click.argument("code", metavar="ACCOUNT_CODE")
@click.argument("title", metavar="TITLE")
@click.pass_context
def create_account(ctx, code: str, title: str):
    """Create a new account.

    Examples:
        bookit account create 1000 "Cash"
        bookit account create 3200 "Revenue"
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        account_id = service.create_account(code=code, title=title)
        click.echo(f"Created account '{code}' (ID: {account_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts."""
    db = ctx.obj["db"]
    service = AccountService(db)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 60)
    for acc in accounts:
        click.echo(f"ID: {acc.id:3d} | {acc.code:10s} | {acc.title}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
