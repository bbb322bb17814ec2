"""CLI error handling helpers."""

import logging

import click

from bookit.domain.errors import DomainError, TemplateNotFoundError

logger = logging.getLogger(__name__)


def error_message(error: DomainError | ValueError) -> str:
    """Return the one-line message shown for a failed command."""
    if isinstance(error, TemplateNotFoundError):
        return f"Error: {error} (see 'bookit template list')"
    return f"Error: {error}"


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error on stderr and exit with status 1."""
    logger.debug("%s failed: %r", ctx.command_path, error)
    click.echo(error_message(error), err=True)
    ctx.exit(1)
