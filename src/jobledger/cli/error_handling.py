"""CLI error handling helpers."""

import click

from jobledger.domain.errors import DomainError, PartialLedgerError, StoreError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, PartialLedgerError):
        click.echo(
            f"Run 'jobledger transaction delete {error.orphan.id}' to remove the unmatched record.",
            err=True,
        )
    ctx.exit(1)


class StoreErrorGroup(click.Group):
    """Group that reports store failures from any subcommand as CLI errors."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except StoreError as e:
            raise click.ClickException(str(e)) from e
