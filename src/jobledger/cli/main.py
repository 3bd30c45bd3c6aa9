"""Main CLI entry point."""

import click
from jobledger.cli.error_handling import StoreErrorGroup
from jobledger.database.factories import create_sqlite_database
from jobledger.logging_setup import configure_logging

# Import and register all commands at module level
from jobledger.cli.commands import (
    job,
    company,
    record,
    transaction,
    stats,
)


@click.group(cls=StoreErrorGroup)
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides JOBLEDGER_DB_PATH environment variable)",
    envvar="JOBLEDGER_DB_PATH",
)
@click.option(
    "--user",
    help="Acting user recorded as owner of new records",
    envvar="JOBLEDGER_USER",
)
@click.option(
    "--log-level",
    help="Logging level (DEBUG, INFO, WARNING, ...)",
    envvar="JOBLEDGER_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, user: str | None, log_level: str | None):
    """Jobledger - Job, company and payment tracking.

    Record receivables, income, expenses and payments between the employers
    and employees of each job, and see the balances derived from them.
    """
    ctx.ensure_object(dict)
    ctx.obj["user"] = user

    if log_level is not None:
        try:
            configure_logging(log_level)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--log-level")

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
job.register_commands(cli)
company.register_commands(cli)
record.register_commands(cli)
transaction.register_commands(cli)
stats.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
