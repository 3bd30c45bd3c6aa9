"""Transaction management commands."""

import click
from jobledger.cli.company_resolution import resolve_company_or_exit
from jobledger.cli.error_handling import handle_domain_error
from jobledger.domain.company import CompanyService
from jobledger.domain.errors import DomainError
from jobledger.domain.transaction import TransactionService
from jobledger.utils.formatters import format_currency, format_date


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.argument("job_id", type=int)
@click.option("--company", help="Only transactions a company is target or actor of (name or ID)")
@click.pass_context
def list_transactions(ctx, job_id: int, company: str | None):
    """List the transactions of a job, newest first."""
    db = ctx.obj["db"]
    company_service = CompanyService(db, ctx.obj["user"])
    service = TransactionService(db, ctx.obj["user"])

    if company is not None:
        company_id = resolve_company_or_exit(ctx, company_service, job_id, company)
        transactions = service.list_company_transactions(company_id)
    else:
        transactions = service.list_job_transactions(job_id)

    if not transactions:
        click.echo("No transactions found.")
        return

    names = {c.id: c.name for c in company_service.list_companies(job_id)}
    click.echo(
        f"\n{'ID':>4s} | {'Date':10s} | {'Kind':22s} | {'Company':15s} | "
        f"{'By':15s} | {'Income':>12s} | {'Expense':>12s} | Description"
    )
    click.echo("-" * 120)
    for txn in transactions:
        performed_by = names.get(txn.performed_by_id, "-") if txn.performed_by_id else "-"
        click.echo(
            f"{txn.id:4d} | {format_date(txn.date):10s} | {txn.tag.value:22s} | "
            f"{names.get(txn.company_id, '?'):15s} | {performed_by:15s} | "
            f"{format_currency(txn.income):>12s} | {format_currency(txn.expense):>12s} | "
            f"{txn.description}"
        )


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool):
    """Delete a transaction.

    Deleting one half of a payment leaves the other half in place.
    """
    service = TransactionService(ctx.obj["db"], ctx.obj["user"])

    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(
        f"Delete transaction {transaction_id} ({txn.tag.value}, {txn.description})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
