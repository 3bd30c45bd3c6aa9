"""Company management commands."""

import click
from jobledger.cli.company_resolution import resolve_company_or_exit
from jobledger.cli.error_handling import handle_domain_error
from jobledger.domain.company import CompanyService
from jobledger.domain.entities import CompanyType, EmployeeStats
from jobledger.domain.errors import DomainError
from jobledger.domain.summary import SummaryService
from jobledger.domain.transaction import TransactionService
from jobledger.utils.formatters import format_currency, format_date

TYPE_CHOICES = click.Choice(["employer", "employee"], case_sensitive=False)


@click.group()
def company_group():
    """Manage the companies of a job."""
    pass


@company_group.command("add")
@click.argument("job_id", type=int)
@click.argument("name", metavar="COMPANY_NAME")
@click.option("--type", "company_type", type=TYPE_CHOICES, required=True, help="Role in the job")
@click.pass_context
def add_company(ctx, job_id: int, name: str, company_type: str):
    """Add a company to a job.

    The type cannot be changed later.

    Examples:
        jobledger company add 1 "Acme Construction" --type employer
        jobledger company add 1 "Ali Usta" --type employee
    """
    service = CompanyService(ctx.obj["db"], ctx.obj["user"])
    try:
        company = service.create_company(
            job_id=job_id,
            name=name,
            company_type=CompanyType(company_type.capitalize()),
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created {company.type.value.lower()} '{company.name}' (ID: {company.id})")


@company_group.command("list")
@click.argument("job_id", type=int)
@click.pass_context
def list_companies(ctx, job_id: int):
    """List the companies of a job with their balances."""
    summary_service = SummaryService(ctx.obj["db"])

    companies = summary_service.list_companies_with_stats(job_id)
    if not companies:
        click.echo("No companies found.")
        return

    click.echo("\nCompanies:")
    click.echo("-" * 80)
    for item in companies:
        company, stats = item.company, item.stats
        click.echo(
            f"ID: {company.id:3d} | {company.name:20s} | {company.type.value:8s} | "
            f"Balance: {format_currency(stats.receivable):>14s} | {stats.status.value}"
        )


@company_group.command("show")
@click.argument("job_id", type=int)
@click.argument("company", metavar="COMPANY")
@click.pass_context
def show_company(ctx, job_id: int, company: str):
    """Show a company's balance and its transactions.

    COMPANY can be a company name or ID.
    """
    db = ctx.obj["db"]
    company_service = CompanyService(db, ctx.obj["user"])
    company_id = resolve_company_or_exit(ctx, company_service, job_id, company)

    try:
        entry = SummaryService(db).get_company_with_stats(company_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    company_obj, stats = entry.company, entry.stats

    click.echo(f"{company_obj.name} ({company_obj.type.value}, ID: {company_obj.id})")
    if isinstance(stats, EmployeeStats):
        click.echo(f"  Total owed:       {format_currency(stats.total_receivable):>16s}")
        click.echo(f"  Payments made:    {format_currency(stats.payments_made):>16s}")
    else:
        click.echo(f"  Income:           {format_currency(stats.employer_income):>16s}")
        click.echo(f"  Expense:          {format_currency(stats.employer_expense):>16s}")
    click.echo(f"  Balance:          {format_currency(stats.receivable):>16s}  ({stats.status.value})")

    transactions = TransactionService(db, ctx.obj["user"]).list_company_transactions(company_id)
    if not transactions:
        click.echo("\nNo transactions.")
        return

    names = {c.id: c.name for c in company_service.list_companies(job_id)}
    click.echo("\nTransactions:")
    click.echo("-" * 80)
    for txn in transactions:
        amount = txn.income if txn.income else -txn.expense
        click.echo(
            f"{txn.id:4d} | {format_date(txn.date)} | {txn.tag.value:22s} | "
            f"{names.get(txn.company_id, '?'):15s} | {format_currency(amount):>14s} | {txn.description}"
        )


@company_group.command("rename")
@click.argument("job_id", type=int)
@click.argument("company", metavar="COMPANY")
@click.argument("new_name", metavar="NEW_NAME")
@click.pass_context
def rename_company(ctx, job_id: int, company: str, new_name: str):
    """Rename a company.

    COMPANY can be a company name or ID.
    """
    service = CompanyService(ctx.obj["db"], ctx.obj["user"])
    company_id = resolve_company_or_exit(ctx, service, job_id, company)
    try:
        renamed = service.rename_company(company_id, new_name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Renamed company to '{renamed.name}'")


@company_group.command("delete")
@click.argument("job_id", type=int)
@click.argument("company", metavar="COMPANY")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_company(ctx, job_id: int, company: str, yes: bool):
    """Delete a company and every transaction it takes part in.

    COMPANY can be a company name or ID.
    """
    service = CompanyService(ctx.obj["db"], ctx.obj["user"])
    company_id = resolve_company_or_exit(ctx, service, job_id, company)
    company_obj = service.get_company(company_id)

    if not yes and not click.confirm(
        f"Delete company '{company_obj.name}' (ID: {company_id}) and its transactions?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_company(company_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted company '{company_obj.name}'")


def register_commands(cli):
    """Register company commands with main CLI."""
    cli.add_command(company_group, name="company")
