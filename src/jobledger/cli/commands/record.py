"""Commands for recording receivables, income, expenses and payments."""

import click
from jobledger.cli.company_resolution import resolve_company_or_exit
from jobledger.cli.error_handling import handle_domain_error
from jobledger.cli.input_parsing import parse_amount_or_exit, parse_date_or_exit
from jobledger.domain.company import CompanyService
from jobledger.domain.entities import CompanyType, Transaction
from jobledger.domain.errors import DomainError, INVALID_COMPANY_TYPE, ValidationError
from jobledger.domain.transaction import TransactionService, validate_payment_parties
from jobledger.utils.formatters import format_currency, format_date


def _common_options(func):
    func = click.option(
        "--date", "date_str", default="today", show_default=True,
        help="Transaction date (YYYY-MM-DD, DD.MM.YYYY or 'today')",
    )(func)
    func = click.option("--description", required=True, help="Transaction description")(func)
    func = click.option("--amount", required=True, help="Positive amount (e.g., 1500, 1.500 or 1.500,00)")(func)
    return func


def _require_type(ctx, company_service: CompanyService, company_id: int, expected: CompanyType):
    company = company_service.get_company(company_id)
    if company.type is not expected:
        handle_domain_error(
            ctx,
            ValidationError(
                INVALID_COMPANY_TYPE,
                f"Company '{company.name}' is not an {expected.value.lower()}",
            ),
        )
    return company


def _echo_transaction(txn: Transaction, company_name: str) -> None:
    amount = txn.income if txn.income else txn.expense
    click.echo(f"Recorded {txn.tag.value} {txn.id} for '{company_name}'")
    click.echo(f"  Date: {format_date(txn.date)}")
    click.echo(f"  Amount: {format_currency(amount)}")
    click.echo(f"  Description: {txn.description}")


@click.group()
def record_group():
    """Record transactions for a job."""
    pass


def _record_single(ctx, job_id, company, expected_type, amount, description, date_str, method_name):
    db = ctx.obj["db"]
    company_service = CompanyService(db, ctx.obj["user"])
    service = TransactionService(db, ctx.obj["user"])

    company_id = resolve_company_or_exit(ctx, company_service, job_id, company)
    company_obj = _require_type(ctx, company_service, company_id, expected_type)
    txn_amount = parse_amount_or_exit(ctx, amount)
    txn_date = parse_date_or_exit(ctx, date_str)

    try:
        txn = getattr(service, method_name)(job_id, company_id, txn_amount, description, txn_date)
    except DomainError as e:
        handle_domain_error(ctx, e)
    _echo_transaction(txn, company_obj.name)


@record_group.command("receivable")
@click.argument("job_id", type=int)
@click.argument("employee", metavar="EMPLOYEE")
@_common_options
@click.pass_context
def record_receivable(ctx, job_id: int, employee: str, amount: str, description: str, date_str: str):
    """Record an amount owed to an employee for work performed.

    Examples:
        jobledger record receivable 1 "Ali Usta" --amount 3000 --description "Tiling"
    """
    _record_single(
        ctx, job_id, employee, CompanyType.EMPLOYEE, amount, description, date_str,
        "record_receivable",
    )


@record_group.command("income")
@click.argument("job_id", type=int)
@click.argument("employer", metavar="EMPLOYER")
@_common_options
@click.pass_context
def record_income(ctx, job_id: int, employer: str, amount: str, description: str, date_str: str):
    """Record income received by an employer."""
    _record_single(
        ctx, job_id, employer, CompanyType.EMPLOYER, amount, description, date_str,
        "record_employer_income",
    )


@record_group.command("expense")
@click.argument("job_id", type=int)
@click.argument("employer", metavar="EMPLOYER")
@_common_options
@click.pass_context
def record_expense(ctx, job_id: int, employer: str, amount: str, description: str, date_str: str):
    """Record an expense made directly by an employer."""
    _record_single(
        ctx, job_id, employer, CompanyType.EMPLOYER, amount, description, date_str,
        "record_employer_expense",
    )


@record_group.command("payment")
@click.argument("job_id", type=int)
@click.option("--from", "employer", required=True, help="Paying employer (name or ID)")
@click.option("--to", "employee", required=True, help="Paid employee (name or ID)")
@_common_options
@click.pass_context
def record_payment(
    ctx, job_id: int, employer: str, employee: str, amount: str, description: str, date_str: str
):
    """Record a payment from an employer to an employee.

    Writes two linked transactions: one received by the employee and one
    made by the employer.

    Examples:
        jobledger record payment 1 --from "Acme" --to "Ali Usta" --amount 1000 --description "Advance"
    """
    db = ctx.obj["db"]
    company_service = CompanyService(db, ctx.obj["user"])
    service = TransactionService(db, ctx.obj["user"])

    employer_id = resolve_company_or_exit(ctx, company_service, job_id, employer)
    employee_id = resolve_company_or_exit(ctx, company_service, job_id, employee)
    employer_obj = company_service.get_company(employer_id)
    employee_obj = company_service.get_company(employee_id)
    txn_amount = parse_amount_or_exit(ctx, amount)
    txn_date = parse_date_or_exit(ctx, date_str)

    try:
        validate_payment_parties(employer_obj, employee_obj)
        pair = service.record_payment_to_employee(
            job_id, employer_id, employee_id, txn_amount, description, txn_date
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Recorded payment of {format_currency(pair.received.income)} "
        f"from '{employer_obj.name}' to '{employee_obj.name}'"
    )
    click.echo(f"  Received: transaction {pair.received.id}")
    click.echo(f"  Made: transaction {pair.made.id}")
    click.echo(f"  Date: {format_date(pair.received.date)}")


def register_commands(cli):
    """Register record commands with main CLI."""
    cli.add_command(record_group, name="record")
