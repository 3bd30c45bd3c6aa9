"""Job management commands."""

import click
from jobledger.cli.error_handling import handle_domain_error
from jobledger.domain.entities import EmployeeStats, JobStatus
from jobledger.domain.errors import DomainError
from jobledger.domain.job import JobService
from jobledger.domain.summary import SummaryService
from jobledger.cli.input_parsing import parse_date_or_exit
from jobledger.utils.formatters import format_currency, format_date

STATUS_CHOICES = click.Choice([status.value for status in JobStatus], case_sensitive=False)


def _status_from_choice(value: str) -> JobStatus:
    for status in JobStatus:
        if status.value.lower() == value.lower():
            return status
    raise click.BadParameter(f"Unknown status '{value}'")


@click.group()
def job_group():
    """Manage jobs."""
    pass


@job_group.command("create")
@click.argument("name", metavar="JOB_NAME")
@click.option("--start-date", default="today", show_default=True, help="Start date (YYYY-MM-DD, DD.MM.YYYY or 'today')")
@click.option("--end-date", help="Optional end date")
@click.option("--description", default="", help="Job description")
@click.option("--status", type=STATUS_CHOICES, default=JobStatus.ACTIVE.value, show_default=True)
@click.pass_context
def create_job(ctx, name: str, start_date: str, end_date: str | None, description: str, status: str):
    """Create a new job.

    Examples:
        jobledger job create "Office renovation" --start-date 2024-03-01
        jobledger job create "Warehouse" --description "Phase 1" --status Paused
    """
    service = JobService(ctx.obj["db"], ctx.obj["user"])
    start = parse_date_or_exit(ctx, start_date, "start date")
    end = parse_date_or_exit(ctx, end_date, "end date") if end_date else None

    try:
        job = service.create_job(
            name=name,
            start_date=start,
            description=description,
            end_date=end,
            status=_status_from_choice(status),
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created job '{job.name}' (ID: {job.id})")


@job_group.command("list")
@click.pass_context
def list_jobs(ctx):
    """List jobs with their balances."""
    summary_service = SummaryService(ctx.obj["db"])

    jobs = summary_service.list_jobs_with_stats(user_id=ctx.obj["user"])
    if not jobs:
        click.echo("No jobs found.")
        return

    click.echo("\nJobs:")
    click.echo("-" * 100)
    for entry in jobs:
        job, stats = entry.job, entry.stats
        click.echo(
            f"ID: {job.id:3d} | {job.name:25s} | {job.status.value:9s} | "
            f"Income: {format_currency(stats.total_income):>14s} | "
            f"Expense: {format_currency(stats.total_expense):>14s} | "
            f"Net: {format_currency(stats.net_balance):>14s}"
        )


@job_group.command("show")
@click.argument("job_id", type=int)
@click.pass_context
def show_job(ctx, job_id: int):
    """Show a job, its statistics and the balance of each company."""
    summary_service = SummaryService(ctx.obj["db"])

    try:
        entry = summary_service.get_job_with_stats(job_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    job, stats = entry.job, entry.stats

    click.echo(f"Job {job.id}: {job.name} [{job.status.value}]")
    if job.description:
        click.echo(f"  {job.description}")
    click.echo(f"  Period: {format_date(job.start_date)} - {format_date(job.end_date)}")
    click.echo()
    click.echo(f"  Total income:     {format_currency(stats.total_income):>16s}")
    click.echo(f"  Total expense:    {format_currency(stats.total_expense):>16s}")
    click.echo(f"  Net balance:      {format_currency(stats.net_balance):>16s}")
    click.echo(f"  To be paid:       {format_currency(stats.total_to_be_paid):>16s}")
    click.echo(f"  Paid:             {format_currency(stats.total_paid):>16s}")
    click.echo(f"  Remaining:        {format_currency(stats.total_remaining):>16s}")

    companies = summary_service.list_companies_with_stats(job_id)
    if not companies:
        click.echo("\nNo companies yet.")
        return

    click.echo("\nCompanies:")
    click.echo("-" * 80)
    for item in companies:
        company, company_stats = item.company, item.stats
        if isinstance(company_stats, EmployeeStats):
            detail = (
                f"Owed: {format_currency(company_stats.total_receivable)}, "
                f"Paid: {format_currency(company_stats.payments_made)}"
            )
        else:
            detail = (
                f"Income: {format_currency(company_stats.employer_income)}, "
                f"Expense: {format_currency(company_stats.employer_expense)}"
            )
        click.echo(
            f"ID: {company.id:3d} | {company.name:20s} | {company.type.value:8s} | "
            f"{detail} | Balance: {format_currency(company_stats.receivable)} "
            f"({company_stats.status.value})"
        )


@job_group.command("update")
@click.argument("job_id", type=int)
@click.option("--name", help="New job name")
@click.option("--description", help="New description")
@click.option("--start-date", help="New start date")
@click.option("--end-date", help="New end date ('none' to clear)")
@click.option("--status", type=STATUS_CHOICES, help="New status")
@click.pass_context
def update_job(
    ctx,
    job_id: int,
    name: str | None,
    description: str | None,
    start_date: str | None,
    end_date: str | None,
    status: str | None,
):
    """Update a job.

    Updates only the fields that are provided.

    Examples:
        jobledger job update 1 --status Completed --end-date today
        jobledger job update 1 --end-date none
    """
    service = JobService(ctx.obj["db"], ctx.obj["user"])

    fields = {}
    if name is not None:
        fields["name"] = name
    if description is not None:
        fields["description"] = description
    if start_date is not None:
        fields["start_date"] = parse_date_or_exit(ctx, start_date, "start date")
    if end_date is not None:
        if end_date.strip().lower() == "none":
            fields["end_date"] = None
        else:
            fields["end_date"] = parse_date_or_exit(ctx, end_date, "end date")
    if status is not None:
        fields["status"] = _status_from_choice(status)

    if not fields:
        click.echo("Error: Nothing to update", err=True)
        ctx.exit(1)

    try:
        job = service.update_job(job_id, **fields)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated job '{job.name}' (ID: {job.id})")


@job_group.command("delete")
@click.argument("job_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_job(ctx, job_id: int, yes: bool):
    """Delete a job with all of its companies and transactions."""
    service = JobService(ctx.obj["db"], ctx.obj["user"])

    job = service.get_job(job_id)
    if job is None:
        click.echo(f"Error: Job {job_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(
        f"Delete job '{job.name}' (ID: {job_id}) and all its companies and transactions?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_job(job_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted job '{job.name}'")


def register_commands(cli):
    """Register job commands with main CLI."""
    cli.add_command(job_group, name="job")

