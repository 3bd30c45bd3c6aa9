"""Overall statistics command."""

import json

import click
from jobledger.domain.summary import SummaryService
from jobledger.utils.formatters import format_currency


@click.command("stats")
@click.option("--all-users", is_flag=True, help="Include jobs of every owner")
@click.option("--json", "as_json", is_flag=True, help="Print the figures as JSON")
@click.pass_context
def stats(ctx, all_users: bool, as_json: bool):
    """Show income, expense and job counts across all jobs."""
    service = SummaryService(ctx.obj["db"])
    user_id = None if all_users else ctx.obj["user"]
    overall = service.get_overall_stats(user_id=user_id)

    if as_json:
        click.echo(json.dumps(overall.to_dict(), default=str, indent=2))
        return

    click.echo("Overall statistics")
    click.echo("-" * 40)
    click.echo(f"Total income:   {format_currency(overall.total_income):>20s}")
    click.echo(f"Total expense:  {format_currency(overall.total_expense):>20s}")
    click.echo(f"Net balance:    {format_currency(overall.net_balance):>20s}")
    click.echo()
    click.echo(f"Jobs: {overall.total_jobs} (active {overall.active_jobs}, "
               f"completed {overall.completed_jobs}, paused {overall.paused_jobs})")


def register_commands(cli):
    """Register stats command with main CLI."""
    cli.add_command(stats)
