"""CLI helpers for company resolution and error handling."""

from __future__ import annotations

import click
from jobledger.cli.error_handling import handle_domain_error
from jobledger.domain.company import CompanyService
from jobledger.domain.errors import DomainError
from jobledger.utils.company_resolver import resolve_company


def resolve_company_or_exit(
    ctx: click.Context, company_service: CompanyService, job_id: int, company: str | int
) -> int:
    """Resolve company name or ID within a job, or exit with a CLI error."""
    try:
        return resolve_company(company_service, job_id, company)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
