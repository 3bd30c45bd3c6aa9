"""Utility for resolving company names to IDs."""

from jobledger.domain.company import CompanyService
from jobledger.domain.errors import NotFoundError


def resolve_company(company_service: CompanyService, job_id: int, company: str | int) -> int:
    """Resolve a company name or ID within a job to a company ID.

    Args:
        company_service: CompanyService instance
        job_id: Job the company must belong to
        company: Company name (str) or ID (int or string representation of int)

    Returns:
        Company ID

    Raises:
        NotFoundError: If no company of the job matches
    """
    try:
        company_id = int(company)
    except (ValueError, TypeError):
        company_id = None

    if company_id is not None:
        company_obj = company_service.get_company(company_id)
        if company_obj is None or company_obj.job_id != job_id:
            raise NotFoundError(f"Company ID {company_id} not found in job {job_id}")
        return company_id

    for comp in company_service.list_companies(job_id):
        if comp.name == company:
            return comp.id

    raise NotFoundError(f"Company '{company}' not found in job {job_id}")
