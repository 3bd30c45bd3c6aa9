"""Statistics query service.

Loads the companies, transactions and jobs for a scope from the store and
combines them with the pure aggregation functions in
``jobledger.domain.statistics``.
"""

from typing import Optional

from jobledger.database.base import Database
from jobledger.domain.entities import (
    CompanyWithStats,
    JobStats,
    JobWithStats,
    OverallStats,
)
from jobledger.domain.errors import NotFoundError, company_not_found, job_not_found
from jobledger.domain.statistics import (
    compute_company_stats,
    compute_job_stats,
    compute_overall_stats,
)


class SummaryService:
    """Service for building company, job and overall statistics."""

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_company_with_stats(self, company_id: int) -> CompanyWithStats:
        """Get a company together with its balance.

        Raises:
            NotFoundError: If company doesn't exist
        """
        company = self.db.get_company(company_id)
        if company is None:
            raise NotFoundError(company_not_found(company_id))
        transactions = self.db.list_transactions(company_id=company_id)
        return CompanyWithStats(
            company=company, stats=compute_company_stats(company, transactions)
        )

    def list_companies_with_stats(self, job_id: int) -> list[CompanyWithStats]:
        """List a job's companies, newest first, each with its balance."""
        companies = self.db.list_companies(job_id=job_id)
        if not companies:
            return []
        transactions = self.db.list_transactions(job_id=job_id)
        return [
            CompanyWithStats(company=company, stats=compute_company_stats(company, transactions))
            for company in companies
        ]

    def get_job_stats(self, job_id: int) -> JobStats:
        """Compute statistics for a job.

        A job without companies or transactions yields all-zero figures.
        """
        companies = self.db.list_companies(job_id=job_id)
        transactions = self.db.list_transactions(job_id=job_id)
        return compute_job_stats(transactions, companies)

    def get_job_with_stats(self, job_id: int) -> JobWithStats:
        """Get a job together with its statistics.

        Raises:
            NotFoundError: If job doesn't exist
        """
        job = self.db.get_job(job_id)
        if job is None:
            raise NotFoundError(job_not_found(job_id))
        return JobWithStats(job=job, stats=self.get_job_stats(job_id))

    def list_jobs_with_stats(self, user_id: Optional[str] = None) -> list[JobWithStats]:
        """List jobs, newest first, each with its statistics."""
        jobs = self.db.list_jobs(user_id=user_id)
        if not jobs:
            return []

        job_ids = {job.id for job in jobs}
        companies = self.db.list_companies(job_ids=job_ids)
        transactions = self.db.list_transactions(job_ids=job_ids)

        results = []
        for job in jobs:
            stats = compute_job_stats(
                [t for t in transactions if t.job_id == job.id],
                [c for c in companies if c.job_id == job.id],
            )
            results.append(JobWithStats(job=job, stats=stats))
        return results

    def get_overall_stats(self, user_id: Optional[str] = None) -> OverallStats:
        """Compute statistics across every job (of one owner when given)."""
        jobs = self.db.list_jobs(user_id=user_id)
        job_ids = {job.id for job in jobs}
        companies = self.db.list_companies(job_ids=job_ids)
        transactions = self.db.list_transactions(job_ids=job_ids)
        return compute_overall_stats(jobs, companies, transactions)
