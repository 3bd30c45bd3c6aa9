"""Company domain service."""

import logging
from typing import Optional

from jobledger.database.base import Database
from jobledger.domain.entities import Company, CompanyType
from jobledger.domain.errors import (
    EMPTY_NAME,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
    company_not_found,
    job_not_found,
)

logger = logging.getLogger(__name__)


class CompanyService:
    """Service for managing the companies of a job."""

    def __init__(self, db: Database, user_id: Optional[str] = None):
        self.db = db
        self.user_id = user_id

    def _require_user(self) -> str:
        if self.user_id is None or not str(self.user_id).strip():
            raise UnauthenticatedError("Not authenticated: no acting user")
        return str(self.user_id)

    def create_company(self, job_id: int, name: str, company_type: CompanyType) -> Company:
        """Create a company under a job.

        The company type cannot be changed afterwards.

        Raises:
            NotFoundError: If job doesn't exist
            ValidationError: If name is blank
        """
        user_id = self._require_user()
        if self.db.get_job(job_id) is None:
            raise NotFoundError(job_not_found(job_id))
        name = (name or "").strip()
        if not name:
            raise ValidationError(EMPTY_NAME, "Company name must not be empty")

        company = self.db.create_company(
            job_id=job_id, user_id=user_id, name=name, company_type=CompanyType(company_type)
        )
        logger.info(
            "Created %s company %s '%s' in job %s",
            company.type.value, company.id, company.name, job_id,
        )
        return company

    def get_company(self, company_id: int) -> Optional[Company]:
        """Get company by ID, or None if not found."""
        return self.db.get_company(company_id)

    def require_company(self, company_id: int) -> Company:
        """Get company by ID.

        Raises:
            NotFoundError: If company doesn't exist
        """
        company = self.db.get_company(company_id)
        if company is None:
            raise NotFoundError(company_not_found(company_id))
        return company

    def list_companies(self, job_id: int) -> list[Company]:
        """List the companies of a job, newest first."""
        return self.db.list_companies(job_id=job_id)

    def rename_company(self, company_id: int, name: str) -> Company:
        """Rename a company.

        Raises:
            NotFoundError: If company doesn't exist
            ValidationError: If name is blank
        """
        self._require_user()
        self.require_company(company_id)
        name = (name or "").strip()
        if not name:
            raise ValidationError(EMPTY_NAME, "Company name must not be empty")
        return self.db.update_company_name(company_id, name)

    def delete_company(self, company_id: int) -> None:
        """Delete a company and every transaction it is target or actor of.

        Raises:
            NotFoundError: If company doesn't exist
        """
        self._require_user()
        self.require_company(company_id)
        self.db.delete_company(company_id)
        logger.info("Deleted company %s", company_id)
