"""Job domain service."""

import logging
from datetime import date
from typing import Optional

from jobledger.database.base import Database
from jobledger.domain.entities import Job, JobStatus
from jobledger.domain.errors import (
    EMPTY_NAME,
    INVALID_DATE_RANGE,
    NOT_EDITABLE,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
    job_not_found,
)

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "description", "start_date", "end_date", "status")


def _check_dates(start_date: date, end_date: Optional[date]) -> None:
    if end_date is not None and end_date < start_date:
        raise ValidationError(INVALID_DATE_RANGE, "End date cannot be before start date")


class JobService:
    """Service for managing jobs."""

    def __init__(self, db: Database, user_id: Optional[str] = None):
        """Initialize job service.

        Args:
            db: Database instance
            user_id: Authenticated owner of created jobs
        """
        self.db = db
        self.user_id = user_id

    def _require_user(self) -> str:
        if self.user_id is None or not str(self.user_id).strip():
            raise UnauthenticatedError("Not authenticated: no acting user")
        return str(self.user_id)

    def create_job(
        self,
        name: str,
        start_date: date,
        description: str = "",
        end_date: Optional[date] = None,
        status: JobStatus = JobStatus.ACTIVE,
    ) -> Job:
        """Create a new job.

        Args:
            name: Job name
            start_date: Start date
            description: Free-text description
            end_date: Optional end date, not before start_date
            status: Initial status

        Returns:
            Created job

        Raises:
            UnauthenticatedError: If no acting user is set
            ValidationError: If name is blank or the date range is inverted
        """
        user_id = self._require_user()
        name = (name or "").strip()
        if not name:
            raise ValidationError(EMPTY_NAME, "Job name must not be empty")
        _check_dates(start_date, end_date)

        job = self.db.create_job(
            user_id=user_id,
            name=name,
            description=(description or "").strip(),
            start_date=start_date,
            end_date=end_date,
            status=JobStatus(status),
        )
        logger.info("Created job %s '%s'", job.id, job.name)
        return job

    def get_job(self, job_id: int) -> Optional[Job]:
        """Get job by ID, or None if not found."""
        return self.db.get_job(job_id)

    def require_job(self, job_id: int) -> Job:
        """Get job by ID.

        Raises:
            NotFoundError: If job doesn't exist
        """
        job = self.db.get_job(job_id)
        if job is None:
            raise NotFoundError(job_not_found(job_id))
        return job

    def list_jobs(self) -> list[Job]:
        """List the acting user's jobs (every job when no user is set)."""
        return self.db.list_jobs(user_id=self.user_id)

    def update_job(self, job_id: int, **fields) -> Job:
        """Update editable job fields.

        Args:
            job_id: Job ID
            **fields: Any of name, description, start_date, end_date, status

        Raises:
            ValidationError: If a field is not editable, the name is blank or
                the resulting date range is inverted
            NotFoundError: If job doesn't exist
        """
        self._require_user()
        unknown = sorted(set(fields) - set(EDITABLE_FIELDS))
        if unknown:
            raise ValidationError(NOT_EDITABLE, f"Cannot edit job fields: {', '.join(unknown)}")

        job = self.require_job(job_id)
        if "name" in fields:
            fields["name"] = (fields["name"] or "").strip()
            if not fields["name"]:
                raise ValidationError(EMPTY_NAME, "Job name must not be empty")
        if "status" in fields:
            fields["status"] = JobStatus(fields["status"])
        _check_dates(
            fields.get("start_date", job.start_date),
            fields.get("end_date", job.end_date),
        )

        updated = self.db.update_job(job_id, **fields)
        logger.info("Updated job %s: %s", job_id, ", ".join(sorted(fields)))
        return updated

    def delete_job(self, job_id: int) -> None:
        """Delete a job with all its companies and transactions.

        Raises:
            NotFoundError: If job doesn't exist
        """
        self._require_user()
        self.require_job(job_id)
        self.db.delete_job(job_id)
        logger.info("Deleted job %s", job_id)
