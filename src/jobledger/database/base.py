"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Collection, Optional, Sequence
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from jobledger.domain.entities import (
    Company,
    CompanyType,
    Job,
    JobStatus,
    Transaction,
    TransactionDraft,
)


class Database(ABC):
    """Abstract record store for jobledger.

    Implementations raise ``StoreError`` for failures of the underlying
    storage. Deleting a job or company cascades to the records that
    reference it.
    """

    #: True when ``create_transactions`` writes all rows or none.
    supports_atomic_batch: bool = False

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Job operations
    @abstractmethod
    def create_job(
        self,
        user_id: str,
        name: str,
        description: str,
        start_date: date,
        end_date: Optional[date] = None,
        status: JobStatus = JobStatus.ACTIVE,
    ) -> Job:
        """Create a job and return it."""
        pass

    @abstractmethod
    def get_job(self, job_id: int) -> Optional[Job]:
        """Get job by ID."""
        pass

    @abstractmethod
    def list_jobs(self, user_id: Optional[str] = None) -> list[Job]:
        """List jobs, newest first, optionally restricted to one owner."""
        pass

    @abstractmethod
    def update_job(self, job_id: int, **fields) -> Job:
        """Update job fields and return the updated job."""
        pass

    @abstractmethod
    def delete_job(self, job_id: int) -> None:
        """Delete a job together with its companies and transactions."""
        pass

    # Company operations
    @abstractmethod
    def create_company(
        self, job_id: int, user_id: str, name: str, company_type: CompanyType
    ) -> Company:
        """Create a company under a job and return it."""
        pass

    @abstractmethod
    def get_company(self, company_id: int) -> Optional[Company]:
        """Get company by ID."""
        pass

    @abstractmethod
    def list_companies(
        self, job_id: Optional[int] = None, job_ids: Optional[Collection[int]] = None
    ) -> list[Company]:
        """List companies, newest first, optionally filtered by job or jobs."""
        pass

    @abstractmethod
    def update_company_name(self, company_id: int, name: str) -> Company:
        """Rename a company and return it."""
        pass

    @abstractmethod
    def delete_company(self, company_id: int) -> None:
        """Delete a company and every transaction it is target or actor of."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(self, draft: TransactionDraft) -> Transaction:
        """Insert a transaction and return the stored record."""
        pass

    def create_transactions(self, drafts: Sequence[TransactionDraft]) -> list[Transaction]:
        """Insert several transactions.

        The default inserts one row at a time and is not atomic; stores that
        can commit all rows together override this and set
        ``supports_atomic_batch``.
        """
        return [self.create_transaction(draft) for draft in drafts]

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        job_id: Optional[int] = None,
        company_id: Optional[int] = None,
        include_performed_by: bool = False,
        job_ids: Optional[Collection[int]] = None,
    ) -> list[Transaction]:
        """List transactions, newest date first.

        Args:
            job_id: Optional job ID filter
            company_id: Optional target company ID filter
            include_performed_by: If True, ``company_id`` also matches rows
                the company performed
            job_ids: Optional filter on a set of job IDs
        """
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass
