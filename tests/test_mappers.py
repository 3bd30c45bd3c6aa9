"""Tests for database mappers."""

from datetime import datetime, date, UTC
from decimal import Decimal

from jobledger.database.models import (
    Job as ORMJob,
    Company as ORMCompany,
    Transaction as ORMTransaction,
)
from jobledger.database.mappers import (
    job_to_domain,
    company_to_domain,
    transaction_to_domain,
    draft_to_orm,
)
from jobledger.domain.entities import (
    Company,
    CompanyType,
    Job,
    JobStatus,
    Transaction,
    TransactionDraft,
    TransactionTag,
)


class TestJobMapper:
    """Tests for Job mapper."""

    def test_job_to_domain(self):
        """Test converting ORM Job to domain Job."""
        now = datetime.now(UTC)
        orm_job = ORMJob(
            id=1,
            user_id="user-1",
            name="Office Renovation",
            description=None,
            start_date=date(2024, 1, 1),
            end_date=None,
            status=JobStatus.PAUSED,
            created_at=now,
            updated_at=now,
        )
        domain_job = job_to_domain(orm_job)

        assert isinstance(domain_job, Job)
        assert domain_job.id == 1
        assert domain_job.description == ""
        assert domain_job.status is JobStatus.PAUSED
        assert domain_job.end_date is None
        assert domain_job.created_at == now


class TestCompanyMapper:
    """Tests for Company mapper."""

    def test_company_to_domain(self):
        now = datetime.now(UTC)
        orm_company = ORMCompany(
            id=3,
            job_id=1,
            user_id="user-1",
            name="Ali Usta",
            type=CompanyType.EMPLOYEE,
            created_at=now,
            updated_at=now,
        )
        company = company_to_domain(orm_company)

        assert isinstance(company, Company)
        assert company.type is CompanyType.EMPLOYEE
        assert company.job_id == 1


class TestTransactionMapper:
    """Tests for Transaction mappers."""

    def test_transaction_to_domain(self):
        """Amounts come back as Decimal even when the column yields floats."""
        now = datetime.now(UTC)
        orm_txn = ORMTransaction(
            id=7,
            job_id=1,
            company_id=3,
            performed_by_id=2,
            user_id="user-1",
            date=date(2024, 1, 15),
            description="Advance",
            income=100.5,
            expense=None,
            tag=TransactionTag.PAYMENT_RECEIVED,
            created_at=now,
            updated_at=now,
        )
        txn = transaction_to_domain(orm_txn)

        assert isinstance(txn, Transaction)
        assert txn.income == Decimal("100.5")
        assert txn.expense == Decimal("0")
        assert txn.tag is TransactionTag.PAYMENT_RECEIVED
        assert txn.performed_by_id == 2

    def test_draft_to_orm(self):
        draft = TransactionDraft(
            job_id=1,
            company_id=2,
            performed_by_id=2,
            user_id="user-1",
            date=date(2024, 1, 15),
            description="Tiling",
            income=Decimal("300"),
            expense=Decimal("0"),
            tag=TransactionTag.RECEIVABLE,
        )
        orm_txn = draft_to_orm(draft)

        assert isinstance(orm_txn, ORMTransaction)
        assert orm_txn.id is None
        assert orm_txn.company_id == 2
        assert orm_txn.income == Decimal("300")
        assert orm_txn.tag is TransactionTag.RECEIVABLE
