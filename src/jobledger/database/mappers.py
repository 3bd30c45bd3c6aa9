"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so schema changes stay out of the
classification and statistics code.
"""

from decimal import Decimal

from jobledger.domain import entities as domain
from jobledger.database.models import (
    Job as ORMJob,
    Company as ORMCompany,
    Transaction as ORMTransaction,
)


def job_to_domain(orm_job: ORMJob) -> domain.Job:
    """Convert SQLAlchemy Job model to domain Job entity."""
    return domain.Job(
        id=orm_job.id,
        user_id=orm_job.user_id,
        name=orm_job.name,
        description=orm_job.description or "",
        start_date=orm_job.start_date,
        end_date=orm_job.end_date,
        status=domain.JobStatus(orm_job.status),
        created_at=orm_job.created_at,
        updated_at=orm_job.updated_at,
    )


def company_to_domain(orm_company: ORMCompany) -> domain.Company:
    """Convert SQLAlchemy Company model to domain Company entity."""
    return domain.Company(
        id=orm_company.id,
        job_id=orm_company.job_id,
        user_id=orm_company.user_id,
        name=orm_company.name,
        type=domain.CompanyType(orm_company.type),
        created_at=orm_company.created_at,
        updated_at=orm_company.updated_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        job_id=orm_transaction.job_id,
        company_id=orm_transaction.company_id,
        performed_by_id=orm_transaction.performed_by_id,
        user_id=orm_transaction.user_id,
        date=orm_transaction.date,
        description=orm_transaction.description,
        income=Decimal(orm_transaction.income or 0),
        expense=Decimal(orm_transaction.expense or 0),
        tag=domain.TransactionTag(orm_transaction.tag),
        created_at=orm_transaction.created_at,
        updated_at=orm_transaction.updated_at,
    )


def draft_to_orm(draft: domain.TransactionDraft) -> ORMTransaction:
    """Build an unsaved SQLAlchemy Transaction from a domain draft."""
    return ORMTransaction(
        job_id=draft.job_id,
        company_id=draft.company_id,
        performed_by_id=draft.performed_by_id,
        user_id=draft.user_id,
        date=draft.date,
        description=draft.description,
        income=draft.income,
        expense=draft.expense,
        tag=draft.tag,
    )
