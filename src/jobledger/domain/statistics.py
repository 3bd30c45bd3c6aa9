"""Aggregation of transactions into company, job and overall statistics.

All functions are pure reductions over ``Decimal`` sums, so results do not
depend on the order of the input sequences.
"""

import logging
from decimal import Decimal
from typing import Iterable, Sequence

from jobledger.domain.classification import Bucket, classify
from jobledger.domain.entities import (
    BalanceStatus,
    Company,
    CompanyStats,
    CompanyType,
    EmployeeStats,
    EmployerStats,
    Job,
    JobStats,
    JobStatus,
    OverallStats,
    Transaction,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _status_for(receivable: Decimal, negative: BalanceStatus) -> BalanceStatus:
    if receivable > 0:
        return BalanceStatus.CREDITOR
    if receivable < 0:
        return negative
    return BalanceStatus.BALANCED


def _bucket_totals(
    transactions: Iterable[Transaction], companies: Iterable[Company]
) -> dict[Bucket, Decimal]:
    """Sum every transaction into the bucket of its target company.

    Transactions whose target company is not in ``companies`` are skipped.
    """
    company_types = {company.id: company.type for company in companies}
    totals = {bucket: ZERO for bucket in Bucket}

    for txn in transactions:
        company_type = company_types.get(txn.company_id)
        if company_type is None:
            logger.debug(
                "Skipping transaction %s: company %s not loaded", txn.id, txn.company_id
            )
            continue
        bucket = classify(company_type, txn.tag)
        totals[bucket] += bucket.amount_of(txn)

    return totals


def compute_company_stats(
    company: Company, transactions: Iterable[Transaction]
) -> CompanyStats:
    """Compute the balance of a single company.

    Args:
        company: Company to summarise
        transactions: Transactions to consider; rows targeting other
            companies are ignored

    Returns:
        EmployeeStats or EmployerStats depending on the company type
    """
    own = [txn for txn in transactions if txn.company_id == company.id]
    totals = _bucket_totals(own, [company])

    if company.type is CompanyType.EMPLOYEE:
        total_receivable = totals[Bucket.RECEIVABLE]
        payments_made = totals[Bucket.PAYABLE_REDUCING]
        receivable = total_receivable - payments_made
        return EmployeeStats(
            total_receivable=total_receivable,
            payments_made=payments_made,
            receivable=receivable,
            status=_status_for(receivable, BalanceStatus.OVERPAID),
        )

    employer_income = totals[Bucket.INCOME]
    employer_expense = totals[Bucket.EXPENSE]
    receivable = employer_expense - employer_income
    return EmployerStats(
        employer_income=employer_income,
        employer_expense=employer_expense,
        receivable=receivable,
        status=_status_for(receivable, BalanceStatus.DEBTOR),
    )


def compute_job_stats(
    transactions: Iterable[Transaction], companies: Iterable[Company]
) -> JobStats:
    """Compute aggregate figures for one job.

    Amounts owed to employees are counted as job expense when recorded and
    tracked separately as ``total_to_be_paid``.
    """
    totals = _bucket_totals(transactions, companies)

    total_income = totals[Bucket.INCOME]
    total_to_be_paid = totals[Bucket.RECEIVABLE]
    total_paid = totals[Bucket.PAYABLE_REDUCING]
    total_expense = totals[Bucket.EXPENSE] + total_to_be_paid

    return JobStats(
        total_income=total_income,
        total_expense=total_expense,
        net_balance=total_income - total_expense,
        total_to_be_paid=total_to_be_paid,
        total_paid=total_paid,
        total_remaining=total_to_be_paid - total_paid,
    )


def compute_overall_stats(
    jobs: Sequence[Job],
    companies: Iterable[Company],
    transactions: Iterable[Transaction],
) -> OverallStats:
    """Compute aggregate figures across every job."""
    totals = _bucket_totals(transactions, companies)

    total_income = totals[Bucket.INCOME]
    total_expense = totals[Bucket.EXPENSE] + totals[Bucket.RECEIVABLE]

    return OverallStats(
        total_income=total_income,
        total_expense=total_expense,
        net_balance=total_income - total_expense,
        total_jobs=len(jobs),
        active_jobs=sum(1 for job in jobs if job.status is JobStatus.ACTIVE),
        completed_jobs=sum(1 for job in jobs if job.status is JobStatus.COMPLETED),
        paused_jobs=sum(1 for job in jobs if job.status is JobStatus.PAUSED),
    )
