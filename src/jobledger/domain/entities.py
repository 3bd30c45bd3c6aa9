"""Domain model entities for jobledger.

These are pure data classes representing business concepts, independent of
database schema. Derived statistics live in separate composite types so that
entities are never mutated to carry computed fields.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union


class JobStatus(str, Enum):
    """Lifecycle state of a job."""

    ACTIVE = "Active"
    COMPLETED = "Completed"
    PAUSED = "Paused"


class CompanyType(str, Enum):
    """Role a company plays within a job."""

    EMPLOYER = "Employer"
    EMPLOYEE = "Employee"


class TransactionTag(str, Enum):
    """Closed vocabulary of transaction kinds."""

    RECEIVABLE = "Receivable"
    INCOME = "Income"
    COLLECTION = "Collection"
    EARNED_PAYMENT_RECEIVED = "EarnedPaymentReceived"
    EMPLOYER_EXPENSE = "EmployerExpense"
    PAYMENT_MADE = "PaymentMade"
    PAYMENT_RECEIVED = "PaymentReceived"

    @property
    def label(self) -> str:
        """Legacy Turkish label used by older exports."""
        return _TAG_LABELS[self]

    @classmethod
    def parse(cls, value: Union[str, "TransactionTag"]) -> "TransactionTag":
        """Parse a tag from its value, member name or legacy label.

        Raises:
            ValueError: If the value is not a known tag
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for tag in cls:
            if text in (tag.value, tag.name, tag.label):
                return tag
        raise ValueError(f"Unknown transaction tag '{value}'")


_TAG_LABELS = {
    TransactionTag.RECEIVABLE: "Alacak",
    TransactionTag.INCOME: "Gelir",
    TransactionTag.COLLECTION: "Tahsilat",
    TransactionTag.EARNED_PAYMENT_RECEIVED: "Hakediş Alındı",
    TransactionTag.EMPLOYER_EXPENSE: "İşveren Harcaması",
    TransactionTag.PAYMENT_MADE: "Ödeme Yapıldı",
    TransactionTag.PAYMENT_RECEIVED: "Ödeme Alındı",
}


class BalanceStatus(str, Enum):
    """Qualitative net position of a company."""

    BALANCED = "Balanced"
    CREDITOR = "Creditor"
    DEBTOR = "Debtor"
    OVERPAID = "Overpaid"


@dataclass(frozen=True)
class Job:
    """Job (project) domain entity."""

    id: int
    user_id: str
    name: str
    description: str
    start_date: date
    end_date: Optional[date]
    status: JobStatus
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Company:
    """Party taking part in a job."""

    id: int
    job_id: int
    user_id: str
    name: str
    type: CompanyType
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    ``company_id`` is the party the transaction is recorded against and
    ``performed_by_id`` the party that caused it.
    """

    id: int
    job_id: int
    company_id: int
    performed_by_id: Optional[int]
    user_id: str
    date: date
    description: str
    income: Decimal
    expense: Decimal
    tag: TransactionTag
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TransactionDraft:
    """Unsaved transaction handed to the store for insertion."""

    job_id: int
    company_id: int
    performed_by_id: Optional[int]
    user_id: str
    date: date
    description: str
    income: Decimal
    expense: Decimal
    tag: TransactionTag


@dataclass(frozen=True)
class PaymentPair:
    """Linked pair of transactions recording a payment to an employee."""

    received: Transaction
    made: Transaction


@dataclass(frozen=True)
class EmployeeStats:
    """Balance of an employee company."""

    total_receivable: Decimal
    payments_made: Decimal
    receivable: Decimal
    status: BalanceStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalReceivable": self.total_receivable,
            "paymentsMade": self.payments_made,
            "receivable": self.receivable,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class EmployerStats:
    """Balance of an employer company.

    ``employer_expense`` is the combined total of direct employer expenses and
    payments made to employees.
    """

    employer_income: Decimal
    employer_expense: Decimal
    receivable: Decimal
    status: BalanceStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            "employerIncome": self.employer_income,
            "employerExpense": self.employer_expense,
            "receivable": self.receivable,
            "status": self.status.value,
        }


CompanyStats = Union[EmployeeStats, EmployerStats]


@dataclass(frozen=True)
class JobStats:
    """Aggregate figures for a single job."""

    total_income: Decimal
    total_expense: Decimal
    net_balance: Decimal
    total_to_be_paid: Decimal
    total_paid: Decimal
    total_remaining: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalIncome": self.total_income,
            "totalExpense": self.total_expense,
            "netBalance": self.net_balance,
            "totalToBePaid": self.total_to_be_paid,
            "totalPaid": self.total_paid,
            "totalRemaining": self.total_remaining,
        }


@dataclass(frozen=True)
class OverallStats:
    """Aggregate figures across every job."""

    total_income: Decimal
    total_expense: Decimal
    net_balance: Decimal
    total_jobs: int
    active_jobs: int
    completed_jobs: int
    paused_jobs: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalIncome": self.total_income,
            "totalExpense": self.total_expense,
            "netBalance": self.net_balance,
            "totalJobs": self.total_jobs,
            "activeJobs": self.active_jobs,
            "completedJobs": self.completed_jobs,
            "pausedJobs": self.paused_jobs,
        }


@dataclass(frozen=True)
class JobWithStats:
    """Job together with its computed statistics."""

    job: Job
    stats: JobStats


@dataclass(frozen=True)
class CompanyWithStats:
    """Company together with its computed balance."""

    company: Company
    stats: CompanyStats
