"""Classification of transactions into financial buckets.

The same ledger row is read with different semantics depending on whose
statistics are being computed. ``classify`` decides, from the target
company's type and the transaction tag, which bucket a row feeds.
"""

from decimal import Decimal
from enum import Enum
from typing import assert_never

from jobledger.domain.entities import CompanyType, Transaction, TransactionTag


class Bucket(Enum):
    """Financial effect of a transaction on its target company."""

    INCOME = "income"
    EXPENSE = "expense"
    RECEIVABLE = "receivable"
    PAYABLE_REDUCING = "payable_reducing"
    NONE = "none"

    def amount_of(self, txn: Transaction) -> Decimal:
        """Return the side of ``txn`` this bucket accumulates."""
        if self is Bucket.EXPENSE:
            return txn.expense
        if self is Bucket.NONE:
            return Decimal("0")
        return txn.income


INCOME_TAGS = frozenset(
    {
        TransactionTag.RECEIVABLE,
        TransactionTag.INCOME,
        TransactionTag.COLLECTION,
        TransactionTag.EARNED_PAYMENT_RECEIVED,
        TransactionTag.PAYMENT_RECEIVED,
    }
)
EXPENSE_TAGS = frozenset({TransactionTag.EMPLOYER_EXPENSE, TransactionTag.PAYMENT_MADE})


def tag_side(tag: TransactionTag) -> str:
    """Return ``"income"`` or ``"expense"`` for the amount a tag carries."""
    match tag:
        case (
            TransactionTag.RECEIVABLE
            | TransactionTag.INCOME
            | TransactionTag.COLLECTION
            | TransactionTag.EARNED_PAYMENT_RECEIVED
            | TransactionTag.PAYMENT_RECEIVED
        ):
            return "income"
        case TransactionTag.EMPLOYER_EXPENSE | TransactionTag.PAYMENT_MADE:
            return "expense"
        case _:
            assert_never(tag)


def _classify_employer(tag: TransactionTag) -> Bucket:
    match tag:
        case (
            TransactionTag.INCOME
            | TransactionTag.COLLECTION
            | TransactionTag.EARNED_PAYMENT_RECEIVED
        ):
            return Bucket.INCOME
        case TransactionTag.EMPLOYER_EXPENSE | TransactionTag.PAYMENT_MADE:
            return Bucket.EXPENSE
        case TransactionTag.RECEIVABLE | TransactionTag.PAYMENT_RECEIVED:
            return Bucket.NONE
        case _:
            assert_never(tag)


def _classify_employee(tag: TransactionTag) -> Bucket:
    match tag:
        case TransactionTag.RECEIVABLE:
            return Bucket.RECEIVABLE
        case TransactionTag.PAYMENT_RECEIVED:
            return Bucket.PAYABLE_REDUCING
        case (
            TransactionTag.INCOME
            | TransactionTag.COLLECTION
            | TransactionTag.EARNED_PAYMENT_RECEIVED
            | TransactionTag.EMPLOYER_EXPENSE
            | TransactionTag.PAYMENT_MADE
        ):
            return Bucket.NONE
        case _:
            assert_never(tag)


def classify(company_type: CompanyType, tag: TransactionTag) -> Bucket:
    """Map a (company type, tag) pair to the bucket it contributes to.

    Args:
        company_type: Type of the transaction's target company
        tag: Transaction tag

    Returns:
        Bucket, ``Bucket.NONE`` for combinations that contribute nothing
    """
    match company_type:
        case CompanyType.EMPLOYER:
            return _classify_employer(tag)
        case CompanyType.EMPLOYEE:
            return _classify_employee(tag)
        case _:
            assert_never(company_type)
