"""Tests for transaction classification rules."""

from decimal import Decimal

import pytest

from jobledger.domain.classification import (
    Bucket,
    EXPENSE_TAGS,
    INCOME_TAGS,
    classify,
    tag_side,
)
from jobledger.domain.entities import CompanyType, TransactionTag

from builders import make_transaction

CLASSIFICATION_TABLE = {
    (CompanyType.EMPLOYER, TransactionTag.INCOME): Bucket.INCOME,
    (CompanyType.EMPLOYER, TransactionTag.COLLECTION): Bucket.INCOME,
    (CompanyType.EMPLOYER, TransactionTag.EARNED_PAYMENT_RECEIVED): Bucket.INCOME,
    (CompanyType.EMPLOYER, TransactionTag.EMPLOYER_EXPENSE): Bucket.EXPENSE,
    (CompanyType.EMPLOYER, TransactionTag.PAYMENT_MADE): Bucket.EXPENSE,
    (CompanyType.EMPLOYEE, TransactionTag.RECEIVABLE): Bucket.RECEIVABLE,
    (CompanyType.EMPLOYEE, TransactionTag.PAYMENT_RECEIVED): Bucket.PAYABLE_REDUCING,
}


@pytest.mark.parametrize("company_type", list(CompanyType))
@pytest.mark.parametrize("tag", list(TransactionTag))
def test_classify_matches_table(company_type, tag):
    """Every listed pair maps to its bucket and every other pair to NONE."""
    expected = CLASSIFICATION_TABLE.get((company_type, tag), Bucket.NONE)
    assert classify(company_type, tag) is expected


def test_employee_tags_never_feed_employer_buckets():
    """Employee-only tags contribute nothing when recorded against an employer."""
    assert classify(CompanyType.EMPLOYER, TransactionTag.RECEIVABLE) is Bucket.NONE
    assert classify(CompanyType.EMPLOYER, TransactionTag.PAYMENT_RECEIVED) is Bucket.NONE


def test_employer_tags_never_feed_employee_buckets():
    """Employer tags contribute nothing when recorded against an employee."""
    for tag in (
        TransactionTag.INCOME,
        TransactionTag.COLLECTION,
        TransactionTag.EARNED_PAYMENT_RECEIVED,
        TransactionTag.EMPLOYER_EXPENSE,
        TransactionTag.PAYMENT_MADE,
    ):
        assert classify(CompanyType.EMPLOYEE, tag) is Bucket.NONE


def test_tag_sides_partition_all_tags():
    """Income-bearing and expense-bearing tags cover every tag exactly once."""
    assert INCOME_TAGS | EXPENSE_TAGS == set(TransactionTag)
    assert not INCOME_TAGS & EXPENSE_TAGS
    for tag in TransactionTag:
        assert tag_side(tag) == ("income" if tag in INCOME_TAGS else "expense")


class TestBucketAmount:
    """Tests for reading the amount a bucket accumulates."""

    def test_income_buckets_read_income(self):
        txn = make_transaction(1, 1, TransactionTag.RECEIVABLE, income="300", expense="7")
        assert Bucket.INCOME.amount_of(txn) == Decimal("300")
        assert Bucket.RECEIVABLE.amount_of(txn) == Decimal("300")
        assert Bucket.PAYABLE_REDUCING.amount_of(txn) == Decimal("300")

    def test_expense_bucket_reads_expense(self):
        txn = make_transaction(1, 1, TransactionTag.PAYMENT_MADE, income="7", expense="200")
        assert Bucket.EXPENSE.amount_of(txn) == Decimal("200")

    def test_none_bucket_is_zero(self):
        txn = make_transaction(1, 1, TransactionTag.INCOME, income="500")
        assert Bucket.NONE.amount_of(txn) == Decimal("0")
