"""Transaction domain service.

Builds well-formed transactions for each recording intent and hands them to
the store. A payment to an employee is written as a linked pair; see
``TransactionService.record_payment_to_employee``.
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from jobledger.database.base import Database
from jobledger.domain.classification import tag_side
from jobledger.domain.entities import (
    Company,
    CompanyType,
    PaymentPair,
    Transaction,
    TransactionDraft,
    TransactionTag,
)
from jobledger.domain.errors import (
    EMPTY_DESCRIPTION,
    INVALID_AMOUNT,
    INVALID_COMPANY_TYPE,
    MISSING_SELECTION,
    NotFoundError,
    PartialLedgerError,
    StoreError,
    UnauthenticatedError,
    ValidationError,
    invalid_amount,
    missing_selection,
    partial_payment,
    transaction_not_found,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
CENT = Decimal("0.01")

Amount = Union[Decimal, int, float, str]


def normalize_amount(amount: Amount) -> Decimal:
    """Return ``amount`` as a positive finite Decimal in whole cents.

    Raises:
        ValidationError: ``InvalidAmount`` for non-numeric, non-finite or
            non-positive values, and for fractions of a cent
    """
    if isinstance(amount, bool) or amount is None:
        raise ValidationError(INVALID_AMOUNT, invalid_amount(amount))
    try:
        if isinstance(amount, (str, float)):
            value = Decimal(str(amount).strip())
        else:
            value = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(INVALID_AMOUNT, invalid_amount(amount))
    if not value.is_finite() or value <= 0:
        raise ValidationError(INVALID_AMOUNT, invalid_amount(amount))
    # Amount columns store two decimal places
    try:
        in_cents = value.quantize(CENT)
    except InvalidOperation:
        raise ValidationError(INVALID_AMOUNT, invalid_amount(amount))
    if value != in_cents:
        raise ValidationError(INVALID_AMOUNT, invalid_amount(amount))
    return value


def normalize_description(description: Optional[str]) -> str:
    """Return the stripped description.

    Raises:
        ValidationError: ``EmptyDescription`` when blank
    """
    text = (description or "").strip()
    if not text:
        raise ValidationError(EMPTY_DESCRIPTION, "Description must not be empty")
    return text


def validate_payment_parties(employer: Optional[Company], employee: Optional[Company]) -> None:
    """Check the parties of a payment before recording it.

    ``TransactionService.record_payment_to_employee`` trusts its arguments;
    callers load both companies and run this check first.

    Raises:
        ValidationError: If a party is missing, has the wrong type, or both
            parties are the same company or belong to different jobs
    """
    if employer is None:
        raise ValidationError(MISSING_SELECTION, missing_selection("employer"))
    if employee is None:
        raise ValidationError(MISSING_SELECTION, missing_selection("employee"))
    if employer.type is not CompanyType.EMPLOYER:
        raise ValidationError(
            INVALID_COMPANY_TYPE, f"Company '{employer.name}' is not an employer"
        )
    if employee.type is not CompanyType.EMPLOYEE:
        raise ValidationError(
            INVALID_COMPANY_TYPE, f"Company '{employee.name}' is not an employee"
        )
    if employer.id == employee.id:
        raise ValidationError(MISSING_SELECTION, "Employer and employee must differ")
    if employer.job_id != employee.job_id:
        raise ValidationError(
            MISSING_SELECTION, "Employer and employee must belong to the same job"
        )


class TransactionService:
    """Service for recording and listing transactions."""

    def __init__(self, db: Database, user_id: Optional[str] = None):
        """Initialize transaction service.

        Args:
            db: Database instance
            user_id: Authenticated actor recorded as owner of new transactions
        """
        self.db = db
        self.user_id = user_id

    def _require_user(self) -> str:
        if self.user_id is None or not str(self.user_id).strip():
            raise UnauthenticatedError("Not authenticated: no acting user")
        return str(self.user_id)

    def _draft(
        self,
        job_id: int,
        company_id: Optional[int],
        performed_by_id: Optional[int],
        amount: Amount,
        description: str,
        txn_date: date,
        tag: TransactionTag,
        role: str,
    ) -> TransactionDraft:
        """Validate inputs and build a single-sided draft for ``tag``."""
        user_id = self._require_user()
        if job_id is None or company_id is None:
            raise ValidationError(MISSING_SELECTION, missing_selection(role))
        value = normalize_amount(amount)
        text = normalize_description(description)

        is_income = tag_side(tag) == "income"
        return TransactionDraft(
            job_id=job_id,
            company_id=company_id,
            performed_by_id=performed_by_id,
            user_id=user_id,
            date=txn_date,
            description=text,
            income=value if is_income else ZERO,
            expense=ZERO if is_income else value,
            tag=tag,
        )

    def _insert(self, draft: TransactionDraft) -> Transaction:
        transaction = self.db.create_transaction(draft)
        logger.info(
            "Recorded %s transaction %s for company %s (%s)",
            draft.tag.value,
            transaction.id,
            draft.company_id,
            draft.income or draft.expense,
        )
        return transaction

    def record_receivable(
        self, job_id: int, employee_id: int, amount: Amount, description: str, date: date
    ) -> Transaction:
        """Record money owed to an employee for work performed.

        Args:
            job_id: Job ID
            employee_id: Employee company ID (target and actor)
            amount: Positive amount owed
            description: Non-blank description
            date: Transaction date

        Returns:
            Stored transaction

        Raises:
            UnauthenticatedError: If no acting user is set
            ValidationError: If amount, description or selection is invalid
            StoreError: If the store rejects the insert
        """
        draft = self._draft(
            job_id, employee_id, employee_id, amount, description, date,
            TransactionTag.RECEIVABLE, "employee",
        )
        return self._insert(draft)

    def record_employer_income(
        self, job_id: int, employer_id: int, amount: Amount, description: str, date: date
    ) -> Transaction:
        """Record income received by an employer."""
        draft = self._draft(
            job_id, employer_id, employer_id, amount, description, date,
            TransactionTag.INCOME, "employer",
        )
        return self._insert(draft)

    def record_employer_expense(
        self, job_id: int, employer_id: int, amount: Amount, description: str, date: date
    ) -> Transaction:
        """Record an expense made directly by an employer."""
        draft = self._draft(
            job_id, employer_id, employer_id, amount, description, date,
            TransactionTag.EMPLOYER_EXPENSE, "employer",
        )
        return self._insert(draft)

    def record_payment_to_employee(
        self,
        job_id: int,
        employer_id: int,
        employee_id: int,
        amount: Amount,
        description: str,
        date: date,
    ) -> PaymentPair:
        """Record a payment from an employer to an employee.

        Produces a ``PaymentReceived`` row against the employee and a
        ``PaymentMade`` row against the employer, both performed by the
        employer and sharing date, description and amount. Company types are
        not checked here; run ``validate_payment_parties`` first.

        When the store supports atomic batches both rows are committed
        together. Otherwise the receiver row is written first and, if the
        payer row then fails, ``PartialLedgerError`` is raised carrying the
        orphaned receiver row.

        Returns:
            PaymentPair of the stored transactions

        Raises:
            UnauthenticatedError: If no acting user is set
            ValidationError: If amount, description or selection is invalid
            StoreError: If nothing could be written
            PartialLedgerError: If only the receiver row was written
        """
        if employer_id is None:
            self._require_user()
            raise ValidationError(MISSING_SELECTION, missing_selection("employer"))
        received_draft = self._draft(
            job_id, employee_id, employer_id, amount, description, date,
            TransactionTag.PAYMENT_RECEIVED, "employee",
        )
        made_draft = self._draft(
            job_id, employer_id, employer_id, amount, description, date,
            TransactionTag.PAYMENT_MADE, "employer",
        )

        if self.db.supports_atomic_batch:
            received, made = self.db.create_transactions([received_draft, made_draft])
            logger.info(
                "Recorded payment %s/%s from company %s to company %s (%s)",
                received.id, made.id, employer_id, employee_id, received_draft.income,
            )
            return PaymentPair(received=received, made=made)

        received = self._insert(received_draft)
        try:
            made = self._insert(made_draft)
        except StoreError as e:
            logger.error(
                "Payment from company %s to company %s left transaction %s unmatched: %s",
                employer_id, employee_id, received.id, e,
            )
            raise PartialLedgerError(partial_payment(received.id), orphan=received) from e
        return PaymentPair(received=received, made=made)

    def compensate_partial_payment(self, error: PartialLedgerError) -> None:
        """Delete the orphaned half of a partially recorded payment."""
        self._require_user()
        self.db.delete_transaction(error.orphan.id)
        logger.info("Removed orphaned payment transaction %s", error.orphan.id)

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Only the given row is removed; deleting one half of a payment pair
        leaves the other half in place.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        self._require_user()
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self.db.delete_transaction(transaction_id)
        logger.info("Deleted transaction %s", transaction_id)

    def list_job_transactions(self, job_id: int) -> list[Transaction]:
        """List every transaction of a job, newest first."""
        return self.db.list_transactions(job_id=job_id)

    def list_company_transactions(self, company_id: int) -> list[Transaction]:
        """List transactions a company is the target or the actor of, newest first."""
        return self.db.list_transactions(company_id=company_id, include_performed_by=True)
