"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic.

    ``code`` names the failed rule (e.g. ``InvalidAmount``).
    """

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class UnauthenticatedError(DomainError):
    """No acting user is available for a write."""


class StoreError(DomainError):
    """Failure reported by the record store."""


class PartialLedgerError(StoreError):
    """A paired payment was only half written.

    ``orphan`` is the transaction that was persisted without its
    counterpart; callers compensate by deleting it or retrying the second
    insert.
    """

    def __init__(self, message: str, orphan):
        super().__init__(message)
        self.orphan = orphan


INVALID_AMOUNT = "InvalidAmount"
EMPTY_DESCRIPTION = "EmptyDescription"
MISSING_SELECTION = "MissingSelection"
INVALID_COMPANY_TYPE = "InvalidCompanyType"
INVALID_DATE_RANGE = "InvalidDateRange"
EMPTY_NAME = "EmptyName"
NOT_EDITABLE = "NotEditable"


def job_not_found(job_id: int) -> str:
    """Return message for missing job."""
    return f"Job {job_id} not found"


def company_not_found(company_id: int) -> str:
    """Return message for missing company."""
    return f"Company {company_id} not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def invalid_amount(amount: object) -> str:
    """Return message for a non-positive or non-numeric amount."""
    return f"Amount must be a positive number, got '{amount}'"


def missing_selection(role: Optional[str] = None) -> str:
    """Return message when a required company was not chosen."""
    if role:
        return f"No {role} company selected"
    return "No company selected"


def partial_payment(orphan_id: int) -> str:
    """Return message when only the receiver side of a payment was stored."""
    return (
        f"Payment partially recorded: transaction {orphan_id} was saved but its "
        "matching payer transaction was not. Delete it or record the payer side again."
    )
