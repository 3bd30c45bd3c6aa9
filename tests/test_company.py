"""Tests for the company service."""

import pytest
from datetime import date

from jobledger.domain.company import CompanyService
from jobledger.domain.entities import CompanyType
from jobledger.domain.errors import EMPTY_NAME, NotFoundError, UnauthenticatedError, ValidationError
from jobledger.utils.company_resolver import resolve_company


class TestCompanyService:
    """Tests for CompanyService."""

    def test_create_company(self, company_service, sample_job):
        company = company_service.create_company(sample_job.id, " Acme ", CompanyType.EMPLOYER)

        assert company.id is not None
        assert company.name == "Acme"
        assert company.type is CompanyType.EMPLOYER
        assert company.job_id == sample_job.id
        assert company_service.get_company(company.id) == company

    def test_create_in_missing_job(self, company_service):
        with pytest.raises(NotFoundError, match="Job 77 not found"):
            company_service.create_company(77, "Acme", CompanyType.EMPLOYER)

    def test_blank_name(self, company_service, sample_job):
        with pytest.raises(ValidationError) as exc_info:
            company_service.create_company(sample_job.id, " ", CompanyType.EMPLOYEE)
        assert exc_info.value.code == EMPTY_NAME

    def test_unauthenticated(self, temp_db, sample_job):
        with pytest.raises(UnauthenticatedError):
            CompanyService(temp_db).create_company(sample_job.id, "Acme", CompanyType.EMPLOYER)

    def test_list_by_job(self, company_service, job_service, sample_job, employer, employee):
        other = job_service.create_job("Other", date(2024, 1, 1))
        company_service.create_company(other.id, "Elsewhere", CompanyType.EMPLOYER)

        companies = company_service.list_companies(sample_job.id)

        assert [c.id for c in companies] == [employee.id, employer.id]

    def test_rename_keeps_type(self, company_service, employee):
        renamed = company_service.rename_company(employee.id, "Ali Usta Ltd")

        assert renamed.name == "Ali Usta Ltd"
        assert renamed.type is CompanyType.EMPLOYEE

    def test_rename_missing(self, company_service):
        with pytest.raises(NotFoundError):
            company_service.rename_company(5, "Ghost")

    def test_delete_removes_target_and_performed_rows(
        self, temp_db, company_service, transaction_service, sample_job, employer, employee
    ):
        income = transaction_service.record_employer_income(
            sample_job.id, employer.id, 500, "Down payment", date(2024, 1, 2)
        )
        pair = transaction_service.record_payment_to_employee(
            sample_job.id, employer.id, employee.id, 100, "Advance", date(2024, 1, 3)
        )
        receivable = transaction_service.record_receivable(
            sample_job.id, employee.id, 300, "Tiling", date(2024, 1, 4)
        )

        company_service.delete_company(employer.id)

        remaining = {t.id for t in temp_db.list_transactions(job_id=sample_job.id)}
        assert remaining == {receivable.id}
        assert income.id not in remaining
        assert pair.received.id not in remaining
        assert company_service.get_company(employee.id) is not None

    def test_delete_missing(self, company_service):
        with pytest.raises(NotFoundError):
            company_service.delete_company(404)


class TestResolveCompany:
    """Tests for resolving a company by name or ID."""

    def test_resolve_by_name(self, company_service, sample_job, employer):
        assert resolve_company(company_service, sample_job.id, "Acme Construction") == employer.id

    def test_resolve_by_id_string(self, company_service, sample_job, employee):
        assert resolve_company(company_service, sample_job.id, str(employee.id)) == employee.id

    def test_id_from_another_job(self, company_service, job_service, employer):
        other = job_service.create_job("Other", date(2024, 1, 1))
        with pytest.raises(NotFoundError):
            resolve_company(company_service, other.id, employer.id)

    def test_unknown_name(self, company_service, sample_job):
        with pytest.raises(NotFoundError, match="'Nobody' not found"):
            resolve_company(company_service, sample_job.id, "Nobody")
