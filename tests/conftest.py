"""Shared pytest fixtures for jobledger tests."""

import tempfile
import os
from datetime import date
import pytest

from jobledger.database.factories import create_sqlite_database
from jobledger.domain.company import CompanyService
from jobledger.domain.entities import CompanyType
from jobledger.domain.job import JobService
from jobledger.domain.summary import SummaryService
from jobledger.domain.transaction import TransactionService

from builders import TEST_USER


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def job_service(temp_db):
    """Create a JobService acting as the test user."""
    return JobService(temp_db, TEST_USER)


@pytest.fixture
def company_service(temp_db):
    """Create a CompanyService acting as the test user."""
    return CompanyService(temp_db, TEST_USER)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService acting as the test user."""
    return TransactionService(temp_db, TEST_USER)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def sample_job(job_service):
    """Create a sample active job."""
    return job_service.create_job(
        name="Office Renovation", start_date=date(2024, 1, 1), description="Second floor"
    )


@pytest.fixture
def employer(company_service, sample_job):
    """Create an employer company in the sample job."""
    return company_service.create_company(sample_job.id, "Acme Construction", CompanyType.EMPLOYER)


@pytest.fixture
def employee(company_service, sample_job):
    """Create an employee company in the sample job."""
    return company_service.create_company(sample_job.id, "Ali Usta", CompanyType.EMPLOYEE)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()

