"""SQLAlchemy models for jobledger database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Enum,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

from jobledger.domain.entities import CompanyType, JobStatus, TransactionTag

Base = declarative_base()


def _now() -> datetime:
    return datetime.now(UTC)


class Job(Base):
    """Job (project) model."""

    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    status = Column(Enum(JobStatus), nullable=False, default=JobStatus.ACTIVE)
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=False)

    # Relationships
    companies = relationship("Company", back_populates="job", cascade="all, delete-orphan")
    transactions = relationship("Transaction", back_populates="job", cascade="all, delete-orphan")


class Company(Base):
    """Company taking part in a job."""

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, nullable=False)
    name = Column(String, nullable=False)
    type = Column(Enum(CompanyType), nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=False)

    # Relationships
    job = relationship("Job", back_populates="companies")
    transactions = relationship(
        "Transaction",
        back_populates="company",
        cascade="all",
        foreign_keys="Transaction.company_id",
    )
    performed_transactions = relationship(
        "Transaction",
        back_populates="performed_by",
        cascade="all",
        foreign_keys="Transaction.performed_by_id",
    )


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    company_id = Column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    performed_by_id = Column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=True, index=True
    )
    user_id = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=False)
    income = Column(Numeric(12, 2), nullable=False, default=0)
    expense = Column(Numeric(12, 2), nullable=False, default=0)
    tag = Column(Enum(TransactionTag), nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=False)

    # Relationships
    job = relationship("Job", back_populates="transactions")
    company = relationship("Company", back_populates="transactions", foreign_keys=[company_id])
    performed_by = relationship(
        "Company", back_populates="performed_transactions", foreign_keys=[performed_by_id]
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
