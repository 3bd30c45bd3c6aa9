"""Database layer for jobledger application."""

from jobledger.database.base import Database
from jobledger.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
