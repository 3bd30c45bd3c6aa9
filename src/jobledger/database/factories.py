"""Factory functions for building record stores."""

import os
from pathlib import Path
from typing import Optional

from jobledger.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "JOBLEDGER_DB_PATH"
DEFAULT_DB_DIR = ".jobledger"
DEFAULT_DB_NAME = "jobledger.db"


def resolve_database_path(database_path: Optional[str] = None) -> str:
    """Pick the SQLite file to use.

    An explicit path wins over ``JOBLEDGER_DB_PATH``; without either the
    ledger lives in ``~/.jobledger/jobledger.db``. ``:memory:`` is passed
    through unchanged.
    """
    path = database_path or os.environ.get(DB_PATH_ENV)
    if path == ":memory:":
        return path
    if not path:
        path = str(Path.home() / DEFAULT_DB_DIR / DEFAULT_DB_NAME)

    Path(path).expanduser().parent.mkdir(parents=True, exist_ok=True)
    return str(Path(path).expanduser())


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite-backed store.

    Args:
        database_path: SQLite file, see ``resolve_database_path``

    Returns:
        SQLAlchemyDatabase bound to the resolved file
    """
    return SQLAlchemyDatabase(f"sqlite:///{resolve_database_path(database_path)}")
