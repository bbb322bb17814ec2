"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from bookit.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENVVAR = "BOOKIT_DB_PATH"
DEFAULT_DB_DIR = ".bookit"
DEFAULT_DB_NAME = "bookit.db"


def default_database_path() -> Path:
    """Return ~/.bookit/bookit.db, creating the directory if needed."""
    db_dir = Path.home() / DEFAULT_DB_DIR
    db_dir.mkdir(parents=True, exist_ok=True)
    return db_dir / DEFAULT_DB_NAME


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to the SQLite file. Falls back to the
            BOOKIT_DB_PATH environment variable, then to
            ``default_database_path()``.

    Returns:
        SQLAlchemyDatabase bound to ``sqlite:///<path>``
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENVVAR) or str(default_database_path())

    return SQLAlchemyDatabase(f"sqlite:///{database_path}")
