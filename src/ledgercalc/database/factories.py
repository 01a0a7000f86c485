"""Database factory functions for creating database instances."""

import logging
import os
from pathlib import Path
from typing import Optional

from ledgercalc.database.sqlalchemy_db import SQLAlchemyDatabase

logger = logging.getLogger(__name__)

DB_PATH_ENV_VAR = "LEDGERCALC_DB_PATH"
DEFAULT_DB_DIR = ".ledgercalc"
DEFAULT_DB_NAME = "ledgercalc.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Resolve the SQLite file to use.

    Order: explicit path, then the LEDGERCALC_DB_PATH environment variable,
    then ~/.ledgercalc/ledgercalc.db. The parent directory is created if needed.
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV_VAR)

    if database_path is None:
        path = Path.home() / DEFAULT_DB_DIR / DEFAULT_DB_NAME
    else:
        path = Path(database_path).expanduser()

    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file (see resolve_database_path)

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    path = resolve_database_path(database_path)
    logger.debug("Using SQLite database at %s", path)
    return SQLAlchemyDatabase(f"sqlite:///{path}")
