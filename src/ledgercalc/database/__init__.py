"""Database layer for ledgercalc application."""

from ledgercalc.database.base import Database
from ledgercalc.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
