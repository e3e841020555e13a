"""Database layer for farmstats application."""

from farmstats.database.base import Database
from farmstats.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
