"""
Dialect providers supplying quote characters and reserved words.
"""

from .base import Dialect
from .mssql import MSSQLDialect
from .mysql import MySQLDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect

__all__ = ["Dialect", "MSSQLDialect", "MySQLDialect", "PostgresDialect", "SQLiteDialect"]
