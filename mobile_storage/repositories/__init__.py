"""
Storage adapters for mobile records.

Each module encapsulates how records are held (a Python set, or a SQL table
that defaults to in-memory SQLite). Services depend on the MobileRepository
protocol rather than on a concrete backend.
"""

from .base import MobileRepository
from .memory_repository import InMemoryMobileRepository
from .sql_repository import SQLMobileRepository

__all__ = ["MobileRepository", "InMemoryMobileRepository", "SQLMobileRepository"]
