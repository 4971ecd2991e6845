"""Database modules"""

from lease_contracts.db.base import RecordStore
from lease_contracts.db.sqlite import SQLiteStore, get_db_path

__all__ = [
    "RecordStore",
    "SQLiteStore",
    "get_db_path",
]
