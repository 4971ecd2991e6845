"""SQLite record store"""

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import List, Optional

from lease_contracts.db.base import RecordStore
from lease_contracts.utils.config import get_settings

logger = logging.getLogger(__name__)


def get_db_path() -> Path:
    """Get database path from settings"""
    settings = get_settings()
    return Path(settings.database_path)


class SQLiteStore(RecordStore):
    """RecordStore backed by a SQLite records table"""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = Path(db_path) if db_path else get_db_path()

    @contextmanager
    def get_connection(self):
        """Get a database connection as context manager"""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_db(self) -> None:
        """Initialize database with schema"""
        with self.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS records (
                    collection TEXT NOT NULL,
                    id TEXT NOT NULL,
                    position INTEGER NOT NULL,
                    data TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    PRIMARY KEY (collection, id)
                )
            """)

            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_records_position
                ON records(collection, position)
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS collections (
                    name TEXT PRIMARY KEY
                )
            """)

    def get_all(self, collection: str) -> List[dict]:
        self.init_db()
        with self.get_connection() as conn:
            rows = conn.execute(
                "SELECT data FROM records WHERE collection = ? ORDER BY position",
                (collection,),
            ).fetchall()
        return [json.loads(row["data"]) for row in rows]

    def has_collection(self, collection: str) -> bool:
        self.init_db()
        with self.get_connection() as conn:
            row = conn.execute(
                "SELECT 1 FROM collections WHERE name = ?", (collection,)
            ).fetchone()
        return row is not None

    def _mark(self, conn, collection: str) -> None:
        conn.execute("INSERT OR IGNORE INTO collections (name) VALUES (?)", (collection,))

    def upsert(self, collection: str, record: dict) -> None:
        self.init_db()
        record_id = record["id"]
        data = json.dumps(record, ensure_ascii=False)
        with self.get_connection() as conn:
            existing = conn.execute(
                "SELECT position FROM records WHERE collection = ? AND id = ?",
                (collection, record_id),
            ).fetchone()
            if existing:
                conn.execute(
                    "UPDATE records SET data = ?, updated_at = CURRENT_TIMESTAMP "
                    "WHERE collection = ? AND id = ?",
                    (data, collection, record_id),
                )
            else:
                conn.execute(
                    "INSERT INTO records (collection, id, position, data) VALUES (?, ?, "
                    "(SELECT COALESCE(MAX(position), -1) + 1 FROM records WHERE collection = ?), ?)",
                    (collection, record_id, collection, data),
                )
            self._mark(conn, collection)
        logger.debug("Upserted %s/%s", collection, record_id)

    def delete(self, collection: str, record_id: str) -> bool:
        self.init_db()
        with self.get_connection() as conn:
            cursor = conn.execute(
                "DELETE FROM records WHERE collection = ? AND id = ?",
                (collection, record_id),
            )
            deleted = cursor.rowcount > 0
        logger.debug("Deleted %s/%s: %s", collection, record_id, deleted)
        return deleted

    def replace_all(self, collection: str, records: List[dict]) -> None:
        self.init_db()
        with self.get_connection() as conn:
            conn.execute("DELETE FROM records WHERE collection = ?", (collection,))
            conn.executemany(
                "INSERT INTO records (collection, id, position, data) VALUES (?, ?, ?, ?)",
                [
                    (collection, record["id"], position, json.dumps(record, ensure_ascii=False))
                    for position, record in enumerate(records)
                ],
            )
            self._mark(conn, collection)
        logger.debug("Replaced %s with %d records", collection, len(records))

    def reset(self) -> None:
        self.init_db()
        with self.get_connection() as conn:
            conn.execute("DELETE FROM records")
            conn.execute("DELETE FROM collections")
        logger.info("All records removed from %s", self.db_path)
