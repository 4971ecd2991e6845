"""Abstract record store with list semantics per collection"""

from abc import ABC, abstractmethod
from typing import List


class RecordStore(ABC):
    """Key-value store holding ordered lists of JSON-able records.

    Every record is a dict with an 'id' key. Collections keep insertion
    order; upserting an existing id keeps its position.
    """

    @abstractmethod
    def init_db(self) -> None:
        """Initialize storage schema."""

    @abstractmethod
    def get_all(self, collection: str) -> List[dict]:
        """All records of a collection, in insertion order."""

    @abstractmethod
    def has_collection(self, collection: str) -> bool:
        """True once the collection has been written, even if now empty."""

    @abstractmethod
    def upsert(self, collection: str, record: dict) -> None:
        """Insert a record, or replace the one with the same id."""

    @abstractmethod
    def delete(self, collection: str, record_id: str) -> bool:
        """Delete by id. Returns False when nothing matched."""

    @abstractmethod
    def replace_all(self, collection: str, records: List[dict]) -> None:
        """Overwrite a whole collection."""

    @abstractmethod
    def reset(self) -> None:
        """Remove every record and forget every collection."""
