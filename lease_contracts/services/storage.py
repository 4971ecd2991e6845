"""Typed access to stored profiles, clauses, templates and contracts"""

import logging
from typing import List, Optional

from lease_contracts.db.base import RecordStore
from lease_contracts.models.contract import GeneratedContract
from lease_contracts.models.profile import LandlordProfile, PropertyProfile
from lease_contracts.models.template import Clause, ContractTemplate
from lease_contracts.services.default_clauses import default_clauses

logger = logging.getLogger(__name__)

LANDLORDS = "landlords"
PROPERTIES = "properties"
CLAUSES = "clauses"
TEMPLATES = "templates"
GENERATED_CONTRACTS = "generated_contracts"


class StorageService:
    """CRUD over the record store, one collection per record kind"""

    def __init__(self, store: Optional[RecordStore] = None):
        self._store = store

    @property
    def store(self) -> RecordStore:
        """Lazy-load the SQLite store."""
        if self._store is None:
            from lease_contracts.db.sqlite import SQLiteStore
            self._store = SQLiteStore()
        return self._store

    def _save(self, collection: str, record) -> None:
        self.store.upsert(collection, record.model_dump(mode="json"))
        logger.info("Saved %s record %s", collection, record.id)

    # Landlords

    def get_landlords(self) -> List[LandlordProfile]:
        return [LandlordProfile(**r) for r in self.store.get_all(LANDLORDS)]

    def get_landlord(self, landlord_id: str) -> Optional[LandlordProfile]:
        return next((p for p in self.get_landlords() if p.id == landlord_id), None)

    def save_landlord(self, profile: LandlordProfile) -> None:
        self._save(LANDLORDS, profile)

    def delete_landlord(self, landlord_id: str) -> bool:
        return self.store.delete(LANDLORDS, landlord_id)

    # Properties

    def get_properties(self) -> List[PropertyProfile]:
        return [PropertyProfile(**r) for r in self.store.get_all(PROPERTIES)]

    def get_property(self, property_id: str) -> Optional[PropertyProfile]:
        return next((p for p in self.get_properties() if p.id == property_id), None)

    def save_property(self, profile: PropertyProfile) -> None:
        self._save(PROPERTIES, profile)

    def delete_property(self, property_id: str) -> bool:
        return self.store.delete(PROPERTIES, property_id)

    # Clauses

    def get_clauses(self) -> List[Clause]:
        """Stored clauses, or the default catalog when none were ever saved.

        A catalog the user emptied stays empty.
        """
        if not self.store.has_collection(CLAUSES):
            return default_clauses()
        return [Clause(**r) for r in self.store.get_all(CLAUSES)]

    def has_stored_clauses(self) -> bool:
        return self.store.has_collection(CLAUSES)

    def save_clauses(self, clauses: List[Clause]) -> None:
        self.store.replace_all(CLAUSES, [c.model_dump(mode="json") for c in clauses])
        logger.info("Saved %d clauses", len(clauses))

    def update_clause(self, clause_id: str, updated: Clause) -> bool:
        """Replace an existing clause. Unknown ids are ignored."""
        clauses = self.get_clauses()
        for index, clause in enumerate(clauses):
            if clause.id == clause_id:
                clauses[index] = updated
                self.save_clauses(clauses)
                return True
        return False

    def add_clause(self, clause: Clause) -> None:
        """Append a clause to the catalog. An existing id is replaced in place."""
        if not self.update_clause(clause.id, clause):
            self.save_clauses(self.get_clauses() + [clause])

    def delete_clause(self, clause_id: str) -> bool:
        clauses = self.get_clauses()
        remaining = [c for c in clauses if c.id != clause_id]
        if len(remaining) == len(clauses):
            return False
        self.save_clauses(remaining)
        return True

    # Templates

    def get_templates(self) -> List[ContractTemplate]:
        return [ContractTemplate(**r) for r in self.store.get_all(TEMPLATES)]

    def get_template(self, template_id: str) -> Optional[ContractTemplate]:
        return next((t for t in self.get_templates() if t.id == template_id), None)

    def save_template(self, template: ContractTemplate) -> None:
        self._save(TEMPLATES, template)

    def delete_template(self, template_id: str) -> bool:
        return self.store.delete(TEMPLATES, template_id)

    # Generated contracts

    def get_generated_contracts(self) -> List[GeneratedContract]:
        return [GeneratedContract(**r) for r in self.store.get_all(GENERATED_CONTRACTS)]

    def get_generated_contract(self, contract_id: str) -> Optional[GeneratedContract]:
        return next((c for c in self.get_generated_contracts() if c.id == contract_id), None)

    def save_generated_contract(self, contract: GeneratedContract) -> None:
        self._save(GENERATED_CONTRACTS, contract)

    def delete_generated_contract(self, contract_id: str) -> bool:
        return self.store.delete(GENERATED_CONTRACTS, contract_id)

    def reset_all_data(self) -> None:
        self.store.reset()
