"""Tests for the SQLite record store and typed storage service"""

from lease_contracts.db.sqlite import SQLiteStore
from lease_contracts.models import Clause, ContractTemplate, LandlordProfile, PersonData
from lease_contracts.services.default_clauses import DEFAULT_CLAUSES, default_template


class TestSQLiteStore:

    def test_upsert_keeps_position(self, tmp_path):
        store = SQLiteStore(str(tmp_path / "s.db"))
        store.upsert("things", {"id": "a", "v": 1})
        store.upsert("things", {"id": "b", "v": 2})
        store.upsert("things", {"id": "a", "v": 3})
        assert store.get_all("things") == [{"id": "a", "v": 3}, {"id": "b", "v": 2}]

    def test_collections_are_separate(self, tmp_path):
        store = SQLiteStore(str(tmp_path / "s.db"))
        store.upsert("x", {"id": "1"})
        store.upsert("y", {"id": "1", "name": "other"})
        assert store.get_all("x") == [{"id": "1"}]
        assert store.get_all("y") == [{"id": "1", "name": "other"}]

    def test_delete(self, tmp_path):
        store = SQLiteStore(str(tmp_path / "s.db"))
        store.upsert("x", {"id": "1"})
        assert store.delete("x", "1") is True
        assert store.delete("x", "1") is False
        assert store.get_all("x") == []

    def test_replace_all_and_reset(self, tmp_path):
        store = SQLiteStore(str(tmp_path / "s.db"))
        store.upsert("x", {"id": "old"})
        store.replace_all("x", [{"id": "n2"}, {"id": "n1"}])
        assert [r["id"] for r in store.get_all("x")] == ["n2", "n1"]
        store.reset()
        assert store.get_all("x") == []

    def test_has_collection_survives_emptying(self, tmp_path):
        store = SQLiteStore(str(tmp_path / "s.db"))
        assert not store.has_collection("x")
        store.upsert("x", {"id": "1"})
        store.delete("x", "1")
        assert store.has_collection("x")
        store.replace_all("y", [])
        assert store.has_collection("y")
        store.reset()
        assert not store.has_collection("x")

    def test_default_path_from_settings(self, tmp_path):
        store = SQLiteStore()
        assert store.db_path == tmp_path / "test.db"


class TestStorageService:

    def test_landlord_crud(self, storage, landlord):
        storage.save_landlord(landlord)
        assert storage.get_landlords() == [landlord]

        landlord.data.name = "João P. Pereira"
        storage.save_landlord(landlord)
        assert storage.get_landlord("landlord-1").data.name == "João P. Pereira"
        assert len(storage.get_landlords()) == 1

        assert storage.delete_landlord("landlord-1")
        assert storage.get_landlord("landlord-1") is None

    def test_property_roundtrip(self, storage, property_profile):
        storage.save_property(property_profile)
        assert storage.get_property("property-1") == property_profile

    def test_clauses_default_catalog(self, storage):
        clauses = storage.get_clauses()
        assert [c.id for c in clauses] == [c.id for c in DEFAULT_CLAUSES]

    def test_save_clauses_overwrites(self, storage):
        storage.save_clauses([Clause(id="only", title="t", content="c")])
        assert [c.id for c in storage.get_clauses()] == ["only"]

    def test_update_clause(self, storage):
        storage.save_clauses([Clause(id="a", title="t", content="old")])
        assert storage.update_clause("a", Clause(id="a", title="t", content="new"))
        assert storage.get_clauses()[0].content == "new"
        assert not storage.update_clause("missing", Clause(id="missing", title="t", content="x"))
        assert len(storage.get_clauses()) == 1

    def test_add_and_delete_clause(self, storage):
        storage.add_clause(Clause(id="extra", title="t", content="Nova cláusula."))
        ids = [c.id for c in storage.get_clauses()]
        assert ids[:-1] == [c.id for c in DEFAULT_CLAUSES]
        assert ids[-1] == "extra"

        storage.add_clause(Clause(id="clause-1", title="t", content="Substituída."))
        clauses = storage.get_clauses()
        assert clauses[0].id == "clause-1"
        assert clauses[0].content == "Substituída."

        assert storage.delete_clause("extra")
        assert not storage.delete_clause("extra")
        assert "extra" not in [c.id for c in storage.get_clauses()]

    def test_emptied_catalog_stays_empty(self, storage):
        storage.save_clauses([Clause(id="only", title="t", content="c")])
        assert storage.delete_clause("only")
        assert storage.get_clauses() == []
        assert storage.has_stored_clauses()

    def test_template_order_survives_storage(self, storage):
        template = ContractTemplate(id="t", name="t", clause_ids=["c9", "c1", "c5"])
        storage.save_template(template)
        assert storage.get_template("t").clause_ids == ["c9", "c1", "c5"]
        assert storage.delete_template("t")
        assert storage.get_templates() == []

    def test_reset_all_data(self, storage, landlord):
        storage.save_landlord(landlord)
        storage.save_template(default_template())
        storage.reset_all_data()
        assert storage.get_landlords() == []
        assert storage.get_templates() == []

    def test_profile_without_marital_status(self, storage):
        profile = LandlordProfile(id="l2", data=PersonData(name="Ana", marital_status=""))
        storage.save_landlord(profile)
        assert storage.get_landlord("l2").data.marital_status is None
