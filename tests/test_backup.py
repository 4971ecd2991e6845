"""Tests for JSON backup export and import"""

import json

import pytest

from lease_contracts.db.sqlite import SQLiteStore
from lease_contracts.models import Clause, ContractRequest
from lease_contracts.services.backup import (
    BackupFormatError,
    default_backup_path,
    export_data,
    import_data,
    read_backup,
    write_backup,
)
from lease_contracts.services.contract import ContractService
from lease_contracts.services.default_clauses import default_template
from lease_contracts.services.storage import StorageService


@pytest.fixture
def populated(storage, landlord, property_profile, tenant):
    storage.save_landlord(landlord)
    storage.save_property(property_profile)
    storage.save_template(default_template())
    service = ContractService(storage)
    service.generate(service.build_context(ContractRequest(
        landlord_id=landlord.id,
        property_id=property_profile.id,
        template_id="default",
        tenant=tenant,
        monthly_rent="900,00",
    )))
    return storage


def test_export_contains_every_collection(populated):
    backup = export_data(populated)
    assert backup.version == 1
    assert len(backup.landlords) == 1
    assert len(backup.properties) == 1
    assert len(backup.templates) == 1
    assert len(backup.generated_contracts) == 1
    assert len(backup.clauses) == 18


def test_write_and_restore_into_empty_store(populated, tmp_path):
    path = write_backup(populated, str(tmp_path / "backup.json"))

    target = StorageService(SQLiteStore(str(tmp_path / "restored.db")))
    import_data(target, read_backup(str(path)))

    assert target.get_landlords() == populated.get_landlords()
    assert target.get_properties() == populated.get_properties()
    assert target.get_templates() == populated.get_templates()
    assert target.get_generated_contracts() == populated.get_generated_contracts()


def test_backup_file_is_readable_json(populated, tmp_path):
    path = write_backup(populated, str(tmp_path / "backup.json"))
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["landlords"][0]["data"]["name"] == "João Pereira"
    assert "CLÁUSULA PRIMEIRA" in raw["generated_contracts"][0]["formatted_content"]


def test_default_path(tmp_path):
    path = default_backup_path()
    assert path.parent == tmp_path / "out"
    assert path.name.startswith("lease_contract_backup_")


def test_import_without_clauses_keeps_catalog(storage):
    storage.save_clauses([Clause(id="mine", title="t", content="c")])
    backup = export_data(storage)
    backup.clauses = []
    import_data(storage, backup)
    assert [c.id for c in storage.get_clauses()] == ["mine"]


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(BackupFormatError):
        read_backup(str(path))


@pytest.mark.parametrize("payload", [
    {"landlords": [], "properties": []},
    {"version": 1, "properties": []},
    {"version": 1, "landlords": []},
    [],
])
def test_missing_required_keys(tmp_path, payload):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(BackupFormatError):
        read_backup(str(path))
