"""JSON backup export and import"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from lease_contracts.models.backup import BACKUP_VERSION, BackupData
from lease_contracts.services.storage import StorageService
from lease_contracts.utils.config import get_settings

logger = logging.getLogger(__name__)


class BackupFormatError(ValueError):
    """Raised when a backup file cannot be read as BackupData"""


def export_data(storage: StorageService) -> BackupData:
    """Snapshot every collection"""
    return BackupData(
        version=BACKUP_VERSION,
        timestamp=datetime.now(),
        landlords=storage.get_landlords(),
        properties=storage.get_properties(),
        templates=storage.get_templates(),
        clauses=storage.get_clauses(),
        generated_contracts=storage.get_generated_contracts(),
    )


def default_backup_path() -> Path:
    """<output_dir>/lease_contract_backup_<YYYY-MM-DD>.json"""
    settings = get_settings()
    filename = f"lease_contract_backup_{datetime.now().date().isoformat()}.json"
    return Path(settings.output_dir) / filename


def write_backup(storage: StorageService, path: Optional[str] = None) -> Path:
    """Write a backup file and return its path"""
    output = Path(path) if path else default_backup_path()
    output.parent.mkdir(parents=True, exist_ok=True)

    backup = export_data(storage)
    with open(output, "w", encoding="utf-8") as f:
        json.dump(backup.model_dump(mode="json"), f, ensure_ascii=False, indent=2)

    logger.info("Backup written to %s", output)
    return output


def read_backup(path: str) -> BackupData:
    """Parse a backup file.

    Raises:
        BackupFormatError if the file is not JSON or lacks version/landlords/properties
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise BackupFormatError(f"Invalid backup file: {e}") from e

    if not isinstance(raw, dict) or not raw.get("version") \
            or "landlords" not in raw or "properties" not in raw:
        raise BackupFormatError("Invalid backup format: version, landlords and properties are required")

    if raw["version"] != BACKUP_VERSION:
        logger.warning("Backup version %s differs from %s, importing anyway", raw["version"], BACKUP_VERSION)

    try:
        return BackupData(**raw)
    except ValidationError as e:
        raise BackupFormatError(f"Invalid backup records: {e}") from e


def import_data(storage: StorageService, backup: BackupData) -> None:
    """Merge a backup into storage.

    Profiles, templates and contracts are upserted by id. Clauses replace the
    stored catalog only when the backup carries at least one.
    """
    for landlord in backup.landlords:
        storage.save_landlord(landlord)
    for prop in backup.properties:
        storage.save_property(prop)
    for template in backup.templates:
        storage.save_template(template)
    if backup.clauses:
        storage.save_clauses(backup.clauses)
    for contract in backup.generated_contracts:
        storage.save_generated_contract(contract)

    logger.info(
        "Imported %d landlords, %d properties, %d templates, %d clauses, %d contracts",
        len(backup.landlords),
        len(backup.properties),
        len(backup.templates),
        len(backup.clauses),
        len(backup.generated_contracts),
    )
