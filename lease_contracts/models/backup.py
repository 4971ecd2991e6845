"""Backup file model"""

from datetime import datetime

from pydantic import BaseModel, Field

from lease_contracts.models.contract import GeneratedContract
from lease_contracts.models.profile import LandlordProfile, PropertyProfile
from lease_contracts.models.template import Clause, ContractTemplate

BACKUP_VERSION = 1


class BackupData(BaseModel):
    """Full export of every stored collection"""
    version: int = BACKUP_VERSION
    timestamp: datetime = Field(default_factory=datetime.now)
    landlords: list[LandlordProfile]
    properties: list[PropertyProfile]
    templates: list[ContractTemplate] = []
    clauses: list[Clause] = []
    generated_contracts: list[GeneratedContract] = []
