"""Data models"""

from lease_contracts.models.profile import (
    MaritalStatus,
    PersonData,
    PropertyData,
    LandlordProfile,
    PropertyProfile,
)
from lease_contracts.models.template import (
    ClauseCategory,
    Clause,
    ContractTemplate,
)
from lease_contracts.models.contract import (
    ContractContext,
    ContractRequest,
    GeneratedContract,
)
from lease_contracts.models.backup import (
    BACKUP_VERSION,
    BackupData,
)

__all__ = [
    "MaritalStatus",
    "PersonData",
    "PropertyData",
    "LandlordProfile",
    "PropertyProfile",
    "ClauseCategory",
    "Clause",
    "ContractTemplate",
    "ContractContext",
    "ContractRequest",
    "GeneratedContract",
    "BACKUP_VERSION",
    "BackupData",
]
