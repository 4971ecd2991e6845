"""Generation context and generated contract models"""

import uuid
from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from lease_contracts.models.profile import (
    LandlordProfile,
    PersonData,
    PropertyData,
    PropertyProfile,
)
from lease_contracts.models.template import ContractTemplate


class ContractContext(BaseModel):
    """Everything needed to render one contract.

    Every part is optional so a partially filled context can be previewed;
    the assembler degrades gaps to empty text.
    """
    version: Literal[1] = 1
    landlord: Optional[LandlordProfile] = None
    property: Optional[PropertyProfile] = None
    tenant: Optional[PersonData] = None
    guarantor: Optional[PersonData] = None
    template: Optional[ContractTemplate] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    monthly_rent: str = ""          # kept as typed, e.g. '1500,00'
    due_day: Optional[int] = Field(default=None, ge=1, le=31)
    contract_location: str = ""
    contract_date: Optional[date] = None
    guarantee_installments: int = 0
    late_fee_percentage: float = 0
    monthly_interest_percentage: float = 0


class GeneratedContract(BaseModel):
    """A persisted contract.

    Tenant, guarantor and property are snapshots taken at generation time.
    """
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    template_id: str
    landlord_id: str
    tenant: PersonData
    guarantor: Optional[PersonData] = None
    property: PropertyData
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    monthly_rent: str = ""
    due_day: Optional[int] = Field(default=None, ge=1, le=31)
    contract_location: str = ""
    contract_date: Optional[date] = None
    guarantee_installments: int = 0
    late_fee_percentage: float = 0
    monthly_interest_percentage: float = 0
    generated_at: datetime = Field(default_factory=datetime.now)
    formatted_content: Optional[str] = None


class ContractRequest(BaseModel):
    """Generation input that refers to stored profiles by id"""
    landlord_id: str
    property_id: str
    template_id: str
    tenant: PersonData
    guarantor: Optional[PersonData] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    monthly_rent: str = ""
    due_day: Optional[int] = Field(default=None, ge=1, le=31)
    contract_location: str = ""
    contract_date: Optional[date] = None
    guarantee_installments: int = 0
    late_fee_percentage: float = 0
    monthly_interest_percentage: float = 0
