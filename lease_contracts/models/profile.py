"""Party and property profile models"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class MaritalStatus(str, Enum):
    """Marital status codes, translated before display"""
    SINGLE = "single"
    MARRIED = "married"


class PersonData(BaseModel):
    """A party to the contract: landlord, tenant or guarantor"""
    name: str = ""
    nationality: str = ""
    marital_status: Optional[MaritalStatus] = None
    rg: str = ""            # national ID number
    cpf: str = ""           # taxpayer ID number
    birthplace: str = ""

    @field_validator("marital_status", mode="before")
    @classmethod
    def _blank_status(cls, value):
        # Forms submit '' when nothing was picked
        if value == "":
            return None
        return value


class PropertyData(BaseModel):
    """A rental unit"""
    description: str = ""
    street: str = ""
    number: str = ""
    zip_code: str = ""
    neighborhood: str = ""
    city: Optional[str] = None
    state: Optional[str] = Field(default=None, max_length=2)
    rooms: Optional[int] = None
    bathrooms: Optional[int] = None

    @field_validator("state")
    @classmethod
    def _upper_state(cls, value: Optional[str]) -> Optional[str]:
        return value.upper() if value else value


class LandlordProfile(BaseModel):
    """A saved landlord"""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = Field(default_factory=datetime.now)
    data: PersonData


class PropertyProfile(BaseModel):
    """A saved property"""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = Field(default_factory=datetime.now)
    data: PropertyData
