"""Clause and contract template models"""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ClauseCategory(str, Enum):
    """Advisory clause category; assembly ignores it"""
    OBLIGATORY = "obligatory"
    OPTIONAL = "optional"


class Clause(BaseModel):
    """A reusable paragraph of contract text"""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str                      # management only, never rendered
    content: str                    # body with {TOKEN} / [TOKEN] / ${TOKEN} placeholders
    category: ClauseCategory = ClauseCategory.OPTIONAL


class ContractTemplate(BaseModel):
    """A named, ordered selection of clause ids"""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    clause_ids: list[str] = []
    has_guarantor: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
