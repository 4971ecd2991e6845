"""Pytest configuration and fixtures"""

from datetime import date

import pytest

from lease_contracts.db.sqlite import SQLiteStore
from lease_contracts.models import (
    Clause,
    ContractContext,
    ContractTemplate,
    LandlordProfile,
    MaritalStatus,
    PersonData,
    PropertyData,
    PropertyProfile,
)
from lease_contracts.services.storage import StorageService


@pytest.fixture(autouse=True)
def test_env(tmp_path, monkeypatch):
    """Set up test environment with temporary database"""
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "test.db"))
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("CONTRACT_LANGUAGE", "pt")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    yield


@pytest.fixture
def storage(tmp_path):
    return StorageService(SQLiteStore(str(tmp_path / "store.db")))


@pytest.fixture
def landlord():
    return LandlordProfile(
        id="landlord-1",
        data=PersonData(
            name="João Pereira",
            nationality="brasileiro",
            marital_status=MaritalStatus.MARRIED,
            rg="12.345.678-9",
            cpf="111.222.333-44",
            birthplace="Salvador/BA",
        ),
    )


@pytest.fixture
def property_profile():
    return PropertyProfile(
        id="property-1",
        data=PropertyData(
            description="casa residencial",
            street="das Flores",
            number="120",
            zip_code="40000-000",
            neighborhood="Barra",
            city="Salvador",
            state="ba",
        ),
    )


@pytest.fixture
def tenant():
    return PersonData(
        name="Maria Silva",
        nationality="brasileira",
        marital_status=MaritalStatus.SINGLE,
        rg="98.765.432-1",
        cpf="555.666.777-88",
        birthplace="Recife/PE",
    )


@pytest.fixture
def guarantor():
    return PersonData(name="Carlos Souza", nationality="brasileiro", cpf="999.888.777-66")


@pytest.fixture
def clauses():
    return [
        Clause(id="c1", title="Aluguel", content="O aluguel é de R$ {RENT}, pago até o dia {DUE_DAY}."),
        Clause(id="c2", title="Prazo", content="Vigência de [START_DATE] a ${END_DATE}."),
        Clause(id="c3", title="Partes", content="Locatário: {TENANT}. Locador: {LANDLORD}."),
    ]


@pytest.fixture
def template():
    return ContractTemplate(id="tpl-1", name="Padrão", clause_ids=["c1", "c2", "c3"])


@pytest.fixture
def context(landlord, property_profile, tenant, template):
    return ContractContext(
        landlord=landlord,
        property=property_profile,
        tenant=tenant,
        template=template,
        start_date=date(2025, 1, 1),
        end_date=date(2025, 12, 31),
        monthly_rent="1500,00",
        due_day=5,
        contract_location="Salvador/BA",
    )
