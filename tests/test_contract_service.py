"""Tests for contract generation and re-display"""

from datetime import date

import pytest

from lease_contracts.models import Clause, ContractContext, ContractRequest, PersonData
from lease_contracts.services.contract import ContractService
from lease_contracts.services.default_clauses import default_template
from lease_contracts.utils.i18n import get_translator


@pytest.fixture
def service(storage, landlord, property_profile, clauses, template):
    storage.save_landlord(landlord)
    storage.save_property(property_profile)
    storage.save_clauses(clauses)
    storage.save_template(template)
    return ContractService(storage, get_translator("pt"))


@pytest.fixture
def request_data(tenant):
    return ContractRequest(
        landlord_id="landlord-1",
        property_id="property-1",
        template_id="tpl-1",
        tenant=tenant,
        start_date=date(2025, 1, 1),
        end_date=date(2025, 12, 31),
        monthly_rent="1500,00",
        due_day=5,
        contract_location="Salvador/BA",
        late_fee_percentage=2,
    )


class TestBuildContext:

    def test_loads_profiles(self, service, request_data):
        context = service.build_context(request_data)
        assert context.landlord.id == "landlord-1"
        assert context.property.id == "property-1"
        assert context.template.id == "tpl-1"
        assert context.due_day == 5
        assert context.late_fee_percentage == 2

    @pytest.mark.parametrize("field", ["landlord_id", "property_id", "template_id"])
    def test_unknown_ids(self, service, request_data, field):
        setattr(request_data, field, "nope")
        with pytest.raises(ValueError, match="not found"):
            service.build_context(request_data)

    def test_blank_guarantor_is_dropped(self, service, request_data):
        request_data.guarantor = PersonData(name="")
        assert service.build_context(request_data).guarantor is None


class TestGenerate:

    def test_generate_persists_contract(self, service, request_data):
        contract = service.generate(service.build_context(request_data))

        assert contract.template_id == "tpl-1"
        assert contract.landlord_id == "landlord-1"
        assert contract.formatted_content.count("CLÁUSULA ") == 3
        assert "CLÁUSULA PRIMEIRA: O aluguel é de R$ 1500,00, pago até o dia 5." in contract.formatted_content
        assert service.storage.get_generated_contract(contract.id) == contract

    def test_missing_parts_raise(self, service):
        with pytest.raises(ValueError, match="landlord, property, tenant, template"):
            service.generate(ContractContext())

    def test_snapshot_is_independent_of_profiles(self, service, request_data, property_profile):
        context = service.build_context(request_data)
        contract = service.generate(context)

        context.property.data.street = "Nova"
        context.tenant.name = "Outra Pessoa"
        property_profile.data.street = "Nova"
        service.storage.save_property(property_profile)

        stored = service.storage.get_generated_contract(contract.id)
        assert stored.property.street == "das Flores"
        assert stored.tenant.name == "Maria Silva"


class TestRender:

    def test_stored_text_is_reused_after_clause_edit(self, service, request_data):
        contract = service.generate(service.build_context(request_data))
        original = contract.formatted_content

        service.storage.update_clause("c1", Clause(id="c1", title="Aluguel", content="Texto novo."))
        stored = service.storage.get_generated_contract(contract.id)
        assert service.render(stored) == original

    def test_reassembles_when_text_missing(self, service, request_data):
        contract = service.generate(service.build_context(request_data))
        contract.formatted_content = None

        text = service.render(contract)
        assert "CLÁUSULA PRIMEIRA: O aluguel é de R$ 1500,00, pago até o dia 5." in text
        assert "Maria Silva" in text

    def test_default_catalog_with_guarantor(self, storage, landlord, property_profile, tenant, guarantor):
        storage.save_landlord(landlord)
        storage.save_property(property_profile)
        storage.save_template(default_template(has_guarantor=True))
        service = ContractService(storage)

        request = ContractRequest(
            landlord_id=landlord.id,
            property_id=property_profile.id,
            template_id="default-guarantor",
            tenant=tenant,
            guarantor=guarantor,
            monthly_rent="2000,00",
            due_day=10,
        )
        text = service.generate(service.build_context(request)).formatted_content

        assert text.count("CLÁUSULA ") == 12
        assert "CLÁUSULA DÉCIMA SEGUNDA: O FIADOR Carlos Souza, inscrito no CPF sob o nº 999.888.777-66" in text
        assert "FIADOR: Carlos Souza" in text
        assert "Salvador/BA" in text
