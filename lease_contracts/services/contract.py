"""Contract generation service: composes contexts, renders and persists contracts."""

import logging
from typing import Optional

from lease_contracts.models.contract import ContractContext, ContractRequest, GeneratedContract
from lease_contracts.models.profile import LandlordProfile, PropertyProfile
from lease_contracts.services.formatter import Translate, format_contract
from lease_contracts.services.storage import StorageService
from lease_contracts.utils.config import get_settings
from lease_contracts.utils.i18n import get_translator

logger = logging.getLogger(__name__)


class ContractService:
    """Builds generation contexts from stored profiles and keeps generated contracts."""

    def __init__(
        self,
        storage: Optional[StorageService] = None,
        translate: Optional[Translate] = None,
    ):
        self.storage = storage or StorageService()
        self.translate = translate or get_translator(get_settings().contract_language)

    def build_context(self, request: ContractRequest) -> ContractContext:
        """Compose a context from stored profiles.

        Raises:
            ValueError if any referenced landlord, property or template is unknown
        """
        landlord = self.storage.get_landlord(request.landlord_id)
        if not landlord:
            raise ValueError(f"Landlord not found: {request.landlord_id}")

        prop = self.storage.get_property(request.property_id)
        if not prop:
            raise ValueError(f"Property not found: {request.property_id}")

        template = self.storage.get_template(request.template_id)
        if not template:
            raise ValueError(f"Template not found: {request.template_id}")

        # A blank guarantor form means no guarantor
        guarantor = request.guarantor
        if guarantor and not guarantor.name.strip():
            guarantor = None

        return ContractContext(
            landlord=landlord,
            property=prop,
            tenant=request.tenant,
            guarantor=guarantor,
            template=template,
            **request.model_dump(
                include={
                    "start_date",
                    "end_date",
                    "monthly_rent",
                    "due_day",
                    "contract_location",
                    "contract_date",
                    "guarantee_installments",
                    "late_fee_percentage",
                    "monthly_interest_percentage",
                }
            ),
        )

    def preview(self, context: ContractContext) -> str:
        """Render the context against the stored clause catalog ('' if no template)."""
        return format_contract(context, self.storage.get_clauses(), self.translate)

    def generate(self, context: ContractContext) -> GeneratedContract:
        """Render and persist a contract.

        Raises:
            ValueError if landlord, property, tenant or template is missing
        """
        missing = [
            name for name in ("landlord", "property", "tenant", "template")
            if getattr(context, name) is None
        ]
        if missing:
            raise ValueError(f"Missing contract data: {', '.join(missing)}")

        content = self.preview(context)
        if not content:
            raise ValueError("Contract is not ready to render")

        contract = GeneratedContract(
            template_id=context.template.id,
            landlord_id=context.landlord.id,
            tenant=context.tenant.model_copy(deep=True),
            guarantor=context.guarantor.model_copy(deep=True) if context.guarantor else None,
            property=context.property.data.model_copy(deep=True),
            start_date=context.start_date,
            end_date=context.end_date,
            monthly_rent=context.monthly_rent,
            due_day=context.due_day,
            contract_location=context.contract_location,
            contract_date=context.contract_date,
            guarantee_installments=context.guarantee_installments,
            late_fee_percentage=context.late_fee_percentage,
            monthly_interest_percentage=context.monthly_interest_percentage,
            formatted_content=content,
        )
        self.storage.save_generated_contract(contract)
        logger.info("Generated contract %s from template %s", contract.id, contract.template_id)
        return contract

    def context_from_contract(self, contract: GeneratedContract) -> ContractContext:
        """Rebuild a context from a stored contract's snapshots.

        The landlord is looked up by id; a deleted landlord yields no landlord.
        """
        landlord: Optional[LandlordProfile] = self.storage.get_landlord(contract.landlord_id)
        return ContractContext(
            landlord=landlord,
            property=PropertyProfile(data=contract.property),
            tenant=contract.tenant,
            guarantor=contract.guarantor,
            template=self.storage.get_template(contract.template_id),
            start_date=contract.start_date,
            end_date=contract.end_date,
            monthly_rent=contract.monthly_rent,
            due_day=contract.due_day,
            contract_location=contract.contract_location,
            contract_date=contract.contract_date,
        )

    def render(self, contract: GeneratedContract) -> str:
        """Text to display for a stored contract.

        Stored text is returned verbatim; only contracts saved without it are
        re-assembled.
        """
        if contract.formatted_content:
            return contract.formatted_content
        logger.debug("Contract %s has no stored text, re-assembling", contract.id)
        return self.preview(self.context_from_contract(contract))
