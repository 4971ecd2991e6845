"""PDF export of assembled contract text"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from lease_contracts.models.contract import GeneratedContract
from lease_contracts.models.profile import PersonData
from lease_contracts.utils.pdf_fonts import get_font_name, register_contract_fonts

logger = logging.getLogger(__name__)

TITLE = "CONTRATO DE LOCAÇÃO RESIDENCIAL"
SIGNATURE_LINE = "_" * 45


class ContractPDFGenerator:
    """Lay out contract text on A4 pages with a signature section"""

    def __init__(self):
        register_contract_fonts()
        self.font_name = get_font_name()
        self.font_bold = get_font_name(bold=True)
        self._init_styles()

    def _init_styles(self):
        """Initialize paragraph styles"""
        self.styles = {
            'title': ParagraphStyle('Title', fontName=self.font_bold,
                fontSize=16, alignment=TA_CENTER, spaceAfter=18),
            'normal': ParagraphStyle('Normal', fontName=self.font_name,
                fontSize=12, leading=16, alignment=TA_JUSTIFY, spaceAfter=12),
            'place': ParagraphStyle('Place', fontName=self.font_name,
                fontSize=12, alignment=TA_CENTER, spaceBefore=20, spaceAfter=30),
            'signature': ParagraphStyle('Signature', fontName=self.font_name,
                fontSize=12, leading=15, alignment=TA_LEFT),
        }

    def generate(
        self,
        text: str,
        output_path: str,
        contract: Optional[GeneratedContract] = None,
        landlord: Optional[PersonData] = None,
    ) -> str:
        """Write the contract PDF and return its path.

        Args:
            text: Assembled contract text, paragraphs separated by newlines.
            output_path: Destination file.
            contract: Source of place, year and signature names, when known.
            landlord: Landlord data for the signature block.
        """
        output = Path(output_path)
        output.parent.mkdir(parents=True, exist_ok=True)

        doc = SimpleDocTemplate(
            str(output),
            pagesize=A4,
            rightMargin=2*cm,
            leftMargin=2*cm,
            topMargin=2*cm,
            bottomMargin=2*cm,
            title=TITLE,
        )

        story = [Paragraph(TITLE, self.styles['title'])]
        for line in text.split("\n"):
            if line.strip():
                story.append(Paragraph(escape(line.strip()), self.styles['normal']))

        story.append(Paragraph(escape(self._place_line(contract)), self.styles['place']))
        story.extend(self._build_signature_section(contract, landlord))

        doc.build(story)
        logger.info("PDF written to %s", output)
        return str(output)

    def _place_line(self, contract: Optional[GeneratedContract]) -> str:
        city = state = ""
        year = datetime.now().year
        if contract:
            city = (contract.property.city or "").upper()
            state = (contract.property.state or "").upper()
            if contract.contract_date:
                year = contract.contract_date.year
            else:
                year = contract.generated_at.year
        return f"{city} – {state}, _____ de _________________ de {year}"

    def _signature_block(self, role: str, person: Optional[PersonData]) -> Table:
        name = person.name.upper() if person else ""
        cpf = person.cpf if person else ""
        rows = [
            [Paragraph(f"{role}:", self.styles['signature'])],
            [Spacer(1, 24)],
            [SIGNATURE_LINE],
            [Paragraph(escape(name), self.styles['signature'])],
            [Paragraph(escape(f"CPF: {cpf}"), self.styles['signature'])],
        ]
        table = Table(rows, colWidths=[16*cm])
        table.setStyle(TableStyle([
            ('FONTNAME', (0, 0), (-1, -1), self.font_bold),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('FONTSIZE', (0, 0), (-1, -1), 12),
        ]))
        return table

    def _build_signature_section(
        self,
        contract: Optional[GeneratedContract],
        landlord: Optional[PersonData],
    ) -> list:
        """LOCADOR, LOCATÁRIO, FIADOR (if any) and two witnesses"""
        content = [
            self._signature_block("LOCADOR", landlord),
            Spacer(1, 20),
            self._signature_block("LOCATÁRIO", contract.tenant if contract else None),
            Spacer(1, 20),
        ]

        guarantor = contract.guarantor if contract else None
        if guarantor and guarantor.name.strip():
            content.append(self._signature_block("FIADOR", guarantor))
            content.append(Spacer(1, 20))

        witnesses = Table(
            [
                ['TESTEMUNHAS:', ''],
                ['', ''],
                [SIGNATURE_LINE[:30], SIGNATURE_LINE[:30]],
                ['CPF: _____________________', 'CPF: _____________________'],
            ],
            colWidths=[8*cm, 8*cm],
        )
        witnesses.setStyle(TableStyle([
            ('FONTNAME', (0, 0), (-1, -1), self.font_bold),
            ('FONTSIZE', (0, 0), (-1, -1), 12),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('TOPPADDING', (0, 1), (-1, 1), 18),
        ]))
        content.append(witnesses)
        return content


def export_contract_pdf(
    text: str,
    output_path: str,
    contract: Optional[GeneratedContract] = None,
    landlord: Optional[PersonData] = None,
) -> str:
    """Convenience function to export a contract"""
    return ContractPDFGenerator().generate(text, output_path, contract, landlord)
