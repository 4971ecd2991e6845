"""Contract text assembly.

Turns a ContractContext and the clause catalog into the final contract text:

    header paragraphs
    CLÁUSULA PRIMEIRA: <body>
    CLÁUSULA SEGUNDA: <body>
    ...

Paragraphs are separated by a blank line. Clause bodies may reference the
fixed tokens below written as {TOKEN}, [TOKEN] or ${TOKEN}.

Everything here is pure: no I/O, no clock, no shared state.
"""

import logging
import re
from datetime import date
from typing import Callable, Iterable, Optional

from lease_contracts.models.contract import ContractContext
from lease_contracts.models.profile import MaritalStatus, PersonData
from lease_contracts.models.template import Clause, ContractTemplate
from lease_contracts.utils.i18n import get_translator

logger = logging.getLogger(__name__)

Translate = Callable[[str], str]

TOKENS = (
    "PROPERTY",
    "STREET",
    "NUMBER",
    "ZIPCODE",
    "NEIGHBORHOOD",
    "CITY",
    "STATE",
    "LANDLORD",
    "LANDLORD_NATIONALITY",
    "LANDLORD_MARITAL_STATUS",
    "LANDLORD_RG",
    "LANDLORD_CPF",
    "LANDLORD_BIRTHPLACE",
    "TENANT",
    "TENANT_NATIONALITY",
    "TENANT_MARITAL_STATUS",
    "TENANT_RG",
    "TENANT_CPF",
    "TENANT_BIRTHPLACE",
    "GUARANTOR",
    "GUARANTOR_NATIONALITY",
    "GUARANTOR_RG",
    "GUARANTOR_CPF",
    "GUARANTOR_BIRTHPLACE",
    "RENT",
    "DUE_DAY",
    "START_DATE",
    "END_DATE",
)

# Longest names first so LANDLORD_CPF is never read as LANDLORD
_NAMES = "|".join(sorted(TOKENS, key=len, reverse=True))
_TOKEN_RE = re.compile(
    r"\$\{(?P<dollar>" + _NAMES + r")\}"
    r"|\{(?P<brace>" + _NAMES + r")\}"
    r"|\[(?P<bracket>" + _NAMES + r")\]"
)

CLAUSE_PREFIX = "CLÁUSULA"
PARAGRAPH_SEPARATOR = "\n\n"
DATE_FORMAT = "%d/%m/%Y"

INTRO = (
    "Pelo presente instrumento particular de CONTRATO DE LOCAÇÃO RESIDENCIAL, "
    "as partes abaixo qualificadas têm entre si, justo e contratado, "
    "o que se segue:"
)

# Feminine forms, since CLÁUSULA is feminine
_UNITS = ("", "PRIMEIRA", "SEGUNDA", "TERCEIRA", "QUARTA", "QUINTA",
          "SEXTA", "SÉTIMA", "OITAVA", "NONA")
_TENS = ("", "DÉCIMA", "VIGÉSIMA", "TRIGÉSIMA", "QUADRAGÉSIMA", "QUINQUAGÉSIMA",
         "SEXAGÉSIMA", "SEPTUAGÉSIMA", "OCTOGÉSIMA", "NONAGÉSIMA")
_HUNDREDS = ("", "CENTÉSIMA", "DUCENTÉSIMA", "TRECENTÉSIMA", "QUADRINGENTÉSIMA",
             "QUINGENTÉSIMA", "SEXCENTÉSIMA", "SEPTINGENTÉSIMA", "OCTINGENTÉSIMA",
             "NONGENTÉSIMA")
MAX_ORDINAL = 999


def _safe(value) -> str:
    """Coerce any value to display text; None becomes ''"""
    return "" if value is None else str(value)


def _format_date(value: Optional[date]) -> str:
    return value.strftime(DATE_FORMAT) if value else ""


def _marital_status(status: Optional[MaritalStatus], translate: Translate) -> str:
    if not status:
        return ""
    code = status.value if isinstance(status, MaritalStatus) else str(status)
    return translate(code)


def build_token_map(
    context: ContractContext,
    translate: Optional[Translate] = None,
) -> dict[str, str]:
    """Map every token of the fixed vocabulary to its display text.

    Args:
        context: Generation context; any part may be missing.
        translate: Lookup for marital status words. Defaults to Portuguese.

    Returns:
        Dict with one entry per token in TOKENS. Missing data maps to ''.
    """
    translate = translate or get_translator("pt")

    prop = context.property.data if context.property else None
    landlord = context.landlord.data if context.landlord else PersonData()
    tenant = context.tenant or PersonData()
    guarantor = context.guarantor or PersonData()

    return {
        "PROPERTY": _safe(prop.description if prop else None),
        "STREET": _safe(prop.street if prop else None),
        "NUMBER": _safe(prop.number if prop else None),
        "ZIPCODE": _safe(prop.zip_code if prop else None),
        "NEIGHBORHOOD": _safe(prop.neighborhood if prop else None),
        "CITY": _safe(prop.city if prop else None),
        "STATE": _safe(prop.state if prop else None),
        "LANDLORD": _safe(landlord.name),
        "LANDLORD_NATIONALITY": _safe(landlord.nationality),
        "LANDLORD_MARITAL_STATUS": _marital_status(landlord.marital_status, translate),
        "LANDLORD_RG": _safe(landlord.rg),
        "LANDLORD_CPF": _safe(landlord.cpf),
        "LANDLORD_BIRTHPLACE": _safe(landlord.birthplace),
        "TENANT": _safe(tenant.name),
        "TENANT_NATIONALITY": _safe(tenant.nationality),
        "TENANT_MARITAL_STATUS": _marital_status(tenant.marital_status, translate),
        "TENANT_RG": _safe(tenant.rg),
        "TENANT_CPF": _safe(tenant.cpf),
        "TENANT_BIRTHPLACE": _safe(tenant.birthplace),
        "GUARANTOR": _safe(guarantor.name),
        "GUARANTOR_NATIONALITY": _safe(guarantor.nationality),
        "GUARANTOR_RG": _safe(guarantor.rg),
        "GUARANTOR_CPF": _safe(guarantor.cpf),
        "GUARANTOR_BIRTHPLACE": _safe(guarantor.birthplace),
        "RENT": _safe(context.monthly_rent),
        "DUE_DAY": _safe(context.due_day),
        "START_DATE": _format_date(context.start_date),
        "END_DATE": _format_date(context.end_date),
    }


def resolve_clauses(template: ContractTemplate, all_clauses: Iterable[Clause]) -> list[Clause]:
    """Return the template's clauses in template order, skipping unknown ids"""
    by_id = {clause.id: clause for clause in all_clauses}
    resolved = []
    for clause_id in template.clause_ids:
        clause = by_id.get(clause_id)
        if clause is None:
            logger.debug("Template '%s' references missing clause '%s'", template.id, clause_id)
            continue
        resolved.append(clause)
    return resolved


def substitute(body: str, token_map: dict[str, str]) -> str:
    """Replace {TOKEN}, [TOKEN] and ${TOKEN} in a clause body.

    Bare token names are left alone, as is anything that is not a well-formed
    bracketed token. Replacement values are inserted as-is and never scanned
    again.
    """
    def _replace(match: re.Match) -> str:
        name = match.group("dollar") or match.group("brace") or match.group("bracket")
        return token_map.get(name) or ""

    return _TOKEN_RE.sub(_replace, body)


def number_to_ordinal_word(n: int) -> str:
    """Spell a clause position as an upper-case Portuguese feminine ordinal.

    Examples:
        1  → 'PRIMEIRA'
        11 → 'DÉCIMA PRIMEIRA'
        20 → 'VIGÉSIMA'
        0  → '0ª' (outside 1-999 falls back to the numeric form)
    """
    if isinstance(n, bool) or not isinstance(n, int) or not 1 <= n <= MAX_ORDINAL:
        return f"{n}ª"

    hundreds, rest = divmod(n, 100)
    tens, units = divmod(rest, 10)
    words = [_HUNDREDS[hundreds], _TENS[tens], _UNITS[units]]
    return " ".join(word for word in words if word)


def _qualification(person: PersonData, translate: Translate) -> str:
    """Inline description of a party, skipping blank fields"""
    parts = [
        person.name.strip(),
        person.nationality.strip(),
        _marital_status(person.marital_status, translate),
    ]
    if person.rg.strip():
        parts.append(f"portador(a) da cédula de identidade RG nº {person.rg.strip()}")
    if person.cpf.strip():
        parts.append(f"inscrito(a) no CPF sob o nº {person.cpf.strip()}")
    if person.birthplace.strip():
        parts.append(f"natural de {person.birthplace.strip()}")

    text = ", ".join(part for part in parts if part)
    return f"{text}." if text else ""


def build_header(
    context: ContractContext,
    translate: Optional[Translate] = None,
) -> list[str]:
    """Intro sentence plus one paragraph per party present.

    LOCADOR and LOCATÁRIO are always emitted; FIADOR only when a guarantor
    name is given.
    """
    translate = translate or get_translator("pt")

    landlord = context.landlord.data if context.landlord else PersonData()
    tenant = context.tenant or PersonData()

    paragraphs = [
        INTRO,
        f"LOCADOR: {_qualification(landlord, translate)}".rstrip(),
        f"LOCATÁRIO: {_qualification(tenant, translate)}".rstrip(),
    ]

    guarantor = context.guarantor
    if guarantor and guarantor.name.strip():
        paragraphs.append(f"FIADOR: {_qualification(guarantor, translate)}")

    return paragraphs


def format_contract(
    context: ContractContext,
    all_clauses: Iterable[Clause],
    translate: Optional[Translate] = None,
) -> str:
    """Assemble the full contract text.

    Returns '' when the context has no template yet, so callers can treat
    empty output as "not ready to render".
    """
    if context.template is None:
        return ""

    translate = translate or get_translator("pt")
    token_map = build_token_map(context, translate)
    clauses = resolve_clauses(context.template, all_clauses)

    rendered = [
        f"{CLAUSE_PREFIX} {number_to_ordinal_word(position)}: {substitute(clause.content, token_map)}"
        for position, clause in enumerate(clauses, start=1)
    ]

    return PARAGRAPH_SEPARATOR.join(build_header(context, translate) + rendered)
