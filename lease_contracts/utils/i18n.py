"""Translation tables and translator factory"""

import logging
from typing import Callable, Dict

logger = logging.getLogger(__name__)

PT: Dict[str, str] = {
    "single": "solteiro(a)",
    "married": "casado(a)",
    "landlord": "Locador",
    "tenant": "Locatário",
    "property": "Imóvel",
    "clauses": "Cláusulas",
    "obligatory": "Obrigatória",
    "optional": "Opcional",
    "generated_at": "Gerado em",
    "no_records": "Nenhum registro encontrado",
}

EN: Dict[str, str] = {
    "single": "single",
    "married": "married",
    "landlord": "Landlord",
    "tenant": "Tenant",
    "property": "Property",
    "clauses": "Clauses",
    "obligatory": "Obligatory",
    "optional": "Optional",
    "generated_at": "Generated at",
    "no_records": "No records found",
}


def get_translator(lang: str = "pt") -> Callable[[str], str]:
    """
    Return a translate(key) function for the given language.

    Lookup order: the language table, then Portuguese, then the key itself
    (logged as a warning so missing entries are visible).
    """
    primary = EN if (lang or "").lower().startswith("en") else PT

    def translate(key: str) -> str:
        msg = primary.get(key)
        if msg is None:
            msg = PT.get(key)
            if msg is None:
                logger.warning("i18n: missing key '%s' for lang='%s'", key, lang)
                msg = key
        return msg

    return translate
