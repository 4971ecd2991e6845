"""Default residential lease clause catalog"""

from lease_contracts.models.template import Clause, ClauseCategory, ContractTemplate

_OBLIGATORY = ClauseCategory.OBLIGATORY
_OPTIONAL = ClauseCategory.OPTIONAL

DEFAULT_CLAUSES: list[Clause] = [
    Clause(
        id="clause-1",
        title="Objeto da Locação",
        category=_OBLIGATORY,
        content=(
            "O objeto da presente locação é {PROPERTY}, localizado na Rua {STREET} nº {NUMBER}, "
            "Bairro {NEIGHBORHOOD}, {CITY}/{STATE}, CEP {ZIPCODE}."
        ),
    ),
    Clause(
        id="clause-2",
        title="Prazo da Locação",
        category=_OBLIGATORY,
        content=(
            "O prazo da locação inicia-se em {START_DATE} e termina em {END_DATE}, "
            "independentemente de aviso, notificação ou interpelação judicial ou extrajudicial."
        ),
    ),
    Clause(
        id="clause-3",
        title="Pagamento do Aluguel",
        category=_OBLIGATORY,
        content=(
            "O aluguel mensal é de R$ {RENT}, a ser pago até o dia {DUE_DAY} de cada mês, "
            "no local indicado pelo LOCADOR, reajustado anualmente conforme a variação "
            "do IGP-M apurada no ano anterior."
        ),
    ),
    Clause(
        id="clause-4",
        title="Multa e Juros Moratórios",
        category=_OBLIGATORY,
        content=(
            "Em caso de mora no pagamento do aluguel, aplicar-se-á multa de 2% (dois por cento) "
            "sobre o valor devido e juros mensais de 1% (um por cento) do montante devido. "
            "Ficam por conta do LOCATÁRIO todos os débitos de água e luz."
        ),
    ),
    Clause(
        id="clause-5",
        title="Renúncia de Direitos",
        category=_OBLIGATORY,
        content=(
            "O pagamento da multa não significa renúncia de qualquer direito ou aceitação da "
            "emenda judicial da mora, em caso de qualquer procedimento judicial contra o LOCATÁRIO."
        ),
    ),
    Clause(
        id="clause-6",
        title="Conservação do Imóvel",
        category=_OBLIGATORY,
        content=(
            "As obras e despesas com a conservação, limpeza e asseio do imóvel correrão por conta "
            "do LOCATÁRIO, que se obriga a devolvê-lo em perfeitas condições de limpeza, "
            "conservação e pintura ao término da locação. O LOCATÁRIO não poderá modificar a "
            "estrutura do imóvel sem prévia autorização por escrito do LOCADOR."
        ),
    ),
    Clause(
        id="clause-7",
        title="Recebimento do Imóvel",
        category=_OBLIGATORY,
        content=(
            "O LOCATÁRIO declara receber o imóvel em perfeito estado de conservação e limpeza, "
            "com fechaduras, vidros, instalações elétricas e hidráulicas em perfeito "
            "funcionamento e todas as contas de água e luz pagas."
        ),
    ),
    Clause(
        id="clause-8",
        title="Destinação do Imóvel",
        category=_OBLIGATORY,
        content=(
            "O imóvel ora locado destina-se única e exclusivamente ao uso residencial "
            "do LOCATÁRIO {TENANT}."
        ),
    ),
    Clause(
        id="clause-9",
        title="Proibição de Sublocação",
        category=_OBLIGATORY,
        content=(
            "O LOCATÁRIO não poderá sublocar, transferir ou ceder o imóvel, sendo nulo de pleno "
            "direito qualquer ato praticado com este fim sem o consentimento prévio e por escrito "
            "do LOCADOR."
        ),
    ),
    Clause(
        id="clause-10",
        title="Sinistro do Imóvel",
        category=_OPTIONAL,
        content=(
            "Em caso de sinistro parcial ou total que torne o imóvel inabitável, o presente "
            "contrato ficará rescindido de pleno direito, independentemente de aviso ou "
            "interpelação judicial ou extrajudicial."
        ),
    ),
    Clause(
        id="clause-11",
        title="Desapropriação",
        category=_OPTIONAL,
        content=(
            "Em caso de desapropriação total ou parcial do imóvel, ficará rescindido de pleno "
            "direito o presente contrato, independente de quaisquer indenizações de ambas as partes."
        ),
    ),
    Clause(
        id="clause-12",
        title="Preferência na Venda",
        category=_OPTIONAL,
        content=(
            "No caso de alienação do imóvel, obriga-se o LOCADOR a dar preferência ao LOCATÁRIO "
            "e, se este não exercer a prerrogativa, a fazer constar do contrato de compra e venda "
            "a existência da presente locação."
        ),
    ),
    Clause(
        id="clause-13",
        title="Vistoria",
        category=_OPTIONAL,
        content=(
            "Ao LOCADOR é facultado, por si ou seus procuradores, vistoriar o imóvel sempre que "
            "achar conveniente, para certeza do cumprimento das obrigações assumidas neste contrato."
        ),
    ),
    Clause(
        id="clause-14",
        title="Multas e Intimações",
        category=_OPTIONAL,
        content=(
            "Cabe ao LOCATÁRIO o cumprimento, dentro dos prazos legais, de quaisquer multas ou "
            "intimações por infrações das leis, portarias ou regulamentos vigentes."
        ),
    ),
    Clause(
        id="clause-15",
        title="Infrações Contratuais",
        category=_OBLIGATORY,
        content=(
            "A infração de qualquer das cláusulas do presente contrato sujeita o infrator à multa "
            "equivalente a 01 (um) mês de aluguel, tomando-se por base o último aluguel vencido."
        ),
    ),
    Clause(
        id="clause-16",
        title="Foro Competente",
        category=_OBLIGATORY,
        content=(
            "As partes obrigam-se por si, herdeiros e sucessores, elegendo o Foro da Comarca de "
            "{CITY}/{STATE} para dirimir qualquer questão oriunda do presente contrato, "
            "renunciando a qualquer outro."
        ),
    ),
    Clause(
        id="clause-17",
        title="Fenômenos Naturais",
        category=_OPTIONAL,
        content=(
            "O LOCADOR não será responsabilizado por danos ao imóvel ou aos pertences do "
            "LOCATÁRIO causados por fenômenos da natureza, como enchentes, tempestades, "
            "vendavais ou raios, devendo o LOCATÁRIO comunicar qualquer ocorrência imediatamente."
        ),
    ),
    Clause(
        id="clause-18",
        title="Fiador",
        category=_OPTIONAL,
        content=(
            "O FIADOR {GUARANTOR}, inscrito no CPF sob o nº {GUARANTOR_CPF}, assume a posição de "
            "devedor solidário do LOCATÁRIO, respondendo com todos os seus bens presentes e "
            "futuros pelo cumprimento integral das obrigações assumidas neste contrato."
        ),
    ),
]

GUARANTOR_CLAUSE_ID = "clause-18"


def default_clauses() -> list[Clause]:
    """Fresh copies of the default catalog"""
    return [clause.model_copy(deep=True) for clause in DEFAULT_CLAUSES]


def default_template(has_guarantor: bool = False) -> ContractTemplate:
    """Template with every obligatory clause, plus the guarantor clause if requested"""
    clause_ids = [c.id for c in DEFAULT_CLAUSES if c.category == ClauseCategory.OBLIGATORY]
    if has_guarantor:
        clause_ids.append(GUARANTOR_CLAUSE_ID)
    name = "Locação residencial com fiador" if has_guarantor else "Locação residencial"
    return ContractTemplate(
        id="default-guarantor" if has_guarantor else "default",
        name=name,
        clause_ids=clause_ids,
        has_guarantor=has_guarantor,
    )
