"""
Service Layer dos Contratos
Projeto: OrçaFAST (Orçamentos e Contratos)

Monta os documentos jurídicos (contrato de serviço, termo de autorização,
contrato de permuta) a partir dos dados dos formulários. O resultado é
um ContractDocument independente de HTML/PDF.
"""

import logging
from decimal import Decimal
from typing import Optional

from orcafast.core.exceptions import BusinessValidationError
from orcafast.schemas.contract import (
    AuthorizationTermData,
    CompanyInfo,
    ContractClause,
    ContractDocument,
    ContractKind,
    Contractor,
    Paragraph,
    PartyBlock,
    PaymentMethod,
    PermutationContractData,
    ServiceContractData,
    ServiceType,
    Signatory,
    TextSegment,
)
from orcafast.services.budget_calculator import discount_value, to_decimal
from orcafast.schemas.budget import DiscountType
from orcafast.services.formatting import (
    currency_with_words,
    format_quantity,
    split_bold_terms,
)

logger = logging.getLogger(__name__)

DEFAULT_SIGNAL_PERCENTAGE = Decimal("50")

SERVICE_TERMS = [
    "CONTRATANTE", "CONTRATANTES", "CONTRATADA", "OBJETO DO CONTRATO",
    "VALOR E FORMA DE PAGAMENTO", "PRAZO DE ENTREGA", "RESPONSABILIDADES",
    "DIREITOS AUTORAIS", "RESCISÃO", "FORO", "DISPOSIÇÕES GERAIS", "GARANTIA",
]
AUTHORIZATION_TERMS = ["AUTORIZANTE", "AUTORIZADO(A)"]
PERMUTATION_TERMS = ["PERMUTANTE", "PERMUTANTES", "PERMUTANTE(S)", "PERMUTADO"]

PARTIES_AGREEMENT = (
    "Resolvem, de comum acordo, celebrar o presente contrato, "
    "que se regerá pelas seguintes cláusulas e condições:"
)


def _bold(text: str) -> TextSegment:
    return TextSegment(text=text, bold=True)


def _plain(text: str) -> TextSegment:
    return TextSegment(text=text)


def _paragraph(text: str, terms: list[str], bullet: bool = False) -> Paragraph:
    return Paragraph(segments=split_bold_terms(text, terms), bullet=bullet)


def _company_paragraph(company: CompanyInfo) -> Paragraph:
    return Paragraph(segments=[
        _bold("NOME:"),
        _plain(f" {company.name}, pessoa jurídica de direito privado, inscrita no "),
        _bold("CNPJ"),
        _plain(f" sob o nº {company.cnpj}, com sede em "),
        _bold("ENDEREÇO:"),
        _plain(f" {company.address}, e "),
        _bold("E-MAIL:"),
        _plain(f" {company.email}."),
    ])


def _person_paragraph(name: str, document: str, address: str, email: str) -> Paragraph:
    return Paragraph(segments=[
        _bold("NOME:"),
        _plain(f" {name}, inscrito(a) no "),
        _bold("CPF/CNPJ"),
        _plain(f" sob o nº {document}, residente e domiciliado(a) em "),
        _bold("ENDEREÇO:"),
        _plain(f" {address}, e "),
        _bold("E-MAIL:"),
        _plain(f" {email}."),
    ])


def _contractor_paragraph(contractor: Contractor) -> Paragraph:
    return _person_paragraph(
        contractor.name, contractor.cpf_cnpj, contractor.address, str(contractor.email)
    )


def _forum_paragraph(jurisdiction: str, document_noun: str) -> Paragraph:
    """'Fica eleito o foro da comarca de X ...' com o foro em negrito."""
    return Paragraph(segments=[
        _plain("Fica eleito o "),
        _bold(f"foro da comarca de {jurisdiction}"),
        _plain(f" para dirimir quaisquer controvérsias oriundas do presente {document_noun}."),
    ])


def _lines(text: Optional[str]) -> list[str]:
    return [line.strip() for line in (text or "").splitlines() if line.strip()]


class ClauseCounter:
    """Numeração sequencial das cláusulas."""

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self.clauses: list[ContractClause] = []

    def add(self, title: str, paragraphs: list[Paragraph]) -> ContractClause:
        clause = ContractClause(number=self._next, title=title, paragraphs=paragraphs)
        self._next += 1
        self.clauses.append(clause)
        return clause


class ContractService:
    """
    Montagem dos documentos jurídicos.

    Os valores monetários aparecem como 'R$ 1.000,00 (mil reais)'.
    """

    def __init__(self, company: CompanyInfo) -> None:
        self.company = company

    # ------------------------------------------------------------
    # Contrato de prestação de serviços
    # ------------------------------------------------------------

    def payment_description(self, data: ServiceContractData) -> str:
        """
        Texto da cláusula de valor e forma de pagamento.

        'Sinal + Entrega' divide o total em sinal (percentual, padrão 50%)
        e restante, usando a mesma regra de desconto percentual do orçamento.
        """
        total = to_decimal(data.total_value)
        if total <= 0:
            return "A definir."

        if data.payment_method == PaymentMethod.UPFRONT:
            return (
                f"O valor total de {currency_with_words(total)} deverá ser pago "
                f"à vista na assinatura deste contrato."
            )

        if data.payment_method == PaymentMethod.SIGNAL_AND_DELIVERY:
            percentage = to_decimal(data.payment_signal_percentage) or DEFAULT_SIGNAL_PERCENTAGE
            signal = discount_value(total, percentage, DiscountType.PERCENTAGE)
            remainder = total - signal
            return (
                f"O valor total de {currency_with_words(total)} será pago da seguinte forma: "
                f"um sinal de {currency_with_words(signal)} na assinatura do contrato, "
                f"e o valor restante de {currency_with_words(remainder)} na entrega final "
                f"dos serviços."
            )

        if data.payment_method == PaymentMethod.OTHER:
            return data.payment_method_other or "Forma de pagamento a ser descrita."

        return "Forma de pagamento não especificada."

    def build_service_contract(self, data: ServiceContractData) -> ContractDocument:
        """
        Monta o contrato de prestação de serviços.

        Cláusulas 1-6 fixas; em seguida Disposições Gerais, Garantia
        (somente Website com garantia informada) e Foro, numeradas em sequência.

        Raises:
            BusinessValidationError: método 'Outro' sem descrição
        """
        if data.payment_method == PaymentMethod.OTHER and not (data.payment_method_other or "").strip():
            raise BusinessValidationError(
                "Descreva a forma de pagamento quando o método for 'Outro'"
            )

        terms = SERVICE_TERMS
        counter = ClauseCounter()
        counter.add("OBJETO DO CONTRATO", [_paragraph(data.object, terms)])
        counter.add("VALOR E FORMA DE PAGAMENTO", [_paragraph(self.payment_description(data), terms)])
        counter.add("PRAZO DE ENTREGA", [_paragraph(data.delivery_deadline, terms)])

        responsibilities = [Paragraph(segments=split_bold_terms("Compete à CONTRATADA:", terms))]
        responsibilities += [
            _paragraph(line, terms, bullet=True) for line in _lines(data.contractor_responsibilities)
        ]
        responsibilities.append(
            Paragraph(segments=split_bold_terms("Compete ao(s) CONTRATANTE(S):", terms))
        )
        responsibilities += [
            _paragraph(line, terms, bullet=True) for line in _lines(data.client_responsibilities)
        ]
        counter.add("RESPONSABILIDADES", responsibilities)

        counter.add("DIREITOS AUTORAIS", [_paragraph(data.copyright, terms)])
        counter.add("RESCISÃO", [_paragraph(
            "O presente contrato poderá ser rescindido por qualquer das partes, mediante "
            f"aviso prévio por escrito com antecedência mínima de {data.rescission_notice_period} "
            "dias. Em caso de rescisão imotivada por parte do CONTRATANTE, será devida uma "
            f"multa correspondente a {format_quantity(data.rescission_fine)}% do valor total "
            "do contrato.",
            terms,
        )])
        counter.add("DISPOSIÇÕES GERAIS", [_paragraph(data.general_dispositions, terms)])
        if data.service_type == ServiceType.WEBSITE and data.warranty:
            counter.add("GARANTIA", [_paragraph(data.warranty, terms)])
        counter.add("FORO", [_forum_paragraph(data.jurisdiction, "contrato")])

        contractors_label = "CONTRATANTES:" if len(data.contractors) > 1 else "CONTRATANTE:"
        document = ContractDocument(
            kind=ContractKind.SERVICE,
            title=data.contract_title,
            parties=[
                PartyBlock(label="CONTRATADA:", paragraphs=[_company_paragraph(self.company)]),
                PartyBlock(
                    label=contractors_label,
                    paragraphs=[_contractor_paragraph(c) for c in data.contractors],
                ),
            ],
            preamble=PARTIES_AGREEMENT,
            clauses=counter.clauses,
            signature_place_date=f"{data.signature_city}, {data.signature_date}.",
            signatories=[Signatory(name=self.company.name)]
            + [Signatory(name=c.name) for c in data.contractors],
        )
        logger.info(
            "Contrato de serviço montado: '%s' (%s cláusulas, %s contratantes)",
            data.contract_title, len(document.clauses), len(data.contractors),
        )
        return document

    # ------------------------------------------------------------
    # Termo de autorização de uso de material
    # ------------------------------------------------------------

    def build_authorization_term(self, data: AuthorizationTermData) -> ContractDocument:
        """Monta o termo de autorização de uso de material audiovisual."""
        terms = AUTHORIZATION_TERMS
        counter = ClauseCounter()

        counter.add("Objeto", [
            _paragraph(
                "Este termo trata da autorização exclusiva e pontual para o uso de material "
                "audiovisual captado pelo AUTORIZADO(A) no projeto abaixo identificado:",
                terms,
            ),
            Paragraph(segments=[_bold("Projeto:"), _plain(f" {data.project_name}")], bullet=True),
            Paragraph(segments=[_bold("Cliente final:"), _plain(f" {data.final_client}")], bullet=True),
            Paragraph(
                segments=[_bold("Data de execução:"), _plain(f" {data.execution_date}")],
                bullet=True,
            ),
            Paragraph(
                segments=[_bold("Link(s) autorizado(s):"), _plain(f" {data.authorized_links}")],
                bullet=True,
            ),
        ])
        counter.add("Permissões e Vedações", [
            _paragraph(line, terms) for line in _lines(data.permissions_and_prohibitions)
        ])
        counter.add("Penalidade", [Paragraph(segments=[
            _plain(
                "O descumprimento de qualquer uma das condições estabelecidas neste termo, "
                "especialmente as vedações da Cláusula 2ª, sujeitará o "
            ),
            _bold("AUTORIZADO(A)"),
            _plain(" ao pagamento de uma multa no valor de "),
            _bold(currency_with_words(data.fine_value)),
            _plain(
                ", sem prejuízo da imediata remoção do material e de eventuais perdas e danos."
            ),
        ])])
        if data.general_dispositions:
            counter.add("Disposições Gerais", [
                _paragraph(line, terms) for line in _lines(data.general_dispositions)
            ])
        counter.add("Foro", [_forum_paragraph(data.jurisdiction, "termo")])

        document = ContractDocument(
            kind=ContractKind.AUTHORIZATION,
            title="TERMO DE AUTORIZAÇÃO DE USO DE MATERIAL",
            parties=[
                PartyBlock(label="AUTORIZANTE:", paragraphs=[_company_paragraph(self.company)]),
                PartyBlock(label="AUTORIZADO(A):", paragraphs=[_person_paragraph(
                    data.authorized_name,
                    data.authorized_cpf_cnpj,
                    data.authorized_address,
                    str(data.authorized_email),
                )]),
            ],
            clauses=counter.clauses,
            signature_place_date=f"{data.signature_city}, {data.signature_date}.",
            signatories=[
                Signatory(name=self.company.name, role="Autorizante"),
                Signatory(name=data.authorized_name, role="Autorizado(a)"),
            ],
        )
        logger.info("Termo de autorização montado para o projeto '%s'", data.project_name)
        return document

    # ------------------------------------------------------------
    # Contrato de permuta
    # ------------------------------------------------------------

    def build_permutation_contract(self, data: PermutationContractData) -> ContractDocument:
        """Monta o contrato de permuta (bem/serviço do permutante por serviço da empresa)."""
        terms = PERMUTATION_TERMS
        counter = ClauseCounter()

        counter.add("Objeto", [_paragraph(
            f"O presente contrato tem como objeto a permuta de {data.permutant_object}, "
            f"de propriedade do(s) PERMUTANTE(S), avaliada em "
            f"{currency_with_words(data.permutant_object_value)}, pelo serviço de "
            f"{data.permuted_object} a ser prestado pelo PERMUTADO.",
            terms,
        )])
        counter.add("Das Condições", [_paragraph(line, terms) for line in _lines(data.conditions)])
        counter.add("Da Transferência de Propriedade", [
            _paragraph(line, terms) for line in _lines(data.property_transfer)
        ])
        if data.general_dispositions:
            counter.add("Das Disposições Gerais", [
                _paragraph(line, terms) for line in _lines(data.general_dispositions)
            ])
        counter.add("Do Foro", [_forum_paragraph(data.jurisdiction, "contrato")])

        permutants_label = "PERMUTANTES:" if len(data.permutants) > 1 else "PERMUTANTE:"
        document = ContractDocument(
            kind=ContractKind.PERMUTATION,
            title="CONTRATO DE PERMUTA",
            parties=[
                PartyBlock(label="PERMUTADO:", paragraphs=[_company_paragraph(self.company)]),
                PartyBlock(
                    label=permutants_label,
                    paragraphs=[_contractor_paragraph(p) for p in data.permutants],
                ),
            ],
            preamble=(
                "Resolvem, de comum acordo, celebrar o presente contrato de permuta, "
                "que se regerá pelas seguintes cláusulas e condições:"
            ),
            clauses=counter.clauses,
            signature_place_date=f"{data.signature_city}, {data.signature_date}.",
            signatories=[Signatory(name=self.company.name, role="PERMUTADO")]
            + [Signatory(name=p.name, role="PERMUTANTE") for p in data.permutants],
        )
        logger.info("Contrato de permuta montado (%s permutantes)", len(data.permutants))
        return document

    def build(self, kind: ContractKind, data) -> ContractDocument:
        """Despacha para o montador do tipo de documento."""
        builders = {
            ContractKind.SERVICE: self.build_service_contract,
            ContractKind.AUTHORIZATION: self.build_authorization_term,
            ContractKind.PERMUTATION: self.build_permutation_contract,
        }
        return builders[kind](data)
