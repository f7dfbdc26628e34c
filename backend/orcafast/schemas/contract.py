"""
Schemas Pydantic dos Contratos
Projeto: OrçaFAST (Orçamentos e Contratos)

Contém:
- Enums: ServiceType, PaymentMethod, ContractKind
- Schemas de entrada: ServiceContractData, AuthorizationTermData,
  PermutationContractData
- Documento montado: ContractDocument (independente da renderização)
"""

import uuid
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, model_validator

from orcafast.core.exceptions import BusinessValidationError
from orcafast.schemas.budget import CamelModel


# -------------------------------------------------------------------
# Enum
# -------------------------------------------------------------------

class ServiceType(str, Enum):
    """Tipos de serviço oferecidos nos contratos de prestação."""
    VIDEO_PRODUCTION = "Produção de Vídeo"
    VIDEO_EDITING = "Edição de Vídeo"
    WEBSITE = "Website"
    DRONE = "Drone"
    SOFTWARE = "Desenvolvimento de Software"
    MOTION_GRAPHICS = "Motion Graphics"


class PaymentMethod(str, Enum):
    """Formas de pagamento do contrato de serviço."""
    UPFRONT = "À vista"
    SIGNAL_AND_DELIVERY = "Sinal + Entrega"
    OTHER = "Outro"


class ContractKind(str, Enum):
    """Documentos jurídicos suportados."""
    SERVICE = "service"
    AUTHORIZATION = "authorization"
    PERMUTATION = "permutation"


# -------------------------------------------------------------------
# Partes
# -------------------------------------------------------------------

class Contractor(CamelModel):
    """Contratante/permutante: pessoa física ou jurídica."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(..., min_length=1, description="Nome é obrigatório.")
    cpf_cnpj: str = Field(..., min_length=1, description="CPF/CNPJ é obrigatório.")
    address: str = Field(..., min_length=1, description="Endereço é obrigatório.")
    email: EmailStr = Field(..., description="E-mail do contratante")


class CompanyInfo(BaseModel):
    """Dados da empresa (contratada/autorizante/permutado)."""

    name: str
    cnpj: str
    address: str
    email: str

    @classmethod
    def from_settings(cls, settings) -> "CompanyInfo":
        return cls(
            name=settings.company_name,
            cnpj=settings.company_cnpj,
            address=settings.company_address,
            email=settings.company_email,
        )


# -------------------------------------------------------------------
# Entrada dos formulários
# -------------------------------------------------------------------

class ServiceContractData(CamelModel):
    """Contrato de prestação de serviços."""

    service_type: ServiceType
    contract_title: str = Field(..., min_length=1)
    contractors: list[Contractor] = Field(
        ...,
        min_length=1,
        description="Adicione pelo menos um contratante.",
    )
    object: str = Field(..., min_length=1, description="Objeto do contrato")
    total_value: Decimal = Field(..., gt=0, description="Valor total do contrato")
    payment_method: PaymentMethod
    payment_signal_percentage: Optional[Decimal] = Field(
        None,
        gt=0,
        le=100,
        description="Percentual do sinal (padrão 50%)",
    )
    payment_method_other: Optional[str] = None
    delivery_deadline: str = Field(..., min_length=1)
    contractor_responsibilities: str = Field(..., min_length=1)
    client_responsibilities: str = Field(..., min_length=1)
    copyright: str = Field(..., min_length=1)
    rescission_notice_period: int = Field(..., ge=0, description="Aviso prévio em dias")
    rescission_fine: Decimal = Field(..., ge=0, le=100, description="Multa em % do valor total")
    general_dispositions: str = Field(..., min_length=1)
    warranty: Optional[str] = None
    specifications: Optional[str] = None
    jurisdiction: str = Field(..., min_length=1)
    signature_city: str = Field(..., min_length=1)
    signature_date: str = Field(..., min_length=1)


class AuthorizationTermData(CamelModel):
    """Termo de autorização de uso de material."""

    authorized_name: str = Field(..., min_length=1)
    authorized_cpf_cnpj: str = Field(..., min_length=1)
    authorized_address: str = Field(..., min_length=1)
    authorized_email: EmailStr
    project_name: str = Field(..., min_length=1)
    final_client: str = Field(..., min_length=1)
    execution_date: str = Field(..., min_length=1)
    authorized_links: str = Field(..., min_length=1)
    permissions_and_prohibitions: str = Field(..., min_length=1)
    fine_value: Decimal = Field(..., ge=0, description="Multa por descumprimento")
    general_dispositions: Optional[str] = None
    jurisdiction: str = Field(..., min_length=1)
    signature_city: str = Field(..., min_length=1)
    signature_date: str = Field(..., min_length=1)


class PermutationContractData(CamelModel):
    """Contrato de permuta."""

    permutants: list[Contractor] = Field(..., min_length=1)
    permutant_object: str = Field(..., min_length=1)
    permutant_object_value: Decimal = Field(..., ge=0)
    permuted_object: str = Field(..., min_length=1)
    conditions: str = Field(..., min_length=1)
    property_transfer: str = Field(..., min_length=1)
    general_dispositions: Optional[str] = None
    jurisdiction: str = Field(..., min_length=1)
    signature_city: str = Field(..., min_length=1)
    signature_date: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_permutants(self) -> "PermutationContractData":
        """CPF/CNPJ não pode se repetir entre os permutantes."""
        documents = [p.cpf_cnpj.strip() for p in self.permutants]
        if len(set(documents)) != len(documents):
            raise BusinessValidationError("CPF/CNPJ repetido entre os permutantes")
        return self


# -------------------------------------------------------------------
# Documento montado
# -------------------------------------------------------------------

class TextSegment(BaseModel):
    """Trecho de texto, opcionalmente em negrito."""

    text: str
    bold: bool = False


class Paragraph(BaseModel):
    """Parágrafo (ou item de lista, se bullet=True)."""

    segments: list[TextSegment] = Field(default_factory=list)
    bullet: bool = False

    @property
    def plain_text(self) -> str:
        return "".join(s.text for s in self.segments)


class ContractClause(CamelModel):
    """Cláusula numerada."""

    number: int
    title: str
    paragraphs: list[Paragraph] = Field(default_factory=list)

    @property
    def heading(self) -> str:
        return f"Cláusula {self.number} – {self.title.upper()}"


class PartyBlock(CamelModel):
    """Qualificação de uma das partes (ex. 'CONTRATANTES:')."""

    label: str
    paragraphs: list[Paragraph] = Field(default_factory=list)


class Signatory(CamelModel):
    """Linha de assinatura."""

    name: str
    role: Optional[str] = None


class ContractDocument(CamelModel):
    """Documento jurídico pronto para renderização."""

    kind: ContractKind
    title: str
    parties: list[PartyBlock] = Field(default_factory=list)
    preamble: Optional[str] = None
    clauses: list[ContractClause] = Field(default_factory=list)
    signature_place_date: str
    signatories: list[Signatory] = Field(default_factory=list)

    @property
    def pdf_filename(self) -> str:
        return f"{self.kind.value}_{self.title.lower().replace(' ', '_')}.pdf"
