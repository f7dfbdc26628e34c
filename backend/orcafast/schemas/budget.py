"""
Schemas Pydantic do Orçamento
Projeto: OrçaFAST (Orçamentos e Contratos)

Contém:
- Enum: DiscountType
- BudgetFeatures: conjunto de funcionalidades opcionais do formulário
- Schemas de entrada (BudgetItemInput, BudgetInput)
- Schemas derivados (BudgetItem, BudgetPreview)

Os schemas de entrada fazem a validação do formulário; os derivados
são apenas o resultado do cálculo e não impõem restrições.
"""

import re
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class DiscountType(str, Enum):
    """Forma de expressar um desconto."""
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class CamelModel(BaseModel):
    """Base com aliases camelCase (formato do frontend), aceitando também snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# -------------------------------------------------------------------
# Funcionalidades do formulário
# -------------------------------------------------------------------

class BudgetFeatures(BaseModel):
    """
    Campos opcionais ativos no formulário de orçamento.

    Com tudo ativo (padrão) o cálculo é o completo. Desativar um campo
    reproduz as variantes mais simples do formulário:
    - units: unidade de medida exibida nas linhas
    - item_discount_type: desconto percentual por item (senão tudo é valor fixo)
    - general_discount: desconto geral sobre o subtotal
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    units: bool = True
    item_discount_type: bool = True
    general_discount: bool = True

    @classmethod
    def from_settings(cls, settings) -> "BudgetFeatures":
        return cls(
            units=settings.feature_units,
            item_discount_type=settings.feature_item_discount_type,
            general_discount=settings.feature_general_discount,
        )


# -------------------------------------------------------------------
# Entrada (formulário)
# -------------------------------------------------------------------

class BudgetItemInput(CamelModel):
    """Linha do orçamento como preenchida no formulário."""

    description: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="Descrição do item",
    )
    unit: Optional[str] = Field(
        None,
        max_length=20,
        description="Unidade de medida (ex. Un, h, m²)",
    )
    quantity: Decimal = Field(
        ...,
        gt=0,
        description="Quantidade",
    )
    unit_price: Decimal = Field(
        ...,
        ge=0,
        description="Preço unitário",
    )
    discount: Optional[Decimal] = Field(
        Decimal("0"),
        ge=0,
        description="Desconto do item (valor ou percentual, conforme discount_type)",
    )
    discount_type: DiscountType = Field(
        DiscountType.FIXED,
        description="percentage | fixed",
    )

    @field_validator("discount_type", mode="before")
    @classmethod
    def default_discount_type(cls, v):
        """Campo omitido ou nulo vale 'fixed'."""
        return DiscountType.FIXED if v in (None, "") else v


class BudgetInput(CamelModel):
    """Dados completos do formulário de orçamento."""

    company_name: str = Field(
        ...,
        min_length=1,
        description="Nome da empresa emissora",
    )
    logo_url: Optional[str] = Field(None, description="URL do logo")
    slogan: Optional[str] = Field(None, description="Slogan da empresa")
    client_name: str = Field(
        ...,
        min_length=1,
        description="Nome do cliente",
    )
    client_address: Optional[str] = Field(None, description="Endereço do cliente")
    budget_number: int = Field(
        0,
        ge=0,
        description="Número reservado do orçamento (0 = ainda não reservado)",
    )
    budget_date: str = Field(
        ...,
        min_length=1,
        description="Data do orçamento, repassada sem alteração (ex. 19/10/2026)",
    )
    items: list[BudgetItemInput] = Field(
        ...,
        min_length=1,
        description="Linhas do orçamento",
    )
    commercial_conditions: Optional[str] = Field(None, description="Condições comerciais")
    payment_conditions: Optional[str] = Field(None, description="Condições de pagamento")
    observations: Optional[str] = Field(None, description="Observações")
    general_discount: Optional[Decimal] = Field(
        Decimal("0"),
        ge=0,
        description="Desconto geral (valor ou percentual)",
    )
    general_discount_type: DiscountType = Field(
        DiscountType.FIXED,
        description="percentage | fixed",
    )
    is_drone_feature_enabled: bool = Field(
        False,
        description="Marca o orçamento como 'com Drone' (apenas visual)",
    )

    @field_validator("general_discount_type", mode="before")
    @classmethod
    def default_general_discount_type(cls, v):
        return DiscountType.FIXED if v in (None, "") else v


class BudgetItemDraft(CamelModel):
    """
    Linha do formulário em edição.

    Aceita linhas incompletas (descrição vazia, quantidade zero);
    linhas totalmente em branco são ignoradas no cálculo.
    """

    description: str = Field("", max_length=1000)
    unit: Optional[str] = Field(None, max_length=20)
    quantity: Decimal = Field(Decimal("0"), ge=0)
    unit_price: Decimal = Field(Decimal("0"), ge=0)
    discount: Optional[Decimal] = Field(Decimal("0"), ge=0)
    discount_type: DiscountType = DiscountType.FIXED

    @field_validator("description", mode="before")
    @classmethod
    def empty_description(cls, v):
        return "" if v is None else v

    @field_validator("quantity", "unit_price", mode="before")
    @classmethod
    def empty_number(cls, v):
        return Decimal("0") if v in (None, "") else v

    @field_validator("discount_type", mode="before")
    @classmethod
    def default_discount_type(cls, v):
        return DiscountType.FIXED if v in (None, "") else v


class BudgetDraft(CamelModel):
    """
    Formulário de orçamento em edição, usado na pré-visualização.

    Recalculado a cada alteração: campos de texto podem estar vazios.
    A exportação em PDF continua exigindo um BudgetInput completo.
    """

    company_name: str = ""
    logo_url: Optional[str] = None
    slogan: Optional[str] = None
    client_name: str = ""
    client_address: Optional[str] = None
    budget_number: int = Field(0, ge=0)
    budget_date: str = ""
    items: list[BudgetItemDraft] = Field(default_factory=list)
    commercial_conditions: Optional[str] = None
    payment_conditions: Optional[str] = None
    observations: Optional[str] = None
    general_discount: Optional[Decimal] = Field(Decimal("0"), ge=0)
    general_discount_type: DiscountType = DiscountType.FIXED
    is_drone_feature_enabled: bool = False

    @field_validator("company_name", "client_name", "budget_date", mode="before")
    @classmethod
    def empty_text(cls, v):
        return "" if v is None else v

    @field_validator("budget_number", mode="before")
    @classmethod
    def empty_budget_number(cls, v):
        return 0 if v in (None, "") else v

    @field_validator("general_discount_type", mode="before")
    @classmethod
    def default_general_discount_type(cls, v):
        return DiscountType.FIXED if v in (None, "") else v


# -------------------------------------------------------------------
# Resultado do cálculo
# -------------------------------------------------------------------

class BudgetItem(CamelModel):
    """Linha do orçamento com desconto e total calculados."""

    description: str = ""
    unit: Optional[str] = None
    quantity: Decimal = Decimal("0")
    unit_price: Decimal = Decimal("0")
    discount: Decimal = Decimal("0")
    discount_type: DiscountType = DiscountType.FIXED
    item_discount_value: Decimal = Field(
        Decimal("0"),
        description="Valor do desconto aplicado à linha",
    )
    item_total: Decimal = Field(
        Decimal("0"),
        description="quantity * unit_price - item_discount_value (pode ser negativo)",
    )


class BudgetPreview(CamelModel):
    """Modelo pronto para pré-visualização, PDF e persistência do número."""

    company_name: str = ""
    logo_url: Optional[str] = None
    slogan: Optional[str] = None
    is_drone_feature_enabled: bool = False
    budget_number: str = "0000"
    budget_date: str = ""
    client_name: str = ""
    client_address: Optional[str] = None
    items: list[BudgetItem] = Field(default_factory=list)
    subtotal: Decimal = Decimal("0")
    general_discount_type: DiscountType = DiscountType.FIXED
    general_discount_value: Decimal = Decimal("0")
    general_discount_percentage: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")
    commercial_conditions: Optional[str] = None
    payment_conditions: Optional[str] = None
    observations: Optional[str] = None

    @property
    def is_preview(self) -> bool:
        """True enquanto nenhum número foi reservado."""
        return self.budget_number == "0000"

    @property
    def pdf_filename(self) -> str:
        """Nome sugerido do arquivo PDF."""
        client = re.sub(r"\s", "_", self.client_name)
        return f"orcamento_{self.budget_number}_{client}.pdf"


class BudgetNumberResponse(CamelModel):
    """Resposta dos endpoints do contador de orçamentos."""

    next_budget_number: int = Field(..., ge=1)


class BudgetDefaults(CamelModel):
    """Valores iniciais do formulário de orçamento (cabeçalho e condições)."""

    company_name: str
    logo_url: Optional[str] = None
    slogan: Optional[str] = None
    commercial_conditions: Optional[str] = None
    payment_conditions: Optional[str] = None
    features: BudgetFeatures

    @classmethod
    def from_settings(cls, settings) -> "BudgetDefaults":
        return cls(
            company_name=settings.budget_company_name,
            logo_url=settings.budget_logo_url,
            slogan=settings.budget_slogan,
            commercial_conditions=settings.default_commercial_conditions,
            payment_conditions=settings.default_payment_conditions,
            features=BudgetFeatures.from_settings(settings),
        )
