"""
Cálculo do Orçamento
Projeto: OrçaFAST (Orçamentos e Contratos)

Transforma os dados do formulário (BudgetInput) no modelo derivado
(BudgetPreview) consumido pela pré-visualização e pelo PDF:
- total e desconto de cada linha
- subtotal, desconto geral e total final
- número do orçamento formatado

Funções puras: sem I/O, sem estado, sem dependência de data/hora.
Nenhum arredondamento é aplicado aqui; o arredondamento a 2 casas
acontece só na formatação monetária.
"""

import logging
from decimal import Decimal
from typing import Any

from orcafast.schemas.budget import (
    BudgetFeatures,
    BudgetItem,
    BudgetPreview,
    DiscountType,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")

DEFAULT_FEATURES = BudgetFeatures()


def _get(obj: Any, name: str) -> Any:
    """Lê um campo de um schema ou de um dict cru do formulário."""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def to_decimal(value: Any) -> Decimal:
    """Converte o valor para Decimal; ausente ou vazio vale 0."""
    if value is None or value == "":
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _discount_type(value: Any) -> DiscountType:
    if value in (None, ""):
        return DiscountType.FIXED
    return DiscountType(value)


def discount_value(base: Decimal, discount: Decimal, discount_type: DiscountType) -> Decimal:
    """
    Valor do desconto sobre uma base (bruto do item ou subtotal).

    Percentual: base * discount / 100. Fixo: o próprio discount.
    O desconto não é limitado à base.
    """
    if discount_type == DiscountType.PERCENTAGE:
        return base * (discount / HUNDRED)
    return discount


def format_budget_number(budget_number: Any) -> str:
    """
    Número do orçamento com zeros à esquerda (mínimo 4 caracteres).

    Valores com mais de 4 dígitos não são truncados: 12345 -> "12345".
    """
    return str(budget_number if budget_number is not None else 0).rjust(4, "0")


def is_blank_item(item: Any) -> bool:
    """Linha vazia: sem descrição, quantidade zero e preço zero."""
    return (
        not _get(item, "description")
        and to_decimal(_get(item, "quantity")) == ZERO
        and to_decimal(_get(item, "unit_price")) == ZERO
    )


def compute_line_item(
    item: Any,
    features: BudgetFeatures = DEFAULT_FEATURES,
) -> BudgetItem:
    """
    Calcula desconto e total de uma linha do orçamento.

    Args:
        item: Linha do formulário (BudgetItemInput ou dict)
        features: Campos opcionais ativos

    Returns:
        BudgetItem: Linha com item_discount_value e item_total
    """
    quantity = to_decimal(_get(item, "quantity"))
    unit_price = to_decimal(_get(item, "unit_price"))
    discount = to_decimal(_get(item, "discount"))
    discount_type = _discount_type(_get(item, "discount_type"))
    if not features.item_discount_type:
        discount_type = DiscountType.FIXED

    gross = quantity * unit_price
    item_discount = discount_value(gross, discount, discount_type)

    return BudgetItem(
        description=_get(item, "description") or "",
        unit=_get(item, "unit") if features.units else None,
        quantity=quantity,
        unit_price=unit_price,
        discount=discount,
        discount_type=discount_type,
        item_discount_value=item_discount,
        item_total=gross - item_discount,
    )


def compute_budget_preview(
    budget: Any,
    features: BudgetFeatures = DEFAULT_FEATURES,
) -> BudgetPreview:
    """
    Gera o modelo de pré-visualização a partir do formulário.

    Passos:
    1. Calcula cada linha (mantendo a ordem, ignorando linhas vazias)
    2. subtotal = soma dos item_total
    3. Desconto geral com a mesma regra das linhas, sobre o subtotal
    4. Percentual equivalente do desconto geral (0 se subtotal <= 0)
    5. total = subtotal - desconto geral
    6. Número do orçamento com zeros à esquerda

    Args:
        budget: BudgetInput, BudgetDraft ou dict equivalente
        features: Campos opcionais ativos

    Returns:
        BudgetPreview: Modelo derivado completo
    """
    items = [
        compute_line_item(item, features)
        for item in (_get(budget, "items") or [])
        if not is_blank_item(item)
    ]

    subtotal = sum((item.item_total for item in items), ZERO)

    general_discount_type = _discount_type(_get(budget, "general_discount_type"))
    if features.general_discount:
        general_discount = to_decimal(_get(budget, "general_discount"))
    else:
        general_discount = ZERO

    general_value = discount_value(subtotal, general_discount, general_discount_type)
    general_percentage = _general_discount_percentage(
        subtotal, general_discount, general_value, general_discount_type
    )

    logger.debug(
        "Orçamento calculado: %s itens, subtotal=%s, desconto geral=%s",
        len(items), subtotal, general_value,
    )

    return BudgetPreview(
        company_name=_get(budget, "company_name") or "",
        logo_url=_get(budget, "logo_url"),
        slogan=_get(budget, "slogan"),
        is_drone_feature_enabled=bool(_get(budget, "is_drone_feature_enabled")),
        budget_number=format_budget_number(_get(budget, "budget_number")),
        budget_date=_get(budget, "budget_date") or "",
        client_name=_get(budget, "client_name") or "",
        client_address=_get(budget, "client_address"),
        items=items,
        subtotal=subtotal,
        general_discount_type=general_discount_type,
        general_discount_value=general_value,
        general_discount_percentage=general_percentage,
        total_amount=subtotal - general_value,
        commercial_conditions=_get(budget, "commercial_conditions"),
        payment_conditions=_get(budget, "payment_conditions"),
        observations=_get(budget, "observations"),
    )


def _general_discount_percentage(
    subtotal: Decimal,
    general_discount: Decimal,
    general_value: Decimal,
    general_discount_type: DiscountType,
) -> Decimal:
    if general_discount_type == DiscountType.PERCENTAGE:
        return general_discount
    if subtotal > ZERO:
        return general_value / subtotal * HUNDRED
    return ZERO

