"""
Schemas Pydantic dos presets de item
Projeto: OrçaFAST (Orçamentos e Contratos)
"""

import uuid
from decimal import Decimal
from typing import Optional

from pydantic import Field

from orcafast.schemas.budget import CamelModel


class PresetBase(CamelModel):
    """Descrição e preço sugeridos para uma linha do orçamento."""

    description: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Descrição é obrigatória.",
    )
    unit_price: Decimal = Field(
        ...,
        ge=0,
        description="Preço unitário não pode ser negativo.",
    )


class PresetCreate(PresetBase):
    pass


class PresetUpdate(CamelModel):
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    unit_price: Optional[Decimal] = Field(None, ge=0)


class PresetRead(PresetBase):
    id: uuid.UUID
