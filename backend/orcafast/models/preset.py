"""
Modelo SQLAlchemy dos presets de item
Projeto: OrçaFAST (Orçamentos e Contratos)
"""


from __future__ import annotations

from decimal import Decimal

from sqlalchemy import CheckConstraint, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from orcafast.models import Base
from orcafast.models.mixins import TimestampMixin, UUIDMixin


class ItemPreset(Base, UUIDMixin, TimestampMixin):
    """
    Descrição e preço unitário reutilizáveis nas linhas do orçamento.

    Attributes:
        description: Texto copiado para a descrição do item
        unit_price: Preço unitário sugerido
    """

    __tablename__ = "item_presets"
    __table_args__ = (
        CheckConstraint("unit_price >= 0", name="ck_item_presets_unit_price"),
    )

    description: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        doc="Descrição do serviço/produto",
    )

    unit_price: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
        default=Decimal("0"),
        doc="Preço unitário sugerido",
    )

    def __repr__(self) -> str:
        return f"<ItemPreset(id={self.id}, description='{self.description}')>"
