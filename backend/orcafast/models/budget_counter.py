"""
Modelo SQLAlchemy do contador de orçamentos
Projeto: OrçaFAST (Orçamentos e Contratos)
"""


from __future__ import annotations

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from orcafast.models import Base


class BudgetCounter(Base):
    """
    Contador global dos números de orçamento (uma única linha, id=1).

    Attributes:
        next_budget_number: Próximo número a ser reservado
    """

    __tablename__ = "budget_counter"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=1)

    next_budget_number: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        doc="Próximo número de orçamento disponível",
    )

    def __repr__(self) -> str:
        return f"<BudgetCounter(next_budget_number={self.next_budget_number})>"
