"""
Modelos SQLAlchemy
Projeto: OrçaFAST (Orçamentos e Contratos)

Import centralizado de todos os modelos.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Classe base de todos os modelos SQLAlchemy."""
    pass


from orcafast.models.client import Client
from orcafast.models.preset import ItemPreset
from orcafast.models.budget_counter import BudgetCounter

__all__ = [
    "Base",
    "Client",
    "ItemPreset",
    "BudgetCounter",
]
