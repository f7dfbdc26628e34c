"""
Modelo SQLAlchemy da entidade Client
Projeto: OrçaFAST (Orçamentos e Contratos)

Cadastro de clientes reutilizado em orçamentos e contratos.
"""


from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from orcafast.models import Base
from orcafast.models.mixins import TimestampMixin, UUIDMixin


class Client(Base, UUIDMixin, TimestampMixin):
    """
    Cadastro de clientes (pessoas físicas e jurídicas).

    Attributes:
        id: UUID primary key
        name: Nome ou razão social
        cpf_cnpj: CPF ou CNPJ (único)
        address: Endereço completo
        email: E-mail de contato
    """

    __tablename__ = "clients"

    name: Mapped[str] = mapped_column(
        String(150),
        nullable=False,
        index=True,
        doc="Nome ou razão social",
    )

    cpf_cnpj: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        unique=True,
        doc="CPF ou CNPJ, como digitado",
    )

    address: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Endereço completo",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="E-mail de contato",
    )

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, name='{self.name}')>"
