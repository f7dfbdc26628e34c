"""
Schemas Pydantic da entidade Client
Projeto: OrçaFAST (Orçamentos e Contratos)
"""
# Define os schemas de validação e serialização da API de clientes.

import datetime
import re
import uuid
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from orcafast.schemas.budget import CamelModel


# -------------------------------------------------------------------
# Normalização
# -------------------------------------------------------------------

def normalize_cpf_cnpj(value: Optional[str]) -> Optional[str]:
    """
    Valida o CPF/CNPJ pela quantidade de dígitos (11 ou 14).

    A pontuação digitada é mantida; apenas espaços nas pontas são removidos.

    Raises:
        ValueError: Se não tiver 11 (CPF) ou 14 (CNPJ) dígitos
    """
    if value is None:
        return None
    normalized = value.strip()
    digits = re.sub(r"\D", "", normalized)
    if len(digits) not in (11, 14):
        raise ValueError("CPF deve ter 11 dígitos e CNPJ 14 dígitos")
    return normalized


class ClientBase(CamelModel):
    """Campos comuns do cadastro de clientes."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=150,
        description="Nome é obrigatório.",
    )
    cpf_cnpj: str = Field(
        ...,
        min_length=1,
        max_length=20,
        description="CPF/CNPJ é obrigatório.",
    )
    address: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Endereço é obrigatório.",
    )
    email: EmailStr = Field(..., description="E-mail do cliente")

    @field_validator("name", "address", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("cpf_cnpj")
    @classmethod
    def validate_cpf_cnpj(cls, v: str) -> str:
        return normalize_cpf_cnpj(v)


class ClientCreate(ClientBase):
    """Criação de cliente."""
    pass


class ClientUpdate(CamelModel):
    """
    Atualização parcial de cliente.

    Todos os campos são opcionais; apenas os enviados são aplicados.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=150)
    cpf_cnpj: Optional[str] = Field(None, min_length=1, max_length=20)
    address: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None

    @field_validator("name", "cpf_cnpj", "address", "email", mode="before")
    @classmethod
    def reject_null(cls, v):
        """Campo enviado não pode ser nulo; omita-o para mantê-lo."""
        if v is None:
            raise ValueError("Campo obrigatório não pode ser nulo")
        return v.strip() if isinstance(v, str) else v

    @field_validator("cpf_cnpj")
    @classmethod
    def validate_cpf_cnpj(cls, v: Optional[str]) -> Optional[str]:
        return normalize_cpf_cnpj(v)


class ClientRead(ClientBase):
    """Leitura de cliente."""

    id: uuid.UUID
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None


class ClientList(CamelModel):
    """Lista paginada de clientes."""

    items: list[ClientRead] = Field(default_factory=list)
    total: int = Field(..., ge=0, description="Total de clientes")
    page: int = Field(..., ge=1, description="Página atual")
    per_page: int = Field(..., ge=1, description="Itens por página")
