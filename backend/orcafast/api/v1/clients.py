"""
Router FastAPI da entidade Client
Projeto: OrçaFAST (Orçamentos e Contratos)

Endpoints do cadastro de clientes.
"""

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from orcafast.core.database import get_db
from orcafast.schemas.client import (
    ClientCreate,
    ClientList,
    ClientRead,
    ClientUpdate,
)
from orcafast.services.client_service import ClientService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/clients",
    tags=["Clientes"],
)


# -------------------------------------------------------------------
# Dependency Injection
# -------------------------------------------------------------------

def get_client_service() -> ClientService:
    """Instância do ClientService para os endpoints."""
    return ClientService()


# -------------------------------------------------------------------
# Endpoints
# -------------------------------------------------------------------

@router.get(
    "/",
    name="clientes_lista",
    summary="Lista clientes",
    description="Lista paginada dos clientes, com filtro de busca opcional.",
    response_model=ClientList,
    status_code=status.HTTP_200_OK,
)
async def get_clients(
    page: int = Query(1, ge=1, description="Número da página"),
    per_page: int = Query(50, ge=1, le=200, description="Itens por página"),
    search: Optional[str] = Query(None, description="Busca em nome, CPF/CNPJ e e-mail"),
    db: AsyncSession = Depends(get_db),
    service: ClientService = Depends(get_client_service),
) -> ClientList:
    """
    Lista paginada dos clientes.

    Args:
        page: Número da página (padrão 1)
        per_page: Itens por página (padrão 50, máx. 200)
        search: Termo de busca opcional
        db: Sessão do banco
        service: ClientService (injetado)

    Returns:
        ClientList: Lista paginada com metadados
    """
    clients, total = await service.get_all(db=db, page=page, per_page=per_page, search=search)

    return ClientList(
        items=[ClientRead.model_validate(c) for c in clients],
        total=total,
        page=page,
        per_page=per_page,
    )


@router.get(
    "/{client_id}",
    name="cliente_detalhe",
    summary="Detalhe do cliente",
    response_model=ClientRead,
    status_code=status.HTTP_200_OK,
)
async def get_client(
    client_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    service: ClientService = Depends(get_client_service),
) -> ClientRead:
    """
    Raises:
        NotFoundError: Se o cliente não existe
    """
    client = await service.get_by_id(db=db, client_id=client_id)
    return ClientRead.model_validate(client)


@router.post(
    "/",
    name="cliente_cria",
    summary="Cadastra cliente",
    response_model=ClientRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_client(
    client_data: ClientCreate,
    db: AsyncSession = Depends(get_db),
    service: ClientService = Depends(get_client_service),
) -> ClientRead:
    """
    Cadastra um novo cliente.

    Raises:
        DuplicateError: CPF/CNPJ já cadastrado
    """
    client = await service.create(db=db, client_data=client_data)
    await db.commit()
    return ClientRead.model_validate(client)


@router.put(
    "/{client_id}",
    name="cliente_atualiza",
    summary="Atualiza cliente",
    response_model=ClientRead,
    status_code=status.HTTP_200_OK,
)
async def update_client(
    client_id: uuid.UUID,
    client_data: ClientUpdate,
    db: AsyncSession = Depends(get_db),
    service: ClientService = Depends(get_client_service),
) -> ClientRead:
    """
    Atualiza os campos enviados de um cliente.

    Raises:
        NotFoundError: Se o cliente não existe
        DuplicateError: CPF/CNPJ já pertence a outro cliente
    """
    client = await service.update(db=db, client_id=client_id, client_data=client_data)
    await db.commit()
    return ClientRead.model_validate(client)


@router.delete(
    "/{client_id}",
    name="cliente_remove",
    summary="Remove cliente",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_client(
    client_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    service: ClientService = Depends(get_client_service),
) -> None:
    await service.delete(db=db, client_id=client_id)
    await db.commit()
