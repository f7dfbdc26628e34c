"""
Service Layer da entidade Client
Projeto: OrçaFAST (Orçamentos e Contratos)

Cadastro de clientes reutilizado no preenchimento de orçamentos e
contratos (nome, CPF/CNPJ, endereço, e-mail).
"""

import logging
import uuid
from typing import Optional

from sqlalchemy import func, select, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from orcafast.core.exceptions import ConflictError, DuplicateError, NotFoundError
from orcafast.models import Client
from orcafast.schemas.client import ClientCreate, ClientUpdate

logger = logging.getLogger(__name__)


class ClientService:
    """
    Operações CRUD sobre o cadastro de clientes.

    Métodos assíncronos, sem dependência do FastAPI. O commit fica
    a cargo do chamador (router).
    """

    async def get_all(
        self,
        db: AsyncSession,
        page: int = 1,
        per_page: int = 50,
        search: Optional[str] = None,
    ) -> tuple[list[Client], int]:
        """
        Lista paginada dos clientes, em ordem alfabética.

        Args:
            db: Sessão do banco
            page: Número da página (a partir de 1)
            per_page: Itens por página
            search: Termo buscado em nome, CPF/CNPJ e e-mail

        Returns:
            Tupla (clientes, total)
        """
        conditions = []
        if search:
            search_term = f"%{search}%"
            conditions.append(or_(
                Client.name.ilike(search_term),
                Client.cpf_cnpj.ilike(search_term),
                Client.email.ilike(search_term),
            ))

        query = select(Client).order_by(Client.name.asc())
        if conditions:
            query = query.where(*conditions)
        query = query.offset((page - 1) * per_page).limit(per_page)

        result = await db.execute(query)
        clients = list(result.scalars().all())

        count_query = select(func.count()).select_from(Client)
        if conditions:
            count_query = count_query.where(*conditions)
        count_result = await db.execute(count_query)
        total = count_result.scalar() or 0

        logger.info(
            "Recuperados %s clientes de %s (página %s)",
            len(clients), total, page,
        )
        return clients, total

    async def get_by_id(self, db: AsyncSession, client_id: uuid.UUID) -> Client:
        """
        Busca um cliente pelo ID.

        Raises:
            NotFoundError: Se o cliente não existe
        """
        result = await db.execute(select(Client).where(Client.id == client_id))
        client = result.scalar_one_or_none()

        if client is None:
            logger.warning("Cliente não encontrado: %s", client_id)
            raise NotFoundError(f"Cliente com ID {client_id} não encontrado")

        return client

    async def create(self, db: AsyncSession, client_data: ClientCreate) -> Client:
        """
        Cadastra um novo cliente.

        Verifica o CPF/CNPJ antes de inserir.

        Raises:
            DuplicateError: CPF/CNPJ já cadastrado
            ConflictError: Erro inesperado do banco
        """
        existing = await self._check_cpf_cnpj_exists(db, client_data.cpf_cnpj)
        if existing:
            logger.warning(
                "Tentativa de cadastrar CPF/CNPJ duplicado: %s (existente: %s)",
                client_data.cpf_cnpj, existing.id,
            )
            raise DuplicateError(
                f"CPF/CNPJ '{client_data.cpf_cnpj}' já cadastrado para outro cliente"
            )

        client = Client(**client_data.model_dump())

        try:
            db.add(client)
            await db.flush()
            await db.refresh(client)
            logger.info("Cliente cadastrado: %s - %s", client.id, client.name)
            return client

        except IntegrityError as e:
            logger.error("IntegrityError ao cadastrar cliente: %s", e.orig)
            await db.rollback()
            if "cpf_cnpj" in str(e.orig).lower():
                raise DuplicateError("CPF/CNPJ já cadastrado para outro cliente")
            raise ConflictError("Erro ao cadastrar o cliente")

        except SQLAlchemyError as e:
            logger.error("Erro SQLAlchemy ao cadastrar cliente: %s - %s", e.__class__.__name__, e)
            await db.rollback()
            raise ConflictError("Erro do banco de dados ao cadastrar o cliente")

    async def update(
        self,
        db: AsyncSession,
        client_id: uuid.UUID,
        client_data: ClientUpdate,
    ) -> Client:
        """
        Atualiza os campos enviados de um cliente.

        Raises:
            NotFoundError: Se o cliente não existe
            DuplicateError: Novo CPF/CNPJ já pertence a outro cliente
            ConflictError: Erro inesperado do banco
        """
        client = await self.get_by_id(db, client_id)
        update_data = client_data.model_dump(exclude_unset=True)

        new_cpf_cnpj = update_data.get("cpf_cnpj")
        if new_cpf_cnpj and new_cpf_cnpj != client.cpf_cnpj:
            existing = await self._check_cpf_cnpj_exists(db, new_cpf_cnpj, exclude_id=client_id)
            if existing:
                logger.warning(
                    "Tentativa de atualizar cliente %s com CPF/CNPJ duplicado: %s",
                    client_id, new_cpf_cnpj,
                )
                raise DuplicateError(
                    f"CPF/CNPJ '{new_cpf_cnpj}' já cadastrado para outro cliente"
                )

        for field, value in update_data.items():
            setattr(client, field, value)

        try:
            await db.flush()
            await db.refresh(client)
            logger.info("Cliente atualizado: %s - %s", client.id, client.name)
            return client

        except IntegrityError as e:
            logger.error("IntegrityError ao atualizar cliente: %s", e.orig)
            await db.rollback()
            if "cpf_cnpj" in str(e.orig).lower():
                raise DuplicateError("CPF/CNPJ já cadastrado para outro cliente")
            raise ConflictError("Erro ao atualizar o cliente")

        except SQLAlchemyError as e:
            logger.error("Erro SQLAlchemy ao atualizar cliente: %s - %s", e.__class__.__name__, e)
            await db.rollback()
            raise ConflictError("Erro do banco de dados ao atualizar o cliente")

    async def delete(self, db: AsyncSession, client_id: uuid.UUID) -> None:
        """
        Remove um cliente do cadastro.

        Raises:
            NotFoundError: Se o cliente não existe
            ConflictError: Erro inesperado do banco
        """
        client = await self.get_by_id(db, client_id)

        try:
            await db.delete(client)
            await db.flush()
            logger.info("Cliente removido: %s - %s", client.id, client.name)

        except SQLAlchemyError as e:
            logger.error("Erro SQLAlchemy ao remover cliente: %s - %s", e.__class__.__name__, e)
            await db.rollback()
            raise ConflictError("Erro do banco de dados ao remover o cliente")

    # ----------------------------------------------------------------
    # Métodos auxiliares
    # ----------------------------------------------------------------

    async def _check_cpf_cnpj_exists(
        self,
        db: AsyncSession,
        cpf_cnpj: str,
        exclude_id: Optional[uuid.UUID] = None,
    ) -> Optional[Client]:
        """Retorna o cliente que já usa o CPF/CNPJ, se houver."""
        query = select(Client).where(Client.cpf_cnpj == cpf_cnpj)
        if exclude_id:
            query = query.where(Client.id != exclude_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()
