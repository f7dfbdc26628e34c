"""
Service Layer do contador de orçamentos
Projeto: OrçaFAST (Orçamentos e Contratos)

Reserva números sequenciais de orçamento. O cálculo do orçamento
apenas formata o número recebido; a alocação acontece aqui.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from orcafast.core.config import settings
from orcafast.core.exceptions import ConflictError
from orcafast.models import BudgetCounter

logger = logging.getLogger(__name__)

COUNTER_ID = 1


class BudgetNumberService:
    """
    Contador global de números de orçamento (linha única).

    Na primeira utilização o contador é criado com
    settings.initial_budget_number.
    """

    def __init__(self, initial_number: int | None = None) -> None:
        self.initial_number = initial_number or settings.initial_budget_number

    async def get_next_budget_number(self, db: AsyncSession) -> int:
        """Próximo número disponível, sem consumi-lo."""
        counter = await self._get_counter(db, for_update=False)
        return counter.next_budget_number

    async def reserve_next_budget_number(self, db: AsyncSession) -> int:
        """
        Reserva o número atual e avança o contador.

        A linha do contador é bloqueada (SELECT ... FOR UPDATE) até o
        commit, serializando reservas concorrentes.

        Returns:
            int: Número reservado para o orçamento

        Raises:
            ConflictError: Erro do banco ao atualizar o contador
        """
        counter = await self._get_counter(db, for_update=True)
        reserved = counter.next_budget_number
        counter.next_budget_number = reserved + 1

        try:
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Erro SQLAlchemy ao reservar número: %s - %s", e.__class__.__name__, e)
            await db.rollback()
            raise ConflictError("Não foi possível reservar o número do orçamento")

        logger.info("Número de orçamento reservado: %s", reserved)
        return reserved

    async def _get_counter(self, db: AsyncSession, for_update: bool) -> BudgetCounter:
        """Busca a linha do contador, criando-a se ainda não existir."""
        query = select(BudgetCounter).where(BudgetCounter.id == COUNTER_ID)
        if for_update:
            query = query.with_for_update()
        result = await db.execute(query)
        counter = result.scalar_one_or_none()

        if counter is None:
            counter = BudgetCounter(id=COUNTER_ID, next_budget_number=self.initial_number)
            db.add(counter)
            await db.flush()
            logger.info("Contador de orçamentos criado em %s", self.initial_number)

        return counter
