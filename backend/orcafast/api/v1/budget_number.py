"""
Router FastAPI do contador de orçamentos
Projeto: OrçaFAST (Orçamentos e Contratos)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from orcafast.core.database import get_db
from orcafast.schemas.budget import BudgetNumberResponse
from orcafast.services.budget_number_service import BudgetNumberService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/budget-number",
    tags=["Número do Orçamento"],
)


def get_budget_number_service() -> BudgetNumberService:
    return BudgetNumberService()


@router.get(
    "",
    name="numero_orcamento_proximo",
    summary="Próximo número de orçamento",
    description="Consulta o próximo número disponível sem consumi-lo.",
    response_model=BudgetNumberResponse,
    status_code=status.HTTP_200_OK,
)
async def get_next_budget_number(
    db: AsyncSession = Depends(get_db),
    service: BudgetNumberService = Depends(get_budget_number_service),
) -> BudgetNumberResponse:
    next_number = await service.get_next_budget_number(db)
    # Cria a linha do contador na primeira consulta
    await db.commit()
    return BudgetNumberResponse(next_budget_number=next_number)


@router.post(
    "",
    name="numero_orcamento_reserva",
    summary="Reserva um número de orçamento",
    description="Retorna o número atual e avança o contador.",
    response_model=BudgetNumberResponse,
    status_code=status.HTTP_200_OK,
)
async def reserve_budget_number(
    db: AsyncSession = Depends(get_db),
    service: BudgetNumberService = Depends(get_budget_number_service),
) -> BudgetNumberResponse:
    """
    Reserva o próximo número de orçamento.

    Returns:
        BudgetNumberResponse: Número reservado (nextBudgetNumber)

    Raises:
        ConflictError: Erro do banco ao atualizar o contador
    """
    reserved = await service.reserve_next_budget_number(db)
    await db.commit()
    return BudgetNumberResponse(next_budget_number=reserved)
