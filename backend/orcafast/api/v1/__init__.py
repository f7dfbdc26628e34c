"""
API v1 Routes
Projeto: OrçaFAST (Orçamentos e Contratos)

Router da versão 1 da API.
"""

from fastapi import APIRouter

from orcafast.api.v1 import budget_number, budgets, clients, contracts, presets

# Router agregado da v1
api_v1_router = APIRouter(prefix="/api/v1")

# Routers dos módulos
api_v1_router.include_router(budgets.router)
api_v1_router.include_router(budget_number.router)
api_v1_router.include_router(clients.router)
api_v1_router.include_router(presets.router)
api_v1_router.include_router(contracts.router)

# Exportação
__all__ = ["api_v1_router"]
