"""
Schemas Pydantic
Projeto: OrçaFAST (Orçamentos e Contratos)

Export centralizado dos schemas da API.
"""

from orcafast.schemas.budget import (
    BudgetDefaults,
    BudgetDraft,
    BudgetFeatures,
    BudgetInput,
    BudgetItem,
    BudgetItemInput,
    BudgetItemDraft,
    BudgetNumberResponse,
    BudgetPreview,
    DiscountType,
)
from orcafast.schemas.client import ClientCreate, ClientList, ClientRead, ClientUpdate
from orcafast.schemas.contract import (
    AuthorizationTermData,
    CompanyInfo,
    ContractDocument,
    ContractKind,
    PermutationContractData,
    ServiceContractData,
)
from orcafast.schemas.preset import PresetCreate, PresetRead, PresetUpdate

__all__ = [
    "BudgetDefaults",
    "BudgetDraft",
    "BudgetFeatures",
    "BudgetInput",
    "BudgetItem",
    "BudgetItemInput",
    "BudgetItemDraft",
    "BudgetNumberResponse",
    "BudgetPreview",
    "DiscountType",
    "ClientCreate",
    "ClientList",
    "ClientRead",
    "ClientUpdate",
    "AuthorizationTermData",
    "CompanyInfo",
    "ContractDocument",
    "ContractKind",
    "PermutationContractData",
    "ServiceContractData",
    "PresetCreate",
    "PresetRead",
    "PresetUpdate",
]
