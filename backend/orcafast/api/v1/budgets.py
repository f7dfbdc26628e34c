"""
Router FastAPI dos Orçamentos
Projeto: OrçaFAST (Orçamentos e Contratos)

Cálculo da pré-visualização, valores iniciais do formulário e exportação em PDF.
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import HTMLResponse

from orcafast.api.v1.responses import pdf_response
from orcafast.core.config import settings
from orcafast.core.exceptions import BusinessValidationError
from orcafast.schemas.budget import (
    BudgetDefaults,
    BudgetDraft,
    BudgetFeatures,
    BudgetInput,
    BudgetPreview,
)
from orcafast.services.budget_calculator import compute_budget_preview
from orcafast.services.pdf_service import PdfService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/budgets",
    tags=["Orçamentos"],
)


# -------------------------------------------------------------------
# Dependency Injection
# -------------------------------------------------------------------

def get_budget_features() -> BudgetFeatures:
    """Campos opcionais do formulário, conforme a configuração."""
    return BudgetFeatures.from_settings(settings)


def get_pdf_service(features: BudgetFeatures = Depends(get_budget_features)) -> PdfService:
    return PdfService(features=features)


# -------------------------------------------------------------------
# Endpoints
# -------------------------------------------------------------------

@router.get(
    "/defaults",
    name="orcamento_padroes",
    summary="Valores iniciais do formulário",
    description="Cabeçalho da empresa, condições sugeridas e campos opcionais ativos.",
    response_model=BudgetDefaults,
    status_code=status.HTTP_200_OK,
)
async def get_budget_defaults() -> BudgetDefaults:
    return BudgetDefaults.from_settings(settings)


@router.post(
    "/preview",
    name="orcamento_preview",
    summary="Pré-visualização do orçamento",
    description="Calcula totais, descontos e o número formatado do orçamento.",
    response_model=BudgetPreview,
    status_code=status.HTTP_200_OK,
)
async def preview_budget(
    budget: BudgetDraft,
    features: BudgetFeatures = Depends(get_budget_features),
) -> BudgetPreview:
    """
    Calcula o orçamento sem consumir número.

    Args:
        budget: Formulário em edição (linhas em branco são ignoradas)
        features: Campos opcionais ativos (injetado)

    Returns:
        BudgetPreview: Modelo derivado (itens, subtotal, desconto, total)
    """
    return compute_budget_preview(budget, features)


@router.post(
    "/preview/html",
    name="orcamento_preview_html",
    summary="Pré-visualização em HTML",
    description="Renderiza o orçamento com o mesmo template usado no PDF.",
    response_class=HTMLResponse,
    status_code=status.HTTP_200_OK,
)
async def preview_budget_html(
    budget: BudgetDraft,
    features: BudgetFeatures = Depends(get_budget_features),
    pdf_service: PdfService = Depends(get_pdf_service),
) -> HTMLResponse:
    preview = compute_budget_preview(budget, features)
    return HTMLResponse(pdf_service.render_budget_html(preview))


@router.post(
    "/pdf",
    name="orcamento_pdf",
    summary="Exporta o orçamento em PDF",
    description="Gera o PDF de um orçamento com número já reservado.",
    response_class=Response,
    status_code=status.HTTP_200_OK,
)
async def export_budget_pdf(
    budget: BudgetInput,
    features: BudgetFeatures = Depends(get_budget_features),
    pdf_service: PdfService = Depends(get_pdf_service),
) -> Response:
    """
    Exporta o orçamento em PDF.

    O número deve ter sido reservado antes (POST /budget-number).

    Raises:
        BusinessValidationError: Orçamento sem número reservado
    """
    if budget.budget_number < 1:
        raise BusinessValidationError(
            "Reserve um número de orçamento antes de exportar o PDF"
        )

    preview = compute_budget_preview(budget, features)
    pdf_bytes = pdf_service.generate_budget_pdf(preview)
    logger.info("Orçamento %s exportado para %s", preview.budget_number, preview.client_name)
    return pdf_response(pdf_bytes, preview.pdf_filename)
