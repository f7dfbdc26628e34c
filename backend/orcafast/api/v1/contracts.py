"""
Router FastAPI dos Contratos
Projeto: OrçaFAST (Orçamentos e Contratos)

Montagem e exportação em PDF do contrato de prestação de serviços,
do termo de autorização de uso de material e do contrato de permuta.
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from orcafast.api.v1.budgets import get_pdf_service
from orcafast.api.v1.responses import pdf_response
from orcafast.core.config import settings
from orcafast.schemas.contract import (
    AuthorizationTermData,
    CompanyInfo,
    ContractDocument,
    ContractKind,
    PermutationContractData,
    ServiceContractData,
)
from orcafast.services.contract_service import ContractService
from orcafast.services.pdf_service import PdfService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/contracts",
    tags=["Contratos"],
)


def get_contract_service() -> ContractService:
    """ContractService com os dados da empresa configurados."""
    return ContractService(CompanyInfo.from_settings(settings))


# -------------------------------------------------------------------
# Contrato de prestação de serviços
# -------------------------------------------------------------------

@router.post(
    "/service/preview",
    name="contrato_servico_preview",
    summary="Monta o contrato de prestação de serviços",
    response_model=ContractDocument,
    status_code=status.HTTP_200_OK,
)
async def preview_service_contract(
    data: ServiceContractData,
    service: ContractService = Depends(get_contract_service),
) -> ContractDocument:
    """
    Raises:
        BusinessValidationError: Forma de pagamento 'Outro' sem descrição
    """
    return service.build(ContractKind.SERVICE, data)


@router.post(
    "/service/pdf",
    name="contrato_servico_pdf",
    summary="Exporta o contrato de prestação de serviços em PDF",
    response_class=Response,
    status_code=status.HTTP_200_OK,
)
async def export_service_contract(
    data: ServiceContractData,
    service: ContractService = Depends(get_contract_service),
    pdf_service: PdfService = Depends(get_pdf_service),
) -> Response:
    document = service.build(ContractKind.SERVICE, data)
    return pdf_response(pdf_service.generate_contract_pdf(document), document.pdf_filename)


# -------------------------------------------------------------------
# Termo de autorização
# -------------------------------------------------------------------

@router.post(
    "/authorization/preview",
    name="termo_autorizacao_preview",
    summary="Monta o termo de autorização de uso de material",
    response_model=ContractDocument,
    status_code=status.HTTP_200_OK,
)
async def preview_authorization_term(
    data: AuthorizationTermData,
    service: ContractService = Depends(get_contract_service),
) -> ContractDocument:
    return service.build(ContractKind.AUTHORIZATION, data)


@router.post(
    "/authorization/pdf",
    name="termo_autorizacao_pdf",
    summary="Exporta o termo de autorização em PDF",
    response_class=Response,
    status_code=status.HTTP_200_OK,
)
async def export_authorization_term(
    data: AuthorizationTermData,
    service: ContractService = Depends(get_contract_service),
    pdf_service: PdfService = Depends(get_pdf_service),
) -> Response:
    document = service.build(ContractKind.AUTHORIZATION, data)
    return pdf_response(pdf_service.generate_contract_pdf(document), document.pdf_filename)


# -------------------------------------------------------------------
# Contrato de permuta
# -------------------------------------------------------------------

@router.post(
    "/permutation/preview",
    name="contrato_permuta_preview",
    summary="Monta o contrato de permuta",
    response_model=ContractDocument,
    status_code=status.HTTP_200_OK,
)
async def preview_permutation_contract(
    data: PermutationContractData,
    service: ContractService = Depends(get_contract_service),
) -> ContractDocument:
    return service.build(ContractKind.PERMUTATION, data)


@router.post(
    "/permutation/pdf",
    name="contrato_permuta_pdf",
    summary="Exporta o contrato de permuta em PDF",
    response_class=Response,
    status_code=status.HTTP_200_OK,
)
async def export_permutation_contract(
    data: PermutationContractData,
    service: ContractService = Depends(get_contract_service),
    pdf_service: PdfService = Depends(get_pdf_service),
) -> Response:
    document = service.build(ContractKind.PERMUTATION, data)
    return pdf_response(pdf_service.generate_contract_pdf(document), document.pdf_filename)
