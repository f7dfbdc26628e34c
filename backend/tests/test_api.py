"""
Testes dos endpoints da API v1 (FastAPI TestClient).

O banco é o AsyncSession mock do conftest; os services com I/O
(contador, clientes, PDF) são substituídos por mocks.
"""

import uuid
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from orcafast.api.v1.budget_number import get_budget_number_service
from orcafast.api.v1.budgets import get_pdf_service
from orcafast.api.v1.clients import get_client_service
from orcafast.core.exceptions import NotFoundError
from orcafast.main import app
from orcafast.schemas.contract import ContractKind
from orcafast.services.contract_service import ContractService

from conftest import MockClient


@pytest.fixture
def pdf_service():
    service = MagicMock()
    service.generate_budget_pdf.return_value = b"%PDF-1.7 orcamento"
    service.generate_contract_pdf.return_value = b"%PDF-1.7 contrato"
    app.dependency_overrides[get_pdf_service] = lambda: service
    return service


class TestHealth:

    def test_health(self, api_client):
        response = api_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


# ============================================================
# Orçamentos
# ============================================================


class TestBudgetEndpoints:
    """Testes de pré-visualização e exportação do orçamento."""

    def test_preview(self, api_client, budget_payload):
        response = api_client.post("/api/v1/budgets/preview", json=budget_payload)

        assert response.status_code == 200
        data = response.json()
        assert data["budgetNumber"] == "0101"
        assert Decimal(data["subtotal"]) == Decimal("1000")
        assert Decimal(data["totalAmount"]) == Decimal("1000")
        assert Decimal(data["items"][0]["itemDiscountValue"]) == Decimal("100")
        assert Decimal(data["items"][0]["itemTotal"]) == Decimal("900")

    def test_preview_with_general_discount(self, api_client, budget_payload):
        budget_payload["generalDiscount"] = 10
        budget_payload["generalDiscountType"] = "percentage"

        response = api_client.post("/api/v1/budgets/preview", json=budget_payload)

        data = response.json()
        assert Decimal(data["generalDiscountValue"]) == Decimal("100")
        assert Decimal(data["totalAmount"]) == Decimal("900")

    def test_preview_without_number(self, api_client, budget_payload):
        budget_payload.pop("budgetNumber")

        response = api_client.post("/api/v1/budgets/preview", json=budget_payload)

        assert response.json()["budgetNumber"] == "0000"

    @pytest.mark.parametrize("field, value", [
        ("generalDiscount", -5),
        ("budgetNumber", -1),
    ])
    def test_preview_invalid_form(self, api_client, budget_payload, field, value):
        budget_payload[field] = value

        response = api_client.post("/api/v1/budgets/preview", json=budget_payload)

        assert response.status_code == 422

    def test_preview_rejects_negative_quantity(self, api_client, budget_payload):
        budget_payload["items"][0]["quantity"] = -1

        response = api_client.post("/api/v1/budgets/preview", json=budget_payload)

        assert response.status_code == 422

    def test_preview_ignores_blank_row(self, api_client, budget_payload):
        """Test linha recém-adicionada em branco não bloqueia a pré-visualização."""
        budget_payload["items"].append({"description": "", "quantity": 0, "unitPrice": 0})

        response = api_client.post("/api/v1/budgets/preview", json=budget_payload)

        assert response.status_code == 200
        data = response.json()
        assert len(data["items"]) == 2
        assert Decimal(data["totalAmount"]) == Decimal("1000")

    def test_preview_incomplete_row(self, api_client, budget_payload):
        """Test linha sem descrição ainda entra no cálculo."""
        budget_payload["items"].append({"description": "", "quantity": 1, "unitPrice": 0})

        response = api_client.post("/api/v1/budgets/preview", json=budget_payload)

        assert response.status_code == 200
        assert len(response.json()["items"]) == 3

    def test_preview_form_being_filled(self, api_client):
        """Test formulário ainda vazio gera uma pré-visualização zerada."""
        response = api_client.post(
            "/api/v1/budgets/preview",
            json={"clientName": "", "items": [{"description": "", "quantity": None}]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["budgetNumber"] == "0000"
        assert Decimal(data["totalAmount"]) == Decimal("0")

    @pytest.mark.parametrize("field, value", [
        ("items", []),
        ("clientName", ""),
    ])
    def test_pdf_requires_complete_form(self, api_client, budget_payload, pdf_service, field, value):
        budget_payload[field] = value

        response = api_client.post("/api/v1/budgets/pdf", json=budget_payload)

        assert response.status_code == 422
        pdf_service.generate_budget_pdf.assert_not_called()

    def test_pdf_rejects_blank_row(self, api_client, budget_payload, pdf_service):
        budget_payload["items"].append({"description": "", "quantity": 0, "unitPrice": 0})

        response = api_client.post("/api/v1/budgets/pdf", json=budget_payload)

        assert response.status_code == 422

    def test_preview_html(self, api_client, budget_payload):
        budget_payload["budgetNumber"] = 0

        response = api_client.post("/api/v1/budgets/preview/html", json=budget_payload)

        assert response.status_code == 200
        assert "PREVIEW" in response.text
        assert "R$ 1.000,00" in response.text
        assert "<strong>10 dias úteis</strong>" in response.text

    def test_defaults(self, api_client):
        response = api_client.get("/api/v1/budgets/defaults")

        assert response.status_code == 200
        data = response.json()
        assert data["companyName"]
        assert set(data["features"]) == {"units", "itemDiscountType", "generalDiscount"}

    def test_pdf_export(self, api_client, budget_payload, pdf_service):
        response = api_client.post("/api/v1/budgets/pdf", json=budget_payload)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert "orcamento_0101_Maria_Souza.pdf" in response.headers["content-disposition"]
        assert response.content == b"%PDF-1.7 orcamento"
        preview = pdf_service.generate_budget_pdf.call_args[0][0]
        assert preview.budget_number == "0101"

    def test_pdf_requires_reserved_number(self, api_client, budget_payload, pdf_service):
        """Test PDF sem número reservado é rejeitado."""
        budget_payload["budgetNumber"] = 0

        response = api_client.post("/api/v1/budgets/pdf", json=budget_payload)

        assert response.status_code == 422
        assert response.json()["error_code"] == "BUSINESS_VALIDATION_ERROR"
        pdf_service.generate_budget_pdf.assert_not_called()


# ============================================================
# Contador de orçamentos
# ============================================================


class TestBudgetNumberEndpoints:
    """Testes do contador de orçamentos."""

    @pytest.fixture
    def number_service(self):
        service = MagicMock()
        service.get_next_budget_number = AsyncMock(return_value=101)
        service.reserve_next_budget_number = AsyncMock(return_value=101)
        app.dependency_overrides[get_budget_number_service] = lambda: service
        return service

    def test_peek(self, api_client, mock_db, number_service):
        response = api_client.get("/api/v1/budget-number")

        assert response.status_code == 200
        assert response.json() == {"nextBudgetNumber": 101}
        number_service.reserve_next_budget_number.assert_not_called()

    def test_reserve(self, api_client, mock_db, number_service):
        response = api_client.post("/api/v1/budget-number")

        assert response.status_code == 200
        assert response.json() == {"nextBudgetNumber": 101}
        number_service.reserve_next_budget_number.assert_awaited_once()
        mock_db.commit.assert_awaited_once()


# ============================================================
# Clientes
# ============================================================


class TestClientEndpoints:
    """Testes do cadastro de clientes."""

    @pytest.fixture
    def client_service(self):
        service = MagicMock()
        app.dependency_overrides[get_client_service] = lambda: service
        return service

    def test_create_client(self, api_client, mock_db, client_service, contractor_payload):
        created = MockClient()
        client_service.create = AsyncMock(return_value=created)

        response = api_client.post("/api/v1/clients/", json=contractor_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == str(created.id)
        assert data["cpfCnpj"] == "123.456.789-09"
        mock_db.commit.assert_awaited_once()

    def test_list_clients(self, api_client, client_service):
        client_service.get_all = AsyncMock(return_value=([MockClient(), MockClient(name="Ana")], 2))

        response = api_client.get("/api/v1/clients/", params={"search": "a"})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert data["perPage"] == 50
        assert len(data["items"]) == 2

    def test_client_not_found(self, api_client, client_service):
        client_service.get_by_id = AsyncMock(side_effect=NotFoundError("Cliente não encontrado"))

        response = api_client.get(f"/api/v1/clients/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["error_code"] == "RESOURCE_NOT_FOUND"

    def test_invalid_email(self, api_client, client_service, contractor_payload):
        contractor_payload["email"] = "sem-arroba"

        response = api_client.post("/api/v1/clients/", json=contractor_payload)

        assert response.status_code == 422


# ============================================================
# Contratos
# ============================================================


class TestContractEndpoints:
    """Testes da montagem e exportação dos contratos."""

    def test_service_contract_preview(self, api_client, service_contract_payload):
        response = api_client.post("/api/v1/contracts/service/preview", json=service_contract_payload)

        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "service"
        assert data["clauses"][-1]["title"] == "FORO"
        assert data["signaturePlaceDate"] == "Recife, 19 de outubro de 2026."

    def test_service_contract_other_payment(self, api_client, service_contract_payload):
        service_contract_payload["paymentMethod"] = "Outro"

        response = api_client.post("/api/v1/contracts/service/preview", json=service_contract_payload)

        assert response.status_code == 422
        assert response.json()["error_code"] == "BUSINESS_VALIDATION_ERROR"

    def test_authorization_preview(self, api_client, authorization_payload):
        response = api_client.post(
            "/api/v1/contracts/authorization/preview", json=authorization_payload
        )

        assert response.status_code == 200
        assert response.json()["kind"] == "authorization"

    def test_permutation_repeated_document(self, api_client, permutation_payload, contractor_payload):
        permutation_payload["permutants"].append(dict(contractor_payload, name="Outra Pessoa"))

        response = api_client.post("/api/v1/contracts/permutation/preview", json=permutation_payload)

        assert response.status_code == 422

    def test_permutation_pdf(self, api_client, permutation_payload, pdf_service):
        response = api_client.post("/api/v1/contracts/permutation/pdf", json=permutation_payload)

        assert response.status_code == 200
        assert response.content == b"%PDF-1.7 contrato"
        assert "attachment" in response.headers["content-disposition"]

    @pytest.mark.parametrize("path, kind, payload_fixture", [
        ("service", ContractKind.SERVICE, "service_contract_payload"),
        ("authorization", ContractKind.AUTHORIZATION, "authorization_payload"),
        ("permutation", ContractKind.PERMUTATION, "permutation_payload"),
    ])
    def test_routes_dispatch_by_kind(
        self, api_client, request, pdf_service, path, kind, payload_fixture
    ):
        """Test cada rota monta o documento pelo tipo correspondente."""
        payload = request.getfixturevalue(payload_fixture)
        original = ContractService.build

        with patch.object(ContractService, "build", autospec=True, side_effect=original) as build:
            preview = api_client.post(f"/api/v1/contracts/{path}/preview", json=payload)
            pdf = api_client.post(f"/api/v1/contracts/{path}/pdf", json=payload)

        assert preview.status_code == 200
        assert pdf.status_code == 200
        assert [c.args[1] for c in build.call_args_list] == [kind, kind]
        assert preview.json()["kind"] == kind.value
