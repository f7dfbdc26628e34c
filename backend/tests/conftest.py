"""
Configuração do pytest e fixtures compartilhadas.

As fixtures de banco usam um AsyncSession mockado: nenhum teste
precisa de PostgreSQL nem do WeasyPrint instalado.
"""

import datetime
import uuid
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from orcafast.core.database import get_db
from orcafast.main import app


# ============================================================
# Fixtures do AsyncSession mock
# ============================================================


@pytest.fixture
def mock_db():
    """Cria um mock de AsyncSession."""
    db = AsyncMock(spec=AsyncSession)
    db.execute = AsyncMock()
    db.add = MagicMock()
    db.add_all = MagicMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.flush = AsyncMock()
    db.refresh = AsyncMock()
    db.delete = AsyncMock()
    return db


def make_result(scalar_one_or_none=None, scalars=None, scalar=None):
    """Resultado de db.execute() com os acessos usados pelos services."""
    result = MagicMock()
    result.scalar_one_or_none.return_value = scalar_one_or_none
    result.scalars.return_value.all.return_value = scalars or []
    result.scalar.return_value = scalar
    return result


# ============================================================
# Objetos mock (sem sessão SQLAlchemy)
# ============================================================


class MockClient:
    """Mock do modelo Client."""
    def __init__(self, **kwargs):
        now = datetime.datetime(2026, 10, 19, 12, 0, tzinfo=datetime.timezone.utc)
        self.id = kwargs.get('id', uuid.uuid4())
        self.name = kwargs.get('name', 'Maria Souza')
        self.cpf_cnpj = kwargs.get('cpf_cnpj', '123.456.789-09')
        self.address = kwargs.get('address', 'Rua das Flores, 100 - Recife/PE')
        self.email = kwargs.get('email', 'maria@empresa.com.br')
        self.created_at = kwargs.get('created_at', now)
        self.updated_at = kwargs.get('updated_at', now)


class MockPreset:
    """Mock do modelo ItemPreset."""
    def __init__(self, **kwargs):
        self.id = kwargs.get('id', uuid.uuid4())
        self.description = kwargs.get('description', 'Gestão de Redes Sociais')
        self.unit_price = kwargs.get('unit_price', Decimal("3500.00"))


class MockCounter:
    """Mock do modelo BudgetCounter."""
    def __init__(self, next_budget_number=101):
        self.id = 1
        self.next_budget_number = next_budget_number


@pytest.fixture
def mock_client():
    return MockClient()


@pytest.fixture
def mock_preset():
    return MockPreset()


# ============================================================
# Dados de formulário
# ============================================================


@pytest.fixture
def budget_payload():
    """Formulário de orçamento em camelCase, como enviado pelo frontend."""
    return {
        "companyName": "OrçaFAST",
        "logoUrl": "/LOGO-OF.png",
        "slogan": "Orçamentos rápidos, resultados imediatos.",
        "clientName": "Maria Souza",
        "clientAddress": "Rua das Flores, 100",
        "budgetNumber": 101,
        "budgetDate": "19/10/2026",
        "items": [
            {
                "description": "Produção de Vídeo Institucional",
                "unit": "Un",
                "quantity": 2,
                "unitPrice": 500,
                "discount": 10,
                "discountType": "percentage",
            },
            {
                "description": "Edição de Vídeo (por minuto)",
                "unit": "min",
                "quantity": 1,
                "unitPrice": 100,
                "discount": 0,
                "discountType": "fixed",
            },
        ],
        "commercialConditions": "Validade da proposta: 15 dias.",
        "paymentConditions": "50% na aprovação e 50% na entrega.",
        "observations": "Prazo de entrega: *10 dias úteis*.",
        "generalDiscount": 0,
        "generalDiscountType": "fixed",
    }


@pytest.fixture
def contractor_payload():
    return {
        "name": "Maria Souza",
        "cpfCnpj": "123.456.789-09",
        "address": "Rua das Flores, 100 - Recife/PE",
        "email": "maria@empresa.com.br",
    }


@pytest.fixture
def service_contract_payload(contractor_payload):
    return {
        "serviceType": "Website",
        "contractTitle": "Contrato de Desenvolvimento de Website",
        "contractors": [contractor_payload],
        "object": "Desenvolvimento do website institucional do CONTRATANTE.",
        "totalValue": 1000,
        "paymentMethod": "Sinal + Entrega",
        "paymentSignalPercentage": 30,
        "deliveryDeadline": "30 dias após a aprovação do layout.",
        "contractorResponsibilities": "Entregar o site publicado\nTreinar a equipe",
        "clientResponsibilities": "Enviar textos e imagens\nAprovar o layout",
        "copyright": "Os direitos patrimoniais são cedidos ao CONTRATANTE após a quitação.",
        "rescissionNoticePeriod": 15,
        "rescissionFine": 20,
        "generalDispositions": "Alterações de escopo serão orçadas à parte.",
        "warranty": "Garantia de 90 dias para correção de falhas.",
        "jurisdiction": "Recife/PE",
        "signatureCity": "Recife",
        "signatureDate": "19 de outubro de 2026",
    }


@pytest.fixture
def authorization_payload():
    return {
        "authorizedName": "João Lima",
        "authorizedCpfCnpj": "987.654.321-00",
        "authorizedAddress": "Av. Boa Viagem, 500 - Recife/PE",
        "authorizedEmail": "joao@produtora.com.br",
        "projectName": "Campanha Verão",
        "finalClient": "Loja Exemplo",
        "executionDate": "10/10/2026",
        "authorizedLinks": "https://portfolio.produtora.com.br/verao",
        "permissionsAndProhibitions": "Uso em portfólio\nVedado o uso comercial",
        "fineValue": 5000,
        "jurisdiction": "Recife/PE",
        "signatureCity": "Recife",
        "signatureDate": "19 de outubro de 2026",
    }


@pytest.fixture
def permutation_payload(contractor_payload):
    return {
        "permutants": [contractor_payload],
        "permutantObject": "um notebook Dell Inspiron",
        "permutantObjectValue": 4500,
        "permutedObject": "edição de vídeo institucional",
        "conditions": "O bem será entregue em perfeito estado.",
        "propertyTransfer": "A propriedade é transferida na entrega do bem.",
        "jurisdiction": "Recife/PE",
        "signatureCity": "Recife",
        "signatureDate": "19 de outubro de 2026",
    }


# ============================================================
# Cliente HTTP
# ============================================================


@pytest.fixture
def api_client(mock_db):
    """TestClient com get_db substituído pelo AsyncSession mock."""

    async def override_get_db():
        yield mock_db

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
