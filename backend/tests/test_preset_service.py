"""
Testes unitários dos presets de item.
"""

import uuid
from decimal import Decimal

import pytest

from orcafast.core.exceptions import NotFoundError
from orcafast.schemas.budget import BudgetItemInput, DiscountType
from orcafast.schemas.preset import PresetCreate
from orcafast.services.preset_service import DEFAULT_PRESETS, PresetService, apply_preset

from conftest import MockPreset, make_result


@pytest.fixture
def service():
    return PresetService()


class TestApplyPreset:
    """Testes da aplicação de preset em uma linha."""

    def test_copies_description_and_price(self, mock_preset):
        item = BudgetItemInput(
            description="Linha antiga",
            unit="mês",
            quantity=Decimal("3"),
            unit_price=Decimal("10"),
            discount=Decimal("5"),
            discount_type=DiscountType.PERCENTAGE,
        )

        updated = apply_preset(item, mock_preset)

        assert updated.description == "Gestão de Redes Sociais"
        assert updated.unit_price == Decimal("3500.00")
        assert updated.quantity == Decimal("3")
        assert updated.unit == "mês"
        assert updated.discount == Decimal("5")
        assert updated.discount_type == DiscountType.PERCENTAGE

    def test_original_item_is_kept(self, mock_preset):
        item = BudgetItemInput(description="Linha antiga", quantity=1, unit_price=10)

        apply_preset(item, mock_preset)

        assert item.description == "Linha antiga"

    def test_raw_dict_item(self, mock_preset):
        updated = apply_preset({"description": "", "quantity": 2, "unit_price": 0}, mock_preset)

        assert updated.description == mock_preset.description
        assert updated.quantity == Decimal("2")


class TestPresetCrud:
    """Testes do CRUD de presets."""

    @pytest.mark.asyncio
    async def test_get_all(self, service, mock_db):
        presets = [MockPreset(), MockPreset(description="Fundação da Marca")]
        mock_db.execute.return_value = make_result(scalars=presets)

        assert await service.get_all(mock_db) == presets

    @pytest.mark.asyncio
    async def test_get_missing_preset(self, service, mock_db):
        mock_db.execute.return_value = make_result(scalar_one_or_none=None)

        with pytest.raises(NotFoundError):
            await service.get_by_id(mock_db, uuid.uuid4())

    @pytest.mark.asyncio
    async def test_create(self, service, mock_db):
        preset = await service.create(
            mock_db, PresetCreate(description="Diária de drone", unit_price=Decimal("1200"))
        )

        mock_db.add.assert_called_once()
        assert preset.description == "Diária de drone"
        assert preset.unit_price == Decimal("1200")

    @pytest.mark.asyncio
    async def test_load_default_presets(self, service, mock_db):
        """Test os presets padrão substituem a lista atual."""
        presets = await service.load_default_presets(mock_db)

        mock_db.execute.assert_awaited_once()
        mock_db.add_all.assert_called_once()
        assert [(p.description, p.unit_price) for p in presets] == DEFAULT_PRESETS
