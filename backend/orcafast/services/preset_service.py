"""
Service Layer dos presets de item
Projeto: OrçaFAST (Orçamentos e Contratos)

Presets são pares (descrição, preço unitário) aplicados às linhas
do orçamento para agilizar o preenchimento.
"""

import logging
import uuid
from decimal import Decimal
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from orcafast.core.exceptions import ConflictError, NotFoundError
from orcafast.models import ItemPreset
from orcafast.schemas.budget import BudgetItemInput
from orcafast.schemas.preset import PresetCreate, PresetUpdate

logger = logging.getLogger(__name__)

DEFAULT_PRESETS = [
    ("Fundação da Marca", Decimal("1800.00")),
    ("Gestão de Redes Sociais", Decimal("3500.00")),
    ("Produção de Conteúdo", Decimal("3700.00")),
    ("Produção de Vídeo Institucional", Decimal("2500.00")),
    ("Edição de Vídeo (por minuto)", Decimal("150.00")),
    ("Captação Aérea com Drone (diária)", Decimal("1200.00")),
]


def apply_preset(item: Any, preset: Any) -> BudgetItemInput:
    """
    Copia descrição e preço unitário do preset para a linha.

    Quantidade, unidade e desconto da linha são mantidos.
    """
    data = item.model_dump() if hasattr(item, "model_dump") else dict(item)
    data["description"] = preset.description
    data["unit_price"] = preset.unit_price
    return BudgetItemInput.model_validate(data)


class PresetService:
    """Operações CRUD sobre os presets de item."""

    async def get_all(self, db: AsyncSession) -> list[ItemPreset]:
        result = await db.execute(select(ItemPreset).order_by(ItemPreset.description.asc()))
        return list(result.scalars().all())

    async def get_by_id(self, db: AsyncSession, preset_id: uuid.UUID) -> ItemPreset:
        """
        Raises:
            NotFoundError: Se o preset não existe
        """
        result = await db.execute(select(ItemPreset).where(ItemPreset.id == preset_id))
        preset = result.scalar_one_or_none()
        if preset is None:
            logger.warning("Preset não encontrado: %s", preset_id)
            raise NotFoundError(f"Preset com ID {preset_id} não encontrado")
        return preset

    async def create(self, db: AsyncSession, preset_data: PresetCreate) -> ItemPreset:
        preset = ItemPreset(**preset_data.model_dump())
        try:
            db.add(preset)
            await db.flush()
            await db.refresh(preset)
        except SQLAlchemyError as e:
            logger.error("Erro SQLAlchemy ao criar preset: %s - %s", e.__class__.__name__, e)
            await db.rollback()
            raise ConflictError("Erro do banco de dados ao criar o preset")
        logger.info("Preset criado: %s - %s", preset.id, preset.description)
        return preset

    async def update(
        self,
        db: AsyncSession,
        preset_id: uuid.UUID,
        preset_data: PresetUpdate,
    ) -> ItemPreset:
        preset = await self.get_by_id(db, preset_id)
        for field, value in preset_data.model_dump(exclude_unset=True).items():
            setattr(preset, field, value)
        try:
            await db.flush()
            await db.refresh(preset)
        except SQLAlchemyError as e:
            logger.error("Erro SQLAlchemy ao atualizar preset: %s - %s", e.__class__.__name__, e)
            await db.rollback()
            raise ConflictError("Erro do banco de dados ao atualizar o preset")
        logger.info("Preset atualizado: %s", preset.id)
        return preset

    async def delete(self, db: AsyncSession, preset_id: uuid.UUID) -> None:
        preset = await self.get_by_id(db, preset_id)
        await db.delete(preset)
        await db.flush()
        logger.info("Preset removido: %s", preset_id)

    async def load_default_presets(self, db: AsyncSession) -> list[ItemPreset]:
        """
        Substitui todos os presets pela lista padrão.

        Returns:
            Lista dos presets padrão recém-criados
        """
        try:
            await db.execute(delete(ItemPreset))
            presets = [
                ItemPreset(description=description, unit_price=unit_price)
                for description, unit_price in DEFAULT_PRESETS
            ]
            db.add_all(presets)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Erro SQLAlchemy ao restaurar presets: %s - %s", e.__class__.__name__, e)
            await db.rollback()
            raise ConflictError("Erro do banco de dados ao restaurar os presets padrão")
        logger.info("Presets padrão restaurados (%s itens)", len(presets))
        return presets
