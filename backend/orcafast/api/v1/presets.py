"""
Router FastAPI dos presets de item
Projeto: OrçaFAST (Orçamentos e Contratos)
"""

import logging
import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from orcafast.core.database import get_db
from orcafast.schemas.preset import PresetCreate, PresetRead, PresetUpdate
from orcafast.services.preset_service import PresetService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/presets",
    tags=["Presets"],
)


def get_preset_service() -> PresetService:
    return PresetService()


@router.get(
    "/",
    name="presets_lista",
    summary="Lista presets",
    response_model=list[PresetRead],
    status_code=status.HTTP_200_OK,
)
async def get_presets(
    db: AsyncSession = Depends(get_db),
    service: PresetService = Depends(get_preset_service),
) -> list[PresetRead]:
    presets = await service.get_all(db)
    return [PresetRead.model_validate(p) for p in presets]


@router.get(
    "/{preset_id}",
    name="preset_detalhe",
    summary="Detalhe do preset",
    response_model=PresetRead,
    status_code=status.HTTP_200_OK,
)
async def get_preset(
    preset_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    service: PresetService = Depends(get_preset_service),
) -> PresetRead:
    preset = await service.get_by_id(db, preset_id)
    return PresetRead.model_validate(preset)


@router.post(
    "/",
    name="preset_cria",
    summary="Cria preset",
    response_model=PresetRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_preset(
    preset_data: PresetCreate,
    db: AsyncSession = Depends(get_db),
    service: PresetService = Depends(get_preset_service),
) -> PresetRead:
    preset = await service.create(db, preset_data)
    await db.commit()
    return PresetRead.model_validate(preset)


@router.post(
    "/defaults",
    name="presets_padrao",
    summary="Restaura os presets padrão",
    description="Remove todos os presets e recria a lista padrão.",
    response_model=list[PresetRead],
    status_code=status.HTTP_200_OK,
)
async def load_default_presets(
    db: AsyncSession = Depends(get_db),
    service: PresetService = Depends(get_preset_service),
) -> list[PresetRead]:
    presets = await service.load_default_presets(db)
    await db.commit()
    return [PresetRead.model_validate(p) for p in presets]


@router.put(
    "/{preset_id}",
    name="preset_atualiza",
    summary="Atualiza preset",
    response_model=PresetRead,
    status_code=status.HTTP_200_OK,
)
async def update_preset(
    preset_id: uuid.UUID,
    preset_data: PresetUpdate,
    db: AsyncSession = Depends(get_db),
    service: PresetService = Depends(get_preset_service),
) -> PresetRead:
    preset = await service.update(db, preset_id, preset_data)
    await db.commit()
    return PresetRead.model_validate(preset)


@router.delete(
    "/{preset_id}",
    name="preset_remove",
    summary="Remove preset",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_preset(
    preset_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    service: PresetService = Depends(get_preset_service),
) -> None:
    await service.delete(db, preset_id)
    await db.commit()
