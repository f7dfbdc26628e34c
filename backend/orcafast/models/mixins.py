"""
Mixins SQLAlchemy para os modelos
Projeto: OrçaFAST (Orçamentos e Contratos)
"""

import datetime
import uuid

from sqlalchemy import DateTime, Uuid
from sqlalchemy import event
from sqlalchemy.orm import Mapped, mapped_column, Session
from sqlalchemy.sql import func


class TimestampMixin:
    """
    Timestamps automáticos de criação e atualização.

    Adiciona:
    - created_at: data/hora de criação do registro
    - updated_at: data/hora da última alteração
    """

    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        doc="Data/hora de criação do registro",
    )

    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        doc="Data/hora da última alteração do registro",
    )


class UUIDMixin:
    """Chave primária UUID gerada na aplicação."""

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        doc="UUID primary key",
    )


@event.listens_for(Session, "before_flush")
def update_timestamp(session: Session, flush_context, instances) -> None:
    """Atualiza updated_at dos objetos novos e alterados antes do flush."""
    now = datetime.datetime.now(datetime.timezone.utc)

    for obj in session.dirty:
        if hasattr(obj, "updated_at") and session.is_modified(obj, include_collections=False):
            obj.updated_at = now

    for obj in session.new:
        if hasattr(obj, "updated_at"):
            obj.updated_at = now
