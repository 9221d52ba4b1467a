# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/repositories/notification_repository.py

Repositorio de notificaciones.

Un destinatario es el UUID de un consultor o el literal "admin"
(canal compartido de administradores).

Autor: Mustashar
Fecha: 2026-09-12
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union
from uuid import UUID

from sqlalchemy import ColumnElement, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.shared.database.transactions import now_utc
from app.modules.notifications.models import Notification

ADMIN_RECIPIENT = "admin"

Recipient = Union[UUID, str]


def resolve_recipient(recipient: Recipient) -> Tuple[Optional[UUID], Optional[str]]:
    """Devuelve (target_user_id, target_role)."""
    if isinstance(recipient, UUID):
        return recipient, None
    if recipient == ADMIN_RECIPIENT:
        return None, ADMIN_RECIPIENT
    return UUID(str(recipient)), None


def _recipient_filter(recipient: Recipient) -> ColumnElement[bool]:
    user_id, role = resolve_recipient(recipient)
    if role is not None:
        return Notification.target_role == role
    return Notification.target_user_id == user_id


class NotificationRepository(BaseRepository[Notification]):

    def __init__(self) -> None:
        super().__init__(Notification)

    async def list_for_recipient(
        self,
        session: AsyncSession,
        recipient: Recipient,
        *,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[Sequence[Notification], int]:
        stmt = select(Notification).where(_recipient_filter(recipient))
        if unread_only:
            stmt = stmt.where(Notification.is_read.is_(False))
        stmt = stmt.order_by(Notification.created_at.desc())
        return await self.paginate(session, stmt, limit=limit, offset=offset)

    async def get_for_recipient(
        self,
        session: AsyncSession,
        notification_id: UUID,
        recipient: Recipient,
    ) -> Optional[Notification]:
        stmt = select(Notification).where(
            Notification.id == notification_id,
            _recipient_filter(recipient),
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def mark_all_read(self, session: AsyncSession, recipient: Recipient) -> int:
        stmt = (
            update(Notification)
            .where(_recipient_filter(recipient), Notification.is_read.is_(False))
            .values(is_read=True, read_at=now_utc())
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return int(result.rowcount or 0)


__all__ = ["NotificationRepository", "resolve_recipient", "ADMIN_RECIPIENT", "Recipient"]
# Fin del archivo backend/app/modules/notifications/repositories/notification_repository.py
