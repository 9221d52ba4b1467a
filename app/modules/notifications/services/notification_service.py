# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/services/notification_service.py

Lado de lectura de las notificaciones (bandeja del destinatario).

Autor: Mustashar
Fecha: 2026-09-12
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.transactions import commit_or_raise, now_utc
from app.shared.errors import NotFound
from app.modules.notifications.models import Notification
from app.modules.notifications.repositories import NotificationRepository
from app.modules.notifications.repositories.notification_repository import Recipient

logger = logging.getLogger(__name__)


class NotificationService:

    def __init__(self, repo: Optional[NotificationRepository] = None):
        self.repo = repo or NotificationRepository()

    async def list_for_recipient(
        self,
        session: AsyncSession,
        recipient: Recipient,
        *,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[Sequence[Notification], int]:
        return await self.repo.list_for_recipient(
            session, recipient, unread_only=unread_only, limit=limit, offset=offset
        )

    async def mark_read(
        self,
        session: AsyncSession,
        notification_id: UUID,
        recipient: Recipient,
    ) -> Notification:
        """Marca como leída; NotFound si no existe o no es del destinatario."""
        async def _work() -> Notification:
            notification = await self.repo.get_for_recipient(session, notification_id, recipient)
            if not notification:
                raise NotFound("Notificación", notification_id)
            if not notification.is_read:
                notification.is_read = True
                notification.read_at = now_utc()
                await session.flush()
            return notification

        return await commit_or_raise(session, _work)

    async def mark_all_read(self, session: AsyncSession, recipient: Recipient) -> int:
        async def _work() -> int:
            count = await self.repo.mark_all_read(session, recipient)
            logger.info("Notifications marked read: recipient=%s count=%d", recipient, count)
            return count

        return await commit_or_raise(session, _work)


__all__ = ["NotificationService"]
# Fin del archivo backend/app/modules/notifications/services/notification_service.py
