# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/services/notification_sinks.py

Sinks de notificación (colaborador externo del núcleo).

El núcleo solo emite: notify(recipient, title, message, severity, link?).
Nunca lee notificaciones ni observa si la entrega tuvo éxito; quien llama
(MarketplaceCoordinator) registra y descarta cualquier excepción.

- DatabaseNotificationSink: persiste en `notifications` con su PROPIA sesión,
  así un fallo de la notificación no toca la transacción de negocio
- LoggingNotificationSink: solo escribe al log

Autor: Mustashar
Fecha: 2026-09-12
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol, runtime_checkable

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.notifications.enums import NotificationSeverity
from app.modules.notifications.models import Notification
from app.modules.notifications.repositories import resolve_recipient
from app.modules.notifications.repositories.notification_repository import Recipient

logger = logging.getLogger(__name__)


@runtime_checkable
class NotificationSink(Protocol):
    async def notify(
        self,
        recipient: Recipient,
        title: str,
        message: str,
        severity: NotificationSeverity,
        link: Optional[str] = None,
    ) -> None:
        ...


class DatabaseNotificationSink:
    """Persiste notificaciones (commit propio)."""

    def __init__(self, session_factory: Optional[Callable[[], AsyncSession]] = None):
        self._session_factory = session_factory

    def _factory(self) -> Callable[[], AsyncSession]:
        if self._session_factory is None:
            from app.shared.database import get_session_factory
            self._session_factory = get_session_factory()
        return self._session_factory

    async def notify(
        self,
        recipient: Recipient,
        title: str,
        message: str,
        severity: NotificationSeverity,
        link: Optional[str] = None,
    ) -> None:
        target_user_id, target_role = resolve_recipient(recipient)
        async with self._factory()() as session:
            session.add(
                Notification(
                    target_user_id=target_user_id,
                    target_role=target_role,
                    title=title,
                    message=message,
                    severity=NotificationSeverity(severity),
                    link=link,
                    is_read=False,
                )
            )
            await session.commit()
        logger.debug("Notification stored: recipient=%s title=%s", recipient, title)


class LoggingNotificationSink:
    """Sink sin persistencia (scripts, desarrollo)."""

    async def notify(
        self,
        recipient: Recipient,
        title: str,
        message: str,
        severity: NotificationSeverity,
        link: Optional[str] = None,
    ) -> None:
        logger.info(
            "Notification: recipient=%s severity=%s title=%s message=%s link=%s",
            recipient, NotificationSeverity(severity).value, title, message, link,
        )


__all__ = ["NotificationSink", "DatabaseNotificationSink", "LoggingNotificationSink", "Recipient"]
# Fin del archivo backend/app/modules/notifications/services/notification_sinks.py
