# -*- coding: utf-8 -*-
"""
backend/app/modules/coordinator/deps.py

Dependencias inyectables compartidas por las rutas de liquidaciones,
moderación y notificaciones.

- get_actor: construye ActorContext desde X-Actor-Id / X-Actor-Role
- get_notification_sink: sink según NOTIFICATION_SINK (database | logging)
- get_coordinator: MarketplaceCoordinator sobre la sesión del request

Autor: Mustashar
Fecha: 2026-09-15
"""

from typing import Optional
from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config import settings
from app.shared.database.database import get_db
from app.shared.utils.http_exceptions import UnauthorizedException
from app.modules.coordinator.actor import ActorContext, ActorRole
from app.modules.coordinator.facades import MarketplaceCoordinator
from app.modules.notifications.services import (
    DatabaseNotificationSink,
    LoggingNotificationSink,
    NotificationSink,
)


async def get_actor(
    x_actor_role: Optional[str] = Header(None, alias="X-Actor-Role"),
    x_actor_id: Optional[str] = Header(None, alias="X-Actor-Id"),
) -> ActorContext:
    """
    Resuelve el actor del request.

    Consultores requieren X-Actor-Id; admin/system lo llevan opcional.
    """
    if not x_actor_role:
        raise UnauthorizedException("Falta el header X-Actor-Role")
    try:
        role = ActorRole(x_actor_role.strip().lower())
    except ValueError:
        raise UnauthorizedException(f"Rol de actor desconocido: {x_actor_role}")

    actor_id: Optional[UUID] = None
    if x_actor_id:
        try:
            actor_id = UUID(x_actor_id.strip())
        except ValueError:
            raise UnauthorizedException("X-Actor-Id debe ser un UUID")

    if role is ActorRole.CONSULTANT and actor_id is None:
        raise UnauthorizedException("Un consultor debe enviar X-Actor-Id")
    return ActorContext(role=role, actor_id=actor_id)


async def get_notification_sink() -> NotificationSink:
    if settings.notification_sink == "logging":
        return LoggingNotificationSink()
    return DatabaseNotificationSink()


async def get_coordinator(
    db: AsyncSession = Depends(get_db),
    sink: NotificationSink = Depends(get_notification_sink),
) -> MarketplaceCoordinator:
    return MarketplaceCoordinator(db, sink)


__all__ = ["get_actor", "get_notification_sink", "get_coordinator"]
# Fin del archivo backend/app/modules/coordinator/deps.py
