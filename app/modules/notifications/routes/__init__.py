# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/routes/__init__.py

Bandeja de notificaciones del actor (consultor: las suyas; admin: canal admin).

Autor: Mustashar
Fecha: 2026-09-18
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_db
from app.shared.utils.http_exceptions import UnauthorizedException
from app.shared.utils.pagination import resolve_page
from app.modules.coordinator.actor import ActorContext
from app.modules.coordinator.deps import get_actor
from app.modules.notifications.repositories import ADMIN_RECIPIENT
from app.modules.notifications.schemas import MarkAllReadOut, NotificationPage, NotificationRead
from app.modules.notifications.services import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _recipient_for(actor: ActorContext):
    if actor.is_admin:
        return ADMIN_RECIPIENT
    if actor.is_consultant:
        return actor.actor_id
    raise UnauthorizedException("El actor no tiene bandeja de notificaciones")


@router.get("", response_model=NotificationPage, summary="Mis notificaciones")
async def list_notifications(
    unread_only: bool = Query(False),
    limit: Optional[int] = Query(None, ge=1),
    offset: Optional[int] = Query(None, ge=0),
    actor: ActorContext = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    limit, offset = resolve_page(limit, offset)
    items, total = await NotificationService().list_for_recipient(
        db, _recipient_for(actor), unread_only=unread_only, limit=limit, offset=offset
    )
    return NotificationPage(
        items=[NotificationRead.model_validate(n) for n in items],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.post("/read-all", response_model=MarkAllReadOut, summary="Marcar todas como leídas")
async def mark_all_read(
    actor: ActorContext = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    updated = await NotificationService().mark_all_read(db, _recipient_for(actor))
    return MarkAllReadOut(updated=updated)


@router.post("/{notification_id}/read", response_model=NotificationRead, summary="Marcar como leída")
async def mark_read(
    notification_id: UUID,
    actor: ActorContext = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    notification = await NotificationService().mark_read(db, notification_id, _recipient_for(actor))
    return NotificationRead.model_validate(notification)


__all__ = ["router"]
