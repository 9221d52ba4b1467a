# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/services/moderation_service.py

Motor de moderación de consultorías.

Reglas de dominio:
1. Toda consultoría nace en `pending`
2. Los cambios de estado siguen VALID_SERVICE_TRANSITIONS; una arista
   inválida lanza InvalidStateTransition (nunca es un no-op silencioso)
3. reject / convert_to_draft exigen motivo (MissingReason si está vacío)
4. convert_to_draft guarda "[<timestamp UTC>] <motivo>"; republish lo limpia
5. edit solo toca title/description/price/duration, nunca `status`
6. delete está permitido en cualquier estado

Transacciones: commit_or_raise; los cambios de estado usan check-and-set
sobre el estado leído.

Autor: Mustashar
Fecha: 2026-09-10
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence, Set, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config import settings
from app.shared.database.transactions import commit_or_raise, now_utc
from app.shared.errors import InvalidStateTransition, MissingReason, ServiceNotFound
from app.shared.utils.money import to_money
from app.modules.moderation.enums import ServiceStatus, validate_service_transition
from app.modules.moderation.models import ConsultationService
from app.modules.moderation.repositories import ConsultationServiceRepository

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"title", "description", "price", "duration"})


@dataclass(frozen=True)
class DeletedService:
    """Foto de la consultoría borrada (para notificar qué se eliminó)."""
    id: UUID
    consultant_id: UUID
    title: str
    status: ServiceStatus


def _require_reason(reason: Optional[str], action: str) -> str:
    cleaned = (reason or "").strip()
    if not cleaned:
        raise MissingReason(action)
    return cleaned


def _validate_content(fields: Mapping[str, Any]) -> dict:
    """Normaliza y valida campos de contenido."""
    out: dict = {}
    if "title" in fields:
        title = (fields["title"] or "").strip()
        if not title:
            raise ValueError("El título de la consultoría no puede estar vacío")
        out["title"] = title
    if "description" in fields:
        out["description"] = (fields["description"] or "").strip()
    if "price" in fields:
        price = to_money(fields["price"])
        if price <= 0:
            raise ValueError("El precio debe ser mayor que cero")
        out["price"] = price
    if "duration" in fields:
        duration = fields["duration"]
        if duration is None or isinstance(duration, bool) or int(duration) != duration or int(duration) <= 0:
            raise ValueError("La duración debe ser un número entero de minutos mayor que cero")
        out["duration"] = int(duration)
    return out


class ModerationService:

    def __init__(self, repo: Optional[ConsultationServiceRepository] = None):
        self.repo = repo or ConsultationServiceRepository()

    # -------------------------------------------------------------
    # Consultor
    # -------------------------------------------------------------
    async def create(
        self,
        session: AsyncSession,
        consultant_id: UUID,
        title: str,
        description: str,
        price: Any,
        duration: int,
    ) -> ConsultationService:
        content = _validate_content(
            {"title": title, "description": description, "price": price, "duration": duration}
        )

        async def _work() -> ConsultationService:
            service = await self.repo.create(
                session,
                consultant_id=consultant_id,
                status=ServiceStatus.PENDING,
                **content,
            )
            logger.info("Service created: id=%s consultant=%s", service.id, consultant_id)
            return service

        return await commit_or_raise(session, _work)

    async def edit(
        self,
        session: AsyncSession,
        service_id: UUID,
        fields: Mapping[str, Any],
    ) -> ConsultationService:
        """
        Edita campos de contenido en cualquier estado.

        Raises:
            ValueError: campo no editable (incluye `status`) o valor inválido
        """
        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Campos no editables: {', '.join(sorted(unknown))}")
        content = _validate_content(fields)

        async def _work() -> ConsultationService:
            service = await self._get_for_update(session, service_id)
            if content:
                await self.repo.update_fields(session, service, content)
                logger.info("Service edited: id=%s fields=%s", service_id, sorted(content))
            return service

        return await commit_or_raise(session, _work)

    async def republish(self, session: AsyncSession, service_id: UUID) -> ConsultationService:
        """draft | rejected → active; limpia rejection_reason."""
        return await self._transition(
            session, service_id, ServiceStatus.ACTIVE, reason=None,
            expected={ServiceStatus.DRAFT, ServiceStatus.REJECTED},
        )

    async def delete(self, session: AsyncSession, service_id: UUID) -> DeletedService:
        async def _work() -> DeletedService:
            service = await self._get_for_update(session, service_id)
            snapshot = DeletedService(
                id=service.id,
                consultant_id=service.consultant_id,
                title=service.title,
                status=service.status,
            )
            await self.repo.delete(session, service)
            logger.info("Service deleted: id=%s status=%s", service_id, snapshot.status.value)
            return snapshot

        return await commit_or_raise(session, _work)

    # -------------------------------------------------------------
    # Admin
    # -------------------------------------------------------------
    async def approve(self, session: AsyncSession, service_id: UUID) -> ConsultationService:
        """pending → active."""
        return await self._transition(
            session, service_id, ServiceStatus.ACTIVE, reason=None,
            expected={ServiceStatus.PENDING},
        )

    async def reject(self, session: AsyncSession, service_id: UUID, reason: Optional[str]) -> ConsultationService:
        """pending → rejected, guarda el motivo tal cual."""
        cleaned = _require_reason(reason, "rechazar la consultoría")
        return await self._transition(session, service_id, ServiceStatus.REJECTED, reason=cleaned)

    async def convert_to_draft(
        self,
        session: AsyncSession,
        service_id: UUID,
        reason: Optional[str],
        *,
        at: Optional[datetime] = None,
    ) -> ConsultationService:
        """active → draft; la consultoría deja de ser visible de inmediato."""
        cleaned = _require_reason(reason, "pasar la consultoría a borrador")
        stamp = (at or now_utc()).strftime(settings.draft_reason_timestamp_format)
        return await self._transition(
            session, service_id, ServiceStatus.DRAFT, reason=f"[{stamp}] {cleaned}"
        )

    # -------------------------------------------------------------
    # Lecturas
    # -------------------------------------------------------------
    async def get(self, session: AsyncSession, service_id: UUID) -> ConsultationService:
        service = await self.repo.get(session, service_id)
        if not service:
            raise ServiceNotFound(service_id)
        return service

    async def list_services(
        self,
        session: AsyncSession,
        *,
        status: Optional[ServiceStatus] = None,
        consultant_id: Optional[UUID] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[Sequence[ConsultationService], int]:
        search = (search or "").strip() or None
        return await self.repo.list_services(
            session,
            status=status,
            consultant_id=consultant_id,
            search=search,
            limit=limit,
            offset=offset,
        )

    async def list_public(
        self,
        session: AsyncSession,
        *,
        consultant_id: Optional[UUID] = None,
    ) -> Sequence[ConsultationService]:
        """Solo consultorías `active` (puerta de visibilidad pública)."""
        return await self.repo.list_public(session, consultant_id=consultant_id)

    # -------------------------------------------------------------
    # Internos
    # -------------------------------------------------------------
    async def _get_for_update(self, session: AsyncSession, service_id: UUID) -> ConsultationService:
        service = await self.repo.get(session, service_id, for_update=True)
        if not service:
            raise ServiceNotFound(service_id)
        return service

    async def _transition(
        self,
        session: AsyncSession,
        service_id: UUID,
        to_status: ServiceStatus,
        *,
        reason: Optional[str],
        expected: Optional[Set[ServiceStatus]] = None,
    ) -> ConsultationService:
        async def _work() -> ConsultationService:
            service = await self._get_for_update(session, service_id)
            from_status = service.status
            if expected is not None and from_status not in expected:
                raise InvalidStateTransition("consultoría", from_status, to_status)
            validate_service_transition(from_status, to_status)

            changed = await self.repo.compare_and_set_status(
                session,
                service.id,
                expected=from_status,
                to_status=to_status,
                rejection_reason=reason,
            )
            if not changed:
                raise InvalidStateTransition("consultoría", from_status, to_status)

            await session.refresh(service)
            logger.info(
                "Service status changed: id=%s %s -> %s",
                service_id, from_status.value, to_status.value,
            )
            return service

        return await commit_or_raise(session, _work)


__all__ = ["ModerationService", "DeletedService", "EDITABLE_FIELDS"]
# Fin del archivo backend/app/modules/moderation/services/moderation_service.py
