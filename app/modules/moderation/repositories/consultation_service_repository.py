# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/repositories/consultation_service_repository.py

Repositorio de ConsultationService.

compare_and_set_status() cambia el estado solo si la fila sigue en el estado
leído (WHERE status=:expected); dos admins moderando la misma consultoría
no pueden pisarse.

Autor: Mustashar
Fecha: 2026-09-10
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import Select, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.shared.database.transactions import now_utc
from app.modules.moderation.enums import ServiceStatus
from app.modules.moderation.models import ConsultationService


class ConsultationServiceRepository(BaseRepository[ConsultationService]):

    def __init__(self) -> None:
        super().__init__(ConsultationService)

    async def compare_and_set_status(
        self,
        session: AsyncSession,
        service_id: UUID,
        *,
        expected: ServiceStatus,
        to_status: ServiceStatus,
        rejection_reason: Optional[str],
    ) -> bool:
        stmt = (
            update(ConsultationService)
            .where(
                ConsultationService.id == service_id,
                ConsultationService.status == expected,
            )
            .values(
                status=to_status,
                rejection_reason=rejection_reason,
                updated_at=now_utc(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount == 1

    async def update_fields(
        self,
        session: AsyncSession,
        service: ConsultationService,
        fields: dict,
    ) -> ConsultationService:
        for name, value in fields.items():
            setattr(service, name, value)
        service.updated_at = now_utc()
        await session.flush()
        return service

    def build_list_query(
        self,
        *,
        status: Optional[ServiceStatus] = None,
        consultant_id: Optional[UUID] = None,
        search: Optional[str] = None,
    ) -> Select:
        stmt = select(ConsultationService)
        if status is not None:
            stmt = stmt.where(ConsultationService.status == status)
        if consultant_id is not None:
            stmt = stmt.where(ConsultationService.consultant_id == consultant_id)
        if search:
            pattern = f"%{search.strip()}%"
            stmt = stmt.where(
                or_(
                    ConsultationService.title.ilike(pattern),
                    ConsultationService.description.ilike(pattern),
                )
            )
        return stmt.order_by(ConsultationService.created_at.desc())

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
        stmt = self.build_list_query(status=status, consultant_id=consultant_id, search=search)
        return await self.paginate(session, stmt, limit=limit, offset=offset)

    async def list_public(
        self,
        session: AsyncSession,
        *,
        consultant_id: Optional[UUID] = None,
    ) -> Sequence[ConsultationService]:
        stmt = self.build_list_query(status=ServiceStatus.ACTIVE, consultant_id=consultant_id)
        result = await session.execute(stmt)
        return result.scalars().all()


__all__ = ["ConsultationServiceRepository"]
# Fin del archivo backend/app/modules/moderation/repositories/consultation_service_repository.py
