# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/repositories/withdrawal_request_repository.py

Repositorio de WithdrawalRequest.

claim_pending() implementa el check-and-set sobre `status`:
    UPDATE withdrawal_requests SET status=:new, ...
     WHERE id=:id AND status='pending'
Solo el primer decisor ve rowcount == 1; el resto recibe False.

Autor: Mustashar
Fecha: 2026-09-06
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import Select, String, cast, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.shared.database.transactions import now_utc
from app.modules.settlement.enums import WithdrawalStatus
from app.modules.settlement.models import WithdrawalRequest


class WithdrawalRequestRepository(BaseRepository[WithdrawalRequest]):

    def __init__(self) -> None:
        super().__init__(WithdrawalRequest)

    async def claim_pending(
        self,
        session: AsyncSession,
        request_id: UUID,
        *,
        to_status: WithdrawalStatus,
        processed_at: datetime,
        rejection_reason: Optional[str] = None,
        admin_notes: Optional[str] = None,
    ) -> bool:
        """Mueve la solicitud fuera de `pending` solo si sigue en `pending`."""
        values = {
            "status": to_status,
            "processed_at": processed_at,
            "updated_at": processed_at,
            "rejection_reason": rejection_reason,
        }
        if admin_notes is not None:
            values["admin_notes"] = admin_notes

        stmt = (
            update(WithdrawalRequest)
            .where(
                WithdrawalRequest.id == request_id,
                WithdrawalRequest.status == WithdrawalStatus.PENDING,
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount == 1

    async def update_admin_notes(
        self,
        session: AsyncSession,
        request: WithdrawalRequest,
        admin_notes: Optional[str],
    ) -> WithdrawalRequest:
        request.admin_notes = admin_notes
        request.updated_at = now_utc()
        await session.flush()
        return request

    def build_list_query(
        self,
        *,
        status: Optional[WithdrawalStatus] = None,
        consultant_id: Optional[UUID] = None,
        search: Optional[str] = None,
    ) -> Select:
        stmt = select(WithdrawalRequest)
        if status is not None:
            stmt = stmt.where(WithdrawalRequest.status == status)
        if consultant_id is not None:
            stmt = stmt.where(WithdrawalRequest.consultant_id == consultant_id)
        if search:
            pattern = f"%{search.strip()}%"
            stmt = stmt.where(
                or_(
                    WithdrawalRequest.bank_account_holder.ilike(pattern),
                    WithdrawalRequest.bank_name.ilike(pattern),
                    WithdrawalRequest.bank_iban.ilike(pattern),
                    cast(WithdrawalRequest.id, String).ilike(pattern),
                )
            )
        return stmt.order_by(WithdrawalRequest.created_at.desc())

    async def list_requests(
        self,
        session: AsyncSession,
        *,
        status: Optional[WithdrawalStatus] = None,
        consultant_id: Optional[UUID] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[Sequence[WithdrawalRequest], int]:
        stmt = self.build_list_query(status=status, consultant_id=consultant_id, search=search)
        return await self.paginate(session, stmt, limit=limit, offset=offset)


__all__ = ["WithdrawalRequestRepository"]
# Fin del archivo backend/app/modules/settlement/repositories/withdrawal_request_repository.py
