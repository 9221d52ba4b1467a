# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/repositories/balance_movement_repository.py

Repositorio del ledger de movimientos (solo inserción y lectura).

Autor: Mustashar
Fecha: 2026-09-06
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.settlement.enums import BalanceMovementKind
from app.modules.settlement.models import BalanceMovement, ConsultantBalance

logger = logging.getLogger(__name__)


class BalanceMovementRepository(BaseRepository[BalanceMovement]):

    def __init__(self) -> None:
        super().__init__(BalanceMovement)

    async def record(
        self,
        session: AsyncSession,
        balance: ConsultantBalance,
        *,
        kind: BalanceMovementKind,
        amount,
        withdrawal_request_id: Optional[UUID] = None,
        idempotency_key: Optional[str] = None,
        description: Optional[str] = None,
    ) -> BalanceMovement:
        """Inserta un movimiento con la foto del saldo ya actualizado."""
        if amount <= 0:
            raise ValueError("amount must be positive")

        movement = await self.create(
            session,
            consultant_id=balance.consultant_id,
            kind=kind,
            amount=amount,
            available_after=balance.available,
            pending_after=balance.pending,
            withdrawn_after=balance.withdrawn,
            withdrawal_request_id=withdrawal_request_id,
            idempotency_key=idempotency_key,
            description=description,
        )
        logger.debug(
            "BalanceMovement created: consultant=%s kind=%s amount=%s",
            balance.consultant_id, kind.value, amount,
        )
        return movement

    async def get_by_idempotency_key(
        self,
        session: AsyncSession,
        consultant_id: UUID,
        idempotency_key: str,
    ) -> Optional[BalanceMovement]:
        stmt = select(BalanceMovement).where(
            BalanceMovement.consultant_id == consultant_id,
            BalanceMovement.idempotency_key == idempotency_key,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_consultant(
        self,
        session: AsyncSession,
        consultant_id: UUID,
        *,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[Sequence[BalanceMovement], int]:
        stmt = (
            select(BalanceMovement)
            .where(BalanceMovement.consultant_id == consultant_id)
            .order_by(BalanceMovement.created_at.desc())
        )
        return await self.paginate(session, stmt, limit=limit, offset=offset)


__all__ = ["BalanceMovementRepository"]
# Fin del archivo backend/app/modules/settlement/repositories/balance_movement_repository.py
