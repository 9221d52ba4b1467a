# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/repositories/consultant_balance_repository.py

Repositorio de ConsultantBalance.

apply_delta() es el único punto que muta los montos del saldo: valida que
ningún campo quede negativo y que `withdrawn` no decrezca, incrementa
`version` y actualiza `updated_at`.

Autor: Mustashar
Fecha: 2026-09-06
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.transactions import now_utc
from app.shared.utils.money import ZERO
from app.modules.settlement.models import ConsultantBalance

logger = logging.getLogger(__name__)


class ConsultantBalanceRepository:
    """Repositorio para ConsultantBalance (clave: consultant_id)."""

    async def get_by_consultant_id(
        self,
        session: AsyncSession,
        consultant_id: UUID,
        *,
        for_update: bool = False,
    ) -> Optional[ConsultantBalance]:
        stmt = select(ConsultantBalance).where(ConsultantBalance.consultant_id == consultant_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)

        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_or_create(
        self,
        session: AsyncSession,
        consultant_id: UUID,
        *,
        currency: str = "SAR",
    ) -> tuple[ConsultantBalance, bool]:
        """
        Obtiene (con lock) o crea el saldo del consultor.

        Si otra transacción lo crea en paralelo, el flush falla con
        IntegrityError y la operación completa hace rollback.

        Returns:
            Tuple (balance, created: bool)
        """
        balance = await self.get_by_consultant_id(session, consultant_id, for_update=True)
        if balance:
            return balance, False

        balance = ConsultantBalance(
            consultant_id=consultant_id,
            available=ZERO,
            pending=ZERO,
            withdrawn=ZERO,
            currency=currency,
            version=1,
        )
        session.add(balance)
        await session.flush()
        logger.info("Consultant balance created: consultant=%s", consultant_id)
        return balance, True

    async def apply_delta(
        self,
        session: AsyncSession,
        balance: ConsultantBalance,
        *,
        available: Decimal = ZERO,
        pending: Decimal = ZERO,
        withdrawn: Decimal = ZERO,
    ) -> ConsultantBalance:
        """
        Aplica deltas sobre el saldo.

        Raises:
            ValueError: si algún campo quedaría negativo o withdrawn decrecería
        """
        if withdrawn < 0:
            raise ValueError("withdrawn no puede decrecer")

        new_available = balance.available + available
        new_pending = balance.pending + pending
        new_withdrawn = balance.withdrawn + withdrawn
        if new_available < 0 or new_pending < 0:
            raise ValueError(
                f"Saldo negativo no permitido: available={new_available} pending={new_pending}"
            )

        balance.available = new_available
        balance.pending = new_pending
        balance.withdrawn = new_withdrawn
        balance.version += 1
        balance.updated_at = now_utc()
        await session.flush()
        return balance


__all__ = ["ConsultantBalanceRepository"]
# Fin del archivo backend/app/modules/settlement/repositories/consultant_balance_repository.py
