# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/services/balance_service.py

Servicio de saldos de consultores.

Provee:
- get_balance: lectura (proyección en cero si el consultor aún no tiene saldo)
- record_earning: ingreso desde el productor de eventos de pago (idempotente)
- release_pending: pending → available
- settle_withdrawal: available → withdrawn (lo invoca WithdrawalService dentro
  de su propia transacción; NO hace commit)
- list_movements: ledger del consultor

Autor: Mustashar
Fecha: 2026-09-06
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config import settings
from app.shared.database.transactions import commit_or_raise
from app.shared.errors import InvalidAmount
from app.shared.utils.money import ZERO, to_money
from app.modules.settlement.enums import BalanceMovementKind
from app.modules.settlement.models import BalanceMovement, ConsultantBalance
from app.modules.settlement.repositories import (
    BalanceMovementRepository,
    ConsultantBalanceRepository,
)

logger = logging.getLogger(__name__)


def parse_amount(value: Any) -> Decimal:
    """Normaliza un monto de entrada; InvalidAmount si no es numérico."""
    try:
        return to_money(value)
    except ValueError as e:
        raise InvalidAmount(value, message=f"Monto inválido: {value!r}. Ingresa un número.") from e


class BalanceService:
    """
    Único escritor de ConsultantBalance.
    """

    def __init__(
        self,
        balance_repo: Optional[ConsultantBalanceRepository] = None,
        movement_repo: Optional[BalanceMovementRepository] = None,
    ):
        self.balance_repo = balance_repo or ConsultantBalanceRepository()
        self.movement_repo = movement_repo or BalanceMovementRepository()

    async def get_balance(self, session: AsyncSession, consultant_id: UUID) -> ConsultantBalance:
        """
        Devuelve el saldo del consultor.

        Si aún no existe, devuelve una instancia transitoria en cero
        (no se agrega a la sesión; leer nunca crea filas).
        """
        balance = await self.balance_repo.get_by_consultant_id(session, consultant_id)
        if balance:
            return balance
        return ConsultantBalance(
            consultant_id=consultant_id,
            available=ZERO,
            pending=ZERO,
            withdrawn=ZERO,
            currency=settings.withdrawal_default_currency,
            version=0,
        )

    async def record_earning(
        self,
        session: AsyncSession,
        consultant_id: UUID,
        amount: Any,
        *,
        release_immediately: bool = False,
        idempotency_key: Optional[str] = None,
        description: Optional[str] = None,
    ) -> BalanceMovement:
        """
        Registra un ingreso del consultor.

        Va a `pending` (o directo a `available` si release_immediately).
        Crea el saldo implícitamente. Idempotente vía idempotency_key.
        """
        amt = parse_amount(amount)
        if amt <= 0:
            raise InvalidAmount(amt)

        async def _work() -> BalanceMovement:
            if idempotency_key:
                existing = await self.movement_repo.get_by_idempotency_key(
                    session, consultant_id, idempotency_key
                )
                if existing:
                    logger.info(
                        "Idempotent record_earning: already exists for consultant=%s key=%s",
                        consultant_id, idempotency_key,
                    )
                    return existing

            balance, _ = await self.balance_repo.get_or_create(
                session, consultant_id, currency=settings.withdrawal_default_currency
            )
            if release_immediately:
                await self.balance_repo.apply_delta(session, balance, available=amt)
            else:
                await self.balance_repo.apply_delta(session, balance, pending=amt)

            movement = await self.movement_repo.record(
                session,
                balance,
                kind=BalanceMovementKind.EARNING_RECORDED,
                amount=amt,
                idempotency_key=idempotency_key,
                description=description,
            )
            logger.info(
                "Earning recorded: consultant=%s amount=%s released=%s available=%s pending=%s",
                consultant_id, amt, release_immediately, balance.available, balance.pending,
            )
            return movement

        return await commit_or_raise(session, _work)

    async def release_pending(
        self,
        session: AsyncSession,
        consultant_id: UUID,
        amount: Any = None,
    ) -> BalanceMovement:
        """
        Libera saldo pendiente a disponible (todo si amount es None).

        Raises:
            InvalidAmount: monto no positivo o mayor que `pending`
        """
        amt = parse_amount(amount) if amount is not None else None
        if amt is not None and amt <= 0:
            raise InvalidAmount(amt)

        async def _work() -> BalanceMovement:
            balance = await self.balance_repo.get_by_consultant_id(
                session, consultant_id, for_update=True
            )
            pending = balance.pending if balance else ZERO
            to_release = pending if amt is None else amt
            if to_release <= 0:
                raise InvalidAmount(
                    to_release, message="No hay saldo pendiente por liberar."
                )
            if to_release > pending:
                raise InvalidAmount(
                    to_release,
                    message=f"No puedes liberar {to_release}: el saldo pendiente es {pending}.",
                )

            await self.balance_repo.apply_delta(
                session, balance, pending=-to_release, available=to_release
            )
            movement = await self.movement_repo.record(
                session,
                balance,
                kind=BalanceMovementKind.EARNING_RELEASED,
                amount=to_release,
            )
            logger.info(
                "Pending released: consultant=%s amount=%s available=%s pending=%s",
                consultant_id, to_release, balance.available, balance.pending,
            )
            return movement

        return await commit_or_raise(session, _work)

    async def settle_withdrawal(
        self,
        session: AsyncSession,
        consultant_id: UUID,
        amount: Decimal,
        *,
        withdrawal_request_id: UUID,
    ) -> BalanceMovement:
        """
        available = max(0, available - amount); withdrawn += amount.

        Se ejecuta dentro de la transacción de la decisión; no hace commit.
        """
        balance, _ = await self.balance_repo.get_or_create(
            session, consultant_id, currency=settings.withdrawal_default_currency
        )
        deducted = min(balance.available, amount)
        if deducted < amount:
            logger.warning(
                "Withdrawal exceeds available balance, flooring at zero: consultant=%s "
                "request=%s amount=%s available=%s",
                consultant_id, withdrawal_request_id, amount, balance.available,
            )

        await self.balance_repo.apply_delta(
            session, balance, available=-deducted, withdrawn=amount
        )
        return await self.movement_repo.record(
            session,
            balance,
            kind=BalanceMovementKind.WITHDRAWAL_SETTLED,
            amount=amount,
            withdrawal_request_id=withdrawal_request_id,
        )

    async def list_movements(
        self,
        session: AsyncSession,
        consultant_id: UUID,
        *,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[Sequence[BalanceMovement], int]:
        return await self.movement_repo.list_for_consultant(
            session, consultant_id, limit=limit, offset=offset
        )


__all__ = ["BalanceService", "parse_amount"]
# Fin del archivo backend/app/modules/settlement/services/balance_service.py
