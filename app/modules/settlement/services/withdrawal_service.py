# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/services/withdrawal_service.py

Ciclo de vida de las solicitudes de retiro.

submit_withdrawal:
    Valida monto (> 0, >= mínimo, <= available) y crea la solicitud en
    `pending`. NO descuenta `available`: los fondos siguen visibles como
    disponibles hasta que un admin decide. Dos solicitudes simultáneas
    pueden sumar más que el saldo; la aprobación lo absorbe con el piso en 0.

decide_withdrawal:
    Una sola transacción:
    1. SELECT ... FOR UPDATE de la solicitud
    2. validate_withdrawal_transition(status, destino)
    3. check-and-set de status (WHERE status='pending'); 0 filas → InvalidStateTransition
    4. si aprueba: BalanceService.settle_withdrawal (lock del saldo + ledger)
    5. commit; cualquier fallo revierte estado y saldo juntos

Autor: Mustashar
Fecha: 2026-09-07
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Optional, Sequence, Tuple, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config import settings
from app.shared.database.transactions import commit_or_raise, now_utc
from app.shared.errors import (
    CurrencyMismatch,
    InsufficientBalance,
    InvalidAmount,
    InvalidStateTransition,
    MissingReason,
    WithdrawalNotFound,
)
from app.shared.utils.money import ZERO
from app.modules.settlement.enums import (
    WithdrawalDecision,
    WithdrawalStatus,
    validate_withdrawal_transition,
)
from app.modules.settlement.models import WithdrawalRequest
from app.modules.settlement.repositories import (
    ConsultantBalanceRepository,
    WithdrawalRequestRepository,
)
from .balance_service import BalanceService, parse_amount

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class WithdrawalService:

    def __init__(
        self,
        request_repo: Optional[WithdrawalRequestRepository] = None,
        balance_repo: Optional[ConsultantBalanceRepository] = None,
        balance_service: Optional[BalanceService] = None,
        minimum_amount: Optional[Decimal] = None,
    ):
        self.request_repo = request_repo or WithdrawalRequestRepository()
        self.balance_repo = balance_repo or ConsultantBalanceRepository()
        self.balance_service = balance_service or BalanceService(balance_repo=self.balance_repo)
        self._minimum_amount = minimum_amount

    @property
    def minimum_amount(self) -> Decimal:
        if self._minimum_amount is not None:
            return self._minimum_amount
        return Decimal(settings.withdrawal_minimum_amount)

    async def submit_withdrawal(
        self,
        session: AsyncSession,
        consultant_id: UUID,
        amount: Any,
        bank_name: str,
        bank_account_holder: str,
        bank_iban: str,
        *,
        currency: Optional[str] = None,
    ) -> WithdrawalRequest:
        """
        Crea una solicitud de retiro en `pending`.

        Raises:
            InvalidAmount: monto no positivo o inferior al mínimo
            CurrencyMismatch: moneda distinta a la del saldo del consultor
            InsufficientBalance: monto mayor que el saldo disponible
            ValueError: datos bancarios vacíos
        """
        amt = parse_amount(amount)
        if amt <= 0:
            raise InvalidAmount(amt)
        minimum = self.minimum_amount
        if amt < minimum:
            raise InvalidAmount(amt, minimum=minimum)

        bank = {
            "bank_name": _clean(bank_name),
            "bank_account_holder": _clean(bank_account_holder),
            "bank_iban": _clean(bank_iban),
        }
        missing = [k for k, v in bank.items() if not v]
        if missing:
            raise ValueError(f"Datos bancarios incompletos: {', '.join(missing)}")

        async def _work() -> WithdrawalRequest:
            balance = await self.balance_repo.get_by_consultant_id(session, consultant_id)
            available = balance.available if balance else ZERO
            balance_currency = balance.currency if balance else settings.withdrawal_default_currency
            requested_currency = (currency or balance_currency).strip().upper()
            if requested_currency != balance_currency:
                raise CurrencyMismatch(requested_currency, balance_currency)
            if amt > available:
                raise InsufficientBalance(requested=amt, available=available)

            request = await self.request_repo.create(
                session,
                consultant_id=consultant_id,
                amount=amt,
                currency=balance_currency,
                status=WithdrawalStatus.PENDING,
                **bank,
            )
            logger.info(
                "Withdrawal submitted: id=%s consultant=%s amount=%s available=%s",
                request.id, consultant_id, amt, available,
            )
            return request

        return await commit_or_raise(session, _work)

    async def decide_withdrawal(
        self,
        session: AsyncSession,
        request_id: UUID,
        decision: Union[WithdrawalDecision, str],
        *,
        rejection_reason: Optional[str] = None,
        admin_notes: Optional[str] = None,
    ) -> WithdrawalRequest:
        """
        Aprueba o rechaza una solicitud `pending` (una sola vez).

        Raises:
            MissingReason: rechazo sin motivo
            WithdrawalNotFound: la solicitud no existe
            InvalidStateTransition: la solicitud ya fue procesada
        """
        decision = WithdrawalDecision(decision)
        reason = _clean(rejection_reason)
        if decision is WithdrawalDecision.REJECT and not reason:
            raise MissingReason("rechazar la solicitud de retiro")
        if decision is WithdrawalDecision.APPROVE:
            reason = None
        notes = _clean(admin_notes)
        target = decision.target_status

        async def _work() -> WithdrawalRequest:
            request = await self.request_repo.get(session, request_id, for_update=True)
            if not request:
                raise WithdrawalNotFound(request_id)

            from_status = request.status
            validate_withdrawal_transition(from_status, target)

            claimed = await self.request_repo.claim_pending(
                session,
                request.id,
                to_status=target,
                processed_at=now_utc(),
                rejection_reason=reason,
                admin_notes=notes,
            )
            if not claimed:
                # Otro admin decidió entre la lectura y el UPDATE
                raise InvalidStateTransition("solicitud de retiro", from_status, target)

            if decision is WithdrawalDecision.APPROVE:
                await self.balance_service.settle_withdrawal(
                    session,
                    request.consultant_id,
                    request.amount,
                    withdrawal_request_id=request.id,
                )

            await session.refresh(request)
            logger.info(
                "Withdrawal %s: id=%s consultant=%s amount=%s",
                target.value, request.id, request.consultant_id, request.amount,
            )
            return request

        return await commit_or_raise(session, _work)

    async def update_admin_notes(
        self,
        session: AsyncSession,
        request_id: UUID,
        admin_notes: Optional[str],
    ) -> WithdrawalRequest:
        """Las notas internas siguen siendo editables tras la decisión."""
        async def _work() -> WithdrawalRequest:
            request = await self.request_repo.get(session, request_id, for_update=True)
            if not request:
                raise WithdrawalNotFound(request_id)
            return await self.request_repo.update_admin_notes(session, request, _clean(admin_notes))

        return await commit_or_raise(session, _work)

    async def get_withdrawal(self, session: AsyncSession, request_id: UUID) -> WithdrawalRequest:
        request = await self.request_repo.get(session, request_id)
        if not request:
            raise WithdrawalNotFound(request_id)
        return request

    async def list_withdrawals(
        self,
        session: AsyncSession,
        *,
        status: Optional[WithdrawalStatus] = None,
        consultant_id: Optional[UUID] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[Sequence[WithdrawalRequest], int]:
        return await self.request_repo.list_requests(
            session,
            status=status,
            consultant_id=consultant_id,
            search=_clean(search),
            limit=limit,
            offset=offset,
        )


__all__ = ["WithdrawalService"]
# Fin del archivo backend/app/modules/settlement/services/withdrawal_service.py
