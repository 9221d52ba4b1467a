# -*- coding: utf-8 -*-
"""
backend/tests/modules/settlement/test_withdrawal_service.py

WithdrawalService: validaciones de envío, decisión única y atomicidad
(estado + saldo juntos o ninguno).
"""

from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from app.shared.errors import (
    CurrencyMismatch,
    InsufficientBalance,
    InvalidAmount,
    InvalidStateTransition,
    MissingReason,
    WithdrawalNotFound,
)
from app.modules.settlement.enums import WithdrawalDecision, WithdrawalStatus
from app.modules.settlement.repositories import WithdrawalRequestRepository
from app.modules.settlement.services import BalanceService, WithdrawalService
from app.shared.database.transactions import now_utc

BANK = {
    "bank_name": "Al Rajhi Bank",
    "bank_account_holder": "Ahmed Al-Harbi",
    "bank_iban": "SA0380000000608010167519",
}


async def _fund(session, consultant_id, amount):
    await BalanceService().record_earning(session, consultant_id, amount, release_immediately=True)


async def _submit(session, consultant_id, amount, service=None):
    service = service or WithdrawalService()
    return await service.submit_withdrawal(session, consultant_id, amount, **BANK)


@pytest.mark.asyncio
async def test_submit_creates_pending_without_touching_balance(db_session, consultant_id):
    await _fund(db_session, consultant_id, 800)

    request = await _submit(db_session, consultant_id, 500)

    assert request.status == WithdrawalStatus.PENDING
    assert request.amount == Decimal("500.00")
    assert request.processed_at is None
    assert request.currency == "SAR"
    balance = await BalanceService().get_balance(db_session, consultant_id)
    assert balance.available == Decimal("800.00")
    assert balance.withdrawn == Decimal("0.00")


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", [0, -100, "0.00"])
async def test_submit_rejects_non_positive(db_session, consultant_id, amount):
    await _fund(db_session, consultant_id, 800)
    with pytest.raises(InvalidAmount) as ei:
        await _submit(db_session, consultant_id, amount)
    assert ei.value.minimum is None


@pytest.mark.asyncio
async def test_submit_rejects_below_minimum(db_session, consultant_id):
    await _fund(db_session, consultant_id, 800)
    with pytest.raises(InvalidAmount) as ei:
        await _submit(db_session, consultant_id, "99.99")
    assert ei.value.minimum == Decimal("100")


@pytest.mark.asyncio
async def test_minimum_can_be_injected(db_session, consultant_id):
    await _fund(db_session, consultant_id, 800)
    service = WithdrawalService(minimum_amount=Decimal("600"))
    with pytest.raises(InvalidAmount):
        await _submit(db_session, consultant_id, 500, service=service)


@pytest.mark.asyncio
async def test_submit_rejects_amount_over_available(db_session, consultant_id):
    await _fund(db_session, consultant_id, 300)
    with pytest.raises(InsufficientBalance) as ei:
        await _submit(db_session, consultant_id, 500)
    assert ei.value.available == Decimal("300.00")

    items, total = await WithdrawalService().list_withdrawals(db_session, consultant_id=consultant_id)
    assert total == 0


@pytest.mark.asyncio
async def test_submit_pending_balance_is_not_withdrawable(db_session, consultant_id):
    await BalanceService().record_earning(db_session, consultant_id, 1000)
    with pytest.raises(InsufficientBalance):
        await _submit(db_session, consultant_id, 100)


@pytest.mark.asyncio
async def test_submit_requires_bank_details(db_session, consultant_id):
    await _fund(db_session, consultant_id, 800)
    with pytest.raises(ValueError):
        await WithdrawalService().submit_withdrawal(
            db_session, consultant_id, 200, "Bank", "   ", "SA00"
        )


@pytest.mark.asyncio
async def test_submit_rejects_currency_other_than_balance(db_session, consultant_id):
    await _fund(db_session, consultant_id, 800)

    with pytest.raises(CurrencyMismatch) as ei:
        await WithdrawalService().submit_withdrawal(db_session, consultant_id, 500, **BANK, currency="USD")

    assert ei.value.balance_currency == "SAR"
    items, total = await WithdrawalService().list_withdrawals(db_session, consultant_id=consultant_id)
    assert total == 0


@pytest.mark.asyncio
async def test_submit_records_balance_currency(db_session, consultant_id):
    await _fund(db_session, consultant_id, 800)

    request = await WithdrawalService().submit_withdrawal(db_session, consultant_id, 500, **BANK, currency=" sar ")

    assert request.currency == "SAR"


@pytest.mark.asyncio
async def test_two_submissions_may_exceed_available(db_session, consultant_id):
    """Envío sin reserva: ambas pasan contra el mismo available."""
    await _fund(db_session, consultant_id, 500)

    first = await _submit(db_session, consultant_id, 400)
    second = await _submit(db_session, consultant_id, 400)

    assert first.status == second.status == WithdrawalStatus.PENDING


@pytest.mark.asyncio
async def test_approve_settles_balance(db_session, consultant_id):
    await _fund(db_session, consultant_id, 800)
    request = await _submit(db_session, consultant_id, 500)

    decided = await WithdrawalService().decide_withdrawal(
        db_session, request.id, WithdrawalDecision.APPROVE, admin_notes="Transferencia SPEI 123"
    )

    assert decided.status == WithdrawalStatus.APPROVED
    assert decided.processed_at is not None
    assert decided.rejection_reason is None
    assert decided.admin_notes == "Transferencia SPEI 123"
    balance = await BalanceService().get_balance(db_session, consultant_id)
    assert balance.available == Decimal("300.00")
    assert balance.withdrawn == Decimal("500.00")


@pytest.mark.asyncio
async def test_reject_requires_reason(db_session, consultant_id):
    await _fund(db_session, consultant_id, 800)
    request = await _submit(db_session, consultant_id, 500)

    for reason in (None, "", "   "):
        with pytest.raises(MissingReason):
            await WithdrawalService().decide_withdrawal(
                db_session, request.id, "reject", rejection_reason=reason
            )

    current = await WithdrawalService().get_withdrawal(db_session, request.id)
    assert current.status == WithdrawalStatus.PENDING


@pytest.mark.asyncio
async def test_reject_keeps_balance(db_session, consultant_id):
    await _fund(db_session, consultant_id, 800)
    request = await _submit(db_session, consultant_id, 500)

    decided = await WithdrawalService().decide_withdrawal(
        db_session, request.id, WithdrawalDecision.REJECT, rejection_reason="IBAN inválido"
    )

    assert decided.status == WithdrawalStatus.REJECTED
    assert decided.rejection_reason == "IBAN inválido"
    assert decided.processed_at is not None
    balance = await BalanceService().get_balance(db_session, consultant_id)
    assert balance.available == Decimal("800.00")
    assert balance.withdrawn == Decimal("0.00")


@pytest.mark.asyncio
@pytest.mark.parametrize("second", [WithdrawalDecision.APPROVE, WithdrawalDecision.REJECT])
async def test_decision_applies_at_most_once(db_session, consultant_id, second):
    await _fund(db_session, consultant_id, 800)
    request = await _submit(db_session, consultant_id, 500)
    request_id = request.id
    service = WithdrawalService()
    await service.decide_withdrawal(db_session, request_id, WithdrawalDecision.APPROVE)

    with pytest.raises(InvalidStateTransition):
        await service.decide_withdrawal(db_session, request_id, second, rejection_reason="tarde")

    balance = await BalanceService().get_balance(db_session, consultant_id)
    assert balance.available == Decimal("300.00")
    assert balance.withdrawn == Decimal("500.00")
    current = await service.get_withdrawal(db_session, request_id)
    assert current.status == WithdrawalStatus.APPROVED
    assert current.rejection_reason is None


@pytest.mark.asyncio
async def test_claim_pending_is_check_and_set(db_session, consultant_id):
    await _fund(db_session, consultant_id, 800)
    request = await _submit(db_session, consultant_id, 500)
    repo = WithdrawalRequestRepository()

    first = await repo.claim_pending(
        db_session, request.id, to_status=WithdrawalStatus.APPROVED, processed_at=now_utc()
    )
    second = await repo.claim_pending(
        db_session, request.id, to_status=WithdrawalStatus.REJECTED, processed_at=now_utc(),
        rejection_reason="x",
    )

    assert first is True
    assert second is False
    await db_session.rollback()


@pytest.mark.asyncio
async def test_lost_race_raises_and_leaves_balance(db_session, consultant_id):
    """Si otro decisor gana entre el lock y el UPDATE, no se toca el saldo."""
    await _fund(db_session, consultant_id, 800)
    request = await _submit(db_session, consultant_id, 500)

    repo = WithdrawalRequestRepository()
    repo.claim_pending = AsyncMock(return_value=False)
    service = WithdrawalService(request_repo=repo)

    with pytest.raises(InvalidStateTransition):
        await service.decide_withdrawal(db_session, request.id, WithdrawalDecision.APPROVE)

    balance = await BalanceService().get_balance(db_session, consultant_id)
    assert balance.available == Decimal("800.00")
    assert balance.withdrawn == Decimal("0.00")


@pytest.mark.asyncio
async def test_balance_failure_rolls_back_status(db_session, consultant_id):
    """Estado y saldo son una sola unidad: si falla el saldo, la solicitud sigue pending."""
    await _fund(db_session, consultant_id, 800)
    request = await _submit(db_session, consultant_id, 500)
    request_id = request.id

    balances = BalanceService()
    balances.settle_withdrawal = AsyncMock(side_effect=RuntimeError("db down"))
    service = WithdrawalService(balance_service=balances)

    with pytest.raises(RuntimeError):
        await service.decide_withdrawal(db_session, request_id, WithdrawalDecision.APPROVE)

    current = await WithdrawalService().get_withdrawal(db_session, request_id)
    await db_session.refresh(current)
    assert current.status == WithdrawalStatus.PENDING
    assert current.processed_at is None
    balance = await BalanceService().get_balance(db_session, consultant_id)
    await db_session.refresh(balance)
    assert balance.withdrawn == Decimal("0.00")


@pytest.mark.asyncio
async def test_decide_unknown_request(db_session):
    with pytest.raises(WithdrawalNotFound):
        await WithdrawalService().decide_withdrawal(db_session, uuid4(), WithdrawalDecision.APPROVE)


@pytest.mark.asyncio
async def test_admin_notes_editable_after_decision(db_session, consultant_id):
    await _fund(db_session, consultant_id, 800)
    request = await _submit(db_session, consultant_id, 500)
    service = WithdrawalService()
    await service.decide_withdrawal(db_session, request.id, WithdrawalDecision.APPROVE)

    updated = await service.update_admin_notes(db_session, request.id, "  Pagado el lunes  ")

    assert updated.admin_notes == "Pagado el lunes"
    assert updated.status == WithdrawalStatus.APPROVED


@pytest.mark.asyncio
async def test_list_withdrawals_filters(db_session, consultant_id, other_consultant_id):
    await _fund(db_session, consultant_id, 2000)
    await _fund(db_session, other_consultant_id, 2000)
    service = WithdrawalService()
    mine = await _submit(db_session, consultant_id, 500)
    await service.submit_withdrawal(
        db_session, other_consultant_id, 700, "SNB", "Fatima Zahra", "SA1111"
    )
    await service.decide_withdrawal(db_session, mine.id, WithdrawalDecision.APPROVE)

    pending, total_pending = await service.list_withdrawals(db_session, status=WithdrawalStatus.PENDING)
    assert total_pending == 1
    assert pending[0].consultant_id == other_consultant_id

    found, total_found = await service.list_withdrawals(db_session, search="fatima")
    assert total_found == 1
    assert found[0].bank_account_holder == "Fatima Zahra"

    own, total_own = await service.list_withdrawals(db_session, consultant_id=consultant_id)
    assert total_own == 1
    assert own[0].id == mine.id


@pytest.mark.asyncio
async def test_list_withdrawals_search_matches_request_id(db_session, consultant_id):
    await _fund(db_session, consultant_id, 2000)
    target = await _submit(db_session, consultant_id, 500)
    await _submit(db_session, consultant_id, 600)

    found, total = await WithdrawalService().list_withdrawals(db_session, search=target.id.hex[:8])

    assert target.id in [r.id for r in found]
    assert total >= 1
# Fin del archivo backend/tests/modules/settlement/test_withdrawal_service.py
