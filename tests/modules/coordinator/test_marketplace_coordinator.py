# -*- coding: utf-8 -*-
"""
backend/tests/modules/coordinator/test_marketplace_coordinator.py

MarketplaceCoordinator: flujos completos por actor con RecordingSink.

- Permisos se verifican antes de mutar
- Notificaciones se emiten tras el commit
- Un sink que falla no revierte la mutación
"""

from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from app.shared.errors import InvalidStateTransition, Unauthorized
from app.modules.coordinator import ActorContext, MarketplaceCoordinator
from app.modules.moderation.enums import ServiceStatus
from app.modules.notifications.enums import NotificationSeverity
from app.modules.notifications.repositories import ADMIN_RECIPIENT
from app.modules.settlement.enums import WithdrawalDecision, WithdrawalStatus

BANK = ("Al Rajhi Bank", "Ahmed Al-Harbi", "SA0380000000608010167519")


@pytest.fixture
def coordinator(db_session, sink):
    return MarketplaceCoordinator(db_session, sink)


@pytest.fixture
def consultant(consultant_id):
    return ActorContext.consultant(consultant_id)


@pytest.fixture
def admin():
    return ActorContext.admin(uuid4())


async def _fund(coordinator, consultant_id, amount):
    await coordinator.record_earning(
        ActorContext.system(), consultant_id, amount, release_immediately=True
    )


# =============================================================
# Liquidaciones
# =============================================================
@pytest.mark.asyncio
async def test_withdrawal_submit_and_approve(coordinator, sink, consultant, admin, consultant_id):
    await _fund(coordinator, consultant_id, 800)
    sink.sent.clear()

    request = await coordinator.submit_withdrawal(consultant, 500, *BANK)

    assert request.status == WithdrawalStatus.PENDING
    balance = await coordinator.get_balance(consultant, consultant_id)
    assert balance.available == Decimal("800.00")
    assert [n.title for n in sink.for_recipient(consultant_id)] == ["Solicitud de retiro enviada"]

    approved = await coordinator.decide_withdrawal(admin, request.id, WithdrawalDecision.APPROVE)

    assert approved.status == WithdrawalStatus.APPROVED
    assert approved.processed_at is not None
    balance = await coordinator.get_balance(admin, consultant_id)
    assert balance.available == Decimal("300.00")
    assert balance.withdrawn == Decimal("500.00")
    last = sink.for_recipient(consultant_id)[-1]
    assert last.title == "Retiro aprobado"
    assert last.severity == NotificationSeverity.SUCCESS
    assert "500.00" in last.message


@pytest.mark.asyncio
async def test_second_approval_fails_without_notifying(coordinator, sink, consultant, admin, consultant_id):
    await _fund(coordinator, consultant_id, 800)
    request = await coordinator.submit_withdrawal(consultant, 500, *BANK)
    await coordinator.decide_withdrawal(admin, request.id, WithdrawalDecision.APPROVE)
    sent_before = len(sink.sent)

    with pytest.raises(InvalidStateTransition):
        await coordinator.decide_withdrawal(admin, request.id, WithdrawalDecision.APPROVE)

    assert len(sink.sent) == sent_before
    balance = await coordinator.get_balance(consultant, consultant_id)
    assert balance.available == Decimal("300.00")
    assert balance.withdrawn == Decimal("500.00")


@pytest.mark.asyncio
async def test_rejection_notifies_with_reason(coordinator, sink, consultant, admin, consultant_id):
    await _fund(coordinator, consultant_id, 800)
    request = await coordinator.submit_withdrawal(consultant, 500, *BANK)

    rejected = await coordinator.decide_withdrawal(
        admin, request.id, WithdrawalDecision.REJECT, rejection_reason="IBAN no coincide"
    )

    assert rejected.status == WithdrawalStatus.REJECTED
    last = sink.for_recipient(consultant_id)[-1]
    assert last.severity == NotificationSeverity.ERROR
    assert "IBAN no coincide" in last.message


@pytest.mark.asyncio
async def test_consultant_cannot_decide(coordinator, sink, consultant, consultant_id):
    await _fund(coordinator, consultant_id, 800)
    request = await coordinator.submit_withdrawal(consultant, 500, *BANK)
    sent_before = len(sink.sent)

    with pytest.raises(Unauthorized):
        await coordinator.decide_withdrawal(consultant, request.id, WithdrawalDecision.APPROVE)

    current = await coordinator.get_withdrawal(consultant, request.id)
    assert current.status == WithdrawalStatus.PENDING
    assert len(sink.sent) == sent_before


@pytest.mark.asyncio
async def test_admin_cannot_submit_withdrawal(coordinator, admin):
    with pytest.raises(Unauthorized):
        await coordinator.submit_withdrawal(admin, 500, *BANK)


@pytest.mark.asyncio
async def test_other_consultant_cannot_read(coordinator, consultant, consultant_id, other_consultant_id):
    await _fund(coordinator, consultant_id, 800)
    request = await coordinator.submit_withdrawal(consultant, 200, *BANK)
    intruder = ActorContext.consultant(other_consultant_id)

    with pytest.raises(Unauthorized):
        await coordinator.get_withdrawal(intruder, request.id)
    with pytest.raises(Unauthorized):
        await coordinator.get_balance(intruder, consultant_id)
    with pytest.raises(Unauthorized):
        await coordinator.list_consultant_withdrawals(intruder, consultant_id)
    with pytest.raises(Unauthorized):
        await coordinator.list_withdrawals(intruder)


@pytest.mark.asyncio
async def test_list_consultant_withdrawals_requires_id(coordinator, admin):
    with pytest.raises(Unauthorized):
        await coordinator.list_consultant_withdrawals(admin, None)


@pytest.mark.asyncio
async def test_record_earning_requires_system_or_admin(coordinator, consultant, consultant_id):
    with pytest.raises(Unauthorized):
        await coordinator.record_earning(consultant, consultant_id, 100)

    balance = await coordinator.get_balance(consultant, consultant_id)
    assert balance.pending == Decimal("0.00")
    assert balance.available == Decimal("0.00")


@pytest.mark.asyncio
async def test_earning_then_release(coordinator, sink, consultant, admin, consultant_id):
    await coordinator.record_earning(ActorContext.system(), consultant_id, 400, idempotency_key="pay-1")
    await coordinator.release_pending(admin, consultant_id, 150)

    balance = await coordinator.get_balance(consultant, consultant_id)
    assert balance.pending == Decimal("250.00")
    assert balance.available == Decimal("150.00")
    assert sink.for_recipient(consultant_id)[0].title == "Nuevo ingreso"

    movements, total = await coordinator.list_movements(consultant, consultant_id)
    assert total == 2


@pytest.mark.asyncio
async def test_failing_sink_does_not_roll_back(db_session, consultant, admin, consultant_id, caplog):
    broken = AsyncMock()
    broken.notify.side_effect = RuntimeError("smtp caído")
    coordinator = MarketplaceCoordinator(db_session, broken)
    await _fund(coordinator, consultant_id, 800)

    request = await coordinator.submit_withdrawal(consultant, 500, *BANK)
    approved = await coordinator.decide_withdrawal(admin, request.id, WithdrawalDecision.APPROVE)

    assert approved.status == WithdrawalStatus.APPROVED
    balance = await coordinator.get_balance(consultant, consultant_id)
    await db_session.refresh(balance)
    assert balance.withdrawn == Decimal("500.00")
    assert broken.notify.await_count == 3
    assert "Notification delivery failed" in caplog.text


# =============================================================
# Moderación
# =============================================================
@pytest.mark.asyncio
async def test_service_reject_and_republish(coordinator, sink, consultant, admin, consultant_id):
    service = await coordinator.create_service(consultant, "Tax Planning", "Planeación fiscal anual", 750, 90)

    assert service.status == ServiceStatus.PENDING
    assert sink.for_recipient(ADMIN_RECIPIENT)[0].title == "Nueva consultoría por revisar"

    rejected = await coordinator.reject_service(admin, service.id, "needs more detail")
    assert rejected.status == ServiceStatus.REJECTED
    assert rejected.rejection_reason == "needs more detail"
    last = sink.for_recipient(consultant_id)[-1]
    assert last.title == "Consultoría rechazada"
    assert "needs more detail" in last.message

    republished = await coordinator.republish_service(consultant, service.id)
    assert republished.status == ServiceStatus.ACTIVE
    assert republished.rejection_reason is None


@pytest.mark.asyncio
async def test_convert_to_draft_hides_service(coordinator, sink, consultant, admin, consultant_id, other_consultant_id):
    service = await coordinator.create_service(consultant, "Tax Planning", "", 750, 90)
    await coordinator.approve_service(admin, service.id)
    assert [s.id for s in await coordinator.list_public_services()] == [service.id]

    drafted = await coordinator.convert_service_to_draft(admin, service.id, "seasonal pause")

    assert drafted.status == ServiceStatus.DRAFT
    assert drafted.rejection_reason.startswith("[")
    assert drafted.rejection_reason.endswith("] seasonal pause")
    assert await coordinator.list_public_services() == []
    last = sink.for_recipient(consultant_id)[-1]
    assert last.severity == NotificationSeverity.WARNING
    with pytest.raises(Unauthorized):
        await coordinator.get_service(ActorContext.consultant(other_consultant_id), service.id)


@pytest.mark.asyncio
async def test_moderation_requires_admin(coordinator, consultant):
    service = await coordinator.create_service(consultant, "Tax Planning", "", 750, 90)

    with pytest.raises(Unauthorized):
        await coordinator.approve_service(consultant, service.id)
    with pytest.raises(Unauthorized):
        await coordinator.reject_service(consultant, service.id, "x")

    current = await coordinator.get_service(consultant, service.id)
    assert current.status == ServiceStatus.PENDING


@pytest.mark.asyncio
async def test_only_owner_edits_or_deletes(coordinator, sink, consultant, other_consultant_id):
    service = await coordinator.create_service(consultant, "Tax Planning", "", 750, 90)
    intruder = ActorContext.consultant(other_consultant_id)

    with pytest.raises(Unauthorized):
        await coordinator.edit_service(intruder, service.id, {"price": 1})
    with pytest.raises(Unauthorized):
        await coordinator.delete_service(intruder, service.id)

    current = await coordinator.get_service(consultant, service.id)
    assert current.price == Decimal("750.00")


@pytest.mark.asyncio
async def test_admin_delete_notifies_owner_and_admins(coordinator, sink, consultant, admin, consultant_id):
    service = await coordinator.create_service(consultant, "Tax Planning", "", 750, 90)
    sink.sent.clear()

    deleted = await coordinator.delete_service(admin, service.id)

    assert deleted.title == "Tax Planning"
    owner_note = sink.for_recipient(consultant_id)[-1]
    assert owner_note.severity == NotificationSeverity.WARNING
    assert len(sink.for_recipient(ADMIN_RECIPIENT)) == 1


@pytest.mark.asyncio
async def test_consultant_lists_only_own(coordinator, consultant, consultant_id, other_consultant_id):
    await coordinator.create_service(consultant, "Mío", "", 100, 30)
    await coordinator.create_service(ActorContext.consultant(other_consultant_id), "Ajeno", "", 100, 30)

    items, total = await coordinator.list_services(consultant)
    assert total == 1
    assert items[0].consultant_id == consultant_id

    with pytest.raises(Unauthorized):
        await coordinator.list_services(consultant, consultant_id=other_consultant_id)

    _, admin_total = await coordinator.list_services(ActorContext.admin())
    assert admin_total == 2
# Fin del archivo backend/tests/modules/coordinator/test_marketplace_coordinator.py
