# -*- coding: utf-8 -*-
"""
backend/tests/modules/moderation/test_moderation_service.py

ModerationService: ciclo de vida de una consultoría, motivos obligatorios,
visibilidad pública y restricciones de edición.
"""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from app.shared.errors import InvalidStateTransition, MissingReason, ServiceNotFound
from app.modules.moderation.enums import ServiceStatus
from app.modules.moderation.services import DeletedService, ModerationService


async def _create(session, consultant_id, title="Estrategia fiscal para PyMEs", **kwargs):
    payload = {"description": "Revisión de obligaciones y régimen", "price": 500, "duration": 60}
    payload.update(kwargs)
    return await ModerationService().create(session, consultant_id, title, **payload)


@pytest.mark.asyncio
async def test_new_service_starts_pending(db_session, consultant_id):
    service = await _create(db_session, consultant_id)

    assert service.status == ServiceStatus.PENDING
    assert service.price == Decimal("500.00")
    assert service.rejection_reason is None
    assert not service.is_publicly_visible


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [{"title": "   "}, {"price": 0}, {"price": -10}, {"duration": 0}, {"duration": 1.5}, {"duration": None}],
)
async def test_create_rejects_invalid_content(db_session, consultant_id, overrides):
    with pytest.raises(ValueError):
        await _create(db_session, consultant_id, **overrides)


@pytest.mark.asyncio
async def test_approve_makes_service_public(db_session, consultant_id):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id)

    approved = await moderation.approve(db_session, service.id)

    assert approved.status == ServiceStatus.ACTIVE
    assert approved.is_publicly_visible
    public = await moderation.list_public(db_session)
    assert [s.id for s in public] == [service.id]


@pytest.mark.asyncio
@pytest.mark.parametrize("reason", [None, "", "   "])
async def test_reject_requires_reason(db_session, consultant_id, reason):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id)

    with pytest.raises(MissingReason):
        await moderation.reject(db_session, service.id, reason)

    assert (await moderation.get(db_session, service.id)).status == ServiceStatus.PENDING


@pytest.mark.asyncio
async def test_reject_then_republish_clears_reason(db_session, consultant_id):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id)

    rejected = await moderation.reject(db_session, service.id, "  Precio fuera de rango  ")
    assert rejected.status == ServiceStatus.REJECTED
    assert rejected.rejection_reason == "Precio fuera de rango"

    republished = await moderation.republish(db_session, service.id)
    assert republished.status == ServiceStatus.ACTIVE
    assert republished.rejection_reason is None


@pytest.mark.asyncio
async def test_convert_to_draft_hides_and_stamps_reason(db_session, consultant_id):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id)
    await moderation.approve(db_session, service.id)
    at = datetime(2026, 9, 15, 8, 30, tzinfo=timezone.utc)

    drafted = await moderation.convert_to_draft(db_session, service.id, "Falta certificación", at=at)

    assert drafted.status == ServiceStatus.DRAFT
    assert drafted.rejection_reason == "[2026-09-15 08:30 UTC] Falta certificación"
    assert not drafted.is_publicly_visible
    assert await moderation.list_public(db_session) == []

    republished = await moderation.republish(db_session, service.id)
    assert republished.status == ServiceStatus.ACTIVE
    assert republished.rejection_reason is None


@pytest.mark.asyncio
async def test_convert_to_draft_requires_reason(db_session, consultant_id):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id)
    await moderation.approve(db_session, service.id)

    with pytest.raises(MissingReason):
        await moderation.convert_to_draft(db_session, service.id, " ")


@pytest.mark.asyncio
async def test_pending_cannot_go_to_draft(db_session, consultant_id):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id)
    service_id = service.id

    with pytest.raises(InvalidStateTransition):
        await moderation.convert_to_draft(db_session, service_id, "ocultar")

    current = await moderation.get(db_session, service_id)
    assert current.status == ServiceStatus.PENDING
    assert current.rejection_reason is None


@pytest.mark.asyncio
async def test_draft_cannot_be_rejected(db_session, consultant_id):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id)
    await moderation.approve(db_session, service.id)
    await moderation.convert_to_draft(db_session, service.id, "revisar")

    with pytest.raises(InvalidStateTransition):
        await moderation.reject(db_session, service.id, "no aplica")


@pytest.mark.asyncio
async def test_approve_only_from_pending(db_session, consultant_id):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id)
    await moderation.reject(db_session, service.id, "incompleta")

    with pytest.raises(InvalidStateTransition):
        await moderation.approve(db_session, service.id)


@pytest.mark.asyncio
async def test_republish_only_from_draft_or_rejected(db_session, consultant_id):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id)

    with pytest.raises(InvalidStateTransition):
        await moderation.republish(db_session, service.id)


@pytest.mark.asyncio
async def test_second_approve_is_not_a_silent_noop(db_session, consultant_id):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id)
    await moderation.approve(db_session, service.id)

    with pytest.raises(InvalidStateTransition):
        await moderation.approve(db_session, service.id)


@pytest.mark.asyncio
async def test_edit_updates_content_only(db_session, consultant_id):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id)
    await moderation.approve(db_session, service.id)

    edited = await moderation.edit(db_session, service.id, {"price": "650.5", "title": " Nuevo título "})

    assert edited.price == Decimal("650.50")
    assert edited.title == "Nuevo título"
    assert edited.status == ServiceStatus.ACTIVE


@pytest.mark.asyncio
@pytest.mark.parametrize("fields", [{"duration": None}, {"price": None}, {"title": None}])
async def test_edit_rejects_null_values(db_session, consultant_id, fields):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id)

    with pytest.raises(ValueError):
        await moderation.edit(db_session, service.id, fields)

    current = await moderation.get(db_session, service.id)
    assert current.duration == 60
    assert current.price == Decimal("500.00")


@pytest.mark.asyncio
async def test_edit_refuses_status(db_session, consultant_id):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id)

    with pytest.raises(ValueError):
        await moderation.edit(db_session, service.id, {"status": ServiceStatus.ACTIVE})

    assert (await moderation.get(db_session, service.id)).status == ServiceStatus.PENDING


@pytest.mark.asyncio
async def test_delete_returns_snapshot(db_session, consultant_id):
    moderation = ModerationService()
    service = await _create(db_session, consultant_id, title="Auditoría laboral")
    await moderation.approve(db_session, service.id)

    snapshot = await moderation.delete(db_session, service.id)

    assert isinstance(snapshot, DeletedService)
    assert snapshot.title == "Auditoría laboral"
    assert snapshot.status == ServiceStatus.ACTIVE
    assert snapshot.consultant_id == consultant_id
    with pytest.raises(ServiceNotFound):
        await moderation.get(db_session, service.id)


@pytest.mark.asyncio
async def test_unknown_service(db_session):
    with pytest.raises(ServiceNotFound):
        await ModerationService().approve(db_session, uuid4())


@pytest.mark.asyncio
async def test_list_services_filters(db_session, consultant_id, other_consultant_id):
    moderation = ModerationService()
    a = await _create(db_session, consultant_id, title="Contabilidad para startups")
    await _create(db_session, consultant_id, title="Marketing digital")
    await _create(db_session, other_consultant_id, title="Contratos mercantiles", description="startups y pymes")
    await moderation.approve(db_session, a.id)

    active, total_active = await moderation.list_services(db_session, status=ServiceStatus.ACTIVE)
    assert total_active == 1
    assert active[0].id == a.id

    found, total_found = await moderation.list_services(db_session, search="startups")
    assert total_found == 2

    mine, total_mine = await moderation.list_services(db_session, consultant_id=consultant_id, limit=1)
    assert total_mine == 2
    assert len(mine) == 1


@pytest.mark.asyncio
async def test_list_public_by_consultant(db_session, consultant_id, other_consultant_id):
    moderation = ModerationService()
    mine = await _create(db_session, consultant_id)
    theirs = await _create(db_session, other_consultant_id)
    await moderation.approve(db_session, mine.id)
    await moderation.approve(db_session, theirs.id)

    public = await moderation.list_public(db_session, consultant_id=consultant_id)

    assert [s.id for s in public] == [mine.id]
# Fin del archivo backend/tests/modules/moderation/test_moderation_service.py
