# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/routes/withdrawals.py

Rutas de solicitudes de retiro:
- Consultor: crear solicitud, listar las propias
- Admin: listar/buscar, decidir (aprobar/rechazar), editar notas internas

Autor: Mustashar
Fecha: 2026-09-16
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.shared.utils.http_exceptions import BadRequestException
from app.shared.utils.pagination import resolve_page
from app.modules.coordinator.actor import ActorContext
from app.modules.coordinator.deps import get_actor, get_coordinator
from app.modules.coordinator.facades import MarketplaceCoordinator
from app.modules.settlement.enums import WithdrawalStatus
from app.modules.settlement.schemas import (
    ConsultantWithdrawalPage,
    WithdrawalAdminRead,
    WithdrawalDecisionIn,
    WithdrawalNotesIn,
    WithdrawalPage,
    WithdrawalRead,
    WithdrawalSubmitIn,
)

router = APIRouter(prefix="/withdrawals", tags=["settlement:withdrawals"])


@router.post(
    "",
    response_model=WithdrawalRead,
    status_code=status.HTTP_201_CREATED,
    summary="Solicitar un retiro",
)
async def submit_withdrawal(
    payload: WithdrawalSubmitIn,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    try:
        request = await coordinator.submit_withdrawal(
            actor,
            payload.amount,
            payload.bank_name,
            payload.bank_account_holder,
            payload.bank_iban,
            currency=payload.currency,
        )
    except ValueError as e:
        raise BadRequestException.from_value_error(e) from e
    return WithdrawalRead.model_validate(request)


@router.get("/mine", response_model=ConsultantWithdrawalPage, summary="Mis solicitudes de retiro")
async def list_my_withdrawals(
    status_filter: Optional[WithdrawalStatus] = Query(None, alias="status"),
    limit: Optional[int] = Query(None, ge=1),
    offset: Optional[int] = Query(None, ge=0),
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    limit, offset = resolve_page(limit, offset)
    items, total = await coordinator.list_consultant_withdrawals(
        actor, actor.actor_id, status=status_filter, limit=limit, offset=offset
    )
    return ConsultantWithdrawalPage(
        items=[WithdrawalRead.model_validate(r) for r in items],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("", response_model=WithdrawalPage, summary="Listar solicitudes (admin)")
async def list_withdrawals(
    status_filter: Optional[WithdrawalStatus] = Query(None, alias="status"),
    consultant_id: Optional[UUID] = Query(None),
    search: Optional[str] = Query(None, max_length=255),
    limit: Optional[int] = Query(None, ge=1),
    offset: Optional[int] = Query(None, ge=0),
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    limit, offset = resolve_page(limit, offset)
    items, total = await coordinator.list_withdrawals(
        actor,
        status=status_filter,
        consultant_id=consultant_id,
        search=search,
        limit=limit,
        offset=offset,
    )
    return WithdrawalPage(
        items=[WithdrawalAdminRead.model_validate(r) for r in items],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/{request_id}", response_model=WithdrawalRead, summary="Detalle de una solicitud")
async def get_withdrawal(
    request_id: UUID,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    request = await coordinator.get_withdrawal(actor, request_id)
    if actor.is_admin:
        return WithdrawalAdminRead.model_validate(request)
    return WithdrawalRead.model_validate(request)


@router.post(
    "/{request_id}/decision",
    response_model=WithdrawalAdminRead,
    summary="Aprobar o rechazar una solicitud (admin)",
)
async def decide_withdrawal(
    request_id: UUID,
    payload: WithdrawalDecisionIn,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    request = await coordinator.decide_withdrawal(
        actor,
        request_id,
        payload.decision,
        rejection_reason=payload.rejection_reason,
        admin_notes=payload.admin_notes,
    )
    return WithdrawalAdminRead.model_validate(request)


@router.patch(
    "/{request_id}/notes",
    response_model=WithdrawalAdminRead,
    summary="Editar notas internas (admin)",
)
async def update_withdrawal_notes(
    request_id: UUID,
    payload: WithdrawalNotesIn,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    request = await coordinator.update_withdrawal_notes(actor, request_id, payload.admin_notes)
    return WithdrawalAdminRead.model_validate(request)


__all__ = ["router"]
# Fin del archivo backend/app/modules/settlement/routes/withdrawals.py
