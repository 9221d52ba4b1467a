# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/routes/balances.py

Rutas de saldos y ledger:
- GET  /balance/{consultant_id}    (dueño o admin)
- GET  /movements/{consultant_id}  (dueño o admin)
- POST /earnings                   (system o admin)
- POST /earnings/release           (system o admin)

Autor: Mustashar
Fecha: 2026-09-16
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.shared.utils.pagination import resolve_page
from app.modules.coordinator.actor import ActorContext
from app.modules.coordinator.deps import get_actor, get_coordinator
from app.modules.coordinator.facades import MarketplaceCoordinator
from app.modules.settlement.schemas import (
    BalanceMovementPage,
    BalanceMovementRead,
    BalanceRead,
    EarningIn,
    ReleasePendingIn,
)

router = APIRouter(tags=["settlement:balances"])


@router.get("/balance/{consultant_id}", response_model=BalanceRead, summary="Saldo del consultor")
async def get_balance(
    consultant_id: UUID,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    balance = await coordinator.get_balance(actor, consultant_id)
    return BalanceRead.model_validate(balance)


@router.get(
    "/movements/{consultant_id}",
    response_model=BalanceMovementPage,
    summary="Movimientos del saldo",
)
async def list_movements(
    consultant_id: UUID,
    limit: Optional[int] = Query(None, ge=1),
    offset: Optional[int] = Query(None, ge=0),
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    limit, offset = resolve_page(limit, offset)
    items, total = await coordinator.list_movements(
        actor, consultant_id, limit=limit, offset=offset
    )
    return BalanceMovementPage(
        items=[BalanceMovementRead.model_validate(m) for m in items],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.post(
    "/earnings",
    response_model=BalanceMovementRead,
    status_code=status.HTTP_201_CREATED,
    summary="Registrar un ingreso del consultor",
)
async def record_earning(
    payload: EarningIn,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    movement = await coordinator.record_earning(
        actor,
        payload.consultant_id,
        payload.amount,
        release_immediately=payload.release_immediately,
        idempotency_key=payload.idempotency_key,
        description=payload.description,
    )
    return BalanceMovementRead.model_validate(movement)


@router.post(
    "/earnings/release",
    response_model=BalanceMovementRead,
    summary="Liberar saldo pendiente a disponible",
)
async def release_pending(
    payload: ReleasePendingIn,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    movement = await coordinator.release_pending(actor, payload.consultant_id, payload.amount)
    return BalanceMovementRead.model_validate(movement)


__all__ = ["router"]
# Fin del archivo backend/app/modules/settlement/routes/balances.py
