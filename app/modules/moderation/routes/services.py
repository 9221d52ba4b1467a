# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/routes/services.py

Rutas de consultorías:
- Consultor: crear, editar, borrar, republicar, listar las propias
- Admin: aprobar, rechazar, pasar a borrador, listar/buscar todas
- Público: listar consultorías activas

Autor: Mustashar
Fecha: 2026-09-17
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.shared.utils.http_exceptions import BadRequestException
from app.shared.utils.pagination import resolve_page
from app.modules.coordinator.actor import ActorContext
from app.modules.coordinator.deps import get_actor, get_coordinator
from app.modules.coordinator.facades import MarketplaceCoordinator
from app.modules.moderation.enums import ServiceStatus
from app.modules.moderation.schemas import (
    ServiceCreateIn,
    ServiceDeletedOut,
    ServicePage,
    ServicePublicRead,
    ServiceRead,
    ServiceReasonIn,
    ServiceUpdateIn,
)

router = APIRouter(prefix="/services", tags=["moderation:services"])


@router.post(
    "",
    response_model=ServiceRead,
    status_code=status.HTTP_201_CREATED,
    summary="Crear consultoría (queda en revisión)",
)
async def create_service(
    payload: ServiceCreateIn,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    try:
        service = await coordinator.create_service(
            actor, payload.title, payload.description, payload.price, payload.duration
        )
    except ValueError as e:
        raise BadRequestException.from_value_error(e) from e
    return ServiceRead.model_validate(service)


@router.get("/public", response_model=list[ServicePublicRead], summary="Consultorías publicadas")
async def list_public_services(
    consultant_id: Optional[UUID] = Query(None),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    services = await coordinator.list_public_services(consultant_id=consultant_id)
    return [ServicePublicRead.model_validate(s) for s in services]


@router.get("", response_model=ServicePage, summary="Listar consultorías (admin: todas; consultor: propias)")
async def list_services(
    status_filter: Optional[ServiceStatus] = Query(None, alias="status"),
    consultant_id: Optional[UUID] = Query(None),
    search: Optional[str] = Query(None, max_length=255),
    limit: Optional[int] = Query(None, ge=1),
    offset: Optional[int] = Query(None, ge=0),
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    limit, offset = resolve_page(limit, offset)
    items, total = await coordinator.list_services(
        actor,
        status=status_filter,
        consultant_id=consultant_id,
        search=search,
        limit=limit,
        offset=offset,
    )
    return ServicePage(
        items=[ServiceRead.model_validate(s) for s in items],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/{service_id}", response_model=ServiceRead, summary="Detalle de consultoría")
async def get_service(
    service_id: UUID,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    service = await coordinator.get_service(actor, service_id)
    return ServiceRead.model_validate(service)


@router.patch("/{service_id}", response_model=ServiceRead, summary="Editar contenido")
async def edit_service(
    service_id: UUID,
    payload: ServiceUpdateIn,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    fields = payload.model_dump(exclude_unset=True)
    try:
        service = await coordinator.edit_service(actor, service_id, fields)
    except ValueError as e:
        raise BadRequestException.from_value_error(e) from e
    return ServiceRead.model_validate(service)


@router.delete("/{service_id}", response_model=ServiceDeletedOut, summary="Eliminar consultoría")
async def delete_service(
    service_id: UUID,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    deleted = await coordinator.delete_service(actor, service_id)
    return ServiceDeletedOut(
        id=deleted.id,
        consultant_id=deleted.consultant_id,
        title=deleted.title,
        status=deleted.status,
    )


@router.post("/{service_id}/approve", response_model=ServiceRead, summary="Aprobar (admin)")
async def approve_service(
    service_id: UUID,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    service = await coordinator.approve_service(actor, service_id)
    return ServiceRead.model_validate(service)


@router.post("/{service_id}/reject", response_model=ServiceRead, summary="Rechazar con motivo (admin)")
async def reject_service(
    service_id: UUID,
    payload: ServiceReasonIn,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    service = await coordinator.reject_service(actor, service_id, payload.reason)
    return ServiceRead.model_validate(service)


@router.post("/{service_id}/draft", response_model=ServiceRead, summary="Pasar a borrador con nota (admin)")
async def convert_service_to_draft(
    service_id: UUID,
    payload: ServiceReasonIn,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    service = await coordinator.convert_service_to_draft(actor, service_id, payload.reason)
    return ServiceRead.model_validate(service)


@router.post("/{service_id}/republish", response_model=ServiceRead, summary="Republicar (dueño o admin)")
async def republish_service(
    service_id: UUID,
    actor: ActorContext = Depends(get_actor),
    coordinator: MarketplaceCoordinator = Depends(get_coordinator),
):
    service = await coordinator.republish_service(actor, service_id)
    return ServiceRead.model_validate(service)


__all__ = ["router"]
# Fin del archivo backend/app/modules/moderation/routes/services.py
