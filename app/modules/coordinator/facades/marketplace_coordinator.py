# -*- coding: utf-8 -*-
"""
backend/app/modules/coordinator/facades/marketplace_coordinator.py

Fachada única que invocan la UI del consultor y la del admin.

Por cada llamada:
1. Verifica rol/propiedad del actor (Unauthorized ANTES de mutar)
2. Ejecuta la operación del motor (liquidaciones o moderación), que hace commit
3. Emite cero o más notificaciones vía _emit()

Las notificaciones son best-effort: _emit() registra y descarta cualquier
excepción del sink; un fallo ahí nunca revierte la mutación ya confirmada.

Autor: Mustashar
Fecha: 2026-09-14
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config import settings
from app.shared.errors import Unauthorized
from app.modules.moderation.enums import ServiceStatus
from app.modules.moderation.models import ConsultationService
from app.modules.moderation.services import DeletedService, ModerationService
from app.modules.notifications.repositories import ADMIN_RECIPIENT
from app.modules.notifications.services import NotificationSink
from app.modules.settlement.enums import WithdrawalDecision, WithdrawalStatus
from app.modules.settlement.models import BalanceMovement, ConsultantBalance, WithdrawalRequest
from app.modules.settlement.services import BalanceService, WithdrawalService
from app.modules.coordinator.actor import ActorContext
from . import messages
from .messages import NotificationMessage

logger = logging.getLogger(__name__)


class MarketplaceCoordinator:

    def __init__(
        self,
        session: AsyncSession,
        sink: NotificationSink,
        settlement: Optional[WithdrawalService] = None,
        moderation: Optional[ModerationService] = None,
        balances: Optional[BalanceService] = None,
    ):
        self.session = session
        self.sink = sink
        self.balances = balances or BalanceService()
        self.settlement = settlement or WithdrawalService(balance_service=self.balances)
        self.moderation = moderation or ModerationService()

    # =============================================================
    # Permisos
    # =============================================================
    @staticmethod
    def _require_admin(actor: ActorContext) -> None:
        if not actor.is_admin:
            raise Unauthorized("Solo un administrador puede realizar esta operación.")

    @staticmethod
    def _require_consultant(actor: ActorContext) -> UUID:
        if not actor.is_consultant or actor.actor_id is None:
            raise Unauthorized("Solo un consultor puede realizar esta operación.")
        return actor.actor_id

    @staticmethod
    def _require_owner_or_admin(actor: ActorContext, consultant_id: UUID) -> None:
        if actor.is_admin or actor.owns(consultant_id):
            return
        raise Unauthorized("Solo el consultor dueño o un administrador pueden realizar esta operación.")

    @staticmethod
    def _require_system_or_admin(actor: ActorContext) -> None:
        if not (actor.is_system or actor.is_admin):
            raise Unauthorized("Operación reservada al sistema de pagos o a un administrador.")

    # =============================================================
    # Notificaciones (best-effort)
    # =============================================================
    async def _emit(self, recipient: Any, note: NotificationMessage) -> None:
        try:
            await self.sink.notify(recipient, note.title, note.message, note.severity, note.link)
        except Exception:
            logger.warning(
                "Notification delivery failed (ignored): recipient=%s title=%s",
                recipient, note.title,
                exc_info=True,
            )

    # =============================================================
    # Liquidaciones
    # =============================================================
    async def submit_withdrawal(
        self,
        actor: ActorContext,
        amount: Any,
        bank_name: str,
        bank_account_holder: str,
        bank_iban: str,
        *,
        currency: Optional[str] = None,
    ) -> WithdrawalRequest:
        consultant_id = self._require_consultant(actor)
        request = await self.settlement.submit_withdrawal(
            self.session,
            consultant_id,
            amount,
            bank_name,
            bank_account_holder,
            bank_iban,
            currency=currency,
        )
        await self._emit(consultant_id, messages.withdrawal_submitted(request.amount, request.currency))
        return request

    async def decide_withdrawal(
        self,
        actor: ActorContext,
        request_id: UUID,
        decision: WithdrawalDecision,
        *,
        rejection_reason: Optional[str] = None,
        admin_notes: Optional[str] = None,
    ) -> WithdrawalRequest:
        self._require_admin(actor)
        request = await self.settlement.decide_withdrawal(
            self.session,
            request_id,
            decision,
            rejection_reason=rejection_reason,
            admin_notes=admin_notes,
        )
        if request.status == WithdrawalStatus.APPROVED:
            note = messages.withdrawal_approved(request.amount, request.currency)
        else:
            note = messages.withdrawal_rejected(
                request.amount, request.currency, request.rejection_reason or ""
            )
        await self._emit(request.consultant_id, note)
        return request

    async def update_withdrawal_notes(
        self,
        actor: ActorContext,
        request_id: UUID,
        admin_notes: Optional[str],
    ) -> WithdrawalRequest:
        self._require_admin(actor)
        return await self.settlement.update_admin_notes(self.session, request_id, admin_notes)

    async def get_withdrawal(self, actor: ActorContext, request_id: UUID) -> WithdrawalRequest:
        request = await self.settlement.get_withdrawal(self.session, request_id)
        self._require_owner_or_admin(actor, request.consultant_id)
        return request

    async def list_withdrawals(
        self,
        actor: ActorContext,
        *,
        status: Optional[WithdrawalStatus] = None,
        consultant_id: Optional[UUID] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[Sequence[WithdrawalRequest], int]:
        self._require_admin(actor)
        return await self.settlement.list_withdrawals(
            self.session,
            status=status,
            consultant_id=consultant_id,
            search=search,
            limit=limit,
            offset=offset,
        )

    async def list_consultant_withdrawals(
        self,
        actor: ActorContext,
        consultant_id: UUID,
        *,
        status: Optional[WithdrawalStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[Sequence[WithdrawalRequest], int]:
        if consultant_id is None:
            raise Unauthorized("Debes identificar al consultor para listar sus retiros.")
        self._require_owner_or_admin(actor, consultant_id)
        return await self.settlement.list_withdrawals(
            self.session,
            status=status,
            consultant_id=consultant_id,
            limit=limit,
            offset=offset,
        )

    async def get_balance(self, actor: ActorContext, consultant_id: UUID) -> ConsultantBalance:
        self._require_owner_or_admin(actor, consultant_id)
        return await self.balances.get_balance(self.session, consultant_id)

    async def list_movements(
        self,
        actor: ActorContext,
        consultant_id: UUID,
        *,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[Sequence[BalanceMovement], int]:
        self._require_owner_or_admin(actor, consultant_id)
        return await self.balances.list_movements(
            self.session, consultant_id, limit=limit, offset=offset
        )

    async def record_earning(
        self,
        actor: ActorContext,
        consultant_id: UUID,
        amount: Any,
        *,
        release_immediately: bool = False,
        idempotency_key: Optional[str] = None,
        description: Optional[str] = None,
    ) -> BalanceMovement:
        self._require_system_or_admin(actor)
        movement = await self.balances.record_earning(
            self.session,
            consultant_id,
            amount,
            release_immediately=release_immediately,
            idempotency_key=idempotency_key,
            description=description,
        )
        await self._emit(
            consultant_id,
            messages.earning_recorded(
                movement.amount, settings.withdrawal_default_currency, release_immediately
            ),
        )
        return movement

    async def release_pending(
        self,
        actor: ActorContext,
        consultant_id: UUID,
        amount: Any = None,
    ) -> BalanceMovement:
        self._require_system_or_admin(actor)
        return await self.balances.release_pending(self.session, consultant_id, amount)

    # =============================================================
    # Moderación
    # =============================================================
    async def create_service(
        self,
        actor: ActorContext,
        title: str,
        description: str,
        price: Any,
        duration: int,
    ) -> ConsultationService:
        consultant_id = self._require_consultant(actor)
        service = await self.moderation.create(
            self.session, consultant_id, title, description, price, duration
        )
        await self._emit(consultant_id, messages.service_submitted(service.title))
        if settings.admin_notify_on_service_submission:
            await self._emit(ADMIN_RECIPIENT, messages.service_submitted_admin(service.title))
        return service

    async def approve_service(self, actor: ActorContext, service_id: UUID) -> ConsultationService:
        self._require_admin(actor)
        service = await self.moderation.approve(self.session, service_id)
        await self._emit(service.consultant_id, messages.service_approved(service.title))
        return service

    async def reject_service(
        self,
        actor: ActorContext,
        service_id: UUID,
        reason: Optional[str],
    ) -> ConsultationService:
        self._require_admin(actor)
        service = await self.moderation.reject(self.session, service_id, reason)
        await self._emit(
            service.consultant_id,
            messages.service_rejected(service.title, service.rejection_reason or ""),
        )
        return service

    async def convert_service_to_draft(
        self,
        actor: ActorContext,
        service_id: UUID,
        reason: Optional[str],
    ) -> ConsultationService:
        self._require_admin(actor)
        service = await self.moderation.convert_to_draft(self.session, service_id, reason)
        await self._emit(
            service.consultant_id,
            messages.service_converted_to_draft(service.title, (reason or "").strip()),
        )
        return service

    async def republish_service(self, actor: ActorContext, service_id: UUID) -> ConsultationService:
        await self._load_owned_service(actor, service_id)
        service = await self.moderation.republish(self.session, service_id)
        await self._emit(service.consultant_id, messages.service_republished(service.title))
        return service

    async def edit_service(
        self,
        actor: ActorContext,
        service_id: UUID,
        fields: Mapping[str, Any],
    ) -> ConsultationService:
        await self._load_owned_service(actor, service_id)
        service = await self.moderation.edit(self.session, service_id, fields)
        await self._emit(
            service.consultant_id,
            messages.service_edited(service.title, by_admin=actor.is_admin),
        )
        return service

    async def delete_service(self, actor: ActorContext, service_id: UUID) -> DeletedService:
        await self._load_owned_service(actor, service_id)
        deleted = await self.moderation.delete(self.session, service_id)
        await self._emit(
            deleted.consultant_id,
            messages.service_deleted(deleted.title, by_admin=actor.is_admin),
        )
        await self._emit(
            ADMIN_RECIPIENT,
            messages.service_deleted_admin(deleted.title, by_admin=actor.is_admin),
        )
        return deleted

    async def get_service(self, actor: ActorContext, service_id: UUID) -> ConsultationService:
        """Admin y dueño ven cualquier estado; el resto solo consultorías activas."""
        service = await self.moderation.get(self.session, service_id)
        if actor.is_admin or actor.owns(service.consultant_id) or service.is_publicly_visible:
            return service
        raise Unauthorized("Esta consultoría no está publicada.")

    async def list_services(
        self,
        actor: ActorContext,
        *,
        status: Optional[ServiceStatus] = None,
        consultant_id: Optional[UUID] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[Sequence[ConsultationService], int]:
        """Admin: todas. Consultor: solo las propias."""
        if not actor.is_admin:
            own_id = self._require_consultant(actor)
            if consultant_id is not None and consultant_id != own_id:
                raise Unauthorized("Solo puedes consultar tus propias consultorías.")
            consultant_id = own_id
        return await self.moderation.list_services(
            self.session,
            status=status,
            consultant_id=consultant_id,
            search=search,
            limit=limit,
            offset=offset,
        )

    async def list_public_services(
        self,
        *,
        consultant_id: Optional[UUID] = None,
    ) -> Sequence[ConsultationService]:
        return await self.moderation.list_public(self.session, consultant_id=consultant_id)

    async def _load_owned_service(self, actor: ActorContext, service_id: UUID) -> ConsultationService:
        service = await self.moderation.get(self.session, service_id)
        self._require_owner_or_admin(actor, service.consultant_id)
        return service


__all__ = ["MarketplaceCoordinator"]
# Fin del archivo backend/app/modules/coordinator/facades/marketplace_coordinator.py
