# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/schemas/balance_schemas.py

Autor: Mustashar
Fecha: 2026-09-08
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from app.shared.utils.base_models import PageOut, UTF8SafeModel
from app.modules.settlement.enums import BalanceMovementKind


class BalanceRead(UTF8SafeModel):
    consultant_id: UUID
    available: Decimal
    pending: Decimal
    withdrawn: Decimal
    currency: str


class BalanceMovementRead(UTF8SafeModel):
    id: UUID
    consultant_id: UUID
    kind: BalanceMovementKind
    amount: Decimal
    available_after: Decimal
    pending_after: Decimal
    withdrawn_after: Decimal
    withdrawal_request_id: Optional[UUID] = None
    description: Optional[str] = None
    created_at: datetime


class BalanceMovementPage(PageOut[BalanceMovementRead]):
    pass


__all__ = ["BalanceRead", "BalanceMovementRead", "BalanceMovementPage"]
# Fin del archivo backend/app/modules/settlement/schemas/balance_schemas.py
