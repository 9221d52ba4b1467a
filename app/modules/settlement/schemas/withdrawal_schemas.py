# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/schemas/withdrawal_schemas.py

Schemas Pydantic para solicitudes de retiro.

Autor: Mustashar
Fecha: 2026-09-08
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from app.shared.utils.base_models import PageOut, UTF8SafeModel
from app.modules.settlement.enums import WithdrawalDecision, WithdrawalStatus


# ========== REQUEST SCHEMAS ==========

class WithdrawalSubmitIn(UTF8SafeModel):
    """Solicitud de retiro enviada por el consultor."""
    amount: Decimal = Field(..., description="Monto a retirar")
    bank_name: str = Field(..., min_length=1, max_length=255)
    bank_account_holder: str = Field(..., min_length=1, max_length=255)
    bank_iban: str = Field(..., min_length=1, max_length=64)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)

    @field_validator("bank_iban")
    @classmethod
    def iban_compact(cls, v: str) -> str:
        return v.replace(" ", "").upper()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "amount": "500.00",
                "bank_name": "Al Rajhi Bank",
                "bank_account_holder": "Ahmed Al-Harbi",
                "bank_iban": "SA0380000000608010167519",
            }
        }
    )


class WithdrawalDecisionIn(UTF8SafeModel):
    """Decisión del admin. `rejection_reason` es obligatorio para reject."""
    decision: WithdrawalDecision
    rejection_reason: Optional[str] = Field(None, max_length=2000)
    admin_notes: Optional[str] = Field(None, max_length=2000)


class WithdrawalNotesIn(UTF8SafeModel):
    admin_notes: Optional[str] = Field(None, max_length=2000)


class EarningIn(UTF8SafeModel):
    """Evento de ingreso del productor de pagos."""
    consultant_id: UUID
    amount: Decimal
    release_immediately: bool = False
    idempotency_key: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)


class ReleasePendingIn(UTF8SafeModel):
    consultant_id: UUID
    amount: Optional[Decimal] = None


# ========== RESPONSE SCHEMAS ==========

class WithdrawalRead(UTF8SafeModel):
    id: UUID
    consultant_id: UUID
    amount: Decimal
    currency: str
    bank_name: str
    bank_account_holder: str
    bank_iban: str
    status: WithdrawalStatus
    rejection_reason: Optional[str] = None
    created_at: datetime
    processed_at: Optional[datetime] = None


class WithdrawalAdminRead(WithdrawalRead):
    """Vista admin: incluye notas internas."""
    admin_notes: Optional[str] = None
    updated_at: datetime


class WithdrawalPage(PageOut[WithdrawalAdminRead]):
    pass


class ConsultantWithdrawalPage(PageOut[WithdrawalRead]):
    pass


__all__ = [
    "WithdrawalSubmitIn",
    "WithdrawalDecisionIn",
    "WithdrawalNotesIn",
    "EarningIn",
    "ReleasePendingIn",
    "WithdrawalRead",
    "WithdrawalAdminRead",
    "WithdrawalPage",
    "ConsultantWithdrawalPage",
]
# Fin del archivo backend/app/modules/settlement/schemas/withdrawal_schemas.py
