# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/models/withdrawal_request_models.py

Solicitud de retiro de un consultor.

Tabla: withdrawal_requests

Ciclo de vida:
- Se crea en `pending` por acción del consultor
- Pasa exactamente una vez a `approved` o `rejected` por acción de un admin
  (processed_at se fija en ese momento)
- Después solo `admin_notes` es mutable

Autor: Mustashar
Fecha: 2026-09-05
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, DateTime, Index, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, as_str_enum
from app.shared.database.transactions import now_utc
from app.modules.settlement.enums import WithdrawalStatus


class WithdrawalRequest(Base):
    __tablename__ = "withdrawal_requests"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    consultant_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)

    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="SAR")

    bank_name: Mapped[str] = mapped_column(String(255), nullable=False)
    bank_account_holder: Mapped[str] = mapped_column(String(255), nullable=False)
    bank_iban: Mapped[str] = mapped_column(String(64), nullable=False)

    status: Mapped[WithdrawalStatus] = mapped_column(
        as_str_enum(WithdrawalStatus, name="withdrawal_status_enum"),
        nullable=False,
        default=WithdrawalStatus.PENDING,
    )
    rejection_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    admin_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=now_utc
    )
    processed_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=now_utc
    )

    __table_args__ = (
        CheckConstraint("amount > 0", name="amount_positive"),
        CheckConstraint(
            "status <> 'rejected' OR rejection_reason IS NOT NULL",
            name="rejected_has_reason",
        ),
        Index("ix_withdrawal_requests_status_created", "status", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<WithdrawalRequest id={self.id} consultant={self.consultant_id} "
            f"amount={self.amount} status={self.status}>"
        )


__all__ = ["WithdrawalRequest"]
# Fin del archivo backend/app/modules/settlement/models/withdrawal_request_models.py
