# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/models/balance_movement_models.py

Ledger inmutable de movimientos de saldo.

Tabla: balance_movements

Cada mutación de ConsultantBalance deja una fila con el monto y una foto
del saldo resultante (available/pending/withdrawn _after).

Constraints:
- uq_balance_movements_consultant_idem: UNIQUE(consultant_id, idempotency_key)
- ck_balance_movements_amount_positive: amount > 0

Autor: Mustashar
Fecha: 2026-09-05
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, as_str_enum
from app.shared.database.transactions import now_utc
from app.modules.settlement.enums import BalanceMovementKind


class BalanceMovement(Base):
    __tablename__ = "balance_movements"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    consultant_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)

    kind: Mapped[BalanceMovementKind] = mapped_column(
        as_str_enum(BalanceMovementKind, name="balance_movement_kind_enum"),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    available_after: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    pending_after: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    withdrawn_after: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    withdrawal_request_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid, ForeignKey("withdrawal_requests.id"), nullable=True
    )
    idempotency_key: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=now_utc
    )

    __table_args__ = (
        UniqueConstraint("consultant_id", "idempotency_key", name="uq_balance_movements_consultant_idem"),
        CheckConstraint("amount > 0", name="amount_positive"),
    )

    def __repr__(self) -> str:
        return f"<BalanceMovement id={self.id} consultant={self.consultant_id} kind={self.kind} amount={self.amount}>"


__all__ = ["BalanceMovement"]
# Fin del archivo backend/app/modules/settlement/models/balance_movement_models.py
