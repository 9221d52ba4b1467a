# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/models/consultant_balance_models.py

Saldo de un consultor (uno por consultor).

Tabla: consultant_balances

- available: monto retirable ahora mismo
- pending  : ganado pero aún no liberado a available
- withdrawn: total pagado históricamente (nunca decrece)
- version  : se incrementa en cada mutación

Solo el motor de liquidaciones (BalanceService) escribe esta tabla.
Se crea implícitamente con el primer ingreso y nunca se borra.

Autor: Mustashar
Fecha: 2026-09-05
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import CheckConstraint, DateTime, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base
from app.shared.database.transactions import now_utc


class ConsultantBalance(Base):
    __tablename__ = "consultant_balances"

    consultant_id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    available: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=Decimal("0.00")
    )
    pending: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=Decimal("0.00")
    )
    withdrawn: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=Decimal("0.00")
    )

    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="SAR")
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=now_utc
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=now_utc
    )

    __table_args__ = (
        CheckConstraint("available >= 0", name="available_non_negative"),
        CheckConstraint("pending >= 0", name="pending_non_negative"),
        CheckConstraint("withdrawn >= 0", name="withdrawn_non_negative"),
    )

    def __repr__(self) -> str:
        return (
            f"<ConsultantBalance consultant={self.consultant_id} available={self.available} "
            f"pending={self.pending} withdrawn={self.withdrawn} v={self.version}>"
        )


__all__ = ["ConsultantBalance"]
# Fin del archivo backend/app/modules/settlement/models/consultant_balance_models.py
