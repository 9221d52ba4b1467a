# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/models/consultation_service_models.py

Consultoría ofrecida por un consultor.

Tabla: consultation_services

`status` es la única fuente de verdad para la visibilidad pública:
solo `active` es visible/reservable. `rejection_reason` guarda el motivo de
rechazo o, en `draft`, la nota del admin con timestamp; se limpia al
republicar.

Autor: Mustashar
Fecha: 2026-09-09
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, as_str_enum
from app.shared.database.transactions import now_utc
from app.modules.moderation.enums import ServiceStatus


class ConsultationService(Base):
    __tablename__ = "consultation_services"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    consultant_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # minutos

    status: Mapped[ServiceStatus] = mapped_column(
        as_str_enum(ServiceStatus, name="service_status_enum"),
        nullable=False,
        default=ServiceStatus.PENDING,
    )
    rejection_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=now_utc
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=now_utc
    )

    __table_args__ = (
        CheckConstraint("price > 0", name="price_positive"),
        CheckConstraint("duration > 0", name="duration_positive"),
        Index("ix_consultation_services_status_created", "status", "created_at"),
    )

    @property
    def is_publicly_visible(self) -> bool:
        return self.status == ServiceStatus.ACTIVE

    def __repr__(self) -> str:
        return f"<ConsultationService id={self.id} consultant={self.consultant_id} status={self.status}>"


__all__ = ["ConsultationService"]
# Fin del archivo backend/app/modules/moderation/models/consultation_service_models.py
