# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/models/notification_models.py

Notificación persistida para un consultor o para el canal de admins.

Tabla: notifications

- target_user_id: consultor destinatario (NULL si va al canal admin)
- target_role   : 'admin' para el canal de administradores

Constraint:
- ck_notifications_has_target: exactamente uno de los dos destinos

Autor: Mustashar
Fecha: 2026-09-12
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, CheckConstraint, DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, as_str_enum
from app.shared.database.transactions import now_utc
from app.modules.notifications.enums import NotificationSeverity


class Notification(Base):
    __tablename__ = "notifications"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    target_user_id: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True, index=True)
    target_role: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, index=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    severity: Mapped[NotificationSeverity] = mapped_column(
        as_str_enum(NotificationSeverity, name="notification_severity_enum", length=16),
        nullable=False,
        default=NotificationSeverity.INFO,
    )
    link: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)

    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=now_utc
    )
    read_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        CheckConstraint(
            "(target_user_id IS NULL) <> (target_role IS NULL)",
            name="has_target",
        ),
    )

    def __repr__(self) -> str:
        target = self.target_user_id or self.target_role
        return f"<Notification id={self.id} target={target} severity={self.severity}>"


__all__ = ["Notification"]
# Fin del archivo backend/app/modules/notifications/models/notification_models.py
