# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/schemas/__init__.py

Autor: Mustashar
Fecha: 2026-09-12
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from app.shared.utils.base_models import PageOut, UTF8SafeModel
from app.modules.notifications.enums import NotificationSeverity


class NotificationRead(UTF8SafeModel):
    id: UUID
    title: str
    message: str
    severity: NotificationSeverity
    link: Optional[str] = None
    is_read: bool
    created_at: datetime


class NotificationPage(PageOut[NotificationRead]):
    pass


class MarkAllReadOut(UTF8SafeModel):
    updated: int


__all__ = ["NotificationRead", "NotificationPage", "MarkAllReadOut"]
