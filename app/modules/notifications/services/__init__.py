# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/services/__init__.py

Autor: Mustashar
Fecha: 2026-09-12
"""

from .notification_sinks import (
    NotificationSink,
    DatabaseNotificationSink,
    LoggingNotificationSink,
)
from .notification_service import NotificationService

__all__ = [
    "NotificationSink",
    "DatabaseNotificationSink",
    "LoggingNotificationSink",
    "NotificationService",
]
