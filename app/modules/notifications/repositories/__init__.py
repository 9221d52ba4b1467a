# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/repositories/__init__.py

Autor: Mustashar
Fecha: 2026-09-12
"""

from .notification_repository import NotificationRepository, resolve_recipient, ADMIN_RECIPIENT

__all__ = ["NotificationRepository", "resolve_recipient", "ADMIN_RECIPIENT"]
