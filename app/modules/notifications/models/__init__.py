# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/models/__init__.py

Autor: Mustashar
Fecha: 2026-09-12
"""

from .notification_models import Notification

__all__ = ["Notification"]
