# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/enums/__init__.py

Autor: Mustashar
Fecha: 2026-09-12
"""

from enum import Enum


class NotificationSeverity(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


__all__ = ["NotificationSeverity"]
