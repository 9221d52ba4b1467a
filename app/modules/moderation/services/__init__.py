# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/services/__init__.py

Autor: Mustashar
Fecha: 2026-09-10
"""

from .moderation_service import ModerationService, DeletedService, EDITABLE_FIELDS

__all__ = ["ModerationService", "DeletedService", "EDITABLE_FIELDS"]
