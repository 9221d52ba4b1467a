# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/models/__init__.py

Autor: Mustashar
Fecha: 2026-09-09
"""

from .consultation_service_models import ConsultationService

__all__ = ["ConsultationService"]
