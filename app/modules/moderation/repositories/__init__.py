# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/repositories/__init__.py

Autor: Mustashar
Fecha: 2026-09-10
"""

from .consultation_service_repository import ConsultationServiceRepository

__all__ = ["ConsultationServiceRepository"]
