# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/routes/__init__.py

Router del módulo de moderación (prefijo /moderation).

Autor: Mustashar
Fecha: 2026-09-17
"""

from fastapi import APIRouter

from .services import router as services_router

router = APIRouter(prefix="/moderation")
router.include_router(services_router)

__all__ = ["router"]
