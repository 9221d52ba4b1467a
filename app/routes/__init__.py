# -*- coding: utf-8 -*-
"""
backend/app/routes/__init__.py

Ensamblador principal de ruteadores de la API de Mustashar.

- /health
- /settlement     (retiros, saldos, ingresos)
- /moderation     (consultorías)
- /notifications  (bandeja del actor)

Autor: Mustashar
Fecha: 2026-09-18
"""

from fastapi import APIRouter

from app.modules.moderation.routes import router as moderation_router
from app.modules.notifications.routes import router as notifications_router
from app.modules.settlement.routes import router as settlement_router
from .health_routes import router as health_router

router = APIRouter()

router.include_router(health_router)
router.include_router(settlement_router)
router.include_router(moderation_router)
router.include_router(notifications_router)

__all__ = ["router"]

# Fin del archivo backend/app/routes/__init__.py
