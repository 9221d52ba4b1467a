# -*- coding: utf-8 -*-
"""
backend/app/routes/health_routes.py

Health check: conectividad a la base y parámetros operativos relevantes
para soporte (mínimo de retiro, moneda, sink de notificaciones).

Autor: Mustashar
Fecha: 2026-09-18
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.shared.config import settings
from app.shared.database.database import check_database_health

router = APIRouter(tags=["health"])


@router.get("/health", summary="Estado del backend")
async def health_check() -> dict:
    db_ok = await check_database_health(timeout_s=2.0)
    return {
        "status": "ok" if db_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "version": settings.app_version,
        "database": {
            "reachable": db_ok,
            "dialect": settings.database_url.split(":", 1)[0],
        },
        "settlement": {
            "minimum_withdrawal": str(settings.withdrawal_minimum_amount),
            "currency": settings.withdrawal_default_currency,
        },
        "notifications": {"sink": settings.notification_sink},
    }

# Fin del archivo backend/app/routes/health_routes.py
