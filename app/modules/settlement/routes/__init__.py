# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/routes/__init__.py

Router del módulo de liquidaciones (prefijo /settlement).

Autor: Mustashar
Fecha: 2026-09-16
"""

from fastapi import APIRouter

from .withdrawals import router as withdrawals_router
from .balances import router as balances_router

router = APIRouter(prefix="/settlement")
router.include_router(withdrawals_router)
router.include_router(balances_router)

__all__ = ["router"]
