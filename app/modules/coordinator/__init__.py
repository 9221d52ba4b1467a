# -*- coding: utf-8 -*-
"""
backend/app/modules/coordinator/__init__.py

Coordinador: fachada por actor que secuencia liquidaciones y moderación con
la emisión de notificaciones.

Autor: Mustashar
Fecha: 2026-09-13
"""

from .actor import ActorContext, ActorRole
from .facades import MarketplaceCoordinator

__all__ = ["ActorContext", "ActorRole", "MarketplaceCoordinator"]
