# -*- coding: utf-8 -*-
"""
backend/app/modules/coordinator/facades/__init__.py

Autor: Mustashar
Fecha: 2026-09-14
"""

from .marketplace_coordinator import MarketplaceCoordinator
from .messages import NotificationMessage

__all__ = ["MarketplaceCoordinator", "NotificationMessage"]
