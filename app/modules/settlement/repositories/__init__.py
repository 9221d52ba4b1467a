# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/repositories/__init__.py

Autor: Mustashar
Fecha: 2026-09-06
"""

from .consultant_balance_repository import ConsultantBalanceRepository
from .withdrawal_request_repository import WithdrawalRequestRepository
from .balance_movement_repository import BalanceMovementRepository

__all__ = [
    "ConsultantBalanceRepository",
    "WithdrawalRequestRepository",
    "BalanceMovementRepository",
]
