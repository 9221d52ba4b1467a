# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/services/__init__.py

Autor: Mustashar
Fecha: 2026-09-07
"""

from .balance_service import BalanceService, parse_amount
from .withdrawal_service import WithdrawalService

__all__ = ["BalanceService", "WithdrawalService", "parse_amount"]
