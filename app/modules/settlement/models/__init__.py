# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/models/__init__.py

Autor: Mustashar
Fecha: 2026-09-05
"""

from .consultant_balance_models import ConsultantBalance
from .withdrawal_request_models import WithdrawalRequest
from .balance_movement_models import BalanceMovement

__all__ = ["ConsultantBalance", "WithdrawalRequest", "BalanceMovement"]
