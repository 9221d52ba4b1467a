# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/schemas/__init__.py

Autor: Mustashar
Fecha: 2026-09-08
"""

from .withdrawal_schemas import (
    WithdrawalSubmitIn,
    WithdrawalDecisionIn,
    WithdrawalNotesIn,
    EarningIn,
    ReleasePendingIn,
    WithdrawalRead,
    WithdrawalAdminRead,
    WithdrawalPage,
    ConsultantWithdrawalPage,
)
from .balance_schemas import BalanceRead, BalanceMovementRead, BalanceMovementPage

__all__ = [
    "WithdrawalSubmitIn",
    "WithdrawalDecisionIn",
    "WithdrawalNotesIn",
    "EarningIn",
    "ReleasePendingIn",
    "WithdrawalRead",
    "WithdrawalAdminRead",
    "WithdrawalPage",
    "ConsultantWithdrawalPage",
    "BalanceRead",
    "BalanceMovementRead",
    "BalanceMovementPage",
]
