# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/enums/__init__.py

Autor: Mustashar
Fecha: 2026-09-05
"""

from .withdrawal_status_enum import WithdrawalStatus
from .withdrawal_decision_enum import WithdrawalDecision
from .balance_movement_kind_enum import BalanceMovementKind
from .withdrawal_status_transitions import (
    VALID_WITHDRAWAL_TRANSITIONS,
    is_valid_withdrawal_transition,
    get_allowed_transitions,
    validate_withdrawal_transition,
)

__all__ = [
    "WithdrawalStatus",
    "WithdrawalDecision",
    "BalanceMovementKind",
    "VALID_WITHDRAWAL_TRANSITIONS",
    "is_valid_withdrawal_transition",
    "get_allowed_transitions",
    "validate_withdrawal_transition",
]
