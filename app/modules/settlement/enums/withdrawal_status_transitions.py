# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/enums/withdrawal_status_transitions.py

Mapa de transiciones válidas para WithdrawalStatus.

Reglas de transición:
- pending  → approved | rejected (decisión administrativa, una sola vez)
- approved → (terminal)
- rejected → (terminal)

Autor: Mustashar
Fecha: 2026-09-05
"""

from typing import Dict, Set

from app.shared.errors import InvalidStateTransition

from .withdrawal_status_enum import WithdrawalStatus


VALID_WITHDRAWAL_TRANSITIONS: Dict[WithdrawalStatus, Set[WithdrawalStatus]] = {
    WithdrawalStatus.PENDING: {
        WithdrawalStatus.APPROVED,
        WithdrawalStatus.REJECTED,
    },
    WithdrawalStatus.APPROVED: set(),
    WithdrawalStatus.REJECTED: set(),
}


def is_valid_withdrawal_transition(
    from_status: WithdrawalStatus,
    to_status: WithdrawalStatus,
) -> bool:
    return to_status in VALID_WITHDRAWAL_TRANSITIONS.get(from_status, set())


def get_allowed_transitions(from_status: WithdrawalStatus) -> Set[WithdrawalStatus]:
    return VALID_WITHDRAWAL_TRANSITIONS.get(from_status, set())


def validate_withdrawal_transition(
    from_status: WithdrawalStatus,
    to_status: WithdrawalStatus,
) -> None:
    """
    Raises:
        InvalidStateTransition: si la solicitud ya fue procesada
    """
    if not is_valid_withdrawal_transition(from_status, to_status):
        raise InvalidStateTransition("solicitud de retiro", from_status, to_status)


__all__ = [
    "VALID_WITHDRAWAL_TRANSITIONS",
    "is_valid_withdrawal_transition",
    "get_allowed_transitions",
    "validate_withdrawal_transition",
]
# Fin del archivo backend/app/modules/settlement/enums/withdrawal_status_transitions.py
