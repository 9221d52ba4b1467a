# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/enums/withdrawal_decision_enum.py

Decisión administrativa sobre una solicitud de retiro.

Autor: Mustashar
Fecha: 2026-09-05
"""

from enum import Enum

from .withdrawal_status_enum import WithdrawalStatus


class WithdrawalDecision(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"

    @property
    def target_status(self) -> WithdrawalStatus:
        """Estado al que mueve la decisión."""
        if self is WithdrawalDecision.APPROVE:
            return WithdrawalStatus.APPROVED
        return WithdrawalStatus.REJECTED


__all__ = ["WithdrawalDecision"]
# Fin del archivo backend/app/modules/settlement/enums/withdrawal_decision_enum.py
