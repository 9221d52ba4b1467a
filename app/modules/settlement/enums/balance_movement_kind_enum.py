# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/enums/balance_movement_kind_enum.py

Tipo de movimiento en el ledger de saldos de consultores.

Autor: Mustashar
Fecha: 2026-09-05
"""

from enum import Enum


class BalanceMovementKind(str, Enum):
    """
    - earning_recorded  : ingreso registrado (a pending, o directo a available)
    - earning_released  : pending → available (fin del periodo de liquidación)
    - withdrawal_settled: available → withdrawn (retiro aprobado)
    """
    EARNING_RECORDED = "earning_recorded"
    EARNING_RELEASED = "earning_released"
    WITHDRAWAL_SETTLED = "withdrawal_settled"


__all__ = ["BalanceMovementKind"]
# Fin del archivo backend/app/modules/settlement/enums/balance_movement_kind_enum.py
