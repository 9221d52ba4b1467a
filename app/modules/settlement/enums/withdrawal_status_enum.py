# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/enums/withdrawal_status_enum.py

Enum: withdrawal_status_enum
Estados del ciclo de vida de una solicitud de retiro.

Valores: ('pending', 'approved', 'rejected')

- pending : creada por el consultor, en espera de decisión
- approved: liquidada por un admin (saldo descontado)
- rejected: rechazada por un admin con motivo

approved y rejected son terminales.

Autor: Mustashar
Fecha: 2026-09-05
"""

from enum import Enum


class WithdrawalStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not WithdrawalStatus.PENDING


__all__ = ["WithdrawalStatus"]
# Fin del archivo backend/app/modules/settlement/enums/withdrawal_status_enum.py
