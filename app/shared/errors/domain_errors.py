# -*- coding: utf-8 -*-
"""
backend/app/shared/errors/domain_errors.py

Taxonomía de errores de dominio compartida por liquidaciones y moderación.

Cada clase lleva un `code` estable (lo que ve el frontend) y un mensaje
en español que indica qué hacer. Los servicios los lanzan de forma
síncrona; ninguno se reintenta automáticamente.

Autor: Mustashar
Fecha: 2026-09-04
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional


class DomainError(Exception):
    """Base de todos los errores de dominio."""
    code: str = "domain_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidAmount(DomainError):
    """Monto no positivo o inferior al mínimo permitido."""
    code = "invalid_amount"

    def __init__(self, amount: Any, minimum: Optional[Decimal] = None, message: Optional[str] = None):
        self.amount = amount
        self.minimum = minimum
        if message is None:
            if minimum is not None:
                message = f"Monto inválido: {amount}. El monto mínimo de retiro es {minimum}."
            else:
                message = f"Monto inválido: {amount}. Debe ser mayor que cero."
        super().__init__(message)


class InsufficientBalance(DomainError):
    """El retiro solicitado excede el saldo disponible."""
    code = "insufficient_balance"

    def __init__(self, requested: Decimal, available: Decimal):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Saldo insuficiente: solicitaste {requested} pero tu saldo disponible es {available}."
        )


class CurrencyMismatch(DomainError):
    """El retiro se pidió en una moneda distinta a la del saldo del consultor."""
    code = "currency_mismatch"

    def __init__(self, requested: str, balance_currency: str):
        self.requested = requested
        self.balance_currency = balance_currency
        super().__init__(
            f"Moneda inválida: solicitaste el retiro en {requested} pero tu saldo está en {balance_currency}."
        )


class MissingReason(DomainError):
    """Rechazo o paso a borrador sin texto explicativo."""
    code = "missing_reason"

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Debes indicar un motivo para '{action}'.")


class InvalidStateTransition(DomainError):
    """Operación invocada sobre una entidad que no está en el estado requerido."""
    code = "invalid_state_transition"

    def __init__(self, entity: str, from_state: Any, to_state: Any, message: Optional[str] = None):
        self.entity = entity
        self.from_state = from_state
        self.to_state = to_state
        from_value = getattr(from_state, "value", from_state)
        to_value = getattr(to_state, "value", to_state)
        default_msg = (
            f"Transición inválida para {entity}: '{from_value}' → '{to_value}'. "
            f"Actualiza la vista; es posible que otra persona ya la haya procesado."
        )
        super().__init__(message or default_msg)


class NotFound(DomainError):
    """La entidad referenciada no existe."""
    code = "not_found"

    def __init__(self, entity: str, identifier: Any):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} no encontrado: {identifier}")


class WithdrawalNotFound(NotFound):
    def __init__(self, request_id: Any):
        super().__init__("Solicitud de retiro", request_id)


class ServiceNotFound(NotFound):
    def __init__(self, service_id: Any):
        super().__init__("Consultoría", service_id)


class Unauthorized(DomainError):
    """El actor intentó una operación fuera de su rol o de su propiedad."""
    code = "unauthorized"

    def __init__(self, message: str = "No tienes permisos para realizar esta operación."):
        super().__init__(message)


__all__ = [
    "DomainError",
    "InvalidAmount",
    "InsufficientBalance",
    "CurrencyMismatch",
    "MissingReason",
    "InvalidStateTransition",
    "NotFound",
    "WithdrawalNotFound",
    "ServiceNotFound",
    "Unauthorized",
]

# Fin del archivo backend/app/shared/errors/domain_errors.py
