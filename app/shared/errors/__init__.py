# -*- coding: utf-8 -*-
"""
backend/app/shared/errors/__init__.py

Autor: Mustashar
Fecha: 2026-09-04
"""

from .domain_errors import (
    DomainError,
    InvalidAmount,
    InsufficientBalance,
    CurrencyMismatch,
    MissingReason,
    InvalidStateTransition,
    NotFound,
    WithdrawalNotFound,
    ServiceNotFound,
    Unauthorized,
)
from .handlers import register_domain_error_handlers

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
    "register_domain_error_handlers",
]
