# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Exportación de utilidades comunes.

Autor: Mustashar
Fecha: 2026-09-04
"""

from .base_models import UTF8SafeModel, PageOut, Field
from .http_exceptions import BadRequestException, UnauthorizedException
from .money import to_money, ZERO, CENTS

__all__ = [
    "UTF8SafeModel",
    "PageOut",
    "Field",
    "BadRequestException",
    "UnauthorizedException",
    "to_money",
    "ZERO",
    "CENTS",
]
