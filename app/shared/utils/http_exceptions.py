# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/http_exceptions.py

Excepciones HTTP propias de la capa de rutas.

Los DomainError no pasan por aquí (los traduce app.shared.errors.handlers).
Estas cubren lo que la capa HTTP detecta sola:
- BadRequestException: ValueError de los motores (datos bancarios vacíos,
  contenido de consultoría inválido)
- UnauthorizedException: headers de actor ausentes o ilegibles

Autor: Mustashar
Fecha: 2026-09-15
"""

from typing import Dict, Optional

from fastapi import HTTPException, status

ACTOR_HEADERS_HINT = {"X-Actor-Headers": "X-Actor-Role, X-Actor-Id"}


class BadRequestException(HTTPException):
    """400 - entrada rechazada por una validación del motor."""

    def __init__(self, detail: str = "Solicitud inválida", headers: Optional[Dict[str, str]] = None):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail, headers=headers)

    @classmethod
    def from_value_error(cls, exc: ValueError) -> "BadRequestException":
        return cls(str(exc) or "Solicitud inválida")


class UnauthorizedException(HTTPException):
    """401 - no se pudo identificar al actor del request."""

    def __init__(self, detail: str = "Identidad del actor ausente o inválida"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers=ACTOR_HEADERS_HINT,
        )


__all__ = ["BadRequestException", "UnauthorizedException"]
# Fin del archivo backend/app/shared/utils/http_exceptions.py
