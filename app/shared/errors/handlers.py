# -*- coding: utf-8 -*-
"""
backend/app/shared/errors/handlers.py

Mapeo de errores de dominio a respuestas HTTP.

Formato de respuesta:
    {"error": "<code>", "detail": "<mensaje>"}

Autor: Mustashar
Fecha: 2026-09-04
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .domain_errors import (
    DomainError,
    InvalidAmount,
    InsufficientBalance,
    CurrencyMismatch,
    MissingReason,
    InvalidStateTransition,
    NotFound,
    Unauthorized,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    InvalidAmount: status.HTTP_400_BAD_REQUEST,
    MissingReason: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InsufficientBalance: status.HTTP_409_CONFLICT,
    CurrencyMismatch: status.HTTP_400_BAD_REQUEST,
    InvalidStateTransition: status.HTTP_409_CONFLICT,
    NotFound: status.HTTP_404_NOT_FOUND,
    Unauthorized: status.HTTP_403_FORBIDDEN,
}


def status_for(exc: DomainError) -> int:
    """Resuelve el status HTTP recorriendo el MRO (WithdrawalNotFound → NotFound)."""
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    http_status = status_for(exc)
    logger.info(
        "Domain error on %s %s: code=%s status=%s",
        request.method, request.url.path, exc.code, http_status,
    )
    return JSONResponse(
        status_code=http_status,
        content={"error": exc.code, "detail": exc.message},
    )


def register_domain_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]


__all__ = ["register_domain_error_handlers", "status_for", "STATUS_BY_ERROR"]

# Fin del archivo backend/app/shared/errors/handlers.py
