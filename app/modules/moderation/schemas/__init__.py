# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/schemas/__init__.py

Autor: Mustashar
Fecha: 2026-09-11
"""

from .consultation_service_schemas import (
    ServiceCreateIn,
    ServiceUpdateIn,
    ServiceReasonIn,
    ServiceRead,
    ServicePublicRead,
    ServicePage,
    ServiceDeletedOut,
)

__all__ = [
    "ServiceCreateIn",
    "ServiceUpdateIn",
    "ServiceReasonIn",
    "ServiceRead",
    "ServicePublicRead",
    "ServicePage",
    "ServiceDeletedOut",
]
