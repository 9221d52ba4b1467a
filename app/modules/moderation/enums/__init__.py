# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/enums/__init__.py

Autor: Mustashar
Fecha: 2026-09-09
"""

from .service_status_enum import ServiceStatus
from .service_status_transitions import (
    VALID_SERVICE_TRANSITIONS,
    is_valid_service_transition,
    get_allowed_transitions,
    validate_service_transition,
)

__all__ = [
    "ServiceStatus",
    "VALID_SERVICE_TRANSITIONS",
    "is_valid_service_transition",
    "get_allowed_transitions",
    "validate_service_transition",
]
