# -*- coding: utf-8 -*-
"""
backend/app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: Mustashar
Fecha: 2026-09-03
"""

from __future__ import annotations

from .database import (
    get_engine,
    get_session_factory,
    get_db,
    session_scope,
    create_all_tables,
    check_database_health,
)
from .base import Base, NAMING_CONVENTION, as_str_enum
from .repository import BaseRepository
from .transactions import commit_or_raise, now_utc

__all__ = [
    "get_engine",
    "get_session_factory",
    "Base",
    "NAMING_CONVENTION",
    "as_str_enum",
    "BaseRepository",
    "commit_or_raise",
    "now_utc",
    "get_db",
    "session_scope",
    "create_all_tables",
    "check_database_health",
]

# Fin del archivo backend/app/shared/database/__init__.py
