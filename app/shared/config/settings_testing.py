# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_testing.py

Entorno de pruebas (PYTHON_ENV=test).

SQLite en memoria vía aiosqlite y sink de notificaciones a log: la suite no
necesita PostgreSQL ni escribe notificaciones fuera de sus propios fixtures.

Autor: Mustashar
Fecha: 2026-09-02
"""

from typing import Literal, Optional

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings, EnvName


class EnvTestingSettings(BaseAppSettings):
    python_env: EnvName = "test"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "pretty", "plain"] = "plain"

    db_name: str = "mustashar_test"
    db_url: Optional[str] = "sqlite+aiosqlite:///:memory:"

    notification_sink: Literal["database", "logging"] = "logging"

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo backend/app/shared/config/settings_testing.py
