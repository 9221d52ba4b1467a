# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_dev.py

Entorno de desarrollo local.

- Lee `.env` del directorio de trabajo
- Logs DEBUG en texto plano
- PostgreSQL local sin SSL; el frontend de Vite es el único origen CORS

Autor: Mustashar
Fecha: 2026-09-02
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings, EnvName


class DevSettings(BaseAppSettings):
    python_env: EnvName = "development"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"
    log_format: Literal["json", "pretty", "plain"] = "plain"

    db_sslmode: str = "disable"
    allowed_origins: str = Field(default="http://localhost:5173", validation_alias="CORS_ORIGINS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["DevSettings"]
# Fin del archivo backend/app/shared/config/settings_dev.py
