# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_prod.py

Entorno de producción.

Solo variables de entorno (sin `.env`), logs JSON para el agregador y
conexión a PostgreSQL con SSL obligatorio. Las reglas que hacen fallar el
arranque viven en BaseAppSettings._security_checks().

Autor: Mustashar
Fecha: 2026-09-02
"""

from typing import Literal

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings, EnvName


class ProdSettings(BaseAppSettings):
    python_env: EnvName = "production"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "pretty", "plain"] = "json"

    db_sslmode: str = "require"

    model_config = SettingsConfigDict(env_file=None, extra="ignore")


__all__ = ["ProdSettings"]
# Fin del archivo backend/app/shared/config/settings_prod.py
