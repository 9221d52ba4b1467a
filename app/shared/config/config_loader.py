# -*- coding: utf-8 -*-
"""
backend/app/shared/config/config_loader.py

Resuelve PYTHON_ENV a una clase de settings y cachea la instancia.

Alias aceptados:
    development: development | dev | local
    test:        test | testing
    production:  production | prod

Un valor desconocido cae a development con un warning: preferimos arrancar
con defaults locales a fallar en un script de soporte.

Autor: Mustashar
Actualizado: 2026-09-02
"""

import logging
import os
from functools import lru_cache
from typing import Dict, Type

from .settings_base import BaseAppSettings, EnvName
from .settings_dev import DevSettings
from .settings_prod import ProdSettings
from .settings_testing import EnvTestingSettings

logger = logging.getLogger(__name__)

_ENV_ALIASES: Dict[str, EnvName] = {
    "development": "development",
    "dev": "development",
    "local": "development",
    "test": "test",
    "testing": "test",
    "production": "production",
    "prod": "production",
}

SETTINGS_BY_ENV: Dict[EnvName, Type[BaseAppSettings]] = {
    "development": DevSettings,
    "test": EnvTestingSettings,
    "production": ProdSettings,
}


def resolve_env_name(raw: str | None) -> EnvName:
    key = (raw or "development").strip().lower()
    env = _ENV_ALIASES.get(key)
    if env is None:
        logger.warning("Unknown PYTHON_ENV=%r, falling back to development", raw)
        return "development"
    return env


@lru_cache(maxsize=1)
def get_settings() -> BaseAppSettings:
    """
    Instancia los settings del entorno actual y ejecuta _security_checks().

    Raises:
        ValueError: si alguna validación de coherencia falla
    """
    env = resolve_env_name(os.getenv("PYTHON_ENV"))
    # python_env explícito: el alias ("prod") no debe llegar al Literal
    instance = SETTINGS_BY_ENV[env](python_env=env)
    instance._security_checks()
    logger.debug("Settings loaded: env=%s class=%s", env, type(instance).__name__)
    return instance


__all__ = ["get_settings", "resolve_env_name", "SETTINGS_BY_ENV"]
# Fin del archivo backend/app/shared/config/config_loader.py
