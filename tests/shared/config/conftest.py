# -*- coding: utf-8 -*-
"""
backend/tests/shared/config/conftest.py

Aísla variables de entorno y el caché de get_settings() en cada test de config.
"""

import os

import pytest

from app.shared.config.config_loader import get_settings


@pytest.fixture(autouse=True)
def _isolate_env_and_cache(monkeypatch):
    # No heredar configuración del shell del dev
    for k in list(os.environ.keys()):
        if k.startswith(("DB_", "CORS_", "APP_", "WITHDRAWAL_", "DRAFT_", "ADMIN_", "LOG_")):
            monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("PYTHON_ENV", "development")
    get_settings.cache_clear()

    yield

    # El resto de la suite corre en PYTHON_ENV=test
    get_settings.cache_clear()
# Fin del archivo backend/tests/shared/config/conftest.py
