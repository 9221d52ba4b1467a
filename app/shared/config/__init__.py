# -*- coding: utf-8 -*-
"""
backend/app/shared/config/__init__.py

Punto único de acceso a la configuración:
    from app.shared.config import settings

El objeto `settings` es un proxy perezoso: la instancia real se construye
(vía config_loader.get_settings) la primera vez que se lee un atributo, lo
que permite a los tests fijar PYTHON_ENV antes de cualquier validación.
"""

from __future__ import annotations

from typing import Any, Callable

from .config_loader import get_settings
from .settings_base import BaseAppSettings


class _SettingsProxy:
    __slots__ = ("_base_getter",)

    def __init__(self, base_getter: Callable[[], BaseAppSettings]) -> None:
        object.__setattr__(self, "_base_getter", base_getter)

    def __getattr__(self, name: str) -> Any:
        return getattr(object.__getattribute__(self, "_base_getter")(), name)

    def __setattr__(self, name: str, value: Any) -> None:
        setattr(object.__getattribute__(self, "_base_getter")(), name, value)


settings = _SettingsProxy(get_settings)

__all__ = ["settings", "get_settings", "BaseAppSettings"]
