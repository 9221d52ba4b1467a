# -*- coding: utf-8 -*-
"""
backend/app/shared/config/logging_config.py

Logging del backend de Mustashar vía logging.config.dictConfig.

Formatos:
    plain / pretty → "<fecha> <nivel> [<logger>]: <mensaje>"
    json           → una línea JSON por registro (python-json-logger)

Los loggers de dominio (app.modules.*) heredan del root. Solo se fijan
niveles propios para librerías ruidosas.

Autor: Mustashar
Fecha: 2026-09-02
"""

import importlib
import logging.config
from typing import Any, Dict, Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["plain", "pretty", "json"]

PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(name)s]: %(message)s"
JSON_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s"

# Librerías cuyo INFO/DEBUG no aporta en operación normal
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncio")


def _json_formatter_path() -> str:
    """python-json-logger 3.x expone `pythonjsonlogger.json`; 2.x solo `jsonlogger`."""
    try:
        importlib.import_module("pythonjsonlogger.json")
        return "pythonjsonlogger.json.JsonFormatter"
    except ImportError:  # pragma: no cover
        return "pythonjsonlogger.jsonlogger.JsonFormatter"


def build_logging_config(level: LogLevel = "INFO", fmt: LogFormat = "plain") -> Dict[str, Any]:
    formatter = "json" if fmt == "json" else "plain"
    formatters: Dict[str, Dict[str, Any]] = {"plain": {"format": PLAIN_FORMAT}}
    if formatter == "json":
        formatters["json"] = {"()": _json_formatter_path(), "format": JSON_FIELDS}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"handlers": ["console"], "level": level.upper()},
        "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
    }


def setup_logging(level: LogLevel = "INFO", fmt: LogFormat = "plain") -> None:
    """
    Aplica la configuración de logging del proceso.

    Ejemplos:
        >>> setup_logging("DEBUG", "plain")
        >>> setup_logging("INFO", "json")
    """
    logging.config.dictConfig(build_logging_config(level, fmt))


__all__ = ["setup_logging", "build_logging_config", "QUIET_LOGGERS"]
# Fin del archivo backend/app/shared/config/logging_config.py
