# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend de Mustashar.

- Carga .env antes de leer settings
- Logging vía setup_logging (plain en dev, JSON en producción)
- Errores de dominio → HTTP vía register_domain_error_handlers
- En dev/test crea las tablas al arrancar (producción usa migraciones)

Autor: Mustashar
Fecha: 2026-09-18
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que lea settings
# En PROD: override=False para respetar variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_override_env = os.getenv("PYTHON_ENV", "development").strip().lower() != "production"
load_dotenv(dotenv_path=_ENV_PATH, override=_override_env)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.shared.config import settings
from app.shared.config.logging_config import setup_logging
from app.shared.database.database import create_all_tables, get_engine
from app.shared.errors import register_domain_error_handlers
from app.routes import router as api_router

setup_logging(settings.log_level, settings.log_format)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    if not settings.is_prod:
        await create_all_tables()
        logger.info("Database tables ensured (env=%s)", settings.python_env)

    logger.info("Mustashar backend started (env=%s)", settings.python_env)
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        await get_engine().dispose()
        logger.info("Mustashar backend stopped")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    origins = settings.get_cors_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_domain_error_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.app_host, port=settings.app_port, reload=settings.is_dev)

# Fin del archivo backend/app/main.py
