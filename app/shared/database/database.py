# -*- coding: utf-8 -*-
"""
backend/app/shared/database/database.py

SQLAlchemy async (asyncpg en dev/prod, aiosqlite en tests).

Provee:
- get_engine() (create_async_engine perezoso, cacheado)
- get_session_factory() (async_sessionmaker)
- Dependencias FastAPI: get_db
- context manager: session_scope()
- check_database_health()

Notas:
- El engine NO se crea al importar el módulo: los tests pueden fijar
  PYTHON_ENV/DB_URL antes, o inyectar su propio engine.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.shared.config import settings
from app.shared.database.base import Base  # reutilizamos la Base única

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Crea (una sola vez) el engine async a partir de settings.database_url."""
    url = settings.database_url
    echo = bool(getattr(settings, "db_echo_sql", False))

    kwargs: dict = {"echo": echo}
    if url.startswith("sqlite") and ":memory:" in url:
        # Una sola conexión compartida; si no, cada checkout vería una BD vacía
        kwargs.update(poolclass=StaticPool, connect_args={"check_same_thread": False})
    else:
        kwargs.update(pool_pre_ping=True)

    logger.info("[DB] Creating async engine (dialect=%s, echo=%s)", url.split(":", 1)[0], echo)
    return create_async_engine(url, **kwargs)


@lru_cache(maxsize=1)
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=get_engine(),
        expire_on_commit=False,
        class_=AsyncSession,
        autoflush=False,
    )


# ── Dependencia FastAPI
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with get_session_factory()() as session:
        try:
            yield session
        except SQLAlchemyError:
            # Importante: rollback para liberar cualquier transacción/lock
            await session.rollback()
            raise
        finally:
            if session.in_transaction():
                await session.rollback()


# ── Context manager reutilizable en scripts/tests
@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    async with get_session_factory()() as session:
        try:
            yield session
            # El commit/rollback queda en manos de quien usa el scope
        finally:
            if session.in_transaction():
                await session.rollback()


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """Crea las tablas de todos los modelos registrados en Base (dev/tests)."""
    eng = engine or get_engine()
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# ── Health check
async def check_database_health(timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        async with asyncio.timeout(timeout_s):
            async with get_engine().connect() as conn:
                await conn.execute(text(sql))
        return True
    except (SQLAlchemyError, OSError, TimeoutError) as e:
        logger.warning("[DB] Health check failed: %s", e)
        return False


__all__ = [
    "get_engine",
    "get_session_factory",
    "Base",
    "get_db",
    "session_scope",
    "create_all_tables",
    "check_database_health",
]
# Fin del archivo backend/app/shared/database/database.py
