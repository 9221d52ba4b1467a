# -*- coding: utf-8 -*-
"""
backend/app/shared/database/transactions.py

Helpers transaccionales compartidos por los servicios de dominio.

- now_utc(): timestamp UTC centralizado (facilita mocks en tests)
- commit_or_raise(): ejecuta un bloque async y hace commit, o rollback + re-raise

Un servicio que necesita aplicar varias mutaciones como una sola unidad
(p. ej. cambio de estado + ajuste de saldo) debe hacerlas dentro del mismo
`work` para que ambas sean visibles o ninguna.

Autor: Mustashar
Fecha: 2026-09-03
"""

import datetime as dt
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


def now_utc() -> dt.datetime:
    """Retorna timestamp actual UTC."""
    return dt.datetime.now(dt.timezone.utc)


async def commit_or_raise(session: AsyncSession, work: Callable[[], Awaitable[T]]) -> T:
    """
    Ejecuta work() dentro de un contexto transaccional.

    Aplica commit si work() tiene éxito.
    Aplica rollback y re-lanza si work() o el commit fallan.

    Args:
        session: Sesión SQLAlchemy async
        work: Corrutina sin argumentos a ejecutar dentro de la transacción

    Returns:
        Resultado de work()
    """
    try:
        result = await work()
        await session.commit()
        return result
    except Exception:
        await session.rollback()
        raise


__all__ = ["now_utc", "commit_or_raise"]
# Fin del archivo backend/app/shared/database/transactions.py
