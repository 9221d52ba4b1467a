# -*- coding: utf-8 -*-
"""
backend/app/shared/database/repository.py

Repositorio base para operaciones async con SQLAlchemy.

Incluye helpers comunes a los módulos de liquidaciones y moderación:
- get(..., for_update=True) con bloqueo pesimista de fila
- paginate(): página + total para listados administrativos

Autor: Mustashar
Fecha: 2026-09-03
"""

from typing import Any, Generic, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")  # modelo ORM


class BaseRepository(Generic[T]):
    """Repositorio asincrónico base para CRUD común."""

    def __init__(self, model: Type[T]):
        self.model = model

    # -------------------------------------------------------------
    # CRUD básico
    # -------------------------------------------------------------
    async def get(
        self,
        session: AsyncSession,
        obj_id: Any,
        *,
        for_update: bool = False,
    ) -> Optional[T]:
        if not for_update:
            return await session.get(self.model, obj_id)
        # populate_existing: el lock debe ver la fila vigente, no la del identity map
        return await session.get(
            self.model, obj_id, with_for_update=True, populate_existing=True
        )

    async def create(self, session: AsyncSession, **kwargs) -> T:
        obj = self.model(**kwargs)
        session.add(obj)
        await session.flush()
        return obj

    async def delete(self, session: AsyncSession, obj: T) -> None:
        await session.delete(obj)
        await session.flush()

    # -------------------------------------------------------------
    # Listados
    # -------------------------------------------------------------
    async def paginate(
        self,
        session: AsyncSession,
        stmt: Select,
        *,
        limit: int,
        offset: int = 0,
    ) -> Tuple[Sequence[T], int]:
        """
        Ejecuta `stmt` paginado y devuelve (items, total).

        El total se calcula sobre el mismo filtro, sin ORDER BY/LIMIT.
        """
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        total = int((await session.execute(count_stmt)).scalar_one())

        result = await session.execute(stmt.limit(limit).offset(offset))
        return result.scalars().all(), total

# Fin del archivo backend/app/shared/database/repository.py
