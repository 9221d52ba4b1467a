# -*- coding: utf-8 -*-
"""
backend/app/shared/database/base.py

Base declarativa y convención de nombres para modelos ORM.

Este módulo proporciona:
- Base: clase base declarativa de SQLAlchemy
- NAMING_CONVENTION: convención de nombres para constraints
- as_str_enum: helper genérico para mapear enums Python a columnas VARCHAR

Autor: Mustashar
Fecha: 2026-09-03
"""

from __future__ import annotations

from enum import Enum
from typing import Type

from sqlalchemy import Enum as SQLEnum
from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# ===== NAMING CONVENTION =====
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


# ===== BASE DECLARATIVA =====
class Base(DeclarativeBase):
    """
    Base declarativa para todos los modelos ORM.
    Incluye convención de nombres para constraints.
    """
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# ===== HELPER GENÉRICO PARA ENUMS =====
def as_str_enum(
    enum_cls: Type[Enum],
    name: str | None = None,
    length: int = 32,
) -> SQLEnum:
    """
    Devuelve un tipo Enum de SQLAlchemy persistido como VARCHAR.

    Uso típico:

        from app.shared.database.base import Base, as_str_enum
        from .enums import WithdrawalStatus

        class WithdrawalRequest(Base):
            status: Mapped[WithdrawalStatus] = mapped_column(
                as_str_enum(WithdrawalStatus, name="withdrawal_status_enum"),
                nullable=False,
            )

    - Guarda el `.value` del enum (no el nombre del miembro).
    - native_enum=False: el mismo DDL funciona en PostgreSQL y en SQLite (tests).
    """
    enum_name = name or getattr(enum_cls, "__db_enum_name__", enum_cls.__name__.lower())

    def _values(_: object) -> list[str]:
        return [e.value for e in enum_cls]  # type: ignore[arg-type]

    return SQLEnum(
        enum_cls,
        name=enum_name,
        native_enum=False,
        length=length,
        validate_strings=True,
        values_callable=_values,
    )


__all__ = ["Base", "NAMING_CONVENTION", "as_str_enum"]

# Fin del archivo backend/app/shared/database/base.py
