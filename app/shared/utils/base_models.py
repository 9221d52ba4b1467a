# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/base_models.py

Modelo base para los schemas Pydantic de la API de Mustashar.

- `from_attributes=True`: los schemas de respuesta se construyen
  directamente desde modelos ORM (WithdrawalRequest, ConsultationService...)
- `str_strip_whitespace=True`: motivos, notas y datos bancarios llegan sin
  espacios sobrantes
- Montos Decimal serializados como string para no perder centavos

Autor: Mustashar
Fecha: 2026-09-04
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class UTF8SafeModel(BaseModel):
    """Base de todos los schemas (request y response)."""
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class PageOut(UTF8SafeModel, Generic[T]):
    """Página de resultados para listados administrativos."""
    items: List[T]
    total: int = Field(..., ge=0)
    limit: int = Field(..., ge=1)
    offset: int = Field(..., ge=0)


__all__ = ["UTF8SafeModel", "PageOut", "Field"]
# Fin del archivo backend/app/shared/utils/base_models.py
