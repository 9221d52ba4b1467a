# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/schemas/consultation_service_schemas.py

Schemas Pydantic para consultorías y su moderación.

Autor: Mustashar
Fecha: 2026-09-11
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from app.shared.utils.base_models import PageOut, UTF8SafeModel
from app.modules.moderation.enums import ServiceStatus


# ========== REQUEST SCHEMAS ==========

class ServiceCreateIn(UTF8SafeModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field("", max_length=5000)
    price: Decimal = Field(..., gt=0)
    duration: int = Field(..., gt=0, description="Duración en minutos")

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("El título de la consultoría no puede estar vacío")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Tax Planning",
                "description": "Planeación fiscal para pymes",
                "price": "350.00",
                "duration": 60,
            }
        }
    )


class ServiceUpdateIn(UTF8SafeModel):
    """Edición parcial; solo campos de contenido (status no es editable)."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    price: Optional[Decimal] = Field(None, gt=0)
    duration: Optional[int] = Field(None, gt=0)

    model_config = ConfigDict(extra="forbid")


class ServiceReasonIn(UTF8SafeModel):
    """Motivo para reject / convert_to_draft."""
    reason: str = Field("", max_length=2000)


# ========== RESPONSE SCHEMAS ==========

class ServiceRead(UTF8SafeModel):
    id: UUID
    consultant_id: UUID
    title: str
    description: str
    price: Decimal
    duration: int
    status: ServiceStatus
    rejection_reason: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ServicePublicRead(UTF8SafeModel):
    """Vista pública (sin motivos de moderación)."""
    id: UUID
    consultant_id: UUID
    title: str
    description: str
    price: Decimal
    duration: int


class ServicePage(PageOut[ServiceRead]):
    pass


class ServiceDeletedOut(UTF8SafeModel):
    id: UUID
    consultant_id: UUID
    title: str
    status: ServiceStatus
    deleted: bool = True


__all__ = [
    "ServiceCreateIn",
    "ServiceUpdateIn",
    "ServiceReasonIn",
    "ServiceRead",
    "ServicePublicRead",
    "ServicePage",
    "ServiceDeletedOut",
]
# Fin del archivo backend/app/modules/moderation/schemas/consultation_service_schemas.py
