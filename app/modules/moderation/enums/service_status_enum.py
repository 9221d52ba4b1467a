# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/enums/service_status_enum.py

Enum: service_status_enum
Estado de publicación de una consultoría.

Valores: ('pending', 'active', 'rejected', 'draft')

- pending : enviada por el consultor, en revisión
- active  : aprobada; única condición para ser visible/reservable
- rejected: rechazada por un admin (con motivo)
- draft   : estaba activa y un admin la ocultó temporalmente (con nota)

⚠️ `draft` NO es "nunca enviada": toda consultoría nace en `pending`.

Autor: Mustashar
Fecha: 2026-09-09
"""

from enum import Enum


class ServiceStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    REJECTED = "rejected"
    DRAFT = "draft"


__all__ = ["ServiceStatus"]
# Fin del archivo backend/app/modules/moderation/enums/service_status_enum.py
