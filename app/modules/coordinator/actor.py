# -*- coding: utf-8 -*-
"""
backend/app/modules/coordinator/actor.py

Identidad del actor que invoca el coordinador.

La autenticación queda fuera de este núcleo: la capa HTTP resuelve el
actor (headers X-Actor-Id / X-Actor-Role) y el coordinador solo verifica
rol y propiedad.

Autor: Mustashar
Fecha: 2026-09-13
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from uuid import UUID


class ActorRole(str, Enum):
    CONSULTANT = "consultant"
    ADMIN = "admin"
    SYSTEM = "system"  # productor de eventos de pago / jobs


@dataclass(frozen=True)
class ActorContext:
    role: ActorRole
    actor_id: Optional[UUID] = None

    @property
    def is_admin(self) -> bool:
        return self.role is ActorRole.ADMIN

    @property
    def is_system(self) -> bool:
        return self.role is ActorRole.SYSTEM

    @property
    def is_consultant(self) -> bool:
        return self.role is ActorRole.CONSULTANT

    def owns(self, consultant_id: UUID) -> bool:
        return self.is_consultant and self.actor_id is not None and self.actor_id == consultant_id

    @classmethod
    def consultant(cls, consultant_id: UUID) -> "ActorContext":
        return cls(role=ActorRole.CONSULTANT, actor_id=consultant_id)

    @classmethod
    def admin(cls, admin_id: Optional[UUID] = None) -> "ActorContext":
        return cls(role=ActorRole.ADMIN, actor_id=admin_id)

    @classmethod
    def system(cls) -> "ActorContext":
        return cls(role=ActorRole.SYSTEM)


__all__ = ["ActorRole", "ActorContext"]
# Fin del archivo backend/app/modules/coordinator/actor.py
