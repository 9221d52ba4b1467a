# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/enums/service_status_transitions.py

Mapa de transiciones válidas para ServiceStatus.

Reglas de transición:
- pending  → active (approve) | rejected (reject)
- active   → draft (convert_to_draft)
- draft    → active (republish)
- rejected → active (republish)

No hay estado terminal; borrar es destruir la entidad, no un estado.
No existen pending → draft ni draft → rejected.

Autor: Mustashar
Fecha: 2026-09-09
"""

from typing import Dict, Set

from app.shared.errors import InvalidStateTransition

from .service_status_enum import ServiceStatus


VALID_SERVICE_TRANSITIONS: Dict[ServiceStatus, Set[ServiceStatus]] = {
    ServiceStatus.PENDING: {
        ServiceStatus.ACTIVE,
        ServiceStatus.REJECTED,
    },
    ServiceStatus.ACTIVE: {
        ServiceStatus.DRAFT,
    },
    ServiceStatus.DRAFT: {
        ServiceStatus.ACTIVE,
    },
    ServiceStatus.REJECTED: {
        ServiceStatus.ACTIVE,
    },
}


def is_valid_service_transition(
    from_status: ServiceStatus,
    to_status: ServiceStatus,
) -> bool:
    """
    Valida si una transición de estado es permitida.

    Args:
        from_status: Estado actual.
        to_status: Estado destino.
    """
    if from_status not in VALID_SERVICE_TRANSITIONS:
        return False
    return to_status in VALID_SERVICE_TRANSITIONS[from_status]


def get_allowed_transitions(from_status: ServiceStatus) -> Set[ServiceStatus]:
    """Obtiene los estados permitidos desde un estado dado."""
    return VALID_SERVICE_TRANSITIONS.get(from_status, set())


def validate_service_transition(
    from_status: ServiceStatus,
    to_status: ServiceStatus,
) -> None:
    """
    Raises:
        InvalidStateTransition: si la arista no existe en el mapa
    """
    if not is_valid_service_transition(from_status, to_status):
        allowed = get_allowed_transitions(from_status)
        allowed_str = ", ".join(sorted(s.value for s in allowed)) if allowed else "ninguno"
        raise InvalidStateTransition(
            "consultoría",
            from_status,
            to_status,
            message=(
                f"Transición inválida para consultoría: '{from_status.value}' → '{to_status.value}'. "
                f"Transiciones permitidas desde '{from_status.value}': {allowed_str}. "
                f"Actualiza la vista; es posible que ya haya sido procesada."
            ),
        )


__all__ = [
    "VALID_SERVICE_TRANSITIONS",
    "is_valid_service_transition",
    "get_allowed_transitions",
    "validate_service_transition",
]
# Fin del archivo backend/app/modules/moderation/enums/service_status_transitions.py
