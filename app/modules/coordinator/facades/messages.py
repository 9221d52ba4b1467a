# -*- coding: utf-8 -*-
"""
backend/app/modules/coordinator/facades/messages.py

Textos de las notificaciones emitidas por el coordinador.

Cada builder devuelve un NotificationMessage (título, mensaje, severidad,
link). Los montos se formatean con 2 decimales y la moneda.

Autor: Mustashar
Fecha: 2026-09-13
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from app.modules.notifications.enums import NotificationSeverity

CONSULTANT_EARNINGS_LINK = "/consultant/earnings"
CONSULTANT_SERVICES_LINK = "/consultant/services"
ADMIN_CONSULTATIONS_LINK = "/admin/consultations"


@dataclass(frozen=True)
class NotificationMessage:
    title: str
    message: str
    severity: NotificationSeverity
    link: Optional[str] = None


def format_amount(amount: Decimal, currency: str) -> str:
    return f"{Decimal(amount):,.2f} {currency}"


# ── Liquidaciones

def withdrawal_submitted(amount: Decimal, currency: str) -> NotificationMessage:
    return NotificationMessage(
        title="Solicitud de retiro enviada",
        message=(
            f"Recibimos tu solicitud de retiro por {format_amount(amount, currency)}. "
            f"Te avisaremos cuando sea procesada."
        ),
        severity=NotificationSeverity.SUCCESS,
        link=CONSULTANT_EARNINGS_LINK,
    )


def withdrawal_approved(amount: Decimal, currency: str) -> NotificationMessage:
    return NotificationMessage(
        title="Retiro aprobado",
        message=(
            f"Tu retiro por {format_amount(amount, currency)} fue aprobado y "
            f"será transferido a tu cuenta bancaria."
        ),
        severity=NotificationSeverity.SUCCESS,
        link=CONSULTANT_EARNINGS_LINK,
    )


def withdrawal_rejected(amount: Decimal, currency: str, reason: str) -> NotificationMessage:
    return NotificationMessage(
        title="Retiro rechazado",
        message=(
            f"Tu solicitud de retiro por {format_amount(amount, currency)} fue rechazada. "
            f"Motivo: {reason}"
        ),
        severity=NotificationSeverity.ERROR,
        link=CONSULTANT_EARNINGS_LINK,
    )


def earning_recorded(amount: Decimal, currency: str, released: bool) -> NotificationMessage:
    where = "tu saldo disponible" if released else "tu saldo pendiente"
    return NotificationMessage(
        title="Nuevo ingreso",
        message=f"Se agregaron {format_amount(amount, currency)} a {where}.",
        severity=NotificationSeverity.INFO,
        link=CONSULTANT_EARNINGS_LINK,
    )


# ── Moderación

def service_submitted(title: str) -> NotificationMessage:
    return NotificationMessage(
        title="Consultoría enviada a revisión",
        message=f"Tu consultoría \"{title}\" fue enviada y está pendiente de aprobación.",
        severity=NotificationSeverity.SUCCESS,
        link=CONSULTANT_SERVICES_LINK,
    )


def service_submitted_admin(title: str) -> NotificationMessage:
    return NotificationMessage(
        title="Nueva consultoría por revisar",
        message=f"La consultoría \"{title}\" está pendiente de moderación.",
        severity=NotificationSeverity.INFO,
        link=ADMIN_CONSULTATIONS_LINK,
    )


def service_approved(title: str) -> NotificationMessage:
    return NotificationMessage(
        title="Consultoría aprobada",
        message=f"Tu consultoría \"{title}\" fue aprobada y ya es visible para los clientes.",
        severity=NotificationSeverity.SUCCESS,
        link=CONSULTANT_SERVICES_LINK,
    )


def service_rejected(title: str, reason: str) -> NotificationMessage:
    return NotificationMessage(
        title="Consultoría rechazada",
        message=f"Tu consultoría \"{title}\" fue rechazada. Motivo: {reason}",
        severity=NotificationSeverity.ERROR,
        link=CONSULTANT_SERVICES_LINK,
    )


def service_converted_to_draft(title: str, reason: str) -> NotificationMessage:
    return NotificationMessage(
        title="Consultoría movida a borrador",
        message=(
            f"Un administrador ocultó tu consultoría \"{title}\" y la movió a borrador. "
            f"Nota: {reason}"
        ),
        severity=NotificationSeverity.WARNING,
        link=CONSULTANT_SERVICES_LINK,
    )


def service_republished(title: str) -> NotificationMessage:
    return NotificationMessage(
        title="Consultoría publicada",
        message=f"Tu consultoría \"{title}\" está activa nuevamente.",
        severity=NotificationSeverity.SUCCESS,
        link=CONSULTANT_SERVICES_LINK,
    )


def service_edited(title: str, by_admin: bool) -> NotificationMessage:
    who = "Un administrador actualizó" if by_admin else "Actualizaste"
    return NotificationMessage(
        title="Consultoría actualizada",
        message=f"{who} la consultoría \"{title}\".",
        severity=NotificationSeverity.INFO,
        link=CONSULTANT_SERVICES_LINK,
    )


def service_deleted(title: str, by_admin: bool) -> NotificationMessage:
    if by_admin:
        return NotificationMessage(
            title="Consultoría eliminada",
            message=f"Un administrador eliminó tu consultoría \"{title}\".",
            severity=NotificationSeverity.WARNING,
            link=CONSULTANT_SERVICES_LINK,
        )
    return NotificationMessage(
        title="Consultoría eliminada",
        message=f"Eliminaste la consultoría \"{title}\".",
        severity=NotificationSeverity.SUCCESS,
        link=CONSULTANT_SERVICES_LINK,
    )


def service_deleted_admin(title: str, by_admin: bool) -> NotificationMessage:
    who = "un administrador" if by_admin else "su consultor"
    return NotificationMessage(
        title="Consultoría eliminada",
        message=f"La consultoría \"{title}\" fue eliminada por {who}.",
        severity=NotificationSeverity.INFO,
        link=ADMIN_CONSULTATIONS_LINK,
    )


__all__ = [
    "NotificationMessage",
    "format_amount",
    "withdrawal_submitted",
    "withdrawal_approved",
    "withdrawal_rejected",
    "earning_recorded",
    "service_submitted",
    "service_submitted_admin",
    "service_approved",
    "service_rejected",
    "service_converted_to_draft",
    "service_republished",
    "service_edited",
    "service_deleted",
    "service_deleted_admin",
]
# Fin del archivo backend/app/modules/coordinator/facades/messages.py
