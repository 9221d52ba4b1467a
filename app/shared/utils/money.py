# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/money.py

Normalización de montos monetarios.

Todos los montos del dominio (saldos, retiros, precios) se manejan como
Decimal con 2 decimales; nunca como float.

Autor: Mustashar
Fecha: 2026-09-04
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

MoneyLike = Union[Decimal, int, float, str]

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: MoneyLike) -> Decimal:
    """
    Convierte `value` a Decimal cuantizado a centavos.

    Los float se convierten vía str() para evitar artefactos binarios
    (0.1 + 0.2 → 0.30, no 0.3000000000000000444).

    Raises:
        ValueError: si el valor no es numérico o no es finito
    """
    if isinstance(value, bool):
        raise ValueError(f"Monto no numérico: {value!r}")
    try:
        dec = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Monto no numérico: {value!r}") from e
    if not dec.is_finite():
        raise ValueError(f"Monto no finito: {value!r}")
    return dec.quantize(CENTS, rounding=ROUND_HALF_UP)


__all__ = ["to_money", "MoneyLike", "CENTS", "ZERO"]
# Fin del archivo backend/app/shared/utils/money.py
