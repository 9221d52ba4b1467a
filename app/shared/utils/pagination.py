# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/pagination.py

Resolución de limit/offset para listados según settings
(DEFAULT_PAGE_SIZE / MAX_PAGE_SIZE).

Autor: Mustashar
Fecha: 2026-09-15
"""

from typing import Optional, Tuple

from app.shared.config import settings


def resolve_page(limit: Optional[int], offset: Optional[int]) -> Tuple[int, int]:
    """Aplica el default y recorta al máximo configurado."""
    size = limit if limit and limit > 0 else settings.page_size_default
    size = min(size, settings.page_size_max)
    return size, max(offset or 0, 0)


__all__ = ["resolve_page"]
# Fin del archivo backend/app/shared/utils/pagination.py
