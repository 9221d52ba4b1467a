# -*- coding: utf-8 -*-
"""
backend/app/modules/moderation/__init__.py

Módulo de moderación: ciclo de vida de publicación de las consultorías.

Autor: Mustashar
Fecha: 2026-09-09
"""
