# -*- coding: utf-8 -*-
"""
backend/app/modules/notifications/__init__.py

Sink de notificaciones (consultores y canal admin) y su bandeja de lectura.

Autor: Mustashar
Fecha: 2026-09-12
"""
