# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Paquete principal del backend de Mustashar.

- app.shared   : configuración, base de datos, errores, utilidades
- app.modules  : liquidaciones, moderación, notificaciones, coordinador
- app.routes   : ensamblado de routers
- app.main     : aplicación FastAPI

Autor: Mustashar
Fecha: 2026-09-01
"""

# Fin del archivo backend/app/__init__.py
