# -*- coding: utf-8 -*-
"""
backend/app/shared/__init__.py

Infraestructura compartida: config, database, errors, utils.

No inicializa settings en import-time para evitar efectos colaterales
durante la recolección de tests.
"""
