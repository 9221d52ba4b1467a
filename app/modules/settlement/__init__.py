# -*- coding: utf-8 -*-
"""
backend/app/modules/settlement/__init__.py

Módulo de liquidaciones: saldos de consultores, ledger de movimientos y
ciclo de vida de las solicitudes de retiro.

Autor: Mustashar
Fecha: 2026-09-05
"""
