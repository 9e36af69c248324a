# -*- coding: utf-8 -*-
"""
backend/app/core/settings.py

Punto de entrada estable para la configuración: reexpone el loader
cacheado de `app.shared.config` (mismo objeto función), de modo que
`Depends(get_settings)` y `app.dependency_overrides[get_settings]`
apuntan a la misma clave en rutas y tests.

Fecha: 19/10/2026
"""

from app.shared.config.config_loader import get_settings

__all__ = ["get_settings"]

# Fin del archivo backend/app/core/settings.py
