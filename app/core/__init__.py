# -*- coding: utf-8 -*-
"""
backend/app/core/__init__.py

Fachada unificada para componentes centrales del backend:
- Configuración (settings)
- Logging

Esta capa envuelve la implementación existente en `app.shared.*` para
ofrecer puntos de entrada estables hacia el resto de los módulos.

Fecha: 19/10/2026
"""

from .settings import get_settings
from .logging import setup_logging, configure_from_settings

__all__ = [
    "get_settings",
    "setup_logging",
    "configure_from_settings",
]

# Fin del archivo backend/app/core/__init__.py
