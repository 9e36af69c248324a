# -*- coding: utf-8 -*-
"""
backend/app/modules/wordpress/__init__.py

Módulo wordpress: login OAuth con WordPress, sesión JWT para la app móvil
y publicación de verificaciones de volumen.

Fecha: 19/10/2026
"""

from .routes import router

__all__ = ["router"]
