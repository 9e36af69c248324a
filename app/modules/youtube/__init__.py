# -*- coding: utf-8 -*-
"""
backend/app/modules/youtube/__init__.py

Módulo youtube: setup OAuth del canal de la app y upload de videos.

Fecha: 19/10/2026
"""

from .routes import router

__all__ = ["router"]
