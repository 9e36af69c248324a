# -*- coding: utf-8 -*-
"""
backend/app/shared/core/resources_cache.py

Contenedor singleton de recursos globales compartidos.
Hoy solo mantiene el cliente HTTP reutilizado por las integraciones
(WordPress REST / OAuth).

Fecha: 19/10/2026
"""

from __future__ import annotations
from typing import Optional

import httpx


class GlobalResources:
    """Contenedor de recursos globales compartidos (instancia única por proceso)."""

    def __init__(self) -> None:
        self.http_client: Optional[httpx.AsyncClient] = None


# Instancia singleton de recursos globales
resources = GlobalResources()


# Fin del archivo backend/app/shared/core/resources_cache.py
