# -*- coding: utf-8 -*-
"""
backend/app/routes/master_routes.py

Router maestro con dos capas:
  - /api/... (interno/estable)
  - rutas públicas sin prefijo (las que usan la app móvil y el dashboard)

Módulos montados en ambas capas:
- wordpress: /auth/callback, /me, /logout, /create-post
- youtube:   /youtube/*
- analytics: /analytics/*

Fecha: 19/10/2026
"""
from __future__ import annotations

import logging

from fastapi import APIRouter

from app.modules.analytics import router as analytics_router
from app.modules.wordpress import router as wordpress_router
from app.modules.youtube import router as youtube_router

logger = logging.getLogger(__name__)

# Capas principales
api = APIRouter(prefix="/api")
public = APIRouter(prefix="")  # sin prefijo

_loaded: list[str] = []  # trazabilidad/debug


def _include(target: APIRouter, router: APIRouter, name: str) -> None:
    """Incluye un router en la capa dada y registra trazabilidad en logs."""
    target.include_router(router)
    _loaded.append(f"{target.prefix or '/'}:{name}")
    logger.debug(
        "✅ Router '%s' montado en prefix '%s' (router.prefix='%s')",
        name,
        target.prefix or "/",
        getattr(router, "prefix", ""),
    )


for _name, _router in (
    ("wordpress", wordpress_router),
    ("youtube", youtube_router),
    ("analytics", analytics_router),
):
    _include(api, _router, _name)
    _include(public, _router, _name)


@api.get("/_debug/loaded-routers")
def loaded_routers():
    """Endpoint de debug para ver qué routers se montaron y en qué capa."""
    return {"loaded": _loaded}


__all__ = ["api", "public"]

# Fin del archivo backend/app/routes/master_routes.py
