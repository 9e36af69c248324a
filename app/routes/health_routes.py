# -*- coding: utf-8 -*-
"""
backend/app/routes/health_routes.py

Endpoint básico de health check del backend de Terra Orgânica.

Fecha: 19/10/2026
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.settings import get_settings

router = APIRouter()


@router.get(
    "/health",
    summary="Health check del backend",
    description=(
        "Devuelve el estado básico del backend, el entorno activo y qué "
        "integraciones externas tienen configuración."
    ),
)
async def health_check() -> dict:
    """
    Health check básico del backend.

    Returns:
        dict: información mínima de estado de la aplicación.
    """
    settings = get_settings()

    return {
        "success": True,
        "message": f"{settings.app_name} backend funcionando",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "integrations": {
            "wordpress_analytics": not settings.missing_wordpress_analytics_settings(),
            "wordpress_oauth": not settings.missing_wordpress_oauth_settings(),
            "youtube_upload": settings.youtube_configured,
        },
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
    }

# Fin del archivo backend/app/routes/health_routes.py
