# -*- coding: utf-8 -*-
"""
backend/app/modules/analytics/dependencies.py

Dependencias FastAPI del módulo analytics.

La validación de configuración es ansiosa: si faltan variables de
WordPress se lanza ConfigurationMissingError antes de tocar la red.

Fecha: 19/10/2026
"""
from __future__ import annotations

from fastapi import Depends

from app.core.settings import get_settings
from app.shared.config.settings_base import BaseAppSettings
from app.shared.core import get_http_client

from .errors import ConfigurationMissingError
from .repositories import ContentRepository, WordPressContentRepository
from .services import CentralsAnalysisService


def ensure_wordpress_configured(settings: BaseAppSettings) -> None:
    missing = settings.missing_wordpress_analytics_settings()
    if missing:
        raise ConfigurationMissingError(missing)


async def get_content_repository(
    settings: BaseAppSettings = Depends(get_settings),
) -> ContentRepository:
    ensure_wordpress_configured(settings)
    http_client = await get_http_client()
    return WordPressContentRepository.from_settings(http_client, settings)


def get_centrals_analysis_service(
    repository: ContentRepository = Depends(get_content_repository),
) -> CentralsAnalysisService:
    return CentralsAnalysisService(repository)


__all__ = [
    "ensure_wordpress_configured",
    "get_content_repository",
    "get_centrals_analysis_service",
]

# Fin del archivo backend/app/modules/analytics/dependencies.py
