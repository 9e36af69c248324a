# -*- coding: utf-8 -*-
"""
backend/app/modules/youtube/dependencies.py

Fecha: 19/10/2026
"""
from __future__ import annotations

from fastapi import Depends

from app.core.settings import get_settings
from app.shared.config.settings_base import BaseAppSettings
from app.shared.integrations import YouTubeClient

from .services import VideoUploadService


def _secret(value) -> str | None:
    return value.get_secret_value() if value else None


def get_youtube_client(settings: BaseAppSettings = Depends(get_settings)) -> YouTubeClient:
    return YouTubeClient(
        settings.youtube_client_id,
        _secret(settings.youtube_client_secret),
        settings.youtube_redirect_uri,
        _secret(settings.youtube_refresh_token),
    )


def get_upload_service(
    client: YouTubeClient = Depends(get_youtube_client),
    settings: BaseAppSettings = Depends(get_settings),
) -> VideoUploadService:
    return VideoUploadService(
        client,
        upload_dir=settings.upload_dir,
        max_bytes=settings.max_upload_size_bytes,
    )


__all__ = ["get_youtube_client", "get_upload_service"]

# Fin del archivo backend/app/modules/youtube/dependencies.py
