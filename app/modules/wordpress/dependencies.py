# -*- coding: utf-8 -*-
"""
backend/app/modules/wordpress/dependencies.py

Dependencias FastAPI del módulo wordpress:
- get_wordpress_client: cliente REST sobre el httpx compartido
- get_current_session: valida el JWT de sesión (Authorization: Bearer)

Fecha: 19/10/2026
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.settings import get_settings
from app.shared.config.settings_base import BaseAppSettings
from app.shared.core import get_http_client
from app.shared.integrations import WordPressClient
from app.shared.utils.http_exceptions import UnauthorizedException
from app.shared.utils.jwt_utils import decode_session_token

from .schemas import SessionClaims
from .services import VolumePostService, WordPressOAuthService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_wordpress_client(
    settings: BaseAppSettings = Depends(get_settings),
) -> WordPressClient:
    http_client = await get_http_client()
    return WordPressClient(
        http_client,
        settings.wordpress_site_url or "",
        timeout=settings.wordpress_timeout_sec,
        max_retries=settings.wordpress_max_retries,
    )


def get_oauth_service(
    client: WordPressClient = Depends(get_wordpress_client),
    settings: BaseAppSettings = Depends(get_settings),
) -> WordPressOAuthService:
    return WordPressOAuthService(client, settings)


def get_post_service(
    client: WordPressClient = Depends(get_wordpress_client),
    settings: BaseAppSettings = Depends(get_settings),
) -> VolumePostService:
    return VolumePostService(client, post_type=settings.wordpress_volume_post_type)


def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> SessionClaims:
    """
    Raises:
        UnauthorizedException 401: token ausente, inválido o expirado.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException("Token no proporcionado")

    payload = decode_session_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedException("Token inválido o expirado")
    return SessionClaims.model_validate(payload)


__all__ = [
    "bearer_scheme",
    "get_wordpress_client",
    "get_oauth_service",
    "get_post_service",
    "get_current_session",
]

# Fin del archivo backend/app/modules/wordpress/dependencies.py
