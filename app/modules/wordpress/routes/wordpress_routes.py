# -*- coding: utf-8 -*-
"""
backend/app/modules/wordpress/routes/wordpress_routes.py

Rutas públicas del login con WordPress y publicación de verificaciones:

- GET  /auth/callback   → intercambio OAuth y redirect (302) al deep link de la app
- GET  /me              → perfil del usuario de la sesión (Bearer)
- POST /logout          → logout sin estado (Bearer)
- POST /create-post     → crea una verificación de volumen en WordPress (Bearer)

Fecha: 19/10/2026
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from app.shared.integrations import WordPressAPIError
from app.shared.utils.json_response import error_response

from ..dependencies import get_current_session, get_oauth_service, get_post_service
from ..errors import OAuthConfigurationError, TokenExchangeError
from ..schemas import (
    CreatePostRequest,
    CreatePostResponse,
    LogoutResponse,
    MeResponse,
    SessionClaims,
)
from ..services import VolumePostService, WordPressOAuthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["wordpress"])


@router.get(
    "/auth/callback",
    summary="Callback OAuth de WordPress",
    response_class=RedirectResponse,
    status_code=302,
)
async def oauth_callback(
    code: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    error: Optional[str] = Query(None),
    error_description: Optional[str] = Query(None),
    service: WordPressOAuthService = Depends(get_oauth_service),
):
    logger.info(f"🔐 Callback OAuth recibido: code={'presente' if code else 'ausente'} state={state}")

    if error:
        logger.error(f"WordPress authorization error: {error} ({error_description})")
        return error_response(
            "WordPress authorization error",
            status_code=400,
            error_code=error,
            error_description=error_description,
        )

    if not code:
        logger.error("Código de autorización no proporcionado")
        return error_response("Authorization code not provided", status_code=400)

    try:
        deep_link = await service.complete_login(code)
    except OAuthConfigurationError as e:
        logger.error(f"❌ OAuth de WordPress sin configurar: {e}")
        return error_response("Configuración OAuth de WordPress incompleta", status_code=500, message=str(e))
    except TokenExchangeError as e:
        logger.error(f"❌ Intercambio de código falló: {e.details}")
        return error_response(str(e), status_code=400, details=e.details)

    logger.info(f"↪️ Redirigiendo al deep link ({len(deep_link)} chars)")
    return RedirectResponse(deep_link, status_code=302)


@router.get("/me", response_model=MeResponse, summary="Perfil del usuario autenticado")
async def me(session: SessionClaims = Depends(get_current_session)):
    return MeResponse(user=session.user_data)


@router.post("/logout", response_model=LogoutResponse, summary="Logout (sin estado)")
async def logout(session: SessionClaims = Depends(get_current_session)):
    # El JWT expira solo; no hay nada que invalidar en servidor
    logger.info(f"👋 Logout de user_id={session.user_id} ({session.user_data.get('name')})")
    return LogoutResponse(message="Logout realizado con éxito")


@router.post(
    "/create-post",
    response_model=CreatePostResponse,
    summary="Crear verificación de volumen en WordPress",
)
async def create_post(
    payload: CreatePostRequest,
    session: SessionClaims = Depends(get_current_session),
    service: VolumePostService = Depends(get_post_service),
):
    if not payload.title:
        logger.error("Title is required")
        return error_response("Title is required", status_code=400)

    if not session.access_token:
        return error_response("Sesión sin access_token de WordPress", status_code=401)

    if not service.client.site_url:
        return error_response(
            "Configuración de WordPress no encontrada",
            status_code=500,
            message="Verifique que WORDPRESS_SITE_URL esté configurado en el .env",
        )

    try:
        post = await service.create_post(
            session.access_token,
            payload.title,
            meta=payload.meta,
            status=payload.status,
        )
    except WordPressAPIError as e:
        logger.error(f"❌ Falló la creación del post (HTTP {e.status_code}): {e}")
        return error_response(
            "Failed to create WordPress post",
            status_code=e.status_code or 500,
            message=str(e),
            details=e.details,
        )

    return CreatePostResponse(message="Post created successfully", post=post)


__all__ = ["router"]

# Fin del archivo backend/app/modules/wordpress/routes/wordpress_routes.py
