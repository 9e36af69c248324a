# -*- coding: utf-8 -*-
"""
backend/app/modules/youtube/routes/youtube_routes.py

Rutas de YouTube (sin autenticación de usuario; el canal es el de la app):

Setup (una sola vez, para obtener YOUTUBE_REFRESH_TOKEN):
- GET  /youtube/setup/auth-url
- GET  /youtube/oauth/callback?code=...
- POST /youtube/setup/exchange-code {code}

Principal:
- POST /youtube/upload  (multipart: video, title, description, tags, privacyStatus)

Fecha: 19/10/2026
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.concurrency import run_in_threadpool

from app.core.settings import get_settings
from app.shared.config.settings_base import BaseAppSettings
from app.shared.integrations import VideoMetadata, YouTubeAPIError, YouTubeClient
from app.shared.utils.http_exceptions import BadRequestException, PayloadTooLargeException
from app.shared.utils.json_response import error_response

from ..dependencies import get_upload_service, get_youtube_client
from ..errors import UploadTooLargeError
from ..schemas import (
    AuthUrlResponse,
    ExchangeCodeRequest,
    TokensResponse,
    UploadResponse,
)
from ..services import VideoUploadService, parse_tags

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/youtube", tags=["youtube"])

VALID_PRIVACY = {"private", "unlisted", "public"}


# ─────────────────────────────────────────────────────────────
# Setup OAuth
# ─────────────────────────────────────────────────────────────

@router.get("/setup/auth-url", response_model=AuthUrlResponse, summary="URL de autorización de YouTube")
async def setup_auth_url(client: YouTubeClient = Depends(get_youtube_client)):
    try:
        auth_url = client.build_auth_url()
    except YouTubeAPIError as e:
        logger.error(f"❌ No se pudo generar la URL de autorización: {e}")
        return error_response("Credenciales OAuth de YouTube no configuradas", status_code=500, details=str(e))

    return AuthUrlResponse(
        message="Abra esta URL en el navegador para autorizar el acceso a YouTube",
        auth_url=auth_url,
        instructions=[
            "1. Abra la URL anterior en el navegador",
            "2. Inicie sesión con la cuenta de YouTube dueña del canal",
            "3. Autorice el acceso",
            "4. Será redirigido al callback que genera el REFRESH_TOKEN",
            "5. Copie el REFRESH_TOKEN y agréguelo al archivo .env",
        ],
    )


async def _exchange(client: YouTubeClient, code: str) -> dict:
    logger.info(f"🔑 Intercambiando código de YouTube ({code[:20]}...)")
    tokens = await run_in_threadpool(client.exchange_code, code)
    logger.info(f"Refresh token {'obtenido' if tokens.get('refresh_token') else 'NO recibido'}")
    return tokens


@router.get("/oauth/callback", response_model=TokensResponse, summary="Callback OAuth de YouTube")
async def oauth_callback(
    code: Optional[str] = Query(None),
    client: YouTubeClient = Depends(get_youtube_client),
):
    if not code:
        raise BadRequestException("Código de autorización no proporcionado")

    try:
        tokens = await _exchange(client, code)
    except YouTubeAPIError as e:
        logger.error(f"❌ Error en el callback de YouTube: {e.details}")
        return error_response("Error al procesar la autorización", status_code=500, details=e.details)

    refresh_token = tokens.get("refresh_token")
    return TokensResponse(
        message="¡Autorización completada! Copie el REFRESH_TOKEN y agréguelo al .env",
        refresh_token=refresh_token,
        instructions=[
            "Agregue esta línea a su archivo .env:",
            f"YOUTUBE_REFRESH_TOKEN={refresh_token}",
            "",
            "Después reinicie el servidor y podrá subir videos",
        ],
    )


@router.post("/setup/exchange-code", response_model=TokensResponse, summary="Intercambio manual del código")
async def exchange_code(
    payload: ExchangeCodeRequest,
    client: YouTubeClient = Depends(get_youtube_client),
):
    if not payload.code:
        raise BadRequestException({
            "error": "Código de autorización no proporcionado",
            "example": {"code": "4/0AVGzR1AJBuCkq..."},
        })

    try:
        tokens = await _exchange(client, payload.code)
    except YouTubeAPIError as e:
        logger.error(f"❌ Error al intercambiar código: {e.details}")
        return error_response(
            "Error al intercambiar código por tokens",
            status_code=500,
            details=e.details,
            help="El código pudo haber expirado. Genere uno nuevo en /youtube/setup/auth-url",
        )

    refresh_token = tokens.get("refresh_token")
    return TokensResponse(
        message="✅ ¡Autorización completada! Copie el REFRESH_TOKEN y agréguelo al .env",
        refresh_token=refresh_token,
        access_token=tokens.get("access_token"),
        instructions=[
            "1. Copie el refresh_token",
            "2. Agregue esta línea a su archivo .env:",
            f"   YOUTUBE_REFRESH_TOKEN={refresh_token}",
            "",
            "3. Reinicie el servidor",
            "4. Listo: ya puede subir videos en /youtube/upload",
        ],
    )


# ─────────────────────────────────────────────────────────────
# Upload
# ─────────────────────────────────────────────────────────────

@router.post("/upload", response_model=UploadResponse, summary="Subir video a YouTube")
async def upload_video(
    video: Optional[UploadFile] = File(None),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    privacy_status: Optional[str] = Form(None, alias="privacyStatus"),
    service: VideoUploadService = Depends(get_upload_service),
    settings: BaseAppSettings = Depends(get_settings),
):
    if video is None or not video.filename:
        raise BadRequestException("No se envió ningún archivo de video")

    if not title:
        raise BadRequestException("El título del video es obligatorio")

    privacy = privacy_status or settings.youtube_default_privacy
    if privacy not in VALID_PRIVACY:
        raise BadRequestException(f"privacyStatus inválido: {privacy}")

    if not service.client.refresh_token:
        return error_response(
            "Refresh Token de YouTube no configurado",
            status_code=500,
            details="Ejecute /youtube/setup/auth-url para configurarlo",
        )

    metadata = VideoMetadata(
        title=title,
        description=description or "",
        tags=parse_tags(tags),
        category_id=settings.youtube_category_id,
        privacy_status=privacy,
    )

    try:
        uploaded = await service.upload(video, metadata)
    except UploadTooLargeError as e:
        logger.warning(f"Upload rechazado: {e}")
        raise PayloadTooLargeException(str(e)) from e
    except YouTubeAPIError as e:
        logger.error(f"❌ Upload a YouTube falló: {e.details or e}")
        return error_response(
            "Failed to upload video to YouTube",
            status_code=500,
            details=e.details if e.details is not None else str(e),
        )

    return UploadResponse(message="Video uploaded successfully to YouTube!", video=uploaded)


__all__ = ["router"]

# Fin del archivo backend/app/modules/youtube/routes/youtube_routes.py
