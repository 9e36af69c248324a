# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/youtube_client.py

Cliente para YouTube Data API v3:
- URL de autorización OAuth 2.0 (setup único para obtener el refresh token)
- Intercambio de código por tokens
- Upload resumible de videos con reintentos ante 429/5xx

Las librerías de Google son bloqueantes: desde rutas async deben llamarse
con `run_in_threadpool`.

Fecha: 19/10/2026
"""

from __future__ import annotations

import json
import logging
import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaFileUpload

logger = logging.getLogger(__name__)

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"
UPLOAD_SCOPES = ["https://www.googleapis.com/auth/youtube.upload"]
RETRYABLE_STATUS = {429, 500, 502, 503, 504}


class YouTubeAPIError(Exception):
    """Fallo al autorizar o subir un video a YouTube."""

    def __init__(self, message: str, details: Any = None):
        self.details = details
        super().__init__(message)


@dataclass
class VideoMetadata:
    title: str
    description: str = ""
    tags: List[str] = field(default_factory=list)
    category_id: str = "22"
    privacy_status: str = "private"
    made_for_kids: bool = False

    def to_body(self) -> Dict[str, Any]:
        return {
            "snippet": {
                "title": self.title,
                "description": self.description,
                "tags": self.tags,
                "categoryId": str(self.category_id),
            },
            "status": {
                "privacyStatus": self.privacy_status,
                "selfDeclaredMadeForKids": bool(self.made_for_kids),
            },
        }


def _http_error_details(e: HttpError) -> Dict[str, Any]:
    """Extrae {code, message, errors} del cuerpo de un HttpError de Google."""
    status = int(getattr(e.resp, "status", 0) or 0)
    details: Dict[str, Any] = {"code": status, "message": str(e)}
    try:
        payload = json.loads(e.content.decode("utf-8"))
        error = payload.get("error", {})
        details.update({
            "code": error.get("code", status),
            "message": error.get("message", str(e)),
            "errors": error.get("errors", []),
        })
    except (ValueError, AttributeError, UnicodeDecodeError):
        pass
    return details


class YouTubeClient:
    """Operaciones OAuth y de upload con las credenciales de la app."""

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        redirect_uri: str,
        refresh_token: Optional[str] = None,
        *,
        max_upload_retries: int = 8,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.refresh_token = refresh_token
        self.max_upload_retries = max_upload_retries

    # ------------------------------------------------------------------
    # OAuth
    # ------------------------------------------------------------------
    def _flow(self) -> Flow:
        if not self.client_id or not self.client_secret:
            raise YouTubeAPIError("YOUTUBE_CLIENT_ID y YOUTUBE_CLIENT_SECRET deben estar configurados")
        client_config = {
            "web": {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "auth_uri": AUTH_URI,
                "token_uri": TOKEN_URI,
                "redirect_uris": [self.redirect_uri],
            }
        }
        # Sin PKCE: la URL y el intercambio ocurren en requests distintos
        return Flow.from_client_config(
            client_config,
            scopes=UPLOAD_SCOPES,
            redirect_uri=self.redirect_uri,
            autogenerate_code_verifier=False,
        )

    def build_auth_url(self) -> str:
        auth_url, _state = self._flow().authorization_url(
            access_type="offline",
            prompt="consent",
        )
        return auth_url

    def exchange_code(self, code: str) -> Dict[str, Optional[str]]:
        """Intercambia el código de autorización por tokens."""
        flow = self._flow()
        try:
            flow.fetch_token(code=code)
        except Exception as e:
            # oauthlib lanza subclases variadas (InvalidGrantError, etc.)
            logger.error(f"Intercambio de código YouTube falló: {type(e).__name__}: {e}")
            raise YouTubeAPIError("Error al intercambiar código por tokens", details=str(e)) from e
        creds = flow.credentials
        return {
            "access_token": creds.token,
            "refresh_token": creds.refresh_token,
        }

    # ------------------------------------------------------------------
    # Upload
    # ------------------------------------------------------------------
    def _credentials(self) -> Credentials:
        if not self.refresh_token:
            raise YouTubeAPIError("Refresh Token de YouTube no configurado")
        creds = Credentials(
            token=None,
            refresh_token=self.refresh_token,
            token_uri=TOKEN_URI,
            client_id=self.client_id,
            client_secret=self.client_secret,
            scopes=UPLOAD_SCOPES,
        )
        creds.refresh(Request())
        return creds

    def _resumable_upload(self, request) -> Dict[str, Any]:
        retry = 0
        while True:
            try:
                _status, response = request.next_chunk()
                if response is not None:
                    return response
                continue
            except HttpError as e:
                if int(getattr(e.resp, "status", 0) or 0) not in RETRYABLE_STATUS:
                    raise
                error: Exception = e
            except (ConnectionError, TimeoutError) as e:
                error = e

            retry += 1
            if retry > self.max_upload_retries:
                raise YouTubeAPIError(f"Upload falló tras {self.max_upload_retries} reintentos: {error}") from error
            sleep = (2 ** retry) + random.random()
            logger.warning(f"Reintentando upload en {sleep:.2f}s por error: {error}")
            time.sleep(sleep)

    def upload_video(self, video_path: str, metadata: VideoMetadata, mimetype: Optional[str] = None) -> Dict[str, Any]:
        """
        Sube el archivo y devuelve el recurso `video` de la API (id, snippet, status).
        """
        try:
            creds = self._credentials()
            youtube = build("youtube", "v3", credentials=creds, cache_discovery=False)
            media = MediaFileUpload(video_path, chunksize=-1, resumable=True, mimetype=mimetype or "video/*")
            request = youtube.videos().insert(
                part="snippet,status",
                body=metadata.to_body(),
                media_body=media,
            )
            response = self._resumable_upload(request)
        except HttpError as e:
            details = _http_error_details(e)
            logger.error(f"YouTube API error: {details}")
            raise YouTubeAPIError(details.get("message") or str(e), details=details) from e
        except RefreshError as e:
            logger.error(f"No se pudo refrescar el token de YouTube: {e}")
            raise YouTubeAPIError("Refresh Token de YouTube inválido o revocado", details=str(e)) from e

        if not response.get("id"):
            raise YouTubeAPIError("Upload sin id de video en la respuesta", details=response)
        return response


__all__ = ["YouTubeClient", "YouTubeAPIError", "VideoMetadata", "UPLOAD_SCOPES"]
# Fin del archivo backend/app/shared/integrations/youtube_client.py
