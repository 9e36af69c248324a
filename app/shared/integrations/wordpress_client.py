# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/wordpress_client.py

Cliente mínimo para la API REST de WordPress (wp-json).

- Autenticación Basic (application password) o Bearer (token OAuth).
- Reintentos con backoff en 429/5xx y errores de transporte.
- Paginación de colecciones vía cabecera `X-WP-TotalPages`.
- Todo fallo se traduce a WordPressAPIError (status + mensaje + detalle).

Fecha: 19/10/2026
"""

from __future__ import annotations

import base64
import logging
from typing import Any, Dict, List, Optional

import httpx

from app.shared.core.http_retry_utils import retry_with_backoff

logger = logging.getLogger(__name__)


class WordPressAPIError(Exception):
    """Fallo al comunicarse con WordPress (red, auth, status != 2xx, JSON inválido)."""

    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        self.status_code = status_code
        self.details = details
        super().__init__(message)


def basic_auth_header(username: str, password: str) -> str:
    credentials = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {credentials}"


def bearer_auth_header(token: str) -> str:
    return f"Bearer {token}"


def _error_message(response: httpx.Response) -> tuple[str, Any]:
    """Extrae mensaje y detalle de un error WordPress ({code, message, data})."""
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}", response.text[:500]
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"]), body
    return f"HTTP {response.status_code}", body


class WordPressClient:
    """
    Envoltura delgada sobre httpx para un sitio WordPress.

    Args:
        http_client: cliente httpx compartido (no se cierra aquí).
        site_url: URL base del sitio (sin `/wp-json`).
        authorization: valor completo de la cabecera Authorization (opcional).
        timeout: timeout por request en segundos.
        max_retries: reintentos ante 429/5xx/transporte.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        site_url: str,
        *,
        authorization: Optional[str] = None,
        timeout: float = 10.0,
        max_retries: int = 2,
        retry_base_delay: float = 0.5,
    ) -> None:
        self.http_client = http_client
        self.site_url = site_url.rstrip("/")
        self.authorization = authorization
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.site_url}/{path.lstrip('/')}"

    def _headers(self, authorization: Optional[str]) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        auth = authorization or self.authorization
        if auth:
            headers["Authorization"] = auth
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        authorization: Optional[str] = None,
        retry: bool = True,
    ) -> httpx.Response:
        url = self.url(path)
        try:
            response = await retry_with_backoff(
                self.http_client.request,
                method,
                url,
                params=params,
                json=json,
                headers=self._headers(authorization),
                timeout=self.timeout,
                max_retries=self.max_retries if retry else 0,
                base_delay=self.retry_base_delay,
            )
        except httpx.HTTPError as e:
            logger.error(f"WordPress {method} {url} falló: {type(e).__name__}: {e}")
            raise WordPressAPIError(f"No fue posible contactar WordPress: {e}") from e

        if response.is_error:
            message, details = _error_message(response)
            logger.error(f"WordPress {method} {url} → HTTP {response.status_code}: {message}")
            raise WordPressAPIError(message, status_code=response.status_code, details=details)
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise WordPressAPIError(
                "Respuesta no JSON de WordPress",
                status_code=response.status_code,
                details=response.text[:500],
            ) from e

    async def get_json(
        self,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        authorization: Optional[str] = None,
        retry: bool = True,
    ) -> Any:
        response = await self._request("GET", path, params=params, authorization=authorization, retry=retry)
        return self._json(response)

    async def post_json(
        self,
        path: str,
        payload: Any,
        *,
        authorization: Optional[str] = None,
    ) -> Any:
        # POST no es idempotente: sin reintentos por status
        response = await self._request("POST", path, json=payload, authorization=authorization, retry=False)
        return self._json(response)

    async def get_collection(
        self,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        per_page: int = 100,
        max_pages: int = 10,
    ) -> List[Dict[str, Any]]:
        """
        Recorre una colección paginada (`?page=N&per_page=M`) hasta
        `X-WP-TotalPages` o `max_pages`, lo que ocurra primero.
        """
        items: List[Dict[str, Any]] = []
        page = 1
        while True:
            query = dict(params or {})
            query.update({"per_page": per_page, "page": page})
            response = await self._request("GET", path, params=query)
            data = self._json(response)
            if not isinstance(data, list):
                raise WordPressAPIError(
                    "Se esperaba una lista en la colección de WordPress",
                    status_code=response.status_code,
                    details=data,
                )
            items.extend(data)

            try:
                total_pages = int(response.headers.get("X-WP-TotalPages", "1"))
            except ValueError:
                total_pages = 1

            if page >= total_pages or not data:
                break
            if page >= max_pages:
                logger.warning(
                    f"Colección {path} truncada en {max_pages} páginas (total reportado: {total_pages})"
                )
                break
            page += 1
        return items


__all__ = [
    "WordPressClient",
    "WordPressAPIError",
    "basic_auth_header",
    "bearer_auth_header",
]
# Fin del archivo backend/app/shared/integrations/wordpress_client.py
