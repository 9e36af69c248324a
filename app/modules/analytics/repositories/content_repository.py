# -*- coding: utf-8 -*-
"""
backend/app/modules/analytics/repositories/content_repository.py

Repositorio de contenido para analytics: lee de WordPress las centrales
(post type `central`) y los registros de verificación de volumen
(post type `verificacoes-de-volu`) buscándolos por nombre de central.

Fecha: 19/10/2026
"""
from __future__ import annotations

import html
import logging
from typing import Any, Dict, List, Optional, Protocol

import httpx

from app.modules.analytics.errors import UpstreamUnavailableError
from app.modules.analytics.schemas import CentralRef
from app.shared.integrations import WordPressAPIError, WordPressClient, basic_auth_header

logger = logging.getLogger(__name__)


class ContentRepository(Protocol):
    async def list_centrals(self) -> List[CentralRef]:
        ...

    async def search_volume_records(self, central_name: str) -> List[Dict[str, Any]]:
        ...


def _display_name(item: Dict[str, Any]) -> Optional[str]:
    title = item.get("title")
    if isinstance(title, dict) and title.get("rendered"):
        return html.unescape(str(title["rendered"]))
    if isinstance(title, str) and title:
        return html.unescape(title)
    name = item.get("name")
    return str(name) if name else None


def to_central_ref(item: Dict[str, Any]) -> CentralRef:
    return CentralRef(id=item.get("id"), name=_display_name(item), slug=item.get("slug"))


class WordPressContentRepository:
    """
    Implementación sobre la API REST de WordPress (Basic auth con
    application password).
    """

    def __init__(
        self,
        client: WordPressClient,
        *,
        central_post_type: str = "central",
        volume_post_type: str = "verificacoes-de-volu",
        per_page: int = 100,
        max_pages: int = 10,
    ) -> None:
        self.client = client
        self.central_post_type = central_post_type
        self.volume_post_type = volume_post_type
        self.per_page = per_page
        self.max_pages = max_pages

    @classmethod
    def from_settings(cls, http_client: httpx.AsyncClient, settings) -> "WordPressContentRepository":
        client = WordPressClient(
            http_client,
            settings.wordpress_site_url,
            authorization=basic_auth_header(
                settings.wordpress_email,
                settings.wordpress_password.get_secret_value(),
            ),
            timeout=settings.wordpress_timeout_sec,
            max_retries=settings.wordpress_max_retries,
        )
        return cls(
            client,
            central_post_type=settings.wordpress_central_post_type,
            volume_post_type=settings.wordpress_volume_post_type,
            per_page=settings.wordpress_per_page,
            max_pages=settings.wordpress_max_pages,
        )

    async def _collection(self, post_type: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        try:
            return await self.client.get_collection(
                f"/wp-json/wp/v2/{post_type}",
                params=params,
                per_page=self.per_page,
                max_pages=self.max_pages,
            )
        except WordPressAPIError as e:
            raise UpstreamUnavailableError(str(e), status_code=e.status_code) from e

    async def list_centrals(self) -> List[CentralRef]:
        items = await self._collection(self.central_post_type)
        centrals = [to_central_ref(item) for item in items if isinstance(item, dict)]
        logger.info(f"📍 {len(centrals)} centrales obtenidas de WordPress")
        return centrals

    async def search_volume_records(self, central_name: str) -> List[Dict[str, Any]]:
        # Join por nombre: WordPress hace búsqueda textual, no por ID
        records = await self._collection(self.volume_post_type, {"search": central_name})
        logger.debug(f"Central {central_name!r}: {len(records)} registros de volumen")
        return records


__all__ = ["ContentRepository", "WordPressContentRepository", "to_central_ref"]

# Fin del archivo backend/app/modules/analytics/repositories/content_repository.py
