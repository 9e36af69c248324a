# -*- coding: utf-8 -*-
"""
backend/app/modules/wordpress/services/posts_service.py

Publicación de verificaciones de volumen en WordPress en nombre del
usuario (Bearer con el access_token OAuth guardado en la sesión).

Fecha: 19/10/2026
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from app.shared.integrations import WordPressClient, bearer_auth_header

logger = logging.getLogger(__name__)


class VolumePostService:
    def __init__(self, client: WordPressClient, post_type: str = "verificacoes-de-volu"):
        self.client = client
        self.post_type = post_type

    async def create_post(
        self,
        access_token: str,
        title: str,
        meta: Optional[Dict[str, Any]] = None,
        status: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Raises:
            WordPressAPIError: si WordPress rechaza el post.
        """
        payload = {
            "title": title,
            "meta": meta or {},
            "status": status or "publish",
        }
        logger.info(f"📝 Creando post {self.post_type!r}: title={title!r} meta={payload['meta']}")
        post = await self.client.post_json(
            f"/wp-json/wp/v2/{self.post_type}",
            payload,
            authorization=bearer_auth_header(access_token),
        )
        post = post if isinstance(post, dict) else {"response": post}
        logger.info(f"✅ Post creado: id={post.get('id')}")
        return post


__all__ = ["VolumePostService"]

# Fin del archivo backend/app/modules/wordpress/services/posts_service.py
