# -*- coding: utf-8 -*-
"""
backend/app/shared/core/http_client_cache.py

Gestión del cliente HTTP global compartido (httpx.AsyncClient).
Se crea perezosamente en la primera llamada y se cierra en el shutdown
de la aplicación (lifespan de app/main.py).

Fecha: 19/10/2026
"""

from __future__ import annotations
import asyncio
import logging

import httpx

from .resources_cache import resources

logger = logging.getLogger(__name__)

# Lock async para evitar creación concurrente del cliente HTTP
_http_client_lock = asyncio.Lock()


def build_http_client(*, user_agent: str, timeout_sec: float) -> httpx.AsyncClient:
    """
    Construye un AsyncClient con timeouts, límites de pool y reintentos
    de transporte (errores de conexión).
    """
    timeout = httpx.Timeout(timeout_sec, connect=min(timeout_sec, 10.0))
    limits = httpx.Limits(
        max_connections=20,
        max_keepalive_connections=10,
        keepalive_expiry=30.0,
    )
    transport = httpx.AsyncHTTPTransport(retries=2)
    return httpx.AsyncClient(
        headers={"User-Agent": user_agent},
        timeout=timeout,
        limits=limits,
        transport=transport,
    )


async def get_http_client() -> httpx.AsyncClient:
    """
    Obtiene el cliente HTTP global. Si no existe (o fue cerrado), lo crea.
    """
    if resources.http_client is not None and not resources.http_client.is_closed:
        return resources.http_client

    async with _http_client_lock:
        if resources.http_client is None or resources.http_client.is_closed:
            from app.shared.config import get_settings
            settings = get_settings()

            logger.info("🔗 Inicializando cliente HTTP global...")
            resources.http_client = build_http_client(
                user_agent=f"{settings.app_name}/{settings.app_version}",
                timeout_sec=settings.wordpress_timeout_sec,
            )
            logger.info("✅ Cliente HTTP global inicializado")
    return resources.http_client


async def close_http_client() -> None:
    """Cierra el cliente HTTP global si existe."""
    client = resources.http_client
    resources.http_client = None
    if client is not None and not client.is_closed:
        await client.aclose()
        logger.info("🔌 Cliente HTTP global cerrado")


# Fin del archivo backend/app/shared/core/http_client_cache.py
