# -*- coding: utf-8 -*-
"""
backend/app/shared/core/http_retry_utils.py

Reintentos con backoff exponencial (y jitter) para llamadas HTTP a
servicios externos. Complementa los reintentos de transporte del cliente
global: aquí también se reintentan respuestas 429/5xx.

Uso:
    response = await retry_with_backoff(
        client.get,
        "https://example.com/wp-json/wp/v2/central",
        max_retries=2,
        base_delay=0.5,
    )

Fecha: 19/10/2026
"""

from __future__ import annotations
import asyncio
import logging
import random
from typing import Any, Awaitable, Callable, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_RETRY_STATUS = frozenset({429, 500, 502, 503, 504})


def _jittered(delay: float) -> float:
    return delay + random.uniform(0, 0.2 * delay)


async def retry_with_backoff(
    func: Callable[..., Awaitable[httpx.Response]],
    *args,
    max_retries: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 30.0,
    backoff_factor: float = 2.0,
    retry_on_status: Optional[set[int] | frozenset[int]] = None,
    **kwargs
) -> httpx.Response:
    """
    Ejecuta una función HTTP async con reintentos y backoff exponencial.

    Args:
        func: Función async a ejecutar (ej: client.get, client.post)
        *args: Argumentos posicionales para func
        max_retries: Número máximo de reintentos (0 = un solo intento)
        base_delay: Delay inicial en segundos
        max_delay: Delay máximo en segundos
        backoff_factor: Factor de multiplicación del delay
        retry_on_status: Códigos HTTP que deben reintentarse (default: 429 y 5xx)
        **kwargs: Argumentos nombrados para func

    Returns:
        La última respuesta obtenida. Si el status sigue en retry_on_status
        tras agotar reintentos, se devuelve tal cual (el llamador decide).

    Raises:
        ValueError: Parámetros inválidos
        httpx.TransportError: Si todos los intentos fallan por transporte
    """
    if max_retries < 0:
        raise ValueError(f"max_retries debe ser >= 0, recibido: {max_retries}")
    if base_delay <= 0:
        raise ValueError(f"base_delay debe ser > 0, recibido: {base_delay}")

    if retry_on_status is None:
        retry_on_status = DEFAULT_RETRY_STATUS

    delay = base_delay

    for attempt in range(max_retries + 1):
        try:
            response = await func(*args, **kwargs)
        except httpx.TransportError as e:
            if attempt >= max_retries:
                logger.error(f"❌ Error de transporte tras {max_retries + 1} intentos: {e}")
                raise
            logger.warning(
                f"Error de transporte ({type(e).__name__}) en intento {attempt + 1}/{max_retries + 1}, "
                f"reintentando en {delay:.1f}s..."
            )
            await asyncio.sleep(_jittered(delay))
            delay = min(delay * backoff_factor, max_delay)
            continue

        if response.status_code in retry_on_status and attempt < max_retries:
            logger.warning(
                f"HTTP {response.status_code} en intento {attempt + 1}/{max_retries + 1}, "
                f"reintentando en {delay:.1f}s..."
            )
            await asyncio.sleep(_jittered(delay))
            delay = min(delay * backoff_factor, max_delay)
            continue

        if attempt > 0:
            logger.info(f"✅ Respuesta HTTP {response.status_code} tras {attempt + 1} intentos")
        return response

    # Inalcanzable: el último intento siempre retorna o relanza
    raise RuntimeError("Reintentos agotados sin respuesta")


# Fin del archivo backend/app/shared/core/http_retry_utils.py
