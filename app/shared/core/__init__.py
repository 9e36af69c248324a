# -*- coding: utf-8 -*-
"""
backend/app/shared/core/__init__.py

Recursos compartidos del backend: cliente HTTP global y reintentos.

Fecha: 19/10/2026
"""

from .http_client_cache import get_http_client, close_http_client, build_http_client
from .http_retry_utils import retry_with_backoff

__all__ = [
    "get_http_client",
    "close_http_client",
    "build_http_client",
    "retry_with_backoff",
]
