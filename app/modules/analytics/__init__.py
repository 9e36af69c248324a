# -*- coding: utf-8 -*-
"""
backend/app/modules/analytics/__init__.py

Módulo de analytics: métricas de volumen por central a partir de los
registros de verificación publicados en WordPress.

Fecha: 19/10/2026
"""

from .aggregators import compute_metrics
from .errors import (
    AnalyticsError,
    ConfigurationMissingError,
    InvalidInputError,
    UpstreamUnavailableError,
)
from .routes import router

__all__ = [
    "compute_metrics",
    "router",
    "AnalyticsError",
    "ConfigurationMissingError",
    "InvalidInputError",
    "UpstreamUnavailableError",
]
