# -*- coding: utf-8 -*-
"""
backend/app/modules/analytics/errors.py

Excepciones de dominio del módulo de analytics de centrales.

- InvalidInputError: error de programación (records no iterable).
- UpstreamUnavailableError: WordPress no respondió o respondió con error.
- ConfigurationMissingError: faltan credenciales/URL de WordPress; aborta
  la solicitud completa antes de cualquier fetch.

Fecha: 19/10/2026
"""

from typing import Optional, Sequence


class AnalyticsError(Exception):
    """Base de errores del módulo analytics."""


class InvalidInputError(AnalyticsError, TypeError):
    """Se lanza cuando compute_metrics recibe algo que no es una secuencia de registros."""
    def __init__(self, received: object):
        self.received_type = type(received).__name__
        super().__init__(f"records debe ser una secuencia de registros, recibido: {self.received_type}")


class UpstreamUnavailableError(AnalyticsError):
    """Se lanza cuando el repositorio de contenido (WordPress) falla."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ConfigurationMissingError(AnalyticsError):
    """Se lanza cuando faltan variables de entorno de WordPress."""
    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(
            f"Verifique que {', '.join(self.missing)} estén configurados en el .env"
        )


__all__ = [
    "AnalyticsError",
    "InvalidInputError",
    "UpstreamUnavailableError",
    "ConfigurationMissingError",
]

# Fin del archivo backend/app/modules/analytics/errors.py
