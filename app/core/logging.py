# -*- coding: utf-8 -*-
"""
backend/app/core/logging.py

Configuración centralizada de logging.
Actúa como fachada del módulo `app.shared.config.logging_config` y añade
`configure_from_settings()` para el arranque de la aplicación.

Fecha: 19/10/2026
"""

from typing import Literal

from app.shared.config.logging_config import setup_logging as _setup_logging
from app.shared.config.settings_base import BaseAppSettings


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        fmt: Formato de salida (plain, pretty, json).
    """
    _setup_logging(level=level, fmt=fmt)


def configure_from_settings(settings: BaseAppSettings) -> None:
    """Aplica LOG_LEVEL / LOG_FORMAT del settings activo."""
    _setup_logging(level=settings.log_level, fmt=settings.log_format)

# Fin del archivo backend/app/core/logging.py
