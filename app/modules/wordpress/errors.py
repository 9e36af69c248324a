# -*- coding: utf-8 -*-
"""
backend/app/modules/wordpress/errors.py

Excepciones del flujo OAuth / publicación en WordPress.

Fecha: 19/10/2026
"""

from typing import Any, Optional, Sequence


class WordPressModuleError(Exception):
    """Base del módulo wordpress."""


class OAuthConfigurationError(WordPressModuleError):
    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(f"Faltan variables de entorno: {', '.join(self.missing)}")


class TokenExchangeError(WordPressModuleError):
    """El servidor OAuth rechazó el código de autorización o no respondió."""
    def __init__(self, message: str, details: Optional[Any] = None):
        self.details = details
        super().__init__(message)


__all__ = ["WordPressModuleError", "OAuthConfigurationError", "TokenExchangeError"]

# Fin del archivo backend/app/modules/wordpress/errors.py
