# -*- coding: utf-8 -*-
"""
backend/app/modules/youtube/errors.py

Fecha: 19/10/2026
"""


class YouTubeModuleError(Exception):
    """Base del módulo youtube."""


class UploadTooLargeError(YouTubeModuleError):
    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes
        super().__init__(f"El archivo excede el tamaño máximo permitido ({max_bytes // (1024 * 1024)} MB)")


__all__ = ["YouTubeModuleError", "UploadTooLargeError"]

# Fin del archivo backend/app/modules/youtube/errors.py
