# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Exportación de utilidades comunes.

Fecha: 19/10/2026
"""

from .http_exceptions import (
    BadRequestException,
    UnauthorizedException,
    PayloadTooLargeException,
    error_body,
)
from .json_response import UTF8JSONResponse, json_response_utf8, error_response
from .jwt_utils import create_session_token, decode_session_token

__all__ = [
    "BadRequestException",
    "UnauthorizedException",
    "PayloadTooLargeException",
    "error_body",
    "UTF8JSONResponse",
    "json_response_utf8",
    "error_response",
    "create_session_token",
    "decode_session_token",
]
