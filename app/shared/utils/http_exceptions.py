# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/http_exceptions.py

Excepciones HTTP personalizadas para la API.
Estandarizan códigos HTTP; el handler global de app/main.py las traduce
al sobre `{success: false, error, ...}`.

`detail` puede ser:
- str: se expone como `error`
- dict: se mezcla tal cual en el cuerpo (debe incluir `error`)

Fecha: 19/10/2026
"""

from fastapi import HTTPException, status
from typing import Any, Dict, Optional, Union

Detail = Union[str, Dict[str, Any]]


class BadRequestException(HTTPException):
    """400 - Solicitud mal formada o parámetros inválidos"""
    def __init__(
        self,
        detail: Detail = "Solicitud inválida",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            headers=headers
        )


class UnauthorizedException(HTTPException):
    """401 - Autenticación requerida o credenciales inválidas"""
    def __init__(
        self,
        detail: Detail = "Token no proporcionado",
        headers: Optional[Dict[str, Any]] = None
    ):
        if headers is None:
            headers = {"WWW-Authenticate": "Bearer"}
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers=headers
        )


class PayloadTooLargeException(HTTPException):
    """413 - El archivo enviado excede el tamaño permitido"""
    def __init__(
        self,
        detail: Detail = "Archivo demasiado grande",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=detail,
            headers=headers
        )


def error_body(detail: Any) -> Dict[str, Any]:
    """Convierte el detail de una HTTPException al sobre de error."""
    if isinstance(detail, dict):
        body = {"success": False}
        body.update(detail)
        body.setdefault("error", "Error")
        return body
    return {"success": False, "error": str(detail)}


__all__ = [
    "BadRequestException",
    "UnauthorizedException",
    "PayloadTooLargeException",
    "error_body",
]
