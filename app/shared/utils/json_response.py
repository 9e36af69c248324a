# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/json_response.py

Respuestas JSON con charset UTF-8 explícito y el sobre estándar de la API:

    éxito:  {"success": true, ...}
    error:  {"success": false, "error": "...", ...}

Uso recomendado:

    from app.shared.utils.json_response import UTF8JSONResponse

    app = FastAPI(default_response_class=UTF8JSONResponse)

Helpers funcionales para casos puntuales:

    return error_response("Title is required", status_code=400)

Fecha: 19/10/2026
"""

from typing import Any, Dict, Optional
from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """
    JSONResponse con Content-Type: application/json; charset=utf-8.

    Evita mojibake (verificações → verificaÃ§Ãµes) en clientes móviles
    que no asumen UTF-8 por defecto.
    """
    media_type = "application/json; charset=utf-8"


def json_response_utf8(
    content: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> UTF8JSONResponse:
    """
    Crea un JSONResponse con Content-Type: application/json; charset=utf-8.
    """
    return UTF8JSONResponse(
        content=content,
        status_code=status_code,
        headers=headers,
    )


def error_response(
    error: str,
    status_code: int = 500,
    headers: Optional[Dict[str, str]] = None,
    **extra: Any,
) -> UTF8JSONResponse:
    """
    Respuesta de error con el sobre `{success: false, error, ...extra}`.
    Las claves extra con valor None se omiten.
    """
    content: Dict[str, Any] = {"success": False, "error": error}
    content.update({k: v for k, v in extra.items() if v is not None})
    return json_response_utf8(content, status_code=status_code, headers=headers)


__all__ = ["UTF8JSONResponse", "json_response_utf8", "error_response"]
