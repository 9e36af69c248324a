# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/jwt_utils.py

JWT helpers para la sesión de la app móvil:
- create_session_token(payload, expires_delta?)
- decode_session_token(token)

El token de sesión transporta el perfil WordPress normalizado y el
access_token OAuth de WordPress para publicar en nombre del usuario.
No existe estado en servidor: el logout consiste en descartar el token.

Fecha: 19/10/2026
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging

from jose import ExpiredSignatureError, JWTError, jwt

from app.shared.config import get_settings

logger = logging.getLogger(__name__)


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def create_session_token(
    payload: Dict[str, Any],
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Firma un JWT con `iat` y `exp` (por defecto JWT_EXPIRE_DAYS días).
    """
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(days=settings.jwt_expire_days)

    iat = _now_utc()
    to_encode = dict(payload)
    to_encode.update({"iat": iat, "exp": iat + expires_delta})

    return jwt.encode(
        to_encode,
        settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
    )


def decode_session_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decodifica y valida un JWT. Devuelve None si es inválido o expiró.
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key.get_secret_value(),
            algorithms=[settings.jwt_algorithm],
        )
    except ExpiredSignatureError as e:
        logger.warning(f"Token expirado: {e}")
        return None
    except JWTError as e:
        logger.warning(f"Token inválido: {e}")
        return None


__all__ = ["create_session_token", "decode_session_token"]
# Fin del módulo jwt_utils.py
