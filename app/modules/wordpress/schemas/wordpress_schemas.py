# -*- coding: utf-8 -*-
"""
backend/app/modules/wordpress/schemas/wordpress_schemas.py

Esquemas Pydantic del módulo wordpress (perfil normalizado, sesión y posts).

Fecha: 19/10/2026
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class WordPressUser(BaseModel):
    """Perfil de usuario normalizado, independiente del endpoint de origen."""
    id: Union[int, str] = "desconhecido"
    name: str = "Usuário"
    email: str = "não disponível"
    username: str = "desconhecido"
    avatar_url: str = ""
    description: str = ""
    registered_date: str = ""
    capabilities: Dict[str, Any] = Field(default_factory=dict)
    roles: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class SessionClaims(BaseModel):
    """Claims del JWT de sesión emitido tras el login OAuth."""
    user_id: Optional[Union[int, str]] = None
    user_data: Dict[str, Any] = Field(default_factory=dict)
    access_token: Optional[str] = None
    iat: Optional[int] = None
    exp: Optional[int] = None

    model_config = ConfigDict(extra="ignore")


class CreatePostRequest(BaseModel):
    title: Optional[str] = Field(None, description="Título del post de verificación")
    meta: Optional[Dict[str, Any]] = Field(None, description="Campos meta (volume, central, ...)")
    status: Optional[str] = Field(None, description="Estado WordPress; por defecto 'publish'")


class MeResponse(BaseModel):
    success: bool = True
    user: Dict[str, Any]


class LogoutResponse(BaseModel):
    success: bool = True
    message: str


class CreatePostResponse(BaseModel):
    success: bool = True
    message: str
    post: Dict[str, Any]


__all__ = [
    "WordPressUser",
    "SessionClaims",
    "CreatePostRequest",
    "MeResponse",
    "LogoutResponse",
    "CreatePostResponse",
]

# Fin del archivo backend/app/modules/wordpress/schemas/wordpress_schemas.py
