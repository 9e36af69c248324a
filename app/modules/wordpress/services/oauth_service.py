# -*- coding: utf-8 -*-
"""
backend/app/modules/wordpress/services/oauth_service.py

Flujo OAuth 2.0 con WordPress (authorization code):

1. exchange_code(): POST {WORDPRESS_OAUTH_URL}/token → access_token (+ user_id)
2. fetch_user_profile(): prueba varios endpoints de perfil en orden y
   normaliza el primero que responda; si todos fallan se usa un perfil
   mínimo (el login no se bloquea por la API de usuarios).
3. issue_session_token(): JWT de sesión con perfil + access_token WordPress.
4. build_deep_link(): URL `{scheme}://auth/callback?jwt_token=...&user_data=...`
   que abre la app móvil.

Fecha: 19/10/2026
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple, Union
from urllib.parse import quote

from app.shared.config.settings_base import BaseAppSettings
from app.shared.integrations import WordPressAPIError, WordPressClient, bearer_auth_header
from app.shared.utils.jwt_utils import create_session_token

from ..errors import OAuthConfigurationError, TokenExchangeError
from ..schemas import WordPressUser

logger = logging.getLogger(__name__)

# Caracteres que encodeURIComponent deja sin escapar
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_roles(value: Any) -> List[str]:
    if isinstance(value, list):
        return [str(v) for v in value]
    return []


def normalize_user_data(data: Any, *, from_oauth_server: bool = False) -> Dict[str, Any]:
    """
    Normaliza la respuesta de cualquiera de los endpoints de perfil.

    - wp/v2/users: {id, name, slug, email?, avatar_urls{96}, ...}
    - {oauth}/me (WP OAuth Server): {ID, display_name, user_email, user_login, ...}
    """
    data = _as_dict(data)

    if not from_oauth_server and data.get("id"):
        user = WordPressUser(
            id=data["id"],
            name=data.get("name") or "Usuário",
            email=data.get("email") or "não disponível",
            username=data.get("slug") or "desconhecido",
            avatar_url=_as_dict(data.get("avatar_urls")).get("96") or data.get("avatar_url") or "",
            description=data.get("description") or "",
            registered_date=data.get("registered_date") or "",
            capabilities=_as_dict(data.get("capabilities")),
            roles=_as_roles(data.get("roles")),
        )
    else:
        user = WordPressUser(
            id=data.get("ID") or data.get("id") or "desconhecido",
            name=data.get("display_name") or data.get("name") or "Usuário",
            email=data.get("user_email") or data.get("email") or "não disponível",
            username=data.get("user_login") or data.get("username") or "desconhecido",
            avatar_url=data.get("avatar") or data.get("avatar_url") or "",
            description=data.get("description") or "",
            registered_date=data.get("user_registered") or data.get("registered_date") or "",
            capabilities=_as_dict(data.get("capabilities")),
            roles=_as_roles(data.get("roles")),
        )
    return user.model_dump()


def placeholder_user() -> Dict[str, Any]:
    return WordPressUser(
        id="desconhecido",
        name="Usuário Autenticado",
        email="não disponível",
        username="usuario",
        description="Usuário autenticado via OAuth",
        registered_date=datetime.now(timezone.utc).isoformat(),
        roles=["subscriber"],
    ).model_dump()


def build_deep_link(scheme: str, jwt_token: str, user: Dict[str, Any]) -> str:
    user_json = json.dumps(user, ensure_ascii=False, separators=(",", ":"))
    return (
        f"{scheme}://auth/callback"
        f"?jwt_token={quote(jwt_token, safe=_URI_COMPONENT_SAFE)}"
        f"&user_data={quote(user_json, safe=_URI_COMPONENT_SAFE)}"
    )


class WordPressOAuthService:
    def __init__(self, client: WordPressClient, settings: BaseAppSettings):
        self.client = client
        self.settings = settings

    def ensure_configured(self) -> None:
        missing = self.settings.missing_wordpress_oauth_settings()
        if missing:
            raise OAuthConfigurationError(missing)

    @property
    def oauth_url(self) -> str:
        return (self.settings.wordpress_oauth_url or "").rstrip("/")

    async def exchange_code(self, code: str) -> Dict[str, Any]:
        """
        Intercambia el código de autorización por un access token.

        Raises:
            TokenExchangeError: si el servidor OAuth rechaza el código.
        """
        secret = self.settings.wordpress_client_secret
        payload = {
            "client_id": self.settings.wordpress_client_id,
            "client_secret": secret.get_secret_value() if secret else None,
            "redirect_uri": self.settings.wordpress_redirect_uri,
            "grant_type": "authorization_code",
            "code": code,
        }
        token_url = f"{self.oauth_url}/token"
        logger.info(f"🔑 Intercambiando código por token en {token_url}")
        try:
            data = await self.client.post_json(token_url, payload)
        except WordPressAPIError as e:
            raise TokenExchangeError(
                "WordPress authentication failed",
                details=e.details if e.details is not None else str(e),
            ) from e

        if not isinstance(data, dict) or not data.get("access_token"):
            raise TokenExchangeError("WordPress authentication failed", details=data)

        logger.info("✅ Token de WordPress obtenido")
        return data

    def profile_endpoints(self, user_id: Optional[Union[int, str]]) -> List[Tuple[str, bool]]:
        """(url, from_oauth_server) en orden de preferencia."""
        endpoints = [("/wp-json/wp/v2/users/me", False)]
        if user_id:
            endpoints.append((f"/wp-json/wp/v2/users/{user_id}", False))
        endpoints.append((f"{self.oauth_url}/me", True))
        endpoints.append(("/wp-json/custom/v1/user", False))
        return endpoints

    async def fetch_user_profile(
        self,
        access_token: str,
        user_id: Optional[Union[int, str]] = None,
    ) -> Tuple[Dict[str, Any], str]:
        """
        Returns:
            (perfil normalizado, endpoint usado | "minimal_fallback")
        """
        authorization = bearer_auth_header(access_token)
        for endpoint, from_oauth_server in self.profile_endpoints(user_id):
            try:
                data = await self.client.get_json(endpoint, authorization=authorization, retry=False)
            except WordPressAPIError as e:
                logger.info(f"Endpoint de perfil {endpoint} falló (HTTP {e.status_code})")
                continue
            return normalize_user_data(data, from_oauth_server=from_oauth_server), endpoint

        logger.warning("⚠️ Todos los endpoints de perfil fallaron; usando datos mínimos del usuario")
        return placeholder_user(), "minimal_fallback"

    def issue_session_token(
        self,
        user_id: Optional[Union[int, str]],
        user: Dict[str, Any],
        access_token: str,
    ) -> str:
        return create_session_token(
            {
                "user_id": user_id,
                "user_data": user,
                "access_token": access_token,
            }
        )

    def build_deep_link(self, jwt_token: str, user: Dict[str, Any]) -> str:
        return build_deep_link(self.settings.app_deep_link_scheme, jwt_token, user)

    async def complete_login(self, code: str) -> str:
        """
        Ejecuta el flujo completo y devuelve el deep link de retorno a la app.
        """
        self.ensure_configured()
        token_data = await self.exchange_code(code)
        access_token = token_data["access_token"]

        user, endpoint_used = await self.fetch_user_profile(access_token, token_data.get("user_id"))
        user_id = token_data.get("user_id") or user.get("id")

        jwt_token = self.issue_session_token(user_id, user, access_token)
        logger.info(
            f"✅ Login completado: user_id={user_id} name={user.get('name')!r} "
            f"perfil={endpoint_used} jwt_len={len(jwt_token)}"
        )
        return self.build_deep_link(jwt_token, user)


__all__ = [
    "WordPressOAuthService",
    "normalize_user_data",
    "placeholder_user",
    "build_deep_link",
]

# Fin del archivo backend/app/modules/wordpress/services/oauth_service.py
