# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests del backend de Terra Orgânica.

- PYTHON_ENV=test antes de importar la app (EnvTestingSettings).
- Aislamiento de variables de entorno y caché de get_settings() por test.
- App FastAPI completa + cliente httpx (ASGITransport) con ciclo de vida.
- Fábrica de settings y cliente WordPress sobre httpx.MockTransport.
"""

import os
import pathlib
import sys
from collections.abc import AsyncIterator

import httpx
import pytest
from pydantic import SecretStr

os.environ["PYTHON_ENV"] = "test"

# -----------------------------------------------------------------------------
# Asegura la raíz del backend en sys.path
# -----------------------------------------------------------------------------
BACKEND_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))
assert (BACKEND_ROOT / "app").exists(), f"'app' no existe en {BACKEND_ROOT}"

_ISOLATED_PREFIXES = ("WORDPRESS_", "YOUTUBE_", "JWT_", "CORS_", "APP_", "LOG_")
_ISOLATED_KEYS = ("UPLOAD_DIR", "MAX_UPLOAD_SIZE_MB")


def _clear_settings_cache():
    from app.shared.config.config_loader import get_settings
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _isolate_env_and_cache(monkeypatch):
    """
    Aísla variables de entorno y limpia el caché de get_settings() en cada test.
    """
    for k in list(os.environ.keys()):
        if k.startswith(_ISOLATED_PREFIXES) or k in _ISOLATED_KEYS:
            monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("PYTHON_ENV", "test")
    _clear_settings_cache()
    yield
    _clear_settings_cache()


@pytest.fixture
def anyio_backend():
    # Permite usar @pytest.mark.anyio en tests async
    return "asyncio"


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
WORDPRESS_SITE = "https://wp.test"
WORDPRESS_OAUTH = "https://wp.test/oauth"


@pytest.fixture
def settings_factory():
    """Devuelve EnvTestingSettings con overrides por nombre de atributo."""
    from app.shared.config.settings_testing import EnvTestingSettings

    def _make(**overrides):
        return EnvTestingSettings().model_copy(update=overrides)

    return _make


@pytest.fixture
def wordpress_settings(settings_factory):
    return settings_factory(
        wordpress_site_url=WORDPRESS_SITE,
        wordpress_oauth_url=WORDPRESS_OAUTH,
        wordpress_client_id="client-id",
        wordpress_client_secret=SecretStr("client-secret"),
        wordpress_redirect_uri="https://api.test/auth/callback",
        wordpress_email="bot@wp.test",
        wordpress_password=SecretStr("app-password"),
    )


# -----------------------------------------------------------------------------
# WordPress simulado (httpx.MockTransport)
# -----------------------------------------------------------------------------
@pytest.fixture
def wordpress_client_factory():
    """
    Crea un WordPressClient cuyo transporte es un handler en memoria.
    Sin esperas de backoff (retry_base_delay mínimo).
    """
    from app.shared.integrations import WordPressClient

    def _make(handler, **kwargs):
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        kwargs.setdefault("retry_base_delay", 0.001)
        return WordPressClient(http, kwargs.pop("site_url", WORDPRESS_SITE), **kwargs)

    return _make


# -----------------------------------------------------------------------------
# App FastAPI y cliente httpx (con ciclo de vida)
# -----------------------------------------------------------------------------
@pytest.fixture(scope="session")
def app():
    """Carga la aplicación principal **después** de fijar PYTHON_ENV=test."""
    from app.main import app as fastapi_app
    return fastapi_app


@pytest.fixture
async def async_client(app) -> AsyncIterator[httpx.AsyncClient]:
    from asgi_lifespan import LifespanManager

    async with LifespanManager(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
    app.dependency_overrides.clear()


@pytest.fixture
def override_settings(app):
    """Sustituye la dependencia get_settings de las rutas por un settings dado."""
    from app.core.settings import get_settings

    def _apply(settings):
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    yield _apply
    app.dependency_overrides.pop(get_settings, None)
