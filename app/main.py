# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend de Terra Orgânica.

- Carga de .env (python-dotenv) antes de resolver settings.
- Logging configurado desde LOG_LEVEL / LOG_FORMAT.
- Ciclo de vida: banner de arranque con rutas disponibles y estado de
  YouTube; en shutdown se cierra el cliente HTTP compartido.
- CORS desde CORS_ORIGINS.
- Handlers de excepciones con el sobre `{success: false, error, ...}` en UTF-8.

Fecha: 19/10/2026
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que lea configuración
# En DEV: override=True para que .env mande sobre variables del entorno
# En PROD/TEST: override=False para respetar el entorno (CI, contenedor, ...)
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().strip('"').strip("'").lower()
_override_env = _PYTHON_ENV == "development"
load_dotenv(dotenv_path=_ENV_PATH, override=_override_env)

import anyio
import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core import configure_from_settings, get_settings
from app.modules.analytics.errors import ConfigurationMissingError
from app.modules.analytics.routes import configuration_missing_response
from app.shared.core import close_http_client
from app.shared.utils.http_exceptions import error_body
from app.shared.utils.json_response import UTF8JSONResponse, json_response_utf8

settings = get_settings()
configure_from_settings(settings)

logger = logging.getLogger(__name__)
logger.info(f"[dotenv] {_ENV_PATH} (override={_override_env}, PYTHON_ENV={_PYTHON_ENV})")


def _log_startup_banner(app_instance: FastAPI) -> None:
    logger.info("=" * 70)
    logger.info(f"🚀 {settings.app_name} backend v{settings.app_version} ({settings.python_env})")
    logger.info(f"   http://{settings.app_host}:{settings.app_port}")
    logger.info("=" * 70)
    for route in app_instance.routes:
        methods = getattr(route, "methods", None)
        path = getattr(route, "path", "")
        if methods and not path.startswith(("/api", "/docs", "/redoc", "/openapi")):
            logger.info(f"  {','.join(sorted(methods)):<10} {path}")

    if settings.youtube_configured:
        logger.info("✅ YouTube configurado: uploads habilitados")
    else:
        logger.warning("⚠️ YOUTUBE_REFRESH_TOKEN no configurado: ejecute GET /youtube/setup/auth-url")

    missing = settings.missing_wordpress_analytics_settings()
    if missing:
        logger.warning(f"⚠️ Analytics de centrales sin configurar: faltan {', '.join(missing)}")
    logger.info("=" * 70)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    _log_startup_banner(app)
    logger.info("🟢 Backend iniciado.")
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        logger.info("🔴 Iniciando shutdown ordenado...")
        with anyio.CancelScope(shield=True):
            await close_http_client()
        logger.info("🔴 Backend apagado.")


openapi_tags = [
    {"name": "wordpress", "description": "Login OAuth con WordPress, sesión JWT y publicación de verificaciones"},
    {"name": "youtube", "description": "Setup OAuth del canal y upload de videos"},
    {"name": "analytics", "description": "Métricas de volumen por central"},
]

app = FastAPI(
    title=f"{settings.app_name} API",
    description="Backend de la app de coleta de campo: WordPress, YouTube y analytics",
    version=settings.app_version,
    lifespan=lifespan,
    openapi_tags=openapi_tags,
    default_response_class=UTF8JSONResponse,
)


# ═══════════════════════════════════════════════════════════════════════════════
# CORS
# ═══════════════════════════════════════════════════════════════════════════════
def _configure_cors(app_instance: FastAPI) -> dict:
    """
    Configura CORS desde CORS_ORIGINS.

    Returns:
        dict con la configuración aplicada para logging.
    """
    origins_list = settings.get_cors_origins()
    is_wildcard_only = origins_list == ["*"]

    cors_config = {
        "allow_origins": origins_list,
        # "*" con allow_credentials=True es inválido en navegadores
        "allow_credentials": not is_wildcard_only,
        "allow_methods": ["*"] if is_wildcard_only else ["GET", "POST", "OPTIONS"],
        "allow_headers": ["*"],
        "max_age": 600,
    }
    logger.info(f"🌐 CORS origins={origins_list} credentials={cors_config['allow_credentials']}")
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    return cors_config


_cors_config = _configure_cors(app)


# ═══════════════════════════════════════════════════════════════════════════════
# EXCEPTION HANDLERS CON UTF-8
# ═══════════════════════════════════════════════════════════════════════════════
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTTPException → {success: false, error, ...} con charset UTF-8."""
    return json_response_utf8(
        content=error_body(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return json_response_utf8(
        content={
            "success": False,
            "error": "Datos de entrada inválidos",
            "details": jsonable_encoder(exc.errors()),
        },
        status_code=422,
    )


@app.exception_handler(ConfigurationMissingError)
async def configuration_missing_handler(request: Request, exc: ConfigurationMissingError):
    logger.error(f"❌ Configuración faltante: {exc}")
    return configuration_missing_response(exc)


# Incluye router maestro
from app.routes import router as main_router

app.include_router(main_router)


@app.get("/")
async def root():
    return {"service": settings.app_name, "status": "active"}


@app.get("/api/health/live")
async def health_live():
    return {"live": True}


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.is_dev,
    )

# Fin del archivo backend/app/main.py
