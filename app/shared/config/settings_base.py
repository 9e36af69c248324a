# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_base.py

Base de configuración (Pydantic v2) para el backend de Terra Orgânica.
- Esta clase NO instancia singletons ni resuelve .env; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Fecha: 19/10/2026
"""

from typing import Literal, Optional

from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]

DEFAULT_JWT_SECRET = "please-change-me"


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="TerraOrganica", validation_alias="APP_NAME")
    app_version: str = Field(default="1.0.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=3000, validation_alias="APP_PORT")

    # =========================
    # CORS
    # =========================
    allowed_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # =========================
    # WordPress (OAuth + REST)
    # =========================
    wordpress_site_url: Optional[str] = Field(default=None, validation_alias="WORDPRESS_SITE_URL")
    wordpress_oauth_url: Optional[str] = Field(default=None, validation_alias="WORDPRESS_OAUTH_URL")
    wordpress_client_id: Optional[str] = Field(default=None, validation_alias="WORDPRESS_CLIENT_ID")
    wordpress_client_secret: Optional[SecretStr] = Field(default=None, validation_alias="WORDPRESS_CLIENT_SECRET")
    wordpress_redirect_uri: Optional[str] = Field(default=None, validation_alias="WORDPRESS_REDIRECT_URI")

    # Credenciales Basic Auth (application password) usadas por analytics
    wordpress_email: Optional[str] = Field(default=None, validation_alias="WORDPRESS_EMAIL")
    wordpress_password: Optional[SecretStr] = Field(default=None, validation_alias="WORDPRESS_PASS")

    # Tipos de post y paginación de la API REST
    wordpress_central_post_type: str = Field(default="central", validation_alias="WORDPRESS_CENTRAL_POST_TYPE")
    wordpress_volume_post_type: str = Field(
        default="verificacoes-de-volu", validation_alias="WORDPRESS_VOLUME_POST_TYPE"
    )
    wordpress_per_page: int = Field(default=100, ge=1, le=100, validation_alias="WORDPRESS_PER_PAGE")
    wordpress_max_pages: int = Field(default=10, ge=1, validation_alias="WORDPRESS_MAX_PAGES")
    wordpress_timeout_sec: float = Field(default=10.0, gt=0, validation_alias="WORDPRESS_TIMEOUT_SEC")
    wordpress_max_retries: int = Field(default=2, ge=0, validation_alias="WORDPRESS_MAX_RETRIES")

    # =========================
    # Sesión (JWT) / Deep link
    # =========================
    jwt_secret_key: SecretStr = Field(default=SecretStr(DEFAULT_JWT_SECRET), validation_alias="JWT_SECRET_KEY")
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    jwt_expire_days: int = Field(default=30, ge=1, validation_alias="JWT_EXPIRE_DAYS")
    app_deep_link_scheme: str = Field(default="terraorganica", validation_alias="APP_DEEP_LINK_SCHEME")

    # =========================
    # YouTube (OAuth 2.0 + upload)
    # =========================
    youtube_client_id: Optional[str] = Field(default=None, validation_alias="YOUTUBE_CLIENT_ID")
    youtube_client_secret: Optional[SecretStr] = Field(default=None, validation_alias="YOUTUBE_CLIENT_SECRET")
    youtube_redirect_uri: str = Field(
        default="http://localhost:3000/youtube/oauth/callback",
        validation_alias="YOUTUBE_REDIRECT_URI",
    )
    youtube_refresh_token: Optional[SecretStr] = Field(default=None, validation_alias="YOUTUBE_REFRESH_TOKEN")
    youtube_category_id: str = Field(default="22", validation_alias="YOUTUBE_CATEGORY_ID")
    youtube_default_privacy: Literal["private", "unlisted", "public"] = Field(
        default="private", validation_alias="YOUTUBE_DEFAULT_PRIVACY"
    )
    upload_dir: str = Field(default="uploads", validation_alias="UPLOAD_DIR")
    max_upload_size_mb: int = Field(default=1024, ge=1, validation_alias="MAX_UPLOAD_SIZE_MB")

    # =========================
    # Observabilidad / Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "pretty", "plain"] = Field(default="pretty", validation_alias="LOG_FORMAT")

    # ===== Helpers de entorno =====
    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @computed_field  # type: ignore[misc]
    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @computed_field  # type: ignore[misc]
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    @computed_field  # type: ignore[misc]
    @property
    def youtube_configured(self) -> bool:
        """True si existe refresh token para subir videos."""
        return bool(self.youtube_refresh_token and self.youtube_refresh_token.get_secret_value())

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    # ===== Utilidades =====
    def missing_wordpress_analytics_settings(self) -> list[str]:
        """Variables de entorno requeridas por analytics que no están definidas."""
        missing = []
        if not self.wordpress_site_url:
            missing.append("WORDPRESS_SITE_URL")
        if not self.wordpress_email:
            missing.append("WORDPRESS_EMAIL")
        if not self.wordpress_password or not self.wordpress_password.get_secret_value():
            missing.append("WORDPRESS_PASS")
        return missing

    def missing_wordpress_oauth_settings(self) -> list[str]:
        """Variables de entorno requeridas por el flujo OAuth de WordPress."""
        required = {
            "WORDPRESS_SITE_URL": self.wordpress_site_url,
            "WORDPRESS_OAUTH_URL": self.wordpress_oauth_url,
            "WORDPRESS_CLIENT_ID": self.wordpress_client_id,
            "WORDPRESS_CLIENT_SECRET": (
                self.wordpress_client_secret.get_secret_value() if self.wordpress_client_secret else None
            ),
            "WORDPRESS_REDIRECT_URI": self.wordpress_redirect_uri,
        }
        return [name for name, value in required.items() if not value]

    def get_cors_origins(self) -> list[str]:
        """Convierte allowed_origins en lista procesable para CORS middleware."""
        if not self.allowed_origins or self.allowed_origins == "*":
            return ["*"]
        # Parsea lista separada por comas, limpia comillas
        return [o.strip().strip('"').strip("'") for o in self.allowed_origins.split(",") if o.strip()]

    def _security_checks(self) -> None:
        """
        Validaciones mínimas de seguridad y coherencia.
        Se invoca desde config_loader tras instanciar el settings.
        """
        import logging
        logger = logging.getLogger(__name__)

        jwt_key = self.jwt_secret_key.get_secret_value()
        weak_jwt = not jwt_key or jwt_key == DEFAULT_JWT_SECRET or len(jwt_key) < 32

        # JWT en prod: debe ser fuerte
        if self.is_prod and weak_jwt:
            raise ValueError("JWT_SECRET_KEY debe tener ≥32 caracteres en producción")

        # Validaciones suaves para desarrollo
        if self.is_dev:
            if weak_jwt:
                logger.info("ℹ️ JWT_SECRET_KEY es débil o usa valor por defecto - considera usar una clave más segura")
            missing = self.missing_wordpress_analytics_settings()
            if missing:
                logger.info(f"ℹ️ Analytics de centrales no disponible, faltan: {', '.join(missing)}")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


__all__ = ["BaseAppSettings", "EnvName", "DEFAULT_JWT_SECRET"]
# Fin del archivo backend/app/shared/config/settings_base.py
