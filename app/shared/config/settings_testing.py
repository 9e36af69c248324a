# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista: logging moderado, sin credenciales de WordPress
y un secreto JWT fijo para poder firmar/verificar tokens en la suite.

Fecha: 19/10/2026
"""

from pydantic import SecretStr
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: str = "test"

    # --- Logging en test: menos ruido ---
    log_level: str = "WARNING"
    log_format: str = "pretty"

    # --- Sesión: secreto fijo para la suite ---
    jwt_secret_key: SecretStr = SecretStr("test-secret-for-session-suite-please-change")

    # --- Uploads en carpeta aislada ---
    upload_dir: str = "uploads-test"

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo backend/app/shared/config/settings_testing.py
