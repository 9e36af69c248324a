# -*- coding: utf-8 -*-
import pathlib

import pytest


@pytest.fixture(autouse=True)
def _dev_env_and_fresh_loader(monkeypatch):
    """
    Los tests de config parten de PYTHON_ENV=development y del caché limpio.
    El aislamiento de variables WORDPRESS_/YOUTUBE_/JWT_... lo hace el conftest raíz.
    """
    monkeypatch.setenv("PYTHON_ENV", "development")
    # Que un .env local del dev no contamine los defaults
    monkeypatch.chdir(pathlib.Path(__file__).parent)

    from app.shared.config.config_loader import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
# Fin del archivo backend/tests/shared/config/conftest.py
