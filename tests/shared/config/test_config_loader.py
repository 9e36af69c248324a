# -*- coding: utf-8 -*-
import pytest

from app.shared.config.config_loader import get_settings
from app.shared.config.settings_dev import DevSettings
from app.shared.config.settings_prod import ProdSettings
from app.shared.config.settings_testing import EnvTestingSettings


def _reset_loader_cache():
    get_settings.cache_clear()


def test_loader_returns_dev_by_default(monkeypatch):
    monkeypatch.delenv("PYTHON_ENV", raising=False)
    _reset_loader_cache()
    s = get_settings()
    assert isinstance(s, DevSettings)
    assert s.is_dev is True
    assert s.python_env == "development"


def test_loader_selects_test(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "test")
    _reset_loader_cache()
    s = get_settings()
    assert isinstance(s, EnvTestingSettings)
    assert s.is_test is True


def test_loader_selects_prod(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.setenv("JWT_SECRET_KEY", "X" * 40)
    _reset_loader_cache()
    s = get_settings()
    assert isinstance(s, ProdSettings)
    assert s.is_prod is True


def test_loader_caches_singleton():
    _reset_loader_cache()
    a = get_settings()
    b = get_settings()
    assert a is b


def test_prod_rejects_weak_jwt_secret(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.setenv("JWT_SECRET_KEY", "short")
    _reset_loader_cache()
    with pytest.raises(ValueError) as ei:
        get_settings()
    assert "JWT_SECRET_KEY" in str(ei.value)


def test_prod_rejects_default_jwt_secret(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    _reset_loader_cache()
    with pytest.raises(ValueError):
        get_settings()


def test_dev_soft_checks_do_not_raise(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "development")
    _reset_loader_cache()
    s = get_settings()
    # sin WordPress ni JWT fuerte: solo logs informativos
    assert s.missing_wordpress_analytics_settings()


def test_core_facade_shares_the_cached_loader(monkeypatch):
    from app.core import get_settings as core_get_settings

    monkeypatch.setenv("PYTHON_ENV", "test")
    _reset_loader_cache()
    # misma función: los overrides de dependencia y cache_clear aplican a ambos
    assert core_get_settings is get_settings
    assert core_get_settings() is get_settings()

# Fin del archivo backend/tests/shared/config/test_config_loader.py
