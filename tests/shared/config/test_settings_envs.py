# -*- coding: utf-8 -*-
from app.shared.config.settings_dev import DevSettings
from app.shared.config.settings_prod import ProdSettings
from app.shared.config.settings_testing import EnvTestingSettings


def test_dev_overrides_defaults():
    s = DevSettings()
    assert s.is_dev
    assert s.log_level.upper() == "DEBUG"
    assert s.log_format == "plain"


def test_test_overrides_defaults(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "test")
    s = EnvTestingSettings()
    assert s.is_test
    assert s.log_level == "WARNING"
    assert len(s.jwt_secret_key.get_secret_value()) >= 32
    assert s.upload_dir == "uploads-test"
    assert s.missing_wordpress_analytics_settings()


def test_prod_overrides_defaults(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.setenv("JWT_SECRET_KEY", "X" * 40)

    s = ProdSettings()
    assert s.is_prod
    assert s.log_level.upper() == "INFO"
    assert s.log_format == "json"
# Fin del archivo backend/tests/shared/config/test_settings_envs.py
