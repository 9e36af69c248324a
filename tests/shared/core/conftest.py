# -*- coding: utf-8 -*-
# conftest.py: fixtures y utilidades comunes para core

import pytest


@pytest.fixture
def no_sleep(monkeypatch):
    """
    Evita esperas reales en backoff (hace que asyncio.sleep sea no-op).
    """
    async def _noop(_):
        return None
    monkeypatch.setattr("asyncio.sleep", _noop)
    return True


@pytest.fixture
async def fresh_resources():
    """Garantiza que no quede un cliente HTTP global entre tests."""
    from app.shared.core import close_http_client
    await close_http_client()
    yield
    await close_http_client()
# Fin del archivo
