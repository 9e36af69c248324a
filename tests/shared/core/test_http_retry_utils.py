# -*- coding: utf-8 -*-
import pytest

from httpx import ConnectError, Request, Response, TimeoutException


@pytest.mark.anyio
async def test_retry_success_without_retries(no_sleep):
    from app.shared.core.http_retry_utils import retry_with_backoff

    async def _ok(url, **kwargs):
        return Response(200, request=Request("GET", url))

    r = await retry_with_backoff(_ok, "https://x.test")
    assert r.status_code == 200


@pytest.mark.anyio
async def test_retry_on_http_status_then_success(no_sleep):
    from app.shared.core.http_retry_utils import retry_with_backoff

    calls = {"n": 0}
    async def _sometimes(url, **kwargs):
        calls["n"] += 1
        if calls["n"] == 1:
            return Response(503, request=Request("GET", url))
        return Response(200, request=Request("GET", url))

    r = await retry_with_backoff(_sometimes, "https://x.test", max_retries=2, retry_on_status={503})
    assert r.status_code == 200
    assert calls["n"] == 2


@pytest.mark.anyio
async def test_retry_on_transport_error_then_success(no_sleep):
    from app.shared.core.http_retry_utils import retry_with_backoff

    calls = {"n": 0}
    async def _flaky(url, **kwargs):
        calls["n"] += 1
        if calls["n"] == 1:
            raise TimeoutException("boom")
        return Response(200, request=Request("GET", url))

    r = await retry_with_backoff(_flaky, "https://x.test", max_retries=2)
    assert r.status_code == 200
    assert calls["n"] == 2


@pytest.mark.anyio
async def test_exhausted_status_retries_return_last_response(no_sleep):
    from app.shared.core.http_retry_utils import retry_with_backoff

    calls = {"n": 0}
    async def _down(url, **kwargs):
        calls["n"] += 1
        return Response(502, request=Request("GET", url))

    r = await retry_with_backoff(_down, "https://x.test", max_retries=2)
    assert r.status_code == 502
    assert calls["n"] == 3


@pytest.mark.anyio
async def test_exhausted_transport_retries_reraise(no_sleep):
    from app.shared.core.http_retry_utils import retry_with_backoff

    async def _dead(url, **kwargs):
        raise ConnectError("refused")

    with pytest.raises(ConnectError):
        await retry_with_backoff(_dead, "https://x.test", max_retries=1)


@pytest.mark.anyio
async def test_client_errors_are_not_retried(no_sleep):
    from app.shared.core.http_retry_utils import retry_with_backoff

    calls = {"n": 0}
    async def _forbidden(url, **kwargs):
        calls["n"] += 1
        return Response(403, request=Request("GET", url))

    r = await retry_with_backoff(_forbidden, "https://x.test", max_retries=3)
    assert r.status_code == 403
    assert calls["n"] == 1


@pytest.mark.anyio
async def test_retry_with_backoff_param_validation():
    from app.shared.core.http_retry_utils import retry_with_backoff

    async def _never():
        raise AssertionError("no debe llamarse")

    with pytest.raises(ValueError):
        await retry_with_backoff(_never, max_retries=-1)
    with pytest.raises(ValueError):
        await retry_with_backoff(_never, base_delay=0.0)
# Fin del archivo
