from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import aiohttp
import pytest
from multidict import CIMultiDict, CIMultiDictProxy

from pybluelink._transport import AiohttpRequestIssuer, HttpResponse
from pybluelink.config import BluelinkConfig
from pybluelink.exceptions import BluelinkTransportError
from pybluelink.session import Session


@dataclass
class _FakeResponse:
    status: int
    payload: str
    headers: dict[str, str] = field(default_factory=dict)

    async def text(self) -> str:
        return self.payload

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(self, *_exc: object) -> None:
        return None


@dataclass
class _FakeHttpSession:
    response: _FakeResponse | None = None
    error: Exception | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    def request(self, method: str, url: str, **kwargs: Any) -> _FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


def _issuer(http: _FakeHttpSession, **config: Any) -> AiohttpRequestIssuer:
    return AiohttpRequestIssuer(
        BluelinkConfig(base_url="https://gw.example", **config),
        Session(access_token="tok", device_id="dev"),
        http,  # type: ignore[arg-type]
        ccs2_protocol_support=True,
    )


@pytest.mark.asyncio
async def test_request_sends_auth_and_parses_json() -> None:
    http = _FakeHttpSession(_FakeResponse(200, '{"retCode": "S"}', {"x-ratelimit-limit": "5"}))

    response = await _issuer(http).request("post", "/api/v2/x", {"a": 1})

    assert response == HttpResponse(status_code=200, headers={"x-ratelimit-limit": "5"}, body={"retCode": "S"})
    call = http.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://gw.example/api/v2/x"
    assert call["json"] == {"a": 1}
    assert call["headers"]["Authorization"] == "Bearer tok"
    assert call["headers"]["ccuCCS2ProtocolSupport"] == "1"


@pytest.mark.asyncio
async def test_empty_body_is_none() -> None:
    http = _FakeHttpSession(_FakeResponse(204, ""))
    response = await _issuer(http).request("POST", "/api/v2/x")
    assert response.body is None
    assert response.ok


@pytest.mark.asyncio
async def test_invalid_json_raises() -> None:
    http = _FakeHttpSession(_FakeResponse(200, "<html>"))
    with pytest.raises(BluelinkTransportError) as exc_info:
        await _issuer(http).request("GET", "/api/v2/x")
    assert exc_info.value.status_code == 200
    assert exc_info.value.endpoint == "/api/v2/x"


@pytest.mark.asyncio
async def test_client_error_raises() -> None:
    http = _FakeHttpSession(error=aiohttp.ClientConnectionError("reset"))
    with pytest.raises(BluelinkTransportError):
        await _issuer(http).request("GET", "/api/v2/x")


@pytest.mark.asyncio
async def test_trace_logging_redacts(caplog: pytest.LogCaptureFixture) -> None:
    http = _FakeHttpSession(_FakeResponse(200, '{"ok": true}'))
    with caplog.at_level(logging.DEBUG, logger="pybluelink._transport"):
        await _issuer(http, api_trace_enabled=True).request("POST", "/api/v2/x", {"deviceId": "dev"})
    assert "<redacted>" in caplog.text
    assert "'dev'" not in caplog.text
    assert "Bearer tok" not in caplog.text


@pytest.mark.asyncio
async def test_response_headers_pass_through() -> None:
    headers = CIMultiDictProxy(CIMultiDict([("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")]))
    http = _FakeHttpSession(_FakeResponse(200, "{}", headers))  # type: ignore[arg-type]

    response = await _issuer(http).request("GET", "/api/v2/x")

    assert response.headers is headers
    assert response.headers.getall("set-cookie") == ["a=1", "b=2"]  # type: ignore[attr-defined]
