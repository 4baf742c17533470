"""HTTP request issuer interface and its aiohttp implementation."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

import aiohttp

from pybluelink._redact import redact_for_log, redact_headers
from pybluelink.config import BluelinkConfig
from pybluelink.exceptions import BluelinkTransportError
from pybluelink.session import SessionProvider

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """One completed HTTP exchange."""

    status_code: int
    headers: Mapping[str, Any] = field(default_factory=dict)
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class RequestIssuer(Protocol):
    """Structural interface the vehicle handle issues requests through.

    The issuer owns URLs, authentication and retries; the handle only
    hands over a method, an API path and an optional JSON body.
    """

    async def request(self, method: str, path: str, body: Mapping[str, Any] | None = None) -> HttpResponse: ...


class AiohttpRequestIssuer:
    """Request issuer backed by an :class:`aiohttp.ClientSession`."""

    def __init__(
        self,
        config: BluelinkConfig,
        session: SessionProvider,
        http_session: aiohttp.ClientSession,
        *,
        ccs2_protocol_support: bool = False,
    ) -> None:
        self._config = config
        self._session = session
        self._http = http_session
        self._ccs2 = ccs2_protocol_support

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._session.access_token}",
            "Content-Type": "application/json; charset=UTF-8",
            "User-Agent": self._config.user_agent,
            "ccuCCS2ProtocolSupport": "1" if self._ccs2 else "0",
        }

    async def request(self, method: str, path: str, body: Mapping[str, Any] | None = None) -> HttpResponse:
        url = f"{self._config.base_url}{path}"
        timeout = aiohttp.ClientTimeout(total=self._config.request_timeout)

        headers = self._headers()
        _logger.debug("%s %s", method.upper(), url)
        if self._config.api_trace_enabled:
            _logger.debug("Request headers %s body %s", redact_headers(headers), redact_for_log(body))

        try:
            async with self._http.request(
                method.upper(),
                url,
                json=dict(body) if body is not None else None,
                headers=headers,
                timeout=timeout,
            ) as resp:
                text = await resp.text()
                status = resp.status
                response_headers = resp.headers
        except aiohttp.ClientError as exc:
            raise BluelinkTransportError(
                f"Request to {path} failed: {exc}",
                endpoint=path,
            ) from exc

        parsed: Any = None
        if text.strip():
            try:
                parsed = json.loads(text)
            except json.JSONDecodeError as exc:
                raise BluelinkTransportError(
                    f"Invalid JSON from {path}: {text[:200]}",
                    status_code=status,
                    endpoint=path,
                ) from exc

        if self._config.api_trace_enabled:
            _logger.debug(
                "Response %s from %s headers %s body %s",
                status,
                path,
                redact_headers(response_headers),
                redact_for_log(parsed),
            )
        return HttpResponse(status_code=status, headers=response_headers, body=parsed)
