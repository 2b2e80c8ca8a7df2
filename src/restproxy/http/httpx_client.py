# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import httpx

from ..config import ProxySettings, load_proxy_settings
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class HttpxClient(HttpClient):
    """Asynchronous httpx client wrapper.

    Redirects are never followed here; the proxy inspects redirect statuses
    itself. Transport exceptions propagate to the caller unchanged.
    """

    def __init__(self, settings: ProxySettings | None = None, client: httpx.AsyncClient | None = None):
        self.settings = settings or load_proxy_settings()
        self._client = client or httpx.AsyncClient(
            follow_redirects=False,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    async def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        content = request.body.encode("utf-8") if request.body is not None else None

        resp = await self._client.request(
            request.method,
            request.url,
            headers=headers,
            content=content,
            follow_redirects=False,
        )
        return HttpResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            text=resp.text,
            url=str(resp.url),
        )

    async def aclose(self) -> None:
        await self._client.aclose()
