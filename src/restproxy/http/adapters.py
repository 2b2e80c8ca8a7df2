# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory HttpClient implementations."""

from __future__ import annotations

from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """Deterministic, programmable HttpClient for tests.

    Responses are keyed by `(method, url)`; a key of `url` alone matches any
    method. Unregistered requests receive a 599 response so they fail loudly
    as an unexpected status.
    """

    def __init__(self, responses: dict[str | tuple[str, str], HttpResponse] | None = None):
        self._responses = dict(responses or {})
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse, *, method: str | None = None) -> None:
        key = (method.upper(), url) if method else url
        self._responses[key] = response

    async def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        for key in ((request.method.upper(), request.url), request.url):
            if key in self._responses:
                return self._responses[key]
        return HttpResponse(status_code=599, text="No stubbed response configured", url=request.url)

    async def aclose(self) -> None:
        self.closed = True
