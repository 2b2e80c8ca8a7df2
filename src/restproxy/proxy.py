# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Typed asynchronous proxy for a JSON resource API."""

from __future__ import annotations

import logging
from contextlib import suppress
from dataclasses import replace
from typing import Any, Generic, TypeVar

from .codec import CodecSettings, JsonCodec
from .config import ProxySettings
from .errors import AuthorizationError, ProtocolError, ProtocolReason
from .http.client import HttpClient, create_default_http_client
from .http.models import HttpRequest, HttpResponse
from .http.url import build_item_url, resolve_location, trim_resource_url
from .models import Credential

logger = logging.getLogger(__name__)

T = TypeVar("T")

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})
UNAUTHORIZED_STATUSES = frozenset({401, 403})
ABSENT_STATUSES = frozenset({404, 410})

LIST_OK = frozenset({200})
GET_OK = frozenset({200})
CREATE_OK = frozenset({200, 201, 202, 400})
UPDATE_OK = frozenset({200, 202, 204, 400})
DELETE_OK = frozenset({202, 204})

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class ResourceProxy(Generic[T]):
    """
    Client bound to one resource collection of a JSON API.

    `model` is the shape responses decode into and request bodies encode from;
    anything the configured JsonCodec handles works (dataclasses, pydantic
    models, dicts). Pass either `codec` or `codec_settings`; a prebuilt codec
    already carries its settings.
    Every operation follows redirects itself, re-issuing the same method and
    body, and fails with ProtocolError when a redirect points back to a URL
    already visited during that call.

    The credential may be replaced at any time; it is read once per request.
    """

    def __init__(
        self,
        resource_url: str,
        model: type[T] | Any,
        *,
        codec_settings: CodecSettings | None = None,
        codec: JsonCodec | None = None,
        credential: Credential | None = None,
        http_client: HttpClient | None = None,
        settings: ProxySettings | None = None,
    ):
        self.base_url = trim_resource_url(resource_url)
        if codec is not None and codec_settings is not None:
            raise ValueError("Pass either codec or codec_settings, not both")
        self.model = model
        self.codec = codec or JsonCodec(codec_settings)
        self._credential = credential
        self._owns_client = http_client is None
        self.http_client = http_client or create_default_http_client(settings)

    @property
    def credential(self) -> Credential | None:
        return self._credential

    @credential.setter
    def credential(self, value: Credential | None) -> None:
        self._credential = value

    def item_url(self, item_id: int) -> str:
        return build_item_url(self.base_url, item_id)

    async def list(self) -> list[T] | None:
        """Return every item of the resource, or None when the resource is 404/410."""
        response = await self._send("GET", self.base_url)
        if response.status_code in LIST_OK:
            return self.codec.decode_list(response.text, self.model)
        if response.status_code in ABSENT_STATUSES:
            return None
        raise self._unexpected(response)

    async def get(self, item_id: int) -> T | None:
        """Return a single item, or None when it does not exist (404/410)."""
        response = await self._send("GET", self.item_url(item_id))
        if response.status_code in GET_OK:
            return self.codec.decode(response.text, self.model)
        if response.status_code in ABSENT_STATUSES:
            return None
        raise self._unexpected(response)

    async def create(self, model: T) -> T:
        """
        POST a new item and return the decoded response body.

        A 400 response is decoded rather than raised: the API reports validation
        failures in the body, so callers inspect the returned object.
        """
        response = await self._send("POST", self.base_url, self.codec.encode(model, self.model))
        if response.status_code in CREATE_OK:
            return self.codec.decode(response.text, self.model)
        raise self._unexpected(response)

    async def update(self, item_id: int, model: T) -> T:
        """PATCH an item; 400 bodies are decoded like create(), an empty 204 yields a default model."""
        response = await self._send("PATCH", self.item_url(item_id), self.codec.encode(model, self.model))
        if response.status_code in UPDATE_OK:
            return self.codec.decode(response.text, self.model)
        raise self._unexpected(response)

    async def delete(self, item_id: int) -> None:
        response = await self._send("DELETE", self.item_url(item_id))
        if response.status_code in DELETE_OK:
            return None
        raise self._unexpected(response)

    def _build_request(self, method: str, url: str, body: str | None = None) -> HttpRequest:
        headers = {"Accept": "application/json"}
        if body is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        credential = self._credential
        authorization = credential.authorization if credential is not None else None
        if authorization:
            headers["Authorization"] = authorization
        return HttpRequest(url=url, method=method, headers=headers, body=body)

    async def _send(self, method: str, url: str, body: str | None = None) -> HttpResponse:
        """
        Dispatch a request, following redirects until a non-redirect status.

        Raises AuthorizationError on 401/403 and ProtocolError for redirects
        without a Location or that revisit a URL from this call.
        """
        visited = {url}
        while True:
            logger.debug("%s %s", method, url)
            response = await self.http_client.request(self._build_request(method, url, body))
            if response.url is None:
                response = replace(response, url=url)
            status = response.status_code

            if status in REDIRECT_STATUSES:
                location = response.location
                if not location:
                    raise ProtocolError(ProtocolReason.REDIRECT_WITHOUT_LOCATION, status, url)
                target = resolve_location(url, location)
                if target in visited:
                    raise ProtocolError(ProtocolReason.ENDLESS_REDIRECT_LOOP, status, target)
                visited.add(target)
                logger.debug("Following %s redirect for %s %s -> %s", status, method, url, target)
                url = target
                continue

            if status in UNAUTHORIZED_STATUSES:
                raise AuthorizationError(status, url)
            return response

    @staticmethod
    def _unexpected(response: HttpResponse) -> ProtocolError:
        logger.debug("Unexpected status %s from %s", response.status_code, response.url)
        return ProtocolError(ProtocolReason.UNEXPECTED_STATUS, response.status_code, response.url)

    async def aclose(self) -> None:
        """Close the HTTP client if this proxy created it."""
        if not self._owns_client:
            return
        with suppress(Exception):
            await self.http_client.aclose()

    async def __aenter__(self) -> ResourceProxy[T]:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.aclose()


__all__ = ["ResourceProxy"]
