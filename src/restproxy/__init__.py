# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
restproxy package entrypoint.

Provides ResourceProxy, a typed asynchronous client for one resource of a JSON
HTTP API (list, get, create, update, delete). HTTP behavior is abstracted
behind an injectable client interface, and models (dataclasses or
pydantic models) are encoded through a configurable JsonCodec.
"""

from .codec import CodecSettings, EnumEncoding, JsonCodec, NamingConvention
from .config import ProxySettings, load_proxy_settings
from .errors import AuthorizationError, CodecError, ProtocolError, ProtocolReason, ProxyError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import Credential
from .proxy import ResourceProxy
from .version import __version__

__all__ = [
    "AuthorizationError",
    "CodecError",
    "CodecSettings",
    "Credential",
    "EnumEncoding",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "JsonCodec",
    "NamingConvention",
    "ProtocolError",
    "ProtocolReason",
    "ProxyError",
    "ProxySettings",
    "ResourceProxy",
    "StubHttpClient",
    "__version__",
    "create_default_http_client",
    "load_proxy_settings",
    "setup_logging",
]
