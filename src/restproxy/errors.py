# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy raised by ResourceProxy.

Transport failures (DNS, refused connections, timeouts) are not part of this
taxonomy; they surface as the transport's own exceptions.
"""

from __future__ import annotations

from enum import Enum


class ProtocolReason(str, Enum):
    UNEXPECTED_STATUS = "unexpected status code"
    REDIRECT_WITHOUT_LOCATION = "redirect without location"
    ENDLESS_REDIRECT_LOOP = "endless redirect loop"


class ProxyError(Exception):
    """Base class for errors raised by the resource proxy."""


class AuthorizationError(ProxyError):
    """The remote API answered 401 or 403."""

    def __init__(self, status_code: int, url: str | None = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Not authorized ({status_code}) for {url}" if url else f"Not authorized ({status_code})")


class ProtocolError(ProxyError):
    """The remote API answered in a way the proxy cannot act on."""

    def __init__(self, reason: ProtocolReason, status_code: int | None = None, url: str | None = None):
        self.reason = reason
        self.status_code = status_code
        self.url = url
        message = reason.value
        if status_code is not None:
            message = f"{message}: {status_code}"
        if url:
            message = f"{message} ({url})"
        super().__init__(message)


class CodecError(ProxyError):
    """A response body could not be decoded into the requested shape."""


__all__ = [
    "AuthorizationError",
    "CodecError",
    "ProtocolError",
    "ProtocolReason",
    "ProxyError",
]
