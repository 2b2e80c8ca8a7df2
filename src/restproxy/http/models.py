# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models exchanged with HttpClient implementations."""

from __future__ import annotations

from dataclasses import dataclass, field

from .headers import header_value

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers = field(default_factory=dict)
    body: str | None = None


@dataclass
class HttpResponse:
    """Normalized HTTP response carrying what the proxy branches on."""

    status_code: int
    headers: Headers = field(default_factory=dict)
    text: str = ""
    url: str | None = None

    @property
    def location(self) -> str | None:
        """Return the Location header, or None when absent or blank."""
        return header_value(self.headers, "Location") or None
