# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for resource and item addressing."""

from __future__ import annotations

from urllib.parse import urljoin, urlsplit


def trim_resource_url(resource_url: str) -> str:
    """
    Strip surrounding whitespace and slashes from a resource URL.

    Example:
      http://api.test/items/ -> http://api.test/items
    """
    trimmed = str(resource_url or "").strip().strip("/")
    parts = urlsplit(trimmed)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Resource URL must be absolute: {resource_url!r}")
    return trimmed


def build_item_url(base_url: str, item_id: int) -> str:
    """Return `{base_url}/{item_id}`."""
    return f"{base_url}/{item_id}"


def resolve_location(current_url: str, location: str) -> str:
    """Resolve a (possibly relative) Location header against the URL that returned it."""
    return urljoin(current_url, location.strip())


__all__ = ["build_item_url", "resolve_location", "trim_resource_url"]
