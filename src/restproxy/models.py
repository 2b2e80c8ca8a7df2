# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Credential model attached to outgoing requests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Credential:
    """Authorization scheme and value, sent as `Authorization: {scheme} {value}`."""

    scheme: str
    value: str

    @classmethod
    def bearer(cls, token: str) -> Credential:
        return cls(scheme="Bearer", value=token)

    @property
    def authorization(self) -> str | None:
        """Return the header value, or None when there is nothing to send."""
        if not self.value:
            return None
        return f"{self.scheme} {self.value}"

    def __repr__(self) -> str:
        return f"Credential(scheme={self.scheme!r}, value=***)"


__all__ = ["Credential"]
