# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across ReflectGuard."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

HeaderPair = tuple[str, str]
Headers = Union[Sequence[HeaderPair], Mapping[str, str]]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    timeout: float | None = None
    allow_redirects: bool | None = None


@dataclass
class HttpResponse:
    """Normalized HTTP response; transport failures are reported with ok=False."""

    ok: bool
    status_code: int | None = None
    reason_phrase: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_category: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def status_line(self) -> str:
        """Render the status the way it is shown in outcome lines, e.g. ``200 OK``."""
        if self.status_code is None:
            return ""
        if self.reason_phrase:
            return f"{self.status_code} {self.reason_phrase}"
        return str(self.status_code)


__all__ = ["HeaderPair", "Headers", "HttpRequest", "HttpResponse"]
