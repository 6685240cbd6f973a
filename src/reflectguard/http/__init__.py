# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .client import HttpClient, create_default_http_client
from .headers import parse_custom_headers, parse_header_line
from .httpx_client import HttpxClient
from .models import HeaderPair, Headers, HttpRequest, HttpResponse

__all__ = [
    "HeaderPair",
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "create_default_http_client",
    "parse_custom_headers",
    "parse_header_line",
]
