# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
ReflectGuard package entrypoint.

This package scans batches of URLs for reflected-parameter XSS indicators: each
URL is fetched, its query values are percent-decoded, tag and event-handler
shaped fragments are extracted, and the response body is checked for a verbatim
echo. HTTP behavior is abstracted behind an injectable client interface and
batches run with bounded concurrency.
"""

from .config import HttpSettings, ScanSettings, load_http_settings, load_scan_settings
from .errors import DecodingError, ErrorCategory, FetchError, ScanError, UrlParseError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    create_default_http_client,
    parse_custom_headers,
)
from .log import setup_logging
from .models import BatchResult, Failed, NotReflected, OutcomeKind, Reflected, ScanOutcome
from .reflection import PATTERN_TABLE, check_reflection, decode_query, extract_candidate_tags
from .runtime import ReflectGuard
from .scan import ReflectionPipeline, ScanDispatcher
from .version import __version__

__all__ = [
    "PATTERN_TABLE",
    "BatchResult",
    "DecodingError",
    "ErrorCategory",
    "Failed",
    "FetchError",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "NotReflected",
    "OutcomeKind",
    "Reflected",
    "ReflectGuard",
    "ReflectionPipeline",
    "ScanDispatcher",
    "ScanError",
    "ScanOutcome",
    "ScanSettings",
    "UrlParseError",
    "check_reflection",
    "create_default_http_client",
    "decode_query",
    "extract_candidate_tags",
    "load_http_settings",
    "load_scan_settings",
    "parse_custom_headers",
    "setup_logging",
    "__version__",
]
