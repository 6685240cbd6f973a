# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    INVALID_URL = "INVALID_URL"
    DECODE_ERROR = "DECODE_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return ErrorCategory.INVALID_URL

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, httpx.DecodingError):
        return ErrorCategory.DECODE_ERROR

    # httpx wraps TLS failures in ConnectError; look at the cause first.
    cause = exc.__cause__ or exc.__context__
    if isinstance(exc, ssl.SSLError) or isinstance(cause, ssl.SSLError):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, socket.gaierror) or isinstance(cause, socket.gaierror):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | str | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.INVALID_URL: "Malformed target URL",
        ErrorCategory.DECODE_ERROR: "Response body could not be decoded",
        ErrorCategory.UNKNOWN_ERROR: "Network error",
        ErrorCategory.NONE: "",
        None: "",
    }
    try:
        key = ErrorCategory(category) if category is not None else None
    except ValueError:
        key = ErrorCategory.UNKNOWN_ERROR
    return mapping.get(key, "Request failed due to network error")


class ScanError(Exception):
    """Base class for per-URL scan failures; never fatal to the batch."""

    kind = "scan"

    def __init__(self, message: str, *, url: str | None = None, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR):
        super().__init__(message)
        self.message = message
        self.url = url
        self.category = category

    def __str__(self) -> str:
        return self.message


class FetchError(ScanError):
    """Network, TLS, timeout or body read failure."""

    kind = "fetch"


class UrlParseError(ScanError):
    """The target URL is syntactically invalid."""

    kind = "url_parse"

    def __init__(self, message: str, *, url: str | None = None):
        super().__init__(message, url=url, category=ErrorCategory.INVALID_URL)


class DecodingError(ScanError):
    """A query value carries an invalid percent-encoding."""

    kind = "decode"

    def __init__(self, message: str, *, url: str | None = None):
        super().__init__(message, url=url, category=ErrorCategory.DECODE_ERROR)


__all__ = [
    "DecodingError",
    "ErrorCategory",
    "FetchError",
    "ScanError",
    "UrlParseError",
    "categorize_exception",
    "error_category_to_reason",
]
