# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Target URL parsing and strict percent-decoding of query values."""

from __future__ import annotations

import re
from urllib.parse import unquote_to_bytes, urlsplit

from ..errors import DecodingError, UrlParseError
from ..models import ParsedUrl, QueryParameter

# A ``%`` not followed by two hex digits is a truncated or invalid escape.
_INVALID_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_HOST_SCHEMES = {"http", "https", "ws", "wss", "ftp"}


def parse_target_url(url: str) -> ParsedUrl:
    """
    Split a target URL into its parts, keeping query pairs raw and in order.

    Raises UrlParseError instead of returning a partial structure.
    """
    raw = str(url or "")
    if not raw.strip():
        raise UrlParseError("empty URL", url=raw)

    try:
        parts = urlsplit(raw)
        port = parts.port
    except ValueError as exc:
        raise UrlParseError(str(exc), url=raw) from exc

    if not parts.scheme:
        raise UrlParseError("relative URL without a base", url=raw)
    scheme = parts.scheme.lower()
    host = parts.hostname or ""
    if scheme in _HOST_SCHEMES and not host:
        raise UrlParseError("empty host", url=raw)

    return ParsedUrl(
        scheme=scheme,
        host=host,
        port=port,
        path=parts.path,
        query=parts.query,
        pairs=split_query(parts.query),
    )


def split_query(query: str) -> tuple[tuple[str, str], ...]:
    """Split a raw query string on ``&`` and the first ``=``; nothing is decoded."""
    pairs: list[tuple[str, str]] = []
    for segment in query.split("&"):
        if not segment:
            continue
        key, _, value = segment.partition("=")
        pairs.append((key, value))
    return tuple(pairs)


def percent_decode(value: str) -> str:
    """
    Decode a query value: ``+`` becomes a space and ``%XX`` escapes are read as UTF-8.

    Truncated or non-hex escapes and byte sequences that are not valid UTF-8
    raise DecodingError.
    """
    invalid = _INVALID_ESCAPE_RE.search(value)
    if invalid:
        start = invalid.start()
        raise DecodingError(f"invalid percent-escape {value[start:start + 3]!r} at offset {start}")
    try:
        return unquote_to_bytes(value.replace("+", " ")).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodingError(f"invalid utf-8 sequence after decoding: {exc.reason}") from exc


def decode_query(url: str) -> list[QueryParameter]:
    """Parse ``url`` and return its query parameters with decoded values, in URL order."""
    parsed = parse_target_url(url)
    params: list[QueryParameter] = []
    for key, raw_value in parsed.pairs:
        try:
            value = percent_decode(raw_value)
        except DecodingError as exc:
            raise DecodingError(f"parameter {key!r}: {exc.message}", url=url) from exc
        params.append(QueryParameter(key=key, raw_value=raw_value, value=value))
    return params


__all__ = ["decode_query", "parse_target_url", "percent_decode", "split_query"]
