# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parsed target URL and query parameter models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedUrl:
    """Scheme/host/path/query decomposition; ``pairs`` keeps raw key/value order."""

    scheme: str
    host: str
    port: int | None
    path: str
    query: str
    pairs: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class QueryParameter:
    key: str
    raw_value: str
    value: str


__all__ = ["ParsedUrl", "QueryParameter"]
