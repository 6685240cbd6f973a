# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level ReflectGuard facade for batch reflection scans."""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import suppress

from .config import load_scan_settings
from .http.client import HttpClient, create_default_http_client
from .http.headers import parse_custom_headers
from .models import BatchResult, ScanOutcome
from .scan.dispatcher import ScanDispatcher
from .scan.pipeline import ReflectionPipeline


class ReflectGuard:
    """
    Convenience wrapper that wires one shared HTTP client and header set into the
    pipeline and dispatcher.

    ``headers`` are raw ``"Name: Value"`` strings; malformed ones are dropped here,
    before any request is made.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        headers: Iterable[str] | None = None,
        concurrency: int | None = None,
        timeout: float | None = None,
    ):
        self.http_client = http_client or create_default_http_client()
        self.headers = parse_custom_headers(headers)
        self.pipeline = ReflectionPipeline(self.http_client, self.headers, timeout=timeout)
        if concurrency is None:
            concurrency = load_scan_settings().concurrency
        self.dispatcher = ScanDispatcher(self.pipeline, concurrency=concurrency)

    def scan(self, urls: Iterable[str]) -> BatchResult:
        return self.dispatcher.run(urls)

    def scan_url(self, url: str) -> ScanOutcome:
        return self.dispatcher.run([url]).outcomes[0]

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> "ReflectGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
