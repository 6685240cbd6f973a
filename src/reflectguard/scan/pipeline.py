# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-URL pipeline: fetch, decode, extract, check."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..errors import ErrorCategory, FetchError, UrlParseError, error_category_to_reason
from ..http.client import HttpClient
from ..http.models import HeaderPair, HttpRequest, HttpResponse
from ..models import NotReflected, Reflected
from ..reflection import PATTERN_TABLE, DetectionRule, check_reflection, decode_query, iter_candidate_tags

logger = logging.getLogger(__name__)


class ReflectionPipeline:
    """
    Runs one target URL to a terminal outcome.

    The pipeline holds only read-only shared state (client, headers, rules), so a
    single instance serves every worker of a batch. Failures are raised as
    ScanError subclasses and turned into outcomes by the dispatcher.
    """

    def __init__(
        self,
        http_client: HttpClient,
        headers: Sequence[HeaderPair] = (),
        *,
        rules: Sequence[DetectionRule] = PATTERN_TABLE,
        timeout: float | None = None,
    ):
        self.http_client = http_client
        self.headers = tuple(headers)
        self.rules = tuple(rules)
        self.timeout = timeout

    def fetch(self, url: str) -> HttpResponse:
        request = HttpRequest(url=url, method="GET", headers=self.headers, timeout=self.timeout)
        response = self.http_client.request(request)
        if response.ok:
            return response

        category = response.error_category or ErrorCategory.UNKNOWN_ERROR.value
        detail = response.error_message or error_category_to_reason(category)
        if response.error_type:
            detail = f"{detail} ({response.error_type})"
        logger.debug("Fetch failed for %s: %s [%s]", url, detail, category)
        if category == ErrorCategory.INVALID_URL.value:
            raise UrlParseError(detail, url=url)
        try:
            error_category = ErrorCategory(category)
        except ValueError:
            error_category = ErrorCategory.UNKNOWN_ERROR
        raise FetchError(detail, url=url, category=error_category)

    def run(self, url: str, *, index: int | None = None) -> Reflected | NotReflected:
        response = self.fetch(url)
        status = response.status_line

        params = decode_query(url)
        if not params:
            logger.debug("%s has no query parameters", url)

        candidates = iter_candidate_tags(params, self.rules)
        outcome = check_reflection(
            response.text,
            candidates,
            url=url,
            status=status,
            status_code=response.status_code,
            index=index,
        )
        if isinstance(outcome, Reflected):
            logger.info("Reflected tag %r in %s (%s)", outcome.tag, url, status)
        return outcome


__all__ = ["ReflectionPipeline"]
