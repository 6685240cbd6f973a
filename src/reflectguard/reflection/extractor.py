# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Candidate tag extraction from decoded parameter values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..models import QueryParameter
from .patterns import PATTERN_TABLE, DetectionRule


def extract_candidate_tags(value: str, rules: Iterable[DetectionRule] = PATTERN_TABLE) -> list[str]:
    """Apply every rule in order; duplicates across rules are kept."""
    candidates: list[str] = []
    for rule in rules:
        candidates.extend(rule.find_all(value))
    return candidates


def iter_candidate_tags(
    params: Iterable[QueryParameter], rules: Iterable[DetectionRule] = PATTERN_TABLE
) -> Iterator[str]:
    """Yield candidates parameter by parameter, so a checker can stop early."""
    rules = tuple(rules)
    for param in params:
        yield from extract_candidate_tags(param.value, rules)


__all__ = ["extract_candidate_tags", "iter_candidate_tags"]
