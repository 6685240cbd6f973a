# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Detection rules applied to decoded query values.

The table is compiled once at import time and never mutated, so every worker
thread reads the same compiled patterns. Rule order matters: tag-shaped rules
come before attribute rules and the first reflected candidate wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Attribute value runs up to the next ``>`` or whitespace.
_ATTRIBUTE_VALUE = r"=[^>\s]+"

# Each handler is checked under its lowercase spelling and one mixed-case
# spelling commonly used to slip past naive filters. Matching is otherwise
# case-sensitive.
EVENT_HANDLER_SPELLINGS: tuple[tuple[str, str], ...] = (
    ("onerror", "OnError"),
    ("onclick", "OnCliCk"),
    ("onload", "OnLoAd"),
    ("ontoggle", "OnToGgLe"),
)


@dataclass(frozen=True)
class DetectionRule:
    name: str
    pattern: re.Pattern[str]

    def find_all(self, value: str) -> list[str]:
        """Return every non-overlapping match, left to right."""
        return [match.group(0) for match in self.pattern.finditer(value)]


def _attribute_rule(attribute: str) -> DetectionRule:
    return DetectionRule(f"attribute:{attribute}", re.compile(re.escape(attribute) + _ATTRIBUTE_VALUE))


def build_pattern_table() -> tuple[DetectionRule, ...]:
    rules = [
        DetectionRule("paired_tag", re.compile(r"<[^>]+>[^<]*</[^>]+>")),
        DetectionRule("tag", re.compile(r"<[^>]+>")),
    ]
    for lowercase, mixed_case in EVENT_HANDLER_SPELLINGS:
        rules.append(_attribute_rule(lowercase))
        rules.append(_attribute_rule(mixed_case))
    rules.append(_attribute_rule("src"))
    return tuple(rules)


PATTERN_TABLE: tuple[DetectionRule, ...] = build_pattern_table()


__all__ = ["EVENT_HANDLER_SPELLINGS", "PATTERN_TABLE", "DetectionRule", "build_pattern_table"]
