# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Query decoding, candidate extraction and reflection checks."""

from .checker import check_reflection, find_reflected_tag
from .extractor import extract_candidate_tags, iter_candidate_tags
from .patterns import PATTERN_TABLE, DetectionRule
from .query import decode_query, parse_target_url, percent_decode, split_query

__all__ = [
    "PATTERN_TABLE",
    "DetectionRule",
    "check_reflection",
    "decode_query",
    "extract_candidate_tags",
    "find_reflected_tag",
    "iter_candidate_tags",
    "parse_target_url",
    "percent_decode",
    "split_query",
]
