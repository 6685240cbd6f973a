# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Custom header parsing.

Headers come from the command line as ``"Name: Value"`` strings. They are split
on the first colon and trimmed; anything else about them is passed through
untouched so the target sees exactly what the tester asked for.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import HeaderPair

logger = logging.getLogger(__name__)


def parse_header_line(line: str) -> HeaderPair | None:
    """Return ``(name, value)`` for a ``"Name: Value"`` string, or None when malformed."""
    name, sep, value = str(line or "").partition(":")
    if not sep:
        return None
    name = name.strip()
    if not name:
        return None
    return (name, value.strip())


def parse_custom_headers(lines: Iterable[str] | None) -> tuple[HeaderPair, ...]:
    """
    Parse repeated header options, silently dropping malformed entries.

    Order and duplicates are preserved; the result is an immutable tuple that is
    shared by every request in the batch.
    """
    pairs: list[HeaderPair] = []
    for line in lines or ():
        pair = parse_header_line(line)
        if pair is None:
            logger.debug("Dropping malformed header %r", line)
            continue
        pairs.append(pair)
    return tuple(pairs)


__all__ = ["parse_custom_headers", "parse_header_line"]
