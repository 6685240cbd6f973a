# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Literal reflection check against a response body."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import NotReflected, Reflected


def find_reflected_tag(body: str, candidates: Iterable[str]) -> str | None:
    """Return the first candidate found verbatim in ``body``."""
    for candidate in candidates:
        if candidate in body:
            return candidate
    return None


def check_reflection(
    body: str,
    candidates: Iterable[str],
    *,
    url: str,
    status: str,
    status_code: int | None = None,
    index: int | None = None,
) -> Reflected | NotReflected:
    # Plain substring test: entity-encoded or re-quoted echoes are not detected.
    tag = find_reflected_tag(body, candidates)
    if tag is not None:
        return Reflected(url=url, tag=tag, status=status, status_code=status_code, index=index)
    return NotReflected(url=url, status=status, status_code=status_code, index=index)


__all__ = ["check_reflection", "find_reflected_tag"]
