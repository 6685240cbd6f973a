# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Domain models for ReflectGuard."""

from .outcome import BatchResult, Failed, NotReflected, OutcomeKind, Reflected, ScanOutcome, TaskError
from .url import ParsedUrl, QueryParameter

__all__ = [
    "BatchResult",
    "Failed",
    "NotReflected",
    "OutcomeKind",
    "ParsedUrl",
    "QueryParameter",
    "Reflected",
    "ScanOutcome",
    "TaskError",
]
