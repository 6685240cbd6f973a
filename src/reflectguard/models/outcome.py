# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan outcome models: exactly one per target URL."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union


class OutcomeKind(str, Enum):
    REFLECTED = "REFLECTED"
    NOT_REFLECTED = "NOT_REFLECTED"
    FAILED = "FAILED"


_FAILURE_LABELS: dict[str, str] = {
    "fetch": "Fetch error",
    "url_parse": "URL parse error",
    "decode": "Decoding error",
    "task": "Task error",
}


@dataclass(frozen=True)
class Reflected:
    """A candidate tag reappeared verbatim in the response body."""

    url: str
    tag: str
    status: str
    status_code: int | None = None
    index: int | None = None

    kind: ClassVar[OutcomeKind] = OutcomeKind.REFLECTED

    def describe(self) -> str:
        return f"Potential XSS found! Tag '{self.tag}' reflected ({self.status})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "outcome": self.kind.value,
            "tag": self.tag,
            "status": self.status,
            "status_code": self.status_code,
        }


@dataclass(frozen=True)
class NotReflected:
    url: str
    status: str
    status_code: int | None = None
    index: int | None = None

    kind: ClassVar[OutcomeKind] = OutcomeKind.NOT_REFLECTED

    def describe(self) -> str:
        return f"No tag reflection found ({self.status})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "outcome": self.kind.value,
            "status": self.status,
            "status_code": self.status_code,
        }


@dataclass(frozen=True)
class Failed:
    """
    Terminal failure for one URL.

    ``failure`` is the error kind (``fetch``, ``url_parse``, ``decode`` or ``task``);
    ``category`` is the finer ErrorCategory value when one is known.
    """

    url: str
    failure: str
    message: str
    category: str | None = None
    index: int | None = None

    kind: ClassVar[OutcomeKind] = OutcomeKind.FAILED

    def describe(self) -> str:
        label = _FAILURE_LABELS.get(self.failure, self.failure)
        return f"Error: {label}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "outcome": self.kind.value,
            "error_kind": self.failure,
            "error_category": self.category,
            "message": self.message,
        }


ScanOutcome = Union[Reflected, NotReflected, Failed]


@dataclass(frozen=True)
class TaskError:
    """An unexpected exception that escaped a pipeline run."""

    index: int
    url: str
    error_type: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, "url": self.url, "error_type": self.error_type, "message": self.message}


@dataclass
class BatchResult:
    """All outcomes of a batch, ordered by input position, plus any task-level errors."""

    outcomes: list[ScanOutcome] = field(default_factory=list)
    task_errors: list[TaskError] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self):
        return iter(self.outcomes)

    @property
    def reflected(self) -> list[Reflected]:
        return [o for o in self.outcomes if isinstance(o, Reflected)]

    @property
    def failed(self) -> list[Failed]:
        return [o for o in self.outcomes if isinstance(o, Failed)]

    def lines(self) -> list[str]:
        """Printable outcome lines; task errors are reported separately and left out."""
        return [
            f"{o.url} -> {o.describe()}"
            for o in self.outcomes
            if not (isinstance(o, Failed) and o.failure == "task")
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [o.to_dict() for o in self.outcomes],
            "task_errors": [e.to_dict() for e in self.task_errors],
        }


__all__ = [
    "BatchResult",
    "Failed",
    "NotReflected",
    "OutcomeKind",
    "Reflected",
    "ScanOutcome",
    "TaskError",
]
