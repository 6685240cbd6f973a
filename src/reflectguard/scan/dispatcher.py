# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Bounded-concurrency batch dispatcher."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from ..config import DEFAULT_CONCURRENCY
from ..errors import ScanError
from ..models import BatchResult, Failed, ScanOutcome, TaskError
from .pipeline import ReflectionPipeline

logger = logging.getLogger(__name__)


class ScanDispatcher:
    """
    Runs the pipeline for every URL with at most ``concurrency`` runs in flight.

    URLs are admitted in input order; completion order is arbitrary. Each future
    is keyed by its input index at submission time, so the batch always returns
    exactly one outcome per URL, in input order.
    """

    def __init__(self, pipeline: ReflectionPipeline, *, concurrency: int = DEFAULT_CONCURRENCY):
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        self.pipeline = pipeline
        self.concurrency = concurrency

    def run(self, urls: Iterable[str]) -> BatchResult:
        targets = list(urls)
        if not targets:
            return BatchResult()

        logger.info("Dispatching %d URLs with concurrency %d", len(targets), self.concurrency)
        outcomes: list[ScanOutcome | None] = [None] * len(targets)
        task_errors: list[TaskError] = []

        with ThreadPoolExecutor(max_workers=self.concurrency, thread_name_prefix="reflectguard") as pool:
            futures: dict[Future, int] = {
                pool.submit(self.pipeline.run, url, index=index): index for index, url in enumerate(targets)
            }
            for future in as_completed(futures):
                index = futures[future]
                outcome, task_error = self._collect(future, index, targets[index])
                outcomes[index] = outcome
                if task_error is not None:
                    task_errors.append(task_error)

        logger.info("Batch finished: %d outcomes, %d task errors", len(outcomes), len(task_errors))
        return BatchResult(outcomes=[o for o in outcomes if o is not None], task_errors=task_errors)

    @staticmethod
    def _collect(future: Future, index: int, url: str) -> tuple[ScanOutcome, TaskError | None]:
        try:
            return future.result(), None
        except ScanError as exc:
            logger.debug("Scan of %s failed: %s: %s", url, exc.kind, exc.message)
            return (
                Failed(url=url, failure=exc.kind, message=exc.message, category=exc.category.value, index=index),
                None,
            )
        except Exception as exc:  # noqa: BLE001
            logger.exception("Pipeline run for %s crashed: %s", url, exc)
            message = str(exc) or type(exc).__name__
            task_error = TaskError(index=index, url=url, error_type=type(exc).__name__, message=message)
            return Failed(url=url, failure="task", message=message, index=index), task_error


__all__ = ["ScanDispatcher"]
