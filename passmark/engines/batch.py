"""Batch aggregation over per-row results."""

import asyncio
import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

from passmark.core.models import (
    DEFAULT_CONFIG,
    BatchResult,
    BatchSummary,
    ProcessingConfig,
    ProcessingResult,
)

from .processor import process_row

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]


def summarize(results: Sequence[ProcessingResult]) -> BatchSummary:
    """Recompute batch statistics from results."""
    return BatchSummary.from_results(results)


def aggregate(results: Sequence[ProcessingResult]) -> BatchResult:
    """Pair results with their summary and log the outcome."""
    summary = summarize(results)
    logger.info(
        f"Batch classified: {summary.total_rows} rows, {summary.pass_count} pass, "
        f"{summary.fail_count} fail, {summary.pending_count} pending, "
        f"field detection {summary.field_detection_rate:.1f}%"
    )
    if summary.defaulted_count:
        logger.warning(
            f"{summary.defaulted_count} of {summary.total_rows} rows were assigned "
            f"a default status and need review"
        )
    return BatchResult(results=list(results), summary=summary)


def process_batch(
    rows: Iterable[Row], config: ProcessingConfig = DEFAULT_CONFIG
) -> BatchResult:
    """Classify each row independently, in input order.

    Args:
        rows: Rows to classify
        config: Processing configuration shared by every row

    Returns:
        BatchResult with per-row results and summary
    """
    return aggregate([process_row(row, config) for row in rows])


def rows_needing_review(
    results: Sequence[ProcessingResult],
) -> List[Tuple[int, ProcessingResult]]:
    """Index and result of every row an operator should review."""
    return [(index, result) for index, result in enumerate(results) if result.needs_review]


async def process_rows_concurrently(
    classify: Callable[[Row], ProcessingResult],
    rows: Sequence[Row],
    max_concurrency: Optional[int] = None,
) -> BatchResult:
    """Run ``classify`` over rows in worker threads.

    Args:
        classify: Row classifier, e.g. AssessmentProcessor.process_row
        rows: Rows to classify
        max_concurrency: Concurrent rows (runtime setting if None)

    Returns:
        BatchResult in input order

    Raises:
        ValueError: If max_concurrency is less than 1
    """
    if max_concurrency is None:
        from passmark.core.config import get_config

        max_concurrency = get_config().max_concurrent_rows
    if max_concurrency < 1:
        raise ValueError(f"max_concurrency must be at least 1, got {max_concurrency}")

    semaphore = asyncio.Semaphore(max_concurrency)
    logger.debug(f"Using concurrency limit: {max_concurrency}")

    async def classify_with_semaphore(row: Row) -> ProcessingResult:
        async with semaphore:
            return await asyncio.to_thread(classify, row)

    results = await asyncio.gather(*(classify_with_semaphore(row) for row in rows))
    return aggregate(results)


async def process_batch_async(
    rows: Iterable[Row],
    config: ProcessingConfig = DEFAULT_CONFIG,
    max_concurrency: Optional[int] = None,
) -> BatchResult:
    """Concurrent counterpart of process_batch with identical results."""
    return await process_rows_concurrently(
        lambda row: process_row(row, config), list(rows), max_concurrency
    )
