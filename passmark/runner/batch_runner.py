"""Batch runner for timed classification runs with a console report."""

import time
import uuid
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence, Union

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from passmark.core.models import BatchRun, ProcessingConfig, ProcessingResult
from passmark.core.types import RunStatus
from passmark.engines import AssessmentProcessor, aggregate, rows_needing_review


class BatchRunner:
    """Classify a batch of caller-supplied rows and report on it."""

    def __init__(
        self,
        config: Optional[Union[ProcessingConfig, Mapping[str, Any]]] = None,
        console: Optional[Console] = None,
    ):
        """Initialize batch runner.

        Args:
            config: Processing config or partial override of the defaults

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.processor = AssessmentProcessor(config)
        self.console = console or Console()

    @property
    def config(self) -> ProcessingConfig:
        return self.processor.config

    def run(self, rows: Sequence[Mapping[str, Any]], show_report: bool = True) -> BatchRun:
        """Classify every row and return run metadata.

        Returns:
            BatchRun; status is NEEDS_REVIEW when any row needs review
        """
        run = BatchRun(run_id=str(uuid.uuid4()), started_at=datetime.now())

        start = time.time()
        results = []
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
            disable=not show_report,
        ) as progress:
            task = progress.add_task(
                f"[cyan]Classifying {len(rows)} rows...", total=len(rows)
            )
            for row in rows:
                results.append(self.processor.process_row(row))
                progress.advance(task)

        run.result = aggregate(results)
        run.elapsed_seconds = time.time() - start
        run.completed_at = datetime.now()
        run.status = (
            RunStatus.NEEDS_REVIEW if run.result.summary.review_count else RunStatus.COMPLETED
        )

        if show_report:
            self._print_summary(run)
        return run

    def _print_summary(self, run: BatchRun) -> None:
        """Print run summary and the rows needing review."""
        summary = run.result.summary
        self.console.print("\n[bold]Assessment Classification Summary[/bold]")
        self.console.print(f"Run ID: {run.run_id}")
        self.console.print(f"Status: {run.status.value}")
        self.console.print("\n[bold]Counts:[/bold]")
        self.console.print(f"  Total Rows: {summary.total_rows}")
        self.console.print(f"  Pass: {summary.pass_count}")
        self.console.print(f"  Fail: {summary.fail_count}")
        self.console.print(f"  Pending: {summary.pending_count}")
        self.console.print(f"  With Warnings: {summary.warning_count}")
        self.console.print(f"  Grade Conversions: {summary.grade_conversions}")
        self.console.print(f"  Defaulted: {summary.defaulted_count}")
        self.console.print(f"  Field Detection: {summary.field_detection_rate:.1f}%")
        self.console.print(f"  Elapsed: {run.elapsed_seconds:.2f}s")

        flagged = rows_needing_review(run.result.results)
        if flagged:
            self.console.print(render_results_table(flagged, title="Rows needing review"))


def render_results_table(
    indexed_results: Sequence[tuple[int, ProcessingResult]], title: Optional[str] = None
) -> Table:
    """Rich table of (row index, result) pairs."""
    table = Table(title=title)
    table.add_column("Row", justify="right")
    table.add_column("Field")
    table.add_column("Value")
    table.add_column("Status")
    table.add_column("Confidence")
    table.add_column("Warnings")
    for index, result in indexed_results:
        table.add_row(
            str(index),
            result.detected_field_name or "-",
            result.original_value or "-",
            result.status.value,
            result.confidence.value,
            ", ".join(t.value for t in result.warning_types) or "-",
        )
    return table
