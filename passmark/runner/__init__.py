"""Batch runner."""

from .batch_runner import BatchRunner, render_results_table

__all__ = ["BatchRunner", "render_results_table"]
