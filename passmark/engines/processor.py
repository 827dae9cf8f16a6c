"""Row-level assessment processing."""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from passmark.core.models import (
    DEFAULT_CONFIG,
    AssessmentWarning,
    BatchResult,
    ProcessingConfig,
    ProcessingResult,
)
from passmark.core.types import ConfidenceLevel, Status, WarningSeverity, WarningType

from .classifier import StatusClassifier
from .detector import FieldDetector
from .normalizer import normalize_value
from .validator import build_config

logger = logging.getLogger(__name__)

_DEFAULTED_CONFIDENCE = (ConfidenceLevel.NONE, ConfidenceLevel.LOW)

_default_detector = FieldDetector()
_default_classifier = StatusClassifier()


def process_row(
    row: Mapping[str, Any],
    config: ProcessingConfig = DEFAULT_CONFIG,
    detector: Optional[FieldDetector] = None,
    classifier: Optional[StatusClassifier] = None,
) -> ProcessingResult:
    """Classify a single row.

    Args:
        row: Mapping of column name to raw value; never modified
        config: Processing configuration
        detector: Field detector (built-in catalog if None)
        classifier: Status classifier (built-in rules if None)

    Returns:
        ProcessingResult with status, confidence and warnings
    """
    detector = detector or _default_detector
    classifier = classifier or _default_classifier
    default_to_pass = config.default_to_pass_on_missing

    field_name = detector.detect(row, config)

    if field_name is None:
        warnings = [
            AssessmentWarning(
                type=WarningType.MISSING_COLUMN,
                message="No assessment status column found in data",
                severity=WarningSeverity.WARNING,
                suggestion="Add a Pass/Fail, Grade, or Assessment column",
            )
        ]
        if default_to_pass:
            warnings.append(
                AssessmentWarning(
                    type=WarningType.DEFAULTED_TO_PASS,
                    message="Defaulted to PASS because assessment data is missing",
                    severity=WarningSeverity.WARNING,
                    suggestion="Provide an explicit assessment status",
                )
            )
        return ProcessingResult(
            status=Status.PASS if default_to_pass else Status.PENDING,
            original_value=None,
            detected_field_name=None,
            confidence=ConfidenceLevel.NONE,
            warnings=warnings,
            was_grade_conversion=False,
            was_defaulted=True,
        )

    value = normalize_value(row[field_name])
    classification = classifier.classify(value, config)

    return ProcessingResult(
        status=classification.status,
        original_value=value or None,
        detected_field_name=field_name,
        confidence=classification.confidence,
        warnings=list(classification.warnings),
        was_grade_conversion=classification.was_grade_conversion,
        was_defaulted=classification.confidence in _DEFAULTED_CONFIDENCE,
    )


def determine_assessment_status(row: Mapping[str, Any]) -> Status:
    """Status alone, under the default configuration."""
    return process_row(row).status


class AssessmentProcessor:
    """Classify rows under one validated configuration."""

    def __init__(
        self,
        config: Optional[Union[ProcessingConfig, Mapping[str, Any]]] = None,
        detector: Optional[FieldDetector] = None,
        classifier: Optional[StatusClassifier] = None,
    ):
        """Initialize assessment processor.

        Args:
            config: ProcessingConfig, or a partial override of the defaults
            detector: Field detector (built-in catalog if None)
            classifier: Status classifier (built-in rules if None)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = build_config(config)
        self.detector = detector or _default_detector
        self.classifier = classifier or _default_classifier
        logger.info(
            f"Assessment processor initialized: "
            f"default_to_pass={self.config.default_to_pass_on_missing}, "
            f"strict_columns={self.config.strict_column_matching}, "
            f"grade_conversion={self.config.allow_grade_conversion}"
        )

    def __call__(self, row: Mapping[str, Any]) -> ProcessingResult:
        return self.process_row(row)

    def process_row(self, row: Mapping[str, Any]) -> ProcessingResult:
        """Classify a single row under this processor's config."""
        return process_row(row, self.config, self.detector, self.classifier)

    def process_batch(self, rows: Iterable[Mapping[str, Any]]) -> BatchResult:
        """Classify rows in order and summarize them."""
        from .batch import aggregate

        return aggregate([self.process_row(row) for row in rows])

    async def process_batch_async(
        self, rows: Iterable[Mapping[str, Any]], max_concurrency: Optional[int] = None
    ) -> BatchResult:
        """Classify rows concurrently; result order matches input order."""
        from .batch import process_rows_concurrently

        return await process_rows_concurrently(
            self.process_row, list(rows), max_concurrency
        )


def create_processor(
    config: Optional[Union[ProcessingConfig, Mapping[str, Any]]] = None,
) -> AssessmentProcessor:
    """Build a processor, rejecting an invalid config before any row is seen.

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    return AssessmentProcessor(config)
