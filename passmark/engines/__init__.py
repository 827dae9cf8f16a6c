"""Classification engines."""

from .batch import (
    aggregate,
    process_batch,
    process_batch_async,
    rows_needing_review,
    summarize,
)
from .classifier import (
    DEFAULT_RULES,
    Classification,
    ClassificationRule,
    StatusClassifier,
    classify_value,
)
from .detector import FIELD_NAME_CATALOG, FieldDetector, detect_assessment_field
from .normalizer import normalize_value
from .processor import (
    AssessmentProcessor,
    create_processor,
    determine_assessment_status,
    process_row,
)
from .validator import build_config, validate_config

__all__ = [
    "FieldDetector",
    "FIELD_NAME_CATALOG",
    "detect_assessment_field",
    "normalize_value",
    "StatusClassifier",
    "ClassificationRule",
    "Classification",
    "DEFAULT_RULES",
    "classify_value",
    "AssessmentProcessor",
    "create_processor",
    "process_row",
    "determine_assessment_status",
    "process_batch",
    "process_batch_async",
    "aggregate",
    "summarize",
    "rows_needing_review",
    "validate_config",
    "build_config",
]
