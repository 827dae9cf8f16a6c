"""Passmark - assessment status classification for imported tabular data."""

from .core import (
    DEFAULT_CONFIG,
    DEFAULT_GRADE_MAPPING,
    REVIEW_WARNING_TYPES,
    AssessmentWarning,
    BatchResult,
    BatchRun,
    BatchSummary,
    ConfidenceLevel,
    # Exceptions
    ConfigurationError,
    # Config
    GlobalConfig,
    PassmarkError,
    # Models
    ProcessingConfig,
    ProcessingResult,
    RunStatus,
    # Types
    Status,
    ValidationError,
    ValidationResult,
    WarningSeverity,
    WarningType,
    configure_logging,
    get_config,
    reload_config,
)
from .engines import (
    FIELD_NAME_CATALOG,
    AssessmentProcessor,
    FieldDetector,
    StatusClassifier,
    build_config,
    classify_value,
    create_processor,
    detect_assessment_field,
    determine_assessment_status,
    normalize_value,
    process_batch,
    process_batch_async,
    process_row,
    rows_needing_review,
    summarize,
    validate_config,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Types
    "Status",
    "ConfidenceLevel",
    "WarningType",
    "WarningSeverity",
    "RunStatus",
    "REVIEW_WARNING_TYPES",
    # Exceptions
    "PassmarkError",
    "ConfigurationError",
    "ValidationError",
    # Models
    "AssessmentWarning",
    "ProcessingConfig",
    "ProcessingResult",
    "BatchSummary",
    "BatchResult",
    "BatchRun",
    "ValidationResult",
    "DEFAULT_CONFIG",
    "DEFAULT_GRADE_MAPPING",
    # Engines
    "FieldDetector",
    "FIELD_NAME_CATALOG",
    "StatusClassifier",
    "AssessmentProcessor",
    "detect_assessment_field",
    "normalize_value",
    "classify_value",
    "process_row",
    "process_batch",
    "process_batch_async",
    "summarize",
    "rows_needing_review",
    "determine_assessment_status",
    "validate_config",
    "build_config",
    "create_processor",
    # Config
    "GlobalConfig",
    "get_config",
    "reload_config",
    "configure_logging",
]
