"""Core infrastructure for Passmark."""

from .config import GlobalConfig, configure_logging, get_config, reload_config
from .exceptions import ConfigurationError, PassmarkError, ValidationError
from .models import (
    DEFAULT_CONFIG,
    DEFAULT_GRADE_MAPPING,
    AssessmentWarning,
    BatchResult,
    BatchRun,
    BatchSummary,
    ProcessingConfig,
    ProcessingResult,
    ValidationResult,
)
from .types import (
    REVIEW_WARNING_TYPES,
    ConfidenceLevel,
    RunStatus,
    Status,
    WarningSeverity,
    WarningType,
)

__all__ = [
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
    # Config
    "GlobalConfig",
    "get_config",
    "reload_config",
    "configure_logging",
]
