"""Core Pydantic data models for Passmark."""

from datetime import datetime
from types import MappingProxyType
from typing import Annotated, Any, Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .types import (
    REVIEW_WARNING_TYPES,
    ConfidenceLevel,
    RunStatus,
    Status,
    WarningSeverity,
    WarningType,
)

DEFAULT_GRADE_MAPPING: Mapping[str, Status] = MappingProxyType(
    {
        "A": Status.PASS,
        "B": Status.PASS,
        "C": Status.PASS,
        "D": Status.PASS,
        "F": Status.FAIL,
        "A+": Status.PASS,
        "A-": Status.PASS,
        "B+": Status.PASS,
        "B-": Status.PASS,
        "C+": Status.PASS,
        "C-": Status.PASS,
        "D+": Status.PASS,
        "D-": Status.PASS,
    }
)

# Read-only once validated; dumps back to a plain dict
GradeMapping = Annotated[
    Mapping[str, Status],
    AfterValidator(lambda value: MappingProxyType(dict(value))),
    PlainSerializer(lambda value: dict(value)),
]


class AssessmentWarning(BaseModel):
    """Single piece of evidence attached to a row's classification."""

    model_config = ConfigDict(frozen=True)

    type: WarningType = Field(..., description="Warning category")
    message: str = Field(..., description="Human-readable explanation")
    severity: WarningSeverity = Field(..., description="ERROR, WARNING or INFO")
    suggestion: Optional[str] = Field(
        default=None, description="How the operator can fix the source data"
    )


class ProcessingConfig(BaseModel):
    """Caller policy for a classification run.

    Accepts both snake_case and camelCase field names.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    allow_grade_conversion: bool = Field(
        default=True, description="Apply grade_mapping to unrecognized values"
    )
    default_to_pass_on_missing: bool = Field(
        default=True,
        description="Default target is PASS (True) or PENDING (False)",
    )
    strict_column_matching: bool = Field(
        default=False, description="Disable fuzzy column-name matching"
    )
    grade_mapping: Optional[GradeMapping] = Field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_GRADE_MAPPING)),
        description="Grade code to status, looked up upper-cased",
    )
    custom_field_mappings: Optional[Tuple[str, ...]] = Field(
        default=None, description="Column names checked before the catalog"
    )

    @field_validator("grade_mapping", mode="before")
    @classmethod
    def _upper_grade_keys(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        upper: Dict[Any, Any] = {}
        for key, status in value.items():
            grade = str(key).strip().upper()
            if grade in upper:
                raise ValueError(f'grade "{grade}" is mapped more than once')
            upper[grade] = status
        return upper

    @field_validator("custom_field_mappings")
    @classmethod
    def _non_blank_field_names(
        cls, value: Optional[Tuple[str, ...]]
    ) -> Optional[Tuple[str, ...]]:
        if value is not None and any(not name.strip() for name in value):
            raise ValueError("custom field mappings must be non-empty strings")
        return value

    @classmethod
    def field_name_for(cls, key: str) -> Optional[str]:
        """Resolve a snake_case or camelCase key to the model field name."""
        for name, info in cls.model_fields.items():
            if key in (name, info.alias, to_camel(name)):
                return name
        return None

    def with_overrides(self, overrides: Optional[Mapping[str, Any]] = None) -> "ProcessingConfig":
        """Return a new config with ``overrides`` merged over this one.

        Raises:
            ConfigurationError: If the merged config is invalid
        """
        from passmark.engines.validator import build_config

        return build_config(overrides or {}, base=self)


DEFAULT_CONFIG = ProcessingConfig()


class ProcessingResult(BaseModel):
    """Classification outcome for one row."""

    model_config = ConfigDict(frozen=True)

    status: Status = Field(..., description="Final assessment status")
    original_value: Optional[str] = Field(
        default=None, description="Normalized source value, None when empty"
    )
    detected_field_name: Optional[str] = Field(
        default=None, description="Column the status was read from"
    )
    confidence: ConfidenceLevel = Field(..., description="Trust in the status")
    warnings: List[AssessmentWarning] = Field(
        default_factory=list, description="Evidence for every inference made"
    )
    was_grade_conversion: bool = Field(
        default=False, description="Status came from a grade letter or mapping"
    )
    was_defaulted: bool = Field(
        default=False, description="Status assigned without a clear signal"
    )

    @property
    def warning_types(self) -> List[WarningType]:
        return [w.type for w in self.warnings]

    @property
    def needs_review(self) -> bool:
        """Whether an operator should look at this row before committing it."""
        return self.was_defaulted or any(
            w.type in REVIEW_WARNING_TYPES for w in self.warnings
        )


class BatchSummary(BaseModel):
    """Aggregate statistics over a list of results."""

    model_config = ConfigDict(frozen=True)

    total_rows: int = Field(default=0, description="Rows processed")
    pass_count: int = Field(default=0, description="Rows classified PASS")
    fail_count: int = Field(default=0, description="Rows classified FAIL")
    pending_count: int = Field(default=0, description="Rows classified PENDING")
    warning_count: int = Field(
        default=0, description="Rows carrying at least one warning"
    )
    grade_conversions: int = Field(default=0, description="Rows via grade conversion")
    defaulted_count: int = Field(default=0, description="Rows with defaulted status")
    review_count: int = Field(default=0, description="Rows needing operator review")
    field_detection_rate: float = Field(
        default=0.0, description="Percent of rows where a status column was found"
    )

    @classmethod
    def from_results(cls, results: Sequence[ProcessingResult]) -> "BatchSummary":
        """Recompute the summary from per-row results."""
        total = len(results)
        detected = sum(1 for r in results if r.detected_field_name is not None)
        return cls(
            total_rows=total,
            pass_count=sum(1 for r in results if r.status == Status.PASS),
            fail_count=sum(1 for r in results if r.status == Status.FAIL),
            pending_count=sum(1 for r in results if r.status == Status.PENDING),
            warning_count=sum(1 for r in results if r.warnings),
            grade_conversions=sum(1 for r in results if r.was_grade_conversion),
            defaulted_count=sum(1 for r in results if r.was_defaulted),
            review_count=sum(1 for r in results if r.needs_review),
            field_detection_rate=(detected / total * 100) if total else 0.0,
        )


class BatchResult(BaseModel):
    """Per-row results plus their summary."""

    model_config = ConfigDict(frozen=True)

    results: List[ProcessingResult] = Field(default_factory=list)
    summary: BatchSummary = Field(default_factory=BatchSummary)


class ValidationResult(BaseModel):
    """Outcome of validating a processing config."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool = Field(..., description="True when no errors were found")
    errors: List[str] = Field(default_factory=list, description="Error messages")


class BatchRun(BaseModel):
    """Metadata for a timed batch run."""

    model_config = ConfigDict(frozen=False)

    run_id: str = Field(..., description="Unique run identifier")
    status: RunStatus = Field(default=RunStatus.COMPLETED, description="Run outcome")
    started_at: Optional[datetime] = Field(default=None, description="Start timestamp")
    completed_at: Optional[datetime] = Field(
        default=None, description="Completion timestamp"
    )
    elapsed_seconds: float = Field(default=0.0, description="Batch duration (s)")
    result: BatchResult = Field(default_factory=BatchResult, description="Batch output")
