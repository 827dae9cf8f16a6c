"""Core type definitions and enums for Passmark."""

from enum import Enum


class Status(str, Enum):
    """Canonical assessment outcome."""

    PASS = "PASS"
    FAIL = "FAIL"
    PENDING = "PENDING"


class ConfidenceLevel(str, Enum):
    """How directly a raw value mapped to a Status.

    Ordered HIGH > MEDIUM > LOW > NONE.
    """

    HIGH = "HIGH"  # Explicit pattern match
    MEDIUM = "MEDIUM"  # Caller grade mapping applied
    LOW = "LOW"  # Unrecognized value, defaulted
    NONE = "NONE"  # No field or no value

    @property
    def rank(self) -> int:
        return _CONFIDENCE_RANK[self]

    def __lt__(self, other):
        if isinstance(other, ConfidenceLevel):
            return self.rank < other.rank
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, ConfidenceLevel):
            return self.rank <= other.rank
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, ConfidenceLevel):
            return self.rank > other.rank
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, ConfidenceLevel):
            return self.rank >= other.rank
        return NotImplemented


_CONFIDENCE_RANK = {
    ConfidenceLevel.NONE: 0,
    ConfidenceLevel.LOW: 1,
    ConfidenceLevel.MEDIUM: 2,
    ConfidenceLevel.HIGH: 3,
}


class WarningType(str, Enum):
    """Reasons a row's classification needs caller attention."""

    MISSING_COLUMN = "MISSING_COLUMN"
    AMBIGUOUS_VALUE = "AMBIGUOUS_VALUE"  # Reserved, not emitted
    GRADE_CONVERSION = "GRADE_CONVERSION"
    UNEXPECTED_VALUE = "UNEXPECTED_VALUE"
    COLUMN_NAME_MISMATCH = "COLUMN_NAME_MISMATCH"  # Reserved, not emitted
    EMPTY_VALUE = "EMPTY_VALUE"
    DEFAULTED_TO_PASS = "DEFAULTED_TO_PASS"


class WarningSeverity(str, Enum):
    """Severity attached to a single warning."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class RunStatus(str, Enum):
    """Outcome of a batch run."""

    COMPLETED = "completed"
    NEEDS_REVIEW = "needs_review"  # Some rows were defaulted or unrecognized


# Warning types that mark a row for operator review
REVIEW_WARNING_TYPES = frozenset(
    {
        WarningType.DEFAULTED_TO_PASS,
        WarningType.UNEXPECTED_VALUE,
        WarningType.MISSING_COLUMN,
    }
)
