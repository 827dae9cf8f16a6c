"""Status classifier mapping normalized values to canonical statuses."""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from passmark.core.models import DEFAULT_CONFIG, AssessmentWarning, ProcessingConfig
from passmark.core.types import ConfidenceLevel, Status, WarningSeverity, WarningType

logger = logging.getLogger(__name__)


def _words(*words: str) -> tuple[re.Pattern[str], ...]:
    """Anchored, case-insensitive full-string patterns."""
    return tuple(re.compile(rf"^{word}$", re.IGNORECASE) for word in words)


@dataclass(frozen=True)
class ClassificationRule:
    """One entry of the ordered explicit-pattern table."""

    name: str
    patterns: tuple[re.Pattern[str], ...]
    status: Status
    confidence: ConfidenceLevel = ConfidenceLevel.HIGH
    grade_conversion: bool = False

    def matches(self, value: str) -> bool:
        return any(pattern.match(value) for pattern in self.patterns)


@dataclass(frozen=True)
class Classification:
    """Result of classifying one normalized value."""

    status: Status
    confidence: ConfidenceLevel
    warnings: List[AssessmentWarning] = field(default_factory=list)
    was_grade_conversion: bool = False


FAIL_RULE = ClassificationRule(
    name="fail",
    patterns=_words(
        "FAIL",
        "FAILED",
        "F",
        "INCOMPLETE",
        "UNSUCCESSFUL",
        "NO",
        "N",
        "REJECT",
        "REJECTED",
        "NOT PASS",
        "NOT_PASS",
        "NOTPASS",
        "UNSATISFACTORY",
        "INCOMPETENT",
        "NEEDS IMPROVEMENT",
        "NEEDS_IMPROVEMENT",
    )
    + (re.compile(r"^([0-7][0-9]?)%?$"),),
    status=Status.FAIL,
)

PENDING_RULE = ClassificationRule(
    name="pending",
    patterns=_words(
        "PENDING",
        "NOT ASSESSED",
        "NOT_ASSESSED",
        "NOTASSESSED",
        "IN PROGRESS",
        "IN_PROGRESS",
        "INPROGRESS",
        "AWAITING",
        "TBD",
        "TO BE DETERMINED",
        "SCHEDULED",
        "UPCOMING",
    ),
    status=Status.PENDING,
)

LETTER_GRADE_RULE = ClassificationRule(
    name="letter_grade",
    patterns=_words(r"[A-D][+-]?"),
    status=Status.PASS,
    grade_conversion=True,
)

PASS_RULE = ClassificationRule(
    name="pass",
    patterns=_words(
        "PASS",
        "PASSED",
        "P",
        "COMPLETE",
        "COMPLETED",
        "SUCCESS",
        "SUCCESSFUL",
        "YES",
        "Y",
        "OK",
        "GOOD",
        "ACCEPT",
        "ACCEPTED",
        "SATISFACTORY",
        "COMPETENT",
        "PROFICIENT",
    )
    + (re.compile(r"^(8[0-9]|9[0-9]|100)%?$"),),
    status=Status.PASS,
)

# FAIL first: a fail signal must never be outranked
DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    FAIL_RULE,
    PENDING_RULE,
    LETTER_GRADE_RULE,
    PASS_RULE,
)


def _default_status(config: ProcessingConfig) -> Status:
    return Status.PASS if config.default_to_pass_on_missing else Status.PENDING


def _grade_conversion_warning(value: str, status: Status) -> AssessmentWarning:
    return AssessmentWarning(
        type=WarningType.GRADE_CONVERSION,
        message=f'Grade "{value}" converted to {status.value}',
        severity=WarningSeverity.INFO,
        suggestion="Consider recording explicit Pass/Fail values",
    )


class StatusClassifier:
    """Classify normalized values against an ordered rule table."""

    def __init__(self, rules: Sequence[ClassificationRule] = DEFAULT_RULES):
        """Initialize status classifier.

        Args:
            rules: Explicit pattern rules, evaluated in order
        """
        self.rules = tuple(rules)

    def match_rule(self, value: str) -> Optional[ClassificationRule]:
        """Return the first rule matching ``value``, if any."""
        for rule in self.rules:
            if rule.matches(value):
                return rule
        return None

    def classify(
        self, value: str, config: ProcessingConfig = DEFAULT_CONFIG
    ) -> Classification:
        """Classify a normalized value.

        Args:
            value: Output of normalize_value
            config: Processing configuration

        Returns:
            Classification with status, confidence and warnings
        """
        if not value:
            return Classification(
                status=_default_status(config),
                confidence=ConfidenceLevel.NONE,
                warnings=[
                    AssessmentWarning(
                        type=WarningType.EMPTY_VALUE,
                        message="Assessment field is empty",
                        severity=WarningSeverity.WARNING,
                        suggestion="Provide an explicit Pass/Fail status",
                    )
                ],
            )

        rule = self.match_rule(value)
        if rule is not None:
            logger.debug(f'Value "{value}" matched rule {rule.name}')
            warnings = []
            if rule.grade_conversion:
                warnings.append(_grade_conversion_warning(value, rule.status))
            return Classification(
                status=rule.status,
                confidence=rule.confidence,
                warnings=warnings,
                was_grade_conversion=rule.grade_conversion,
            )

        if config.allow_grade_conversion and config.grade_mapping:
            mapped = config.grade_mapping.get(value.upper())
            if mapped is not None:
                logger.debug(f'Value "{value}" mapped to {mapped.value} by grade mapping')
                return Classification(
                    status=mapped,
                    confidence=ConfidenceLevel.MEDIUM,
                    warnings=[_grade_conversion_warning(value, mapped)],
                    was_grade_conversion=True,
                )

        status = _default_status(config)
        warnings = [
            AssessmentWarning(
                type=WarningType.UNEXPECTED_VALUE,
                message=f'Unrecognized assessment value: "{value}"',
                severity=WarningSeverity.WARNING,
                suggestion="Use standard Pass/Fail values or supported grades",
            )
        ]
        if status == Status.PASS:
            warnings.append(
                AssessmentWarning(
                    type=WarningType.DEFAULTED_TO_PASS,
                    message=f'Unrecognized value "{value}" defaulted to PASS',
                    severity=WarningSeverity.WARNING,
                    suggestion="Review and correct the assessment value",
                )
            )
        logger.debug(f'Value "{value}" unrecognized, defaulted to {status.value}')
        return Classification(
            status=status, confidence=ConfidenceLevel.LOW, warnings=warnings
        )


_default_classifier = StatusClassifier()


def classify_value(value: str, config: ProcessingConfig = DEFAULT_CONFIG) -> Classification:
    """Classify a normalized value with the built-in rule table."""
    return _default_classifier.classify(value, config)
