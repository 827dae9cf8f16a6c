"""Field detector for locating the assessment column in a row."""

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence

from passmark.core.models import DEFAULT_CONFIG, ProcessingConfig

logger = logging.getLogger(__name__)

# Known column-name spellings, strongest signal first
FIELD_NAME_CATALOG: tuple[str, ...] = (
    # Explicit pass/fail columns
    "Pass/Fail",
    "PASS/FAIL",
    "Pass_Fail",
    "PASS_FAIL",
    # Assessment
    "Assessment",
    "ASSESSMENT",
    "assessment",
    "Assessment Status",
    "ASSESSMENT_STATUS",
    "assessment_status",
    "Assessment_Status",
    # Grade
    "Grade",
    "GRADE",
    "grade",
    "Final Grade",
    "FINAL_GRADE",
    "final_grade",
    "Letter Grade",
    "LETTER_GRADE",
    "letter_grade",
    # Result
    "Result",
    "RESULT",
    "result",
    "Test Result",
    "TEST_RESULT",
    "test_result",
    "Exam Result",
    "EXAM_RESULT",
    "exam_result",
    # Status
    "Status",
    "STATUS",
    "status",
    "Pass Status",
    "PASS_STATUS",
    "pass_status",
    "Completion Status",
    "COMPLETION_STATUS",
    "completion_status",
    # Score
    "Score",
    "SCORE",
    "score",
    "Final Score",
    "FINAL_SCORE",
    "final_score",
    # Generic, lowest priority
    "P/F",
    "P_F",
    "PF",
)


class FieldDetector:
    """Locate the key in a row that holds the assessment outcome."""

    def __init__(self, catalog: Sequence[str] = FIELD_NAME_CATALOG):
        """Initialize field detector.

        Args:
            catalog: Column names in priority order
        """
        self.catalog = tuple(catalog)

    def detect(
        self, row: Mapping[str, Any], config: ProcessingConfig = DEFAULT_CONFIG
    ) -> Optional[str]:
        """Return the name of the assessment column, or None.

        Custom field mappings are tried first, then an exact pass over the
        catalog, then (unless strict matching is on) a fuzzy pass.
        """
        keys = list(row.keys())

        if config.custom_field_mappings:
            field = self.match_custom(keys, config.custom_field_mappings)
            if field is not None:
                logger.debug(f"Assessment field '{field}' matched custom mapping")
                return field

        field = self.match_exact(keys)
        if field is not None:
            logger.debug(f"Assessment field '{field}' matched catalog exactly")
            return field

        if not config.strict_column_matching:
            field = self.match_fuzzy(keys)
            if field is not None:
                logger.debug(f"Assessment field '{field}' matched catalog fuzzily")
                return field

        logger.debug(f"No assessment field among columns {keys}")
        return None

    @staticmethod
    def match_custom(keys: Iterable[Any], custom_names: Sequence[str]) -> Optional[str]:
        """First caller-supplied name present as a key, in caller order."""
        available = set(keys)
        for name in custom_names:
            if name in available:
                return name
        return None

    def match_exact(self, keys: Iterable[Any]) -> Optional[str]:
        """First catalog entry present verbatim as a key."""
        available = set(keys)
        for pattern in self.catalog:
            if pattern in available:
                return pattern
        return None

    def match_fuzzy(self, keys: Sequence[Any]) -> Optional[str]:
        """Case-insensitive equality or containment in either direction.

        Candidates are ranked by catalog order, not by match quality, so
        an assessment-like header beats a generic one such as "Score".
        """
        candidates = [
            (key, key.lower())
            for key in keys
            if isinstance(key, str) and key.strip()
        ]
        for pattern in self.catalog:
            needle = pattern.lower()
            for key, folded in candidates:
                if folded == needle or needle in folded or folded in needle:
                    return key
        return None


_default_detector = FieldDetector()


def detect_assessment_field(
    row: Mapping[str, Any], config: ProcessingConfig = DEFAULT_CONFIG
) -> Optional[str]:
    """Detect the assessment column using the built-in catalog."""
    return _default_detector.detect(row, config)
