"""Unit tests for FieldDetector."""

import pytest

from passmark.core.models import DEFAULT_CONFIG, ProcessingConfig
from passmark.engines.detector import (
    FIELD_NAME_CATALOG,
    FieldDetector,
    detect_assessment_field,
)


@pytest.fixture
def detector():
    return FieldDetector()


@pytest.fixture
def strict_config():
    return ProcessingConfig(strict_column_matching=True)


class TestCatalog:
    """Test the built-in column-name catalog."""

    def test_priority_order(self):
        """Pass/Fail outranks Grade, which outranks Score and P/F."""
        index = FIELD_NAME_CATALOG.index

        assert FIELD_NAME_CATALOG[0] == "Pass/Fail"
        assert index("Assessment") < index("Grade") < index("Result")
        assert index("Result") < index("Status") < index("Score")
        assert index("Score") < index("P/F")
        assert FIELD_NAME_CATALOG[-1] == "PF"

    def test_no_duplicates(self):
        """Every spelling appears once."""
        assert len(set(FIELD_NAME_CATALOG)) == len(FIELD_NAME_CATALOG)


class TestExactMatching:
    """Test exact catalog pass."""

    def test_single_known_column(self, detector):
        """A known column is found."""
        assert detector.detect({"Name": "Ada", "Grade": "B+"}) == "Grade"

    def test_catalog_order_beats_row_order(self, detector):
        """The higher-priority column wins regardless of row order."""
        row = {"Score": "90", "Status": "Active", "Pass/Fail": "P"}

        assert detector.detect(row) == "Pass/Fail"

    def test_upper_snake_spelling(self, detector):
        """Snake-case spellings in the catalog match exactly."""
        assert detector.detect({"ASSESSMENT_STATUS": "PASS"}) == "ASSESSMENT_STATUS"

    def test_exact_match_preferred_over_fuzzy(self, detector):
        """An exact lower-priority entry beats a fuzzy higher-priority one."""
        row = {"Assessment Notes": "retake", "Result": "PASS"}

        assert detector.detect(row) == "Result"

    def test_empty_row(self, detector):
        """Nothing to find in an empty row."""
        assert detector.detect({}) is None


class TestCustomFieldMappings:
    """Test caller-supplied field names."""

    def test_custom_names_first(self, detector):
        """Custom names are tried before the catalog."""
        config = ProcessingConfig(custom_field_mappings=["Verdict"])
        row = {"Grade": "A", "Verdict": "FAIL"}

        assert detector.detect(row, config) == "Verdict"

    def test_custom_names_in_caller_order(self, detector):
        """The first custom name present wins, in caller order."""
        config = ProcessingConfig(custom_field_mappings=["Outcome", "Verdict"])
        row = {"Verdict": "FAIL", "Outcome": "PASS"}

        assert detector.detect(row, config) == "Outcome"

    def test_falls_back_to_catalog(self, detector):
        """No custom name present: the catalog still applies."""
        config = ProcessingConfig(custom_field_mappings=["Outcome"])

        assert detector.detect({"Grade": "A"}, config) == "Grade"

    def test_custom_names_are_exact(self, detector):
        """Custom names are not matched case-insensitively."""
        config = ProcessingConfig(
            custom_field_mappings=["Outcome"], strict_column_matching=True
        )

        assert detector.detect({"outcome": "PASS"}, config) is None


class TestFuzzyMatching:
    """Test the case-insensitive and containment pass."""

    def test_case_insensitive(self, detector):
        """Odd capitalization matches."""
        assert detector.detect({"pAsS/fAiL": "P"}) == "pAsS/fAiL"

    def test_key_contains_pattern(self, detector):
        """A longer header containing a catalog name matches."""
        assert detector.detect({"Learner": "Ada", "FINAL GRADE (%)": "B"}) == (
            "FINAL GRADE (%)"
        )

    def test_pattern_contains_key(self, detector):
        """A header that is part of a catalog name matches."""
        assert detector.detect({"Pass": "Y"}) == "Pass"

    def test_catalog_order_breaks_ties(self, detector):
        """An assessment-like header beats a score header listed first."""
        row = {"Quiz Score": "85", "Assessment Outcome": "PASS"}

        assert detector.detect(row) == "Assessment Outcome"

    def test_first_row_key_for_same_pattern(self, detector):
        """Among keys matching the same catalog entry, row order decides."""
        row = {"Midterm Grade": "C", "Overall Grade": "A"}

        assert detector.detect(row) == "Midterm Grade"

    def test_blank_keys_ignored(self, detector):
        """Blank headers are not contained-in matches."""
        assert detector.detect({"": "PASS", "   ": "PASS"}) is None

    def test_non_string_keys_ignored(self, detector):
        """Numeric headers from spreadsheets are skipped."""
        assert detector.detect({0: "PASS", 1: "x"}) is None

    def test_unrelated_columns(self, detector):
        """No catalog overlap gives None."""
        assert detector.detect({"Notes": "great job", "Learner": "Ada"}) is None

    def test_strict_disables_fuzzy(self, detector, strict_config):
        """Strict matching only accepts exact names."""
        assert detector.detect({"FINAL GRADE (%)": "B"}, strict_config) is None
        assert detector.detect({"Final Grade": "B"}, strict_config) == "Final Grade"


class TestDetectorStages:
    """Test the separately exposed passes."""

    def test_match_exact(self, detector):
        assert detector.match_exact(["grade", "Score"]) == "grade"
        assert detector.match_exact(["Grades"]) is None

    def test_match_fuzzy(self, detector):
        assert detector.match_fuzzy(["Grades"]) == "Grades"

    def test_match_custom(self):
        assert FieldDetector.match_custom(["a", "b"], ["b", "a"]) == "b"
        assert FieldDetector.match_custom(["a"], ["c"]) is None

    def test_custom_catalog(self):
        """A detector can be built over another catalog."""
        detector = FieldDetector(catalog=["Outcome", "Mark"])

        assert detector.detect({"Mark": "A", "Grade": "B"}) == "Mark"


class TestModuleHelper:
    """Test detect_assessment_field."""

    def test_default_config(self):
        assert detect_assessment_field({"Result": "PASS"}) == "Result"

    def test_row_not_mutated(self):
        row = {"Final Score": " 85 "}
        before = dict(row)

        detect_assessment_field(row, DEFAULT_CONFIG)

        assert row == before
